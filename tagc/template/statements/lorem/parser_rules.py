"""
Правила парсинга для оператора lorem.

Синтаксис: {% lorem [count] [w|p|b] [random] %}
"""

from __future__ import annotations

from typing import List

from .nodes import LoremStatement
from ...parser import Parser
from ...tokens import TokenType, MalformedArgumentsError
from ...types import StatementRule
from ....lorem import LoremMode


def parse_lorem(parser: Parser, args: Parser) -> LoremStatement:
    """
    Парсит аргументы тега lorem.

    Все аргументы необязательны, но порядок фиксирован: количество,
    режим, флаг random.
    """
    location = parser.current()
    count = 1
    mode = LoremMode.PLAIN_PARAGRAPHS
    random = False

    count_token = args.match(TokenType.INTEGER)
    if count_token is not None:
        count = int(count_token.value)

    mode_token = args.match(TokenType.NAME)
    if mode_token is not None:
        try:
            mode = LoremMode(mode_token.value)
        except ValueError:
            raise args.error(
                "lorem-method must be either 'w', 'p' or 'b'.",
                mode_token,
                error_cls=MalformedArgumentsError,
            ) from None

    if args.match_name("random") is not None:
        random = True

    if not args.end():
        raise args.error("Malformed lorem-tag args.", error_cls=MalformedArgumentsError)

    return LoremStatement(location=location, count=count, mode=mode, random=random)


def get_lorem_statement_rules() -> List[StatementRule]:
    """
    Возвращает правила регистрации оператора lorem.
    """
    return [
        StatementRule(name="lorem", parser_func=parse_lorem),
    ]


__all__ = ["parse_lorem", "get_lorem_statement_rules"]
