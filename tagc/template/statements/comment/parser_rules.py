"""
Правила парсинга для блочного комментария.

Синтаксис: {% comment %} ... {% endcomment %}
"""

from __future__ import annotations

from typing import List

from .nodes import CommentStatement
from ...parser import Parser
from ...tokens import MalformedArgumentsError
from ...types import StatementRule


def parse_comment(parser: Parser, args: Parser) -> CommentStatement:
    """
    Пропускает все содержимое до {% endcomment %}, включая вложенные теги.
    """
    location = parser.current()

    # Пропуск начинается с "%}" открывающего тега: там же и позиция ошибки незакрытого блока
    parser.skip_until("endcomment")

    if not args.end():
        raise args.error("Tag 'comment' does not take any argument.", error_cls=MalformedArgumentsError)

    return CommentStatement(location=location)


def get_comment_statement_rules() -> List[StatementRule]:
    """
    Возвращает правила регистрации оператора comment.
    """
    return [
        StatementRule(name="comment", parser_func=parse_comment),
    ]


__all__ = ["parse_comment", "get_comment_statement_rules"]
