"""
Синтаксический анализатор шаблонов.

Parser — курсор над общим списком токенов с собственной позицией и
границей. Один и тот же класс используется как внешний парсер шаблона
(распознавание тегов) и как парсер аргументов тега: последний является
представлением над тем же списком токенов, ограниченным аргументами
одного тега, и не может выйти за эту границу или сдвинуть внешний курсор.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Type

from .nodes import TemplateNode, TemplateAST, DataNode, Statement, StatementBlock
from .registry import StatementRegistry
from .tokens import Token, TokenType, TemplateSyntaxError, UnterminatedBlockError

logger = logging.getLogger(__name__)


class Parser:
    """
    Курсор над потоком токенов.

    Args:
        tokens: Общий список токенов шаблона (не копируется)
        registry: Реестр операторов для распознавания тегов
        start: Индекс первого токена области
        end: Индекс-граница области (не включительно); по умолчанию конец списка
    """

    def __init__(
        self,
        tokens: List[Token],
        registry: StatementRegistry,
        start: int = 0,
        end: Optional[int] = None,
    ):
        self.tokens = tokens
        self.registry = registry
        self.start = start
        self.position = start
        self.bound = len(tokens) if end is None else end

    # ======= Навигация =======

    def current(self) -> Token:
        """
        Возвращает текущий токен без потребления.

        На границе области возвращает токен-ограничитель (например, BLOCK_END
        для аргументов тега) или EOF.
        """
        return self._token_at(self.position)

    def peek(self, offset: int = 1) -> Token:
        """
        Возвращает токен на указанном смещении от текущей позиции.

        За границей области, как и current(), возвращает токен-ограничитель или EOF.
        """
        return self._token_at(self.position + offset)

    def _token_at(self, index: int) -> Token:
        index = min(index, self.bound)
        if index < len(self.tokens):
            return self.tokens[index]
        if self.tokens:
            last = self.tokens[-1]
            return Token(TokenType.EOF, "", last.position + len(last.value), last.line, last.column)
        return Token(TokenType.EOF, "", 0, 1, 1)

    def end(self) -> bool:
        """Проверяет, достигнута ли граница области."""
        return self.position >= self.bound or self.current().type == TokenType.EOF

    def advance(self) -> Token:
        """Продвигается к следующему токену и возвращает предыдущий."""
        current = self.current()
        if not self.end():
            self.position += 1
        return current

    def match(self, *token_types: TokenType) -> Optional[Token]:
        """
        Потребляет и возвращает текущий токен, если его тип совпадает.

        Иначе курсор не двигается и возвращается None.
        """
        if self.end() or self.current().type not in token_types:
            return None
        return self.advance()

    def match_name(self, *names: str) -> Optional[Token]:
        """Как match(), но для токена NAME с одним из указанных значений (с учетом регистра)."""
        current = self.current()
        if self.end() or current.type != TokenType.NAME or current.value not in names:
            return None
        return self.advance()

    def consume(self, expected_type: TokenType, message: Optional[str] = None) -> Token:
        """
        Потребляет токен ожидаемого типа.

        Raises:
            TemplateSyntaxError: Если токен не соответствует ожидаемому типу
        """
        token = self.match(expected_type)
        if token is None:
            current = self.current()
            raise self.error(message or f"Expected {expected_type.name}, got {current.type.name}")
        return token

    def error(
        self,
        message: str,
        token: Optional[Token] = None,
        cause: Optional[Exception] = None,
        error_cls: Type[TemplateSyntaxError] = TemplateSyntaxError,
    ) -> TemplateSyntaxError:
        """
        Создает (но не выбрасывает) ошибку с позицией текущего токена.
        """
        return error_cls(message, token or self.current(), cause)

    def sub_parser(self, start: int, end: int) -> "Parser":
        """Создает парсер-представление над частью того же списка токенов."""
        return Parser(self.tokens, self.registry, start, end)

    def skip_until(self, *names: str) -> None:
        """
        Пропускает токены до тега с одним из указанных имен.

        Останавливается сразу после имени найденного тега; закрывающий
        разделитель потребляет вызывающий цикл. Вложенные теги с другими
        именами отбрасываются вместе с остальным содержимым.

        Raises:
            UnterminatedBlockError: Если шаблон закончился раньше (позиция — начало пропуска)
        """
        started_at = self.current()
        while not self.end():
            if self.match(TokenType.BLOCK_BEGIN) and self.match_name(*names):
                return
            if self.current().type != TokenType.BLOCK_BEGIN:
                self.advance()

        expected = ", ".join(names)
        raise self.error(
            f"Unexpected end of template, expected one of: {expected}",
            started_at,
            error_cls=UnterminatedBlockError,
        )

    # ======= Распознавание тегов =======

    def parse(self) -> TemplateAST:
        """
        Парсит всю область токенов в AST.

        Raises:
            TemplateSyntaxError: При ошибке синтаксического анализа
        """
        ast: List[TemplateNode] = []

        while not self.end():
            node = self._parse_next_node()
            if node is None:
                continue
            # Объединяем с предыдущим DataNode если возможно
            if isinstance(node, DataNode) and ast and isinstance(ast[-1], DataNode):
                ast[-1] = DataNode(text=ast[-1].text + node.text)
            else:
                ast.append(node)

        logger.debug(f"Parsed AST with {len(ast)} nodes")
        return ast

    def _parse_next_node(self) -> Optional[TemplateNode]:
        current = self.current()

        if current.type == TokenType.DATA:
            return DataNode(text=self.advance().value)
        if current.type == TokenType.BLOCK_BEGIN:
            return self.parse_statement_block()
        if current.type == TokenType.COMMENT_BEGIN:
            self._skip_short_comment()
            return None

        raise self.error(f"Unexpected token {current.type.name}")

    def _skip_short_comment(self) -> None:
        """Отбрасывает комментарий {# ... #}."""
        self.consume(TokenType.COMMENT_BEGIN)
        self.match(TokenType.DATA)
        self.consume(TokenType.COMMENT_END, "Expected end of comment")

    def parse_statement_block(self) -> StatementBlock:
        """
        Парсит тег {% name args... %}.

        Находит функцию парсинга в реестре, строит парсер аргументов,
        ограниченный токенами между именем и закрывающим разделителем,
        и вызывает функцию с (внешний парсер, парсер аргументов).
        Внешний курсор в момент вызова стоит сразу после имени тега.
        """
        begin = self.consume(TokenType.BLOCK_BEGIN)

        name_token = self.match(TokenType.NAME)
        if name_token is None:
            raise self.error("Expected statement name")

        parser_func = self.registry.lookup(name_token.value)
        if parser_func is None:
            raise self.error(f"Unknown statement name '{name_token.value}'", name_token)

        args_start = self.position
        block_end = self._find_block_end(args_start)
        if block_end is None:
            raise self.error(f"Tag '{name_token.value}' is not closed", begin)

        args = self.sub_parser(args_start, block_end)
        statement = parser_func(self, args)
        if not isinstance(statement, Statement):
            raise TypeError(
                f"Parser for '{name_token.value}' returned {type(statement).__name__}, expected Statement"
            )

        # Строчные теги не двигают внешний курсор: переходим к концу своего тега
        if self.position < block_end:
            self.position = block_end
        self.consume(TokenType.BLOCK_END, f"Expected end of '{name_token.value}' tag")

        logger.debug(f"Parsed statement '{name_token.value}' at {begin.line}:{begin.column}")
        return StatementBlock(location=begin, name=name_token.value, statement=statement)

    def _find_block_end(self, start: int) -> Optional[int]:
        """Индекс ближайшего BLOCK_END начиная с start или None."""
        for index in range(start, min(self.bound, len(self.tokens))):
            token_type = self.tokens[index].type
            if token_type == TokenType.BLOCK_END:
                return index
            if token_type in (TokenType.BLOCK_BEGIN, TokenType.EOF):
                return None
        return None


def parse_template(tokens: List[Token], registry: StatementRegistry) -> TemplateAST:
    """
    Удобная функция для парсинга списка токенов.

    Args:
        tokens: Токены шаблона (с EOF в конце)
        registry: Реестр операторов

    Returns:
        AST шаблона
    """
    return Parser(tokens, registry).parse()


__all__ = ["Parser", "parse_template"]
