"""
Лексические типы.

Определяет типы токенов, позиции в исходном тексте и ошибки,
привязанные к позиции (лексические и синтаксические).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..errors import TagcUserError


class TokenType(enum.Enum):
    """Типы токенов в шаблоне."""

    # Текстовый контент вне тегов
    DATA = "DATA"

    # Разделители тегов {% ... %}
    BLOCK_BEGIN = "BLOCK_BEGIN"
    BLOCK_END = "BLOCK_END"

    # Разделители коротких комментариев {# ... #}
    COMMENT_BEGIN = "COMMENT_BEGIN"
    COMMENT_END = "COMMENT_END"

    # Содержимое тегов
    NAME = "NAME"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"
    SYMBOL = "SYMBOL"

    EOF = "EOF"


@dataclass(frozen=True)
class SourcePosition:
    """Позиция в исходном тексте шаблона (строки и колонки с 1)."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    Токен с позиционной информацией для точной диагностики ошибок.
    """
    type: TokenType
    value: str
    position: int        # Позиция в исходном тексте
    line: int           # Номер строки (начиная с 1)
    column: int         # Номер колонки (начиная с 1)

    @property
    def source_position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class LexerError(TagcUserError):
    """Ошибка лексического анализа."""

    def __init__(self, message: str, line: int, column: int, position: int):
        super().__init__(f"{message} at {line}:{column}")
        self.message = message
        self.line = line
        self.column = column
        self.position = position


class TemplateSyntaxError(TagcUserError):
    """
    Ошибка синтаксического анализа с привязкой к токену.

    Создается через Parser.error() и пробрасывается вызывающим кодом.
    """

    def __init__(self, message: str, token: Token, cause: Optional[Exception] = None):
        super().__init__(f"{message} at {token.line}:{token.column}")
        self.message = message
        self.token = token
        self.line = token.line
        self.column = token.column
        self.cause = cause

    @property
    def source_position(self) -> SourcePosition:
        return self.token.source_position


class MalformedArgumentsError(TemplateSyntaxError):
    """Аргументы тега не соответствуют его грамматике."""
    pass


class UnterminatedBlockError(TemplateSyntaxError):
    """Закрывающий тег блока не найден до конца шаблона."""
    pass


__all__ = [
    "TokenType",
    "SourcePosition",
    "Token",
    "LexerError",
    "TemplateSyntaxError",
    "MalformedArgumentsError",
    "UnterminatedBlockError",
]
