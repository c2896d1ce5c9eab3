"""
Лексический анализатор шаблонов.

Токенизирует исходный текст шаблона, разбивая его на последовательность
токенов для последующего синтаксического анализа.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .tokens import Token, TokenType, LexerError
from ..config import LexerConfig

logger = logging.getLogger(__name__)


class TemplateLexer:
    """
    Лексический анализатор шаблонов.

    Разбивает исходный текст на токены, учитывая различные контексты:
    - обычный текст
    - внутри тегов {% ... %}
    - внутри комментариев {# ... #}
    """

    # Регулярные выражения для содержимого тегов (порядок важен)
    _TAG_PATTERNS = [
        (TokenType.NAME, re.compile(r'[A-Za-z_][A-Za-z0-9_]*')),
        (TokenType.FLOAT, re.compile(r'\d+\.\d+')),
        (TokenType.INTEGER, re.compile(r'\d+')),
        (TokenType.STRING, re.compile(r'"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\'', re.DOTALL)),
        (TokenType.SYMBOL, re.compile(r'==|!=|<=|>=|//|\*\*|[-+*/%<>=!()\[\]{}.,:|~]')),
    ]

    _WHITESPACE = re.compile(r'\s+')

    def __init__(self, config: Optional[LexerConfig] = None):
        self.config = config or LexerConfig()
        self.text = ""
        self.position = 0
        self.line = 1
        self.column = 1
        self.length = 0
        self.tokens: List[Token] = []

    def tokenize(self, text: str) -> List[Token]:
        """
        Токенизирует весь исходный текст и возвращает список токенов.

        Список всегда завершается токеном EOF.

        Raises:
            LexerError: При незакрытом теге/комментарии или неизвестном символе
        """
        self.text = text
        self.position = 0
        self.line = 1
        self.column = 1
        self.length = len(text)
        self.tokens = []

        while self.position < self.length:
            self._tokenize_data()

        self.tokens.append(Token(TokenType.EOF, "", self.position, self.line, self.column))
        logger.debug(f"Tokenized {self.length} chars -> {len(self.tokens)} tokens")
        return self.tokens

    def _tokenize_data(self) -> None:
        """Обрабатывает текст до следующего открывающего разделителя."""
        cfg = self.config
        block_at = self.text.find(cfg.block_start, self.position)
        comment_at = self.text.find(cfg.comment_start, self.position)

        candidates = [p for p in (block_at, comment_at) if p != -1]
        if not candidates:
            self._emit(TokenType.DATA, self.length - self.position)
            return

        start = min(candidates)
        if start > self.position:
            self._emit(TokenType.DATA, start - self.position)

        # При совпадении позиций побеждает более длинный разделитель
        if block_at == start and (comment_at != start or len(cfg.block_start) >= len(cfg.comment_start)):
            self._tokenize_block()
        else:
            self._tokenize_comment()

    def _tokenize_block(self) -> None:
        """Токенизирует содержимое тега {% ... %}."""
        begin = self._emit(TokenType.BLOCK_BEGIN, len(self.config.block_start))
        block_end = self.config.block_end

        while True:
            whitespace = self._WHITESPACE.match(self.text, self.position)
            if whitespace:
                self._advance(len(whitespace.group(0)))

            if self.position >= self.length:
                raise LexerError(
                    f"Unclosed tag, expected '{block_end}'",
                    begin.line, begin.column, begin.position
                )

            if self.text.startswith(block_end, self.position):
                self._emit(TokenType.BLOCK_END, len(block_end))
                return

            for token_type, pattern in self._TAG_PATTERNS:
                match = pattern.match(self.text, self.position)
                if match:
                    self._emit(token_type, len(match.group(0)))
                    break
            else:
                char = self.text[self.position]
                raise LexerError(
                    f"Unexpected character in tag: {char!r}",
                    self.line, self.column, self.position
                )

    def _tokenize_comment(self) -> None:
        """Токенизирует комментарий {# ... #}: тело целиком становится DATA."""
        begin = self._emit(TokenType.COMMENT_BEGIN, len(self.config.comment_start))

        end_at = self.text.find(self.config.comment_end, self.position)
        if end_at == -1:
            raise LexerError(
                f"Unclosed comment, expected '{self.config.comment_end}'",
                begin.line, begin.column, begin.position
            )

        if end_at > self.position:
            self._emit(TokenType.DATA, end_at - self.position)
        self._emit(TokenType.COMMENT_END, len(self.config.comment_end))

    def _emit(self, token_type: TokenType, size: int) -> Token:
        """Создает токен из следующих size символов и сдвигает позицию."""
        token = Token(
            token_type,
            self.text[self.position:self.position + size],
            self.position,
            self.line,
            self.column,
        )
        self.tokens.append(token)
        self._advance(size)
        return token

    def _advance(self, count: int) -> None:
        """
        Перемещает позицию на указанное количество символов,
        обновляя номера строк и колонок.
        """
        for _ in range(count):
            if self.position < self.length:
                if self.text[self.position] == '\n':
                    self.line += 1
                    self.column = 1
                else:
                    self.column += 1
                self.position += 1


def tokenize_template(text: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Удобная функция для токенизации шаблона.

    Args:
        text: Исходный текст шаблона
        config: Разделители (по умолчанию {% %} и {# #})

    Returns:
        Список токенов

    Raises:
        LexerError: При ошибке лексического анализа
    """
    return TemplateLexer(config).tokenize(text)


__all__ = ["TemplateLexer", "tokenize_template"]
