"""
Рендерер: приемник вывода для исполнения AST.

Экземпляр создается на один вызов рендеринга и не разделяется между
потоками: он владеет буфером вывода и источником случайности.
"""

from __future__ import annotations

import io
import logging
import random as _random
from typing import Optional

from .nodes import DataNode, StatementBlock, Statement, TemplateAST, TemplateNode

logger = logging.getLogger(__name__)


class Renderer:
    """
    Обходит AST и накапливает вывод в порядке вызовов write_string().

    Args:
        random: Источник случайности (random.Random-совместимый);
                по умолчанию создается новый независимый генератор
    """

    def __init__(self, random: Optional[_random.Random] = None):
        self.random = random if random is not None else _random.Random()
        self._out = io.StringIO()

    def write_string(self, text: str) -> int:
        """Записывает строку в вывод и возвращает число записанных символов."""
        return self._out.write(text)

    def execute(self, ast: TemplateAST) -> None:
        """Исполняет узлы AST по порядку."""
        for node in ast:
            self.execute_node(node)

    def execute_node(self, node: TemplateNode) -> None:
        if isinstance(node, DataNode):
            self.write_string(node.text)
        elif isinstance(node, (StatementBlock, Statement)):
            node.execute(self)
        else:
            raise TypeError(f"Cannot execute node of type {type(node).__name__}")

    def getvalue(self) -> str:
        """Возвращает накопленный вывод."""
        return self._out.getvalue()


__all__ = ["Renderer"]
