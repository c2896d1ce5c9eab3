"""
Базовые AST-узлы.

Определяет базовую иерархию неизменяемых классов узлов для представления
структуры шаблонов и контракт операторов (statements), который реализуют
конкретные теги.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

from .tokens import Token, SourcePosition

if TYPE_CHECKING:
    from .renderer import Renderer


@dataclass(frozen=True)
class TemplateNode:
    """Базовый класс для всех узлов AST шаблона."""
    pass


@dataclass(frozen=True)
class DataNode(TemplateNode):
    """
    Обычный текстовый контент в шаблоне.

    Представляет статический текст, который не требует обработки
    и выводится в результат как есть.
    """
    text: str


@dataclass(frozen=True)
class Statement(TemplateNode, ABC):
    """
    Контракт оператора, полученного из тега.

    Attributes:
        location: Токен, текущий сразу после чтения имени тега
    """
    location: Token

    def position(self) -> SourcePosition:
        """Возвращает позицию оператора в исходном тексте."""
        return self.location.source_position

    def describe(self) -> str:
        """Человекочитаемое представление для диагностики."""
        pos = self.position()
        return f"{type(self).__name__}(Line={pos.line} Col={pos.column})"

    @abstractmethod
    def execute(self, renderer: Renderer) -> None:
        """
        Выполняет оператор, записывая результат в renderer.

        Не должен изменять состояние узла.
        """
        pass


@dataclass(frozen=True)
class StatementBlock(TemplateNode):
    """
    Тег {% name ... %} в AST.

    Attributes:
        location: Открывающий токен тега
        name: Имя оператора
        statement: Оператор, построенный функцией парсинга
    """
    location: Token
    name: str
    statement: Statement

    def position(self) -> SourcePosition:
        return self.location.source_position

    def describe(self) -> str:
        pos = self.position()
        return f"StatementBlock(Line={pos.line} Col={pos.column} {self.statement.describe()})"

    def execute(self, renderer: Renderer) -> None:
        self.statement.execute(renderer)


# Алиас для списка узлов (AST)
TemplateAST = List[TemplateNode]


__all__ = ["TemplateNode", "DataNode", "Statement", "StatementBlock", "TemplateAST"]
