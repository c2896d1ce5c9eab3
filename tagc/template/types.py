from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, TYPE_CHECKING

from .nodes import Statement

if TYPE_CHECKING:
    from .parser import Parser

# Функция парсинга тега: (внешний парсер, парсер аргументов) -> оператор
StatementParserFunc = Callable[["Parser", "Parser"], Statement]


@dataclass(frozen=True)
class StatementRule:
    """
    Правило регистрации оператора в реестре.
    """
    name: str                            # Имя тега (например, "lorem")
    parser_func: StatementParserFunc     # Функция парсинга


StatementTable = Dict[str, StatementParserFunc]


__all__ = ["StatementParserFunc", "StatementRule", "StatementTable"]
