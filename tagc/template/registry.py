"""
Реестр операторов шаблонизатора.

Сопоставляет имена тегов функциям парсинга. Заполняется до начала
компиляции шаблонов и после этого только читается, поэтому безопасен
для одновременного поиска из нескольких потоков.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .types import StatementParserFunc, StatementRule, StatementTable
from ..errors import DuplicateRegistrationError

logger = logging.getLogger(__name__)


class StatementRegistry:
    """
    Таблица "имя тега -> функция парсинга".

    Каждое имя регистрируется не более одного раза; операции удаления нет.
    Экземпляр создается явно и передается в парсер (без глобального состояния).
    """

    def __init__(self):
        self._statements: StatementTable = {}

    def register(self, name: str, parser_func: StatementParserFunc) -> None:
        """
        Регистрирует функцию парсинга под именем тега.

        Args:
            name: Имя тега
            parser_func: Функция (parser, args) -> Statement

        Raises:
            DuplicateRegistrationError: Если имя уже занято (первая регистрация остается)
        """
        if name in self._statements:
            raise DuplicateRegistrationError(name)
        self._statements[name] = parser_func
        logger.debug(f"Registered statement: {name}")

    def register_rules(self, rules: Iterable[StatementRule]) -> None:
        """Регистрирует набор правил (например, все операторы одного модуля)."""
        for rule in rules:
            self.register(rule.name, rule.parser_func)

    def lookup(self, name: str) -> Optional[StatementParserFunc]:
        """
        Возвращает функцию парсинга для тега или None.
        """
        return self._statements.get(name)

    def names(self) -> List[str]:
        """Возвращает отсортированный список зарегистрированных имен."""
        return sorted(self._statements)

    def __contains__(self, name: object) -> bool:
        return name in self._statements

    def __len__(self) -> int:
        return len(self._statements)


def create_default_registry(disabled: Iterable[str] = ()) -> StatementRegistry:
    """
    Создает реестр со встроенными операторами.

    Args:
        disabled: Имена встроенных операторов, которые не нужно регистрировать

    Returns:
        Заполненный реестр
    """
    from .statements import get_builtin_statement_rules

    skip = set(disabled)
    registry = StatementRegistry()
    registry.register_rules(rule for rule in get_builtin_statement_rules() if rule.name not in skip)

    unknown = skip - {rule.name for rule in get_builtin_statement_rules()}
    if unknown:
        logger.warning(f"Unknown statements in disabled list: {', '.join(sorted(unknown))}")

    return registry


__all__ = ["StatementRegistry", "create_default_registry"]
