"""
Встроенные операторы шаблонизатора.
"""

from __future__ import annotations

from typing import List

from .comment import CommentStatement, get_comment_statement_rules
from .lorem import LoremStatement, get_lorem_statement_rules
from ..types import StatementRule


def get_builtin_statement_rules() -> List[StatementRule]:
    """Возвращает правила всех встроенных операторов."""
    return [
        *get_comment_statement_rules(),
        *get_lorem_statement_rules(),
    ]


__all__ = ["CommentStatement", "LoremStatement", "get_builtin_statement_rules"]
