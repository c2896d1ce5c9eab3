"""
AST узел для блочного комментария.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...nodes import Statement
from ...renderer import Renderer


@dataclass(frozen=True)
class CommentStatement(Statement):
    """
    Блок {% comment %}...{% endcomment %}.

    Тело отбрасывается при парсинге и в узле не хранится.
    """

    def execute(self, renderer: Renderer) -> None:
        pass


__all__ = ["CommentStatement"]
