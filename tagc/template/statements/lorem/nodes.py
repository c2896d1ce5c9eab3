"""
AST узел для оператора lorem.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...nodes import Statement
from ...renderer import Renderer
from ....lorem import LoremMode, lorem


@dataclass(frozen=True)
class LoremStatement(Statement):
    """
    Генератор текста-заполнителя {% lorem [count] [w|p|b] [random] %}.

    Attributes:
        count: Количество абзацев (или слов для режима w)
        mode: Режим генерации
        random: Случайная выборка вместо канонического текста
    """
    count: int = 1
    mode: LoremMode = LoremMode.PLAIN_PARAGRAPHS
    random: bool = False

    def execute(self, renderer: Renderer) -> None:
        # Вывод зависит только от полей узла и источника случайности рендерера
        text = lorem(self.count, self.mode, self.random, rng=renderer.random)
        renderer.write_string(text)


__all__ = ["LoremStatement"]
