"""
Оператор lorem: вставка текста-заполнителя.

Обрабатывает:
- {% lorem %} - один канонический абзац
- {% lorem 3 p %} - три HTML-абзаца
- {% lorem 10 w random %} - десять случайных слов
"""

from __future__ import annotations

from .nodes import LoremStatement
from .parser_rules import parse_lorem, get_lorem_statement_rules

__all__ = ["LoremStatement", "parse_lorem", "get_lorem_statement_rules"]
