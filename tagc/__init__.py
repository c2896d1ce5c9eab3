"""
tagc — расширяемый компилятор тегов для текстового шаблонизатора.
"""

from __future__ import annotations

from .template import (
    Template,
    TemplateProcessor,
    TemplateProcessingError,
    StatementRegistry,
    create_template_processor,
)

__all__ = [
    "Template",
    "TemplateProcessor",
    "TemplateProcessingError",
    "StatementRegistry",
    "create_template_processor",
]
