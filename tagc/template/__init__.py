"""
Компилятор тегов шаблонизатора.

Лексер, парсер с распознаванием тегов через реестр операторов,
встроенные операторы и рендерер.
"""

from __future__ import annotations

from .nodes import TemplateNode, DataNode, Statement, StatementBlock, TemplateAST
from .parser import Parser
from .processor import Template, TemplateProcessor, TemplateProcessingError, create_template_processor
from .registry import StatementRegistry, create_default_registry
from .renderer import Renderer
from .tokens import (
    Token, TokenType, SourcePosition,
    LexerError, TemplateSyntaxError, MalformedArgumentsError, UnterminatedBlockError,
)
from .types import StatementRule, StatementParserFunc

__all__ = [
    "TemplateNode",
    "DataNode",
    "Statement",
    "StatementBlock",
    "TemplateAST",
    "Parser",
    "Template",
    "TemplateProcessor",
    "TemplateProcessingError",
    "create_template_processor",
    "StatementRegistry",
    "create_default_registry",
    "Renderer",
    "Token",
    "TokenType",
    "SourcePosition",
    "LexerError",
    "TemplateSyntaxError",
    "MalformedArgumentsError",
    "UnterminatedBlockError",
    "StatementRule",
    "StatementParserFunc",
]
