"""
Оператор comment: блок, который компилируется в пустоту.
"""

from __future__ import annotations

from .nodes import CommentStatement
from .parser_rules import parse_comment, get_comment_statement_rules

__all__ = ["CommentStatement", "parse_comment", "get_comment_statement_rules"]
