"""
Unified test infrastructure for tagc.

This package contains common utilities and helpers
used across all tests to avoid code duplication.

Modules:
- file_utils: Utilities for creating files and directories
- rendering_utils: Utilities for tokenizing, parsing and rendering templates
- cli_utils: Utilities for running the CLI in a subprocess
"""

from .cli_utils import run_cli
from .file_utils import write, write_config
from .rendering_utils import tokenize, parse_template, render_template, statement_of, make_processor

__all__ = [
    # CLI utilities
    "run_cli",

    # File utilities
    "write", "write_config",

    # Rendering utilities
    "tokenize", "parse_template", "render_template", "statement_of", "make_processor",
]
