"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TagcUserError.

Programming errors and bugs should NOT inherit from TagcUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations


class TagcUserError(Exception):
    """
    Base class for all user-facing errors in tagc.

    These errors indicate problems that the template author can fix:
    malformed tags, unterminated blocks, broken configuration, etc.
    """
    pass


class ConfigError(TagcUserError):
    """Ошибка загрузки или валидации конфигурации."""
    pass


class DuplicateRegistrationError(ValueError):
    """Повторная регистрация оператора под уже занятым именем."""

    def __init__(self, name: str):
        super().__init__(f"Statement '{name}' is already registered")
        self.name = name


class UnknownModeError(ValueError):
    """Генератор текста вызван с неизвестным режимом."""

    def __init__(self, mode: str):
        super().__init__(f"Unsupported lorem method: {mode!r}")
        self.mode = mode


__all__ = ["TagcUserError", "ConfigError", "DuplicateRegistrationError", "UnknownModeError"]
