"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from MsgFmtUserError.

Programming errors and bugs should NOT inherit from MsgFmtUserError —
they will propagate with full tracebacks. Errors raised by type handlers
are never wrapped and reach the caller as-is.
"""

from __future__ import annotations

from typing import Optional


class MsgFmtUserError(Exception):
    """
    Base class for all user-facing errors in msgfmt.

    These errors indicate problems that the user can fix:
    malformed messages, invalid handler registries, broken config files.
    """
    pass


class MessageSyntaxError(MsgFmtUserError):
    """
    Несбалансированные фигурные скобки в сообщении.

    Attributes:
        message: Строка, в которой не нашлась закрывающая скобка
        position: Индекс открывающей скобки без пары (или None)
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(f'Unbalanced curly braces in string: "{message}"')


class HandlerRegistrationError(MsgFmtUserError, ValueError):
    """Некорректный реестр обработчиков типов."""
    pass


class ConfigLoadError(MsgFmtUserError, ValueError):
    """Ошибка загрузки конфигурации форматтера."""
    pass


__all__ = [
    "MsgFmtUserError",
    "MessageSyntaxError",
    "HandlerRegistrationError",
    "ConfigLoadError",
]
