"""
msgfmt — форматирование сообщений с плейсхолдерами {key} и {key, type, format}.

Публичный API: MessageFormatter (фасад), MessageProcessor (ядро),
узлы результата и утилиты разбора блоков.
"""

from __future__ import annotations

from importlib import metadata

from .cache import CacheSnapshot, FormatCache
from .config import FormatterConfig, load_config
from .errors import ConfigLoadError, HandlerRegistrationError, MessageSyntaxError, MsgFmtUserError
from .formatter import MessageFormatter
from .handlers import RecurseFn, TypeHandler, TypeHandlerRegistry
from .logging_setup import setup_logging
from .nodes import (
    SOURCE_MESSAGE,
    SOURCE_PLACEHOLDER,
    MessageNode,
    PlaceholderNode,
    ResultNode,
    decorate_message,
    decorate_placeholder,
    extract_values,
    nodes_to_dicts,
)
from .processor import MessageProcessor
from .syntax import find_closing_bracket, split_argument, split_formatted_argument

try:
    __version__ = metadata.version("message-formatter")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "setup_logging",
    "MessageFormatter",
    "MessageProcessor",
    "TypeHandler",
    "TypeHandlerRegistry",
    "RecurseFn",
    "FormatCache",
    "CacheSnapshot",
    "FormatterConfig",
    "load_config",
    "MsgFmtUserError",
    "MessageSyntaxError",
    "HandlerRegistrationError",
    "ConfigLoadError",
    "SOURCE_MESSAGE",
    "SOURCE_PLACEHOLDER",
    "ResultNode",
    "MessageNode",
    "PlaceholderNode",
    "decorate_message",
    "decorate_placeholder",
    "extract_values",
    "nodes_to_dicts",
    "find_closing_bracket",
    "split_argument",
    "split_formatted_argument",
]
