"""
Фасад форматтера сообщений.

Объединяет MessageProcessor и извлечение значений: process возвращает
дерево узлов для нестроковых рендереров, format — итоговую строку.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any, Mapping, Optional

from .cache import FormatCache
from .config import FormatterConfig, load_config
from .handlers import TypeHandler, TypeHandlerRegistry
from .nodes import ResultNodes, extract_values
from .processor import MessageProcessor

logger = logging.getLogger(__name__)


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


class MessageFormatter:
    """
    Основной класс для форматирования сообщений.

    Результаты format кэшируются по (message, values, locale), поэтому
    зарегистрированные обработчики должны быть чистыми функциями.
    """

    def __init__(
        self,
        type_handlers: Optional[Mapping[str, TypeHandler]] = None,
        *,
        cache: Optional[FormatCache] = None,
        config: Optional[FormatterConfig] = None,
    ):
        """
        Создаёт форматтер с набором пользовательских обработчиков типов.

        Args:
            type_handlers: Имя типа -> обработчик; не меняется после создания
            cache: Готовый кэш для format (имеет приоритет над config)
            config: Настройки; по умолчанию FormatterConfig()
        """
        self.config = config or FormatterConfig()
        self._registry = TypeHandlerRegistry(type_handlers)
        self._processor = MessageProcessor(self._registry)
        # Ключи кэша разных форматтеров не пересекаются даже при общем FormatCache
        self._cache_namespace = uuid.uuid4().hex
        self._cache = cache if cache is not None else FormatCache(
            self.config.cache_max_entries,
            enabled=self.config.cache_enabled,
        )

    @classmethod
    def from_config(
        cls,
        path: Path | str,
        type_handlers: Optional[Mapping[str, TypeHandler]] = None,
    ) -> "MessageFormatter":
        """Создаёт форматтер по YAML-конфигурации."""
        config = load_config(path)
        logger.debug(f"Loaded formatter config from {path}: {config}")
        return cls(type_handlers, config=config)

    @property
    def type_handlers(self) -> Mapping[str, TypeHandler]:
        return self._registry.as_mapping()

    @property
    def cache(self) -> FormatCache:
        return self._cache

    def process(
        self,
        message: Optional[str],
        values: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> ResultNodes:
        """
        Обрабатывает сообщение в список узлов, описывающих его части.

        Такой вывод полезен рендерерам, которые возвращают не строки,
        а, например, компоненты интерфейса.
        """
        return self._processor.process(message, values, locale)

    def format(
        self,
        message: Optional[str],
        values: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """
        Форматирует сообщение в строку.

        Raises:
            MessageSyntaxError: При несбалансированных скобках
        """
        def render() -> str:
            nodes = self.process(message, values, locale)
            return "".join(_to_text(v) for v in extract_values(nodes))

        if not message:
            return ""
        return self._cache.get_or_compute(message, values, locale, render, namespace=self._cache_namespace)


__all__ = ["MessageFormatter"]
