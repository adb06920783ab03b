"""
Рекурсивный процессор сообщений.

Сканирует сообщение слева направо, выделяет литеральный текст и блоки
плейсхолдеров, разрешает значения и передаёт их обработчикам типов.
Обработчик получает привязанный метод process и может рекурсивно
обработать построенное им под-сообщение с тем же реестром.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .errors import MessageSyntaxError
from .handlers import TypeHandler, TypeHandlerRegistry
from .nodes import ResultNodes, decorate_message, decorate_placeholder
from .syntax import NOT_FOUND, OPEN_BRACE, find_closing_bracket, split_formatted_argument

logger = logging.getLogger(__name__)


class MessageProcessor:
    """
    Ядро разбора и подстановки.

    Не хранит изменяемого состояния: каждый вызов process независим,
    общими остаются только реестр обработчиков и переданные values.
    """

    def __init__(self, handlers: Optional[TypeHandlerRegistry | Mapping[str, TypeHandler]] = None):
        if isinstance(handlers, TypeHandlerRegistry):
            self.handlers = handlers
        else:
            self.handlers = TypeHandlerRegistry(handlers)

    def process(
        self,
        message: Optional[str],
        values: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> ResultNodes:
        """
        Обрабатывает сообщение и возвращает упорядоченный список узлов.

        Args:
            message: Сообщение с плейсхолдерами
            values: Данные плейсхолдеров (отсутствующие ключи дают пустую строку)
            locale: Локаль, передаваемая обработчикам типов

        Returns:
            Узлы в порядке их следования в тексте

        Raises:
            MessageSyntaxError: Если у '{' нет парной '}'
        """
        if values is None:
            values = {}

        result: ResultNodes = []
        text = message or ""
        position = 0

        # Хвост после каждого блока обрабатывается в цикле, а не рекурсией
        while position < len(text):
            block_start = text.find(OPEN_BRACE, position)
            if block_start == -1:
                result.append(decorate_message(text[position:]))
                break

            block_end = find_closing_bracket(text, block_start)
            if block_end == NOT_FOUND:
                logger.debug(f"Unbalanced braces at {block_start} in {text!r}")
                raise MessageSyntaxError(text, block_start)

            head = text[position:block_start]
            if head:
                result.append(decorate_message(head))

            block = text[block_start:block_end + 1]
            result.append(self._process_block(block, values, locale))

            position = block_end + 1

        return result

    def _process_block(self, block: str, values: Mapping[str, Any], locale: Optional[str]):
        """Разрешает один блок {key, type, format} в узел плейсхолдера."""
        parts = split_formatted_argument(block)
        key = parts[0] if parts else ""
        type_name = parts[1] if len(parts) > 1 else None
        format_ = parts[2] if len(parts) > 2 else None

        body = values.get(key)
        if body is None:
            body = ""

        handler = self.handlers.get(type_name)
        if handler is not None:
            body = handler(body, format_, values, locale, self.process)

        return decorate_placeholder(key, type_name, body)


__all__ = ["MessageProcessor"]
