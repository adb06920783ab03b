"""
Интерфейс обработчиков типов и их реестр.

Обработчик типа получает разрешённое значение плейсхолдера, строку format
из блока и функцию рекурсивной обработки, через которую может повторно
войти в MessageProcessor для построенного им под-сообщения.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Protocol, runtime_checkable

from .errors import HandlerRegistrationError
from .nodes import ResultNodes

logger = logging.getLogger(__name__)

# Функция повторного входа в процессор: (message, values, locale) -> узлы
RecurseFn = Callable[[str, Optional[Mapping[str, Any]], Optional[str]], ResultNodes]


@runtime_checkable
class TypeHandler(Protocol):
    """
    Протокол обработчика типа.

    Обработчик волен игнорировать recurse, если возвращает скалярный результат.
    """

    def __call__(
        self,
        value: Any,
        format: Optional[str],
        values: Mapping[str, Any],
        locale: Optional[str],
        recurse: RecurseFn,
    ) -> Any:
        """
        Преобразует значение плейсхолдера.

        Args:
            value: Разрешённое значение (пустая строка для отсутствующего ключа)
            format: Третья часть блока или None
            values: Данные плейсхолдеров текущего вызова (только чтение)
            locale: Локаль текущего вызова или None
            recurse: Процессор, привязанный к тому же реестру обработчиков

        Returns:
            Строка, произвольное значение или список узлов от recurse
        """
        ...


class TypeHandlerRegistry:
    """
    Неизменяемый реестр обработчиков типов по имени.

    Заполняется один раз при создании и не меняется в течение жизни форматтера,
    поэтому безопасен для одновременного использования из нескольких потоков.
    """

    def __init__(self, handlers: Optional[Mapping[str, TypeHandler]] = None):
        checked: Dict[str, TypeHandler] = {}
        for name, handler in (handlers or {}).items():
            if not isinstance(name, str) or not name.strip():
                raise HandlerRegistrationError(f"Type handler name must be a non-empty string, got {name!r}")
            if not callable(handler):
                raise HandlerRegistrationError(f"Type handler '{name}' is not callable")
            checked[name] = handler
            logger.debug(f"Registered type handler: {name}")
        self._handlers: Mapping[str, TypeHandler] = MappingProxyType(checked)

    def get(self, name: Optional[str]) -> Optional[TypeHandler]:
        """Возвращает обработчик для типа или None, если тип не зарегистрирован."""
        if not name:
            return None
        return self._handlers.get(name)

    def names(self) -> List[str]:
        return list(self._handlers)

    def as_mapping(self) -> Mapping[str, TypeHandler]:
        """Read-only представление реестра."""
        return self._handlers

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"TypeHandlerRegistry({self.names()!r})"


__all__ = ["RecurseFn", "TypeHandler", "TypeHandlerRegistry"]
