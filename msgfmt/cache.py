from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1024

_PLAIN_SCALARS = (str, bool, int, float)


def _is_plain(value: Any) -> bool:
    """
    Проверяет, что значение однозначно кодируется в JSON.

    Типы сравниваются точно: подклассы str/int (например, Enum со смесью str)
    кодируются как базовое значение, но через str() выводятся иначе.
    Кортежи и прочие типы тоже отбрасываются.
    """
    if value is None or type(value) in _PLAIN_SCALARS:
        return True
    if type(value) is list:
        return all(_is_plain(v) for v in value)
    if type(value) is dict:
        return all(type(k) is str and _is_plain(v) for k, v in value.items())
    return False


def _sha1_json(payload: Any) -> str:
    return hashlib.sha1(json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")).hexdigest()


def cache_key(
    message: str,
    values: Optional[Mapping[str, Any]],
    locale: Optional[str],
    namespace: str = "",
) -> Optional[str]:
    """
    Стабильный ключ кэша для аргументов format.

    Args:
        namespace: Идентификатор владельца кэша (форматтера), чтобы форматтеры
            с разными обработчиками не получали результаты друг друга

    Returns:
        sha1 от JSON-представления (namespace, message, values, locale) или None,
        если аргументы нельзя однозначно закодировать
    """
    if values is None:
        values = {}
    if type(message) is not str or not _is_plain(values) or type(values) is not dict:
        return None
    if locale is not None and type(locale) is not str:
        return None
    return _sha1_json({"namespace": namespace, "message": message, "values": values, "locale": locale})


@dataclass(frozen=True)
class CacheSnapshot:
    enabled: bool
    entries: int
    max_entries: Optional[int]
    hits: int
    misses: int


class FormatCache:
    """
    Потокобезопасный LRU-кэш результатов MessageFormatter.format.

    Ключ — sha1 от JSON-кодировки (message, values, locale).
    Вызовы с аргументами, которые нельзя закодировать, не кэшируются.
    max_entries=None означает кэш без ограничения размера.
    Переменная окружения MSGFMT_CACHE=0 полностью отключает кэш.
    """

    def __init__(self, max_entries: Optional[int] = DEFAULT_MAX_ENTRIES, *, enabled: Optional[bool] = None):
        env = os.environ.get("MSGFMT_CACHE", None)
        if env is not None:
            self.enabled = env.strip().lower() not in {"0", "false", "no", "off", ""}
        elif enabled is not None:
            self.enabled = bool(enabled)
        else:
            self.enabled = True
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive or None, got {max_entries}")
        self.max_entries = max_entries
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_compute(
        self,
        message: str,
        values: Optional[Mapping[str, Any]],
        locale: Optional[str],
        compute: Callable[[], str],
        *,
        namespace: str = "",
    ) -> str:
        """
        Возвращает закэшированный результат или вычисляет и сохраняет новый.

        compute вызывается вне блокировки; исключения из него не кэшируются.
        namespace отделяет записи разных владельцев одного экземпляра кэша.
        """
        if not self.enabled:
            return compute()

        key = cache_key(message, values, locale, namespace)
        if key is None:
            logger.debug("Format arguments are not cacheable, computing directly")
            return compute()

        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self._hits += 1
                return self._entries[key]
            self._misses += 1

        result = compute()

        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)
        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def snapshot(self) -> CacheSnapshot:
        with self._lock:
            return CacheSnapshot(
                enabled=self.enabled,
                entries=len(self._entries),
                max_entries=self.max_entries,
                hits=self._hits,
                misses=self._misses,
            )


__all__ = ["DEFAULT_MAX_ENTRIES", "CacheSnapshot", "FormatCache", "cache_key"]
