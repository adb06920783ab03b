"""
Конфигурация форматтера.

Загружается из YAML-файла вида:

    cache:
      enabled: true
      max_entries: 512

Отсутствующий файл даёт настройки по умолчанию.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .cache import DEFAULT_MAX_ENTRIES
from .errors import ConfigLoadError

_yaml = YAML(typ="safe")


@dataclass
class FormatterConfig:
    """Настройки MessageFormatter."""
    cache_enabled: bool = True
    cache_max_entries: Optional[int] = DEFAULT_MAX_ENTRIES  # None — без ограничения

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormatterConfig":
        """Создание экземпляра из словаря (из YAML)."""
        cache = data.get("cache", {}) or {}
        if not isinstance(cache, dict):
            raise ConfigLoadError("cache: expected a mapping")

        enabled = cache.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigLoadError(f"cache.enabled: expected bool, got {type(enabled).__name__}")

        max_entries = cache.get("max_entries", DEFAULT_MAX_ENTRIES)
        if max_entries is not None:
            if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 1:
                raise ConfigLoadError(f"cache.max_entries: expected positive int or null, got {max_entries!r}")

        return cls(cache_enabled=enabled, cache_max_entries=max_entries)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь для YAML."""
        return {
            "cache": {
                "enabled": self.cache_enabled,
                "max_entries": self.cache_max_entries,
            }
        }


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Path | str) -> FormatterConfig:
    """
    Загружает конфигурацию форматтера из YAML.

    Args:
        path: Путь к YAML-файлу

    Returns:
        Конфигурация (по умолчанию, если файла нет)

    Raises:
        ConfigLoadError: При некорректном YAML или значениях полей
    """
    return FormatterConfig.from_dict(_read_yaml_map(Path(path)))


__all__ = ["FormatterConfig", "load_config"]
