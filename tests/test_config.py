"""
Проверяем YAML-загрузчик `msgfmt.config.load_config`:

1. Корректный файл разбирается в `FormatterConfig`.
2. Отсутствующий файл даёт значения по умолчанию.
3. Некорректные значения приводят к понятной ошибке.
"""

from pathlib import Path

import pytest

from msgfmt import ConfigLoadError, FormatterConfig, MessageFormatter, load_config
from msgfmt.cache import DEFAULT_MAX_ENTRIES


def test_load_valid_yaml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "msgfmt.yaml"
    cfg_path.write_text(
        """
cache:
  enabled: false
  max_entries: 16
"""
    )

    cfg = load_config(cfg_path)

    assert cfg == FormatterConfig(cache_enabled=False, cache_max_entries=16)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yaml")

    assert cfg.cache_enabled is True
    assert cfg.cache_max_entries == DEFAULT_MAX_ENTRIES


def test_null_max_entries_means_unbounded(tmp_path: Path) -> None:
    cfg_path = tmp_path / "msgfmt.yaml"
    cfg_path.write_text("cache:\n  max_entries: null\n")

    assert load_config(cfg_path).cache_max_entries is None


@pytest.mark.parametrize("body", [
    "- just\n- a list\n",
    "cache: [1, 2]\n",
    "cache:\n  enabled: maybe\n",
    "cache:\n  max_entries: 0\n",
    "cache:\n  max_entries: many\n",
    "cache: {enabled: [\n",
])
def test_invalid_config(tmp_path: Path, body: str) -> None:
    cfg_path = tmp_path / "msgfmt.yaml"
    cfg_path.write_text(body)

    with pytest.raises(ConfigLoadError):
        load_config(cfg_path)


def test_round_trip_dict() -> None:
    cfg = FormatterConfig(cache_enabled=False, cache_max_entries=None)

    assert FormatterConfig.from_dict(cfg.to_dict()) == cfg


def test_formatter_from_config(tmp_path: Path) -> None:
    cfg_path = tmp_path / "msgfmt.yaml"
    cfg_path.write_text("cache:\n  max_entries: 3\n")

    formatter = MessageFormatter.from_config(cfg_path, {"echo": lambda v, *rest: v})

    assert formatter.cache.max_entries == 3
    assert formatter.cache.enabled is True
    assert formatter.format("{a, echo}!", {"a": "hi"}) == "hi!"
