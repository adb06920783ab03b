from __future__ import annotations

from typing import Dict

import pytest

from msgfmt import MessageFormatter, find_closing_bracket


def parse_branches(fmt: str) -> Dict[str, str]:
    """Разбирает формат вида `male {He} other {They}` в словарь веток."""
    branches: Dict[str, str] = {}
    pos = 0
    while True:
        start = fmt.find("{", pos)
        if start == -1:
            break
        end = find_closing_bracket(fmt, start)
        branches[fmt[pos:start].strip()] = fmt[start + 1:end]
        pos = end + 1
    return branches


def plural_handler(value, format, values, locale, recurse):
    """Упрощённый plural: `one=1 item|other=# items`."""
    options = dict(part.split("=", 1) for part in (format or "").split("|"))
    branch = options.get("one") if value == 1 else options.get("other")
    return (branch or "").replace("#", str(value))


def select_handler(value, format, values, locale, recurse):
    """select с рекурсивной обработкой выбранной ветки."""
    branches = parse_branches(format or "")
    branch = branches.get(str(value), branches.get("other", ""))
    return recurse(branch, values, locale)


@pytest.fixture
def formatter() -> MessageFormatter:
    return MessageFormatter({"plural": plural_handler, "select": select_handler})


@pytest.fixture(autouse=True)
def _isolate_cache_env(monkeypatch):
    """Кэш не должен зависеть от MSGFMT_CACHE в окружении разработчика."""
    monkeypatch.delenv("MSGFMT_CACHE", raising=False)
