from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

PACKAGE_LOGGER = "msgfmt"


class _MsgFmtHandler(logging.StreamHandler):
    """Обработчик, который setup_logging добавляет не более одного раза."""


def setup_logging(level: Optional[int] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Подключает вывод логов пакета для приложений и отладки.

    Библиотека сама не вызывает эту функцию при импорте. Повторный вызов
    меняет только уровень. Без явного level уровень DEBUG включается
    переменной окружения MSGFMT_DEBUG, иначе WARNING.

    Args:
        level: Уровень логгера msgfmt
        stream: Поток вывода (по умолчанию stderr)

    Returns:
        Логгер пакета
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    if level is None:
        level = logging.DEBUG if os.environ.get("MSGFMT_DEBUG") else logging.WARNING
    log.setLevel(level)

    if not any(isinstance(h, _MsgFmtHandler) for h in log.handlers):
        handler = _MsgFmtHandler(stream)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        log.addHandler(handler)
    return log


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
