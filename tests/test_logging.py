import logging

import pytest

import msgfmt
from msgfmt import MessageProcessor, MessageSyntaxError, setup_logging


def test_setup_logging_adds_handler_once():
    first = setup_logging()
    handlers = list(first.handlers)

    second = setup_logging(logging.INFO)

    assert first is second
    assert first.name == "msgfmt"
    assert second.handlers == handlers
    assert second.level == logging.INFO


def test_setup_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("MSGFMT_DEBUG", "1")

    assert setup_logging().level == logging.DEBUG

    monkeypatch.delenv("MSGFMT_DEBUG")
    assert setup_logging().level == logging.WARNING


def test_unbalanced_braces_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="msgfmt")

    with pytest.raises(MessageSyntaxError):
        MessageProcessor().process("oops {")

    assert any("Unbalanced braces" in r.getMessage() for r in caplog.records)


def test_version_is_a_string():
    assert isinstance(msgfmt.__version__, str)
    assert msgfmt.__version__
