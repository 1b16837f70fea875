"""Tests for structured logging setup."""

import json
import logging

import pytest
import structlog

from patternkit.config import LoggingConfig
from patternkit.helpers.logger import get_logger, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


def _own_handlers():
    return [h for h in logging.getLogger().handlers if h.get_name() == "patternkit-console"]


def test_sets_root_level(restore_logging):
    setup_logging(LoggingConfig(level="warning"))
    assert logging.getLogger().level == logging.WARNING


def test_repeated_setup_keeps_one_handler(restore_logging):
    setup_logging()
    setup_logging()
    assert len(_own_handlers()) == 1


def test_json_renderer_output(restore_logging, capsys):
    setup_logging(LoggingConfig(level="INFO", renderer="json"))

    get_logger("patternkit.test").info("Registered family", family="modern")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Registered family"
    assert event["family"] == "modern"
    assert event["level"] == "info"
    assert event["logger"] == "patternkit.test"


def test_level_filtering(restore_logging, capsys):
    setup_logging(LoggingConfig(level="ERROR", renderer="json"))

    get_logger("patternkit.test").info("hidden")

    assert "hidden" not in capsys.readouterr().err
