"""Tests for JSON logging setup."""

import logging

from pythonjsonlogger.json import JsonFormatter

from cultural_signals.logging_config import LOGGING_CONFIG, configure_logging


def test_configure_logging_installs_json_handler():
    configure_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    assert logging.getLogger("slack_sdk.socket_mode").level == logging.WARNING


def test_base_config_not_mutated():
    configure_logging("ERROR")

    assert LOGGING_CONFIG["root"]["level"] == "INFO"
