"""Tests for logging configuration."""

import logging

import pytest

from creatorledger.logging_config import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    get_logger,
    resolve_log_level,
)


def test_resolve_log_level_names_and_numbers():
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(" Info ") == logging.INFO
    assert resolve_log_level(logging.ERROR) == logging.ERROR


def test_resolve_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert resolve_log_level() == logging.WARNING


def test_resolve_log_level_reads_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
    assert resolve_log_level() == logging.ERROR


def test_resolve_log_level_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_log_level("chatty")


def test_configured_logger_writes_key_value_lines(capsys):
    configure_logging("INFO")

    get_logger("creatorledger.tests").info("income_recorded", owner="alice")

    err = capsys.readouterr().err
    assert "level='info'" in err
    assert "event='income_recorded'" in err
    assert "owner='alice'" in err


def test_messages_below_level_are_dropped(capsys):
    configure_logging("WARNING")

    get_logger("creatorledger.tests").info("quiet")

    assert "quiet" not in capsys.readouterr().err
