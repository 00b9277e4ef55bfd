# tests/test_config.py

import logging

from miniutils.core.config import Settings
from miniutils.core.errors import InputValidationError, MiniutilsError, UsageError


def test_defaults(monkeypatch):
    monkeypatch.delenv("MINIUTILS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MINIUTILS_URL_SAFE_CHARS", raising=False)
    config = Settings(_env_file=None)
    assert config.numeric_log_level() == logging.WARNING
    assert config.url_safe_chars == ""


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MINIUTILS_LOG_LEVEL", "debug")
    monkeypatch.setenv("MINIUTILS_URL_SAFE_CHARS", "?=")
    config = Settings(_env_file=None)
    assert config.numeric_log_level() == logging.DEBUG
    assert config.url_safe_chars == "?="


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("MINIUTILS_LOG_LEVEL", "chatty")
    assert Settings(_env_file=None).numeric_log_level() == logging.WARNING


def test_error_exit_codes():
    assert UsageError("missing").exit_code == 1
    assert InputValidationError("bad", exit_code=3).exit_code == 3
    assert isinstance(InputValidationError("bad"), MiniutilsError)
