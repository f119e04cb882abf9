"""
Unit tests for configuration
"""

import pytest
from pydantic import ValidationError

from synclens.core.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.APP_NAME == "SyncLens"
    assert settings.SYNC_LOGGER_SUBSYSTEM == "SyncLens"
    assert settings.SYNC_LOGGER_CATEGORY == "sync"


def test_log_level_is_normalized():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="verbose")


def test_invalid_log_format():
    with pytest.raises(ValidationError):
        Settings(LOG_FORMAT="xml")


def test_backend_is_normalized():
    assert Settings(SYNC_LOGGING_BACKEND="Disabled").SYNC_LOGGING_BACKEND == "disabled"


def test_invalid_backend():
    with pytest.raises(ValidationError):
        Settings(SYNC_LOGGING_BACKEND="syslog")


def test_environment_override(monkeypatch):
    monkeypatch.setenv("SYNC_LOGGING_ENABLED", "false")
    monkeypatch.setenv("SYNC_LOGGER_SUBSYSTEM", "Notes")
    settings = get_settings()
    assert settings.SYNC_LOGGING_ENABLED is False
    assert settings.SYNC_LOGGER_SUBSYSTEM == "Notes"
