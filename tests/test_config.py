"""Tests for settings loading and logging configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from app.config import Settings, configure_logging, get_settings, reset_settings_cache


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("DATABASE_ECHO", "true")
    reset_settings_cache()
    try:
        settings = get_settings()
        assert settings.database_url == "sqlite:///./other.db"
        assert settings.database_echo is True
        assert get_settings() is settings
    finally:
        monkeypatch.undo()
        reset_settings_cache()


def test_database_url_must_not_be_empty() -> None:
    with pytest.raises(ValidationError):
        Settings(database_url="")


def test_hash_rounds_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(database_url="sqlite://", password_hash_rounds=0)


def test_configure_logging_sets_level() -> None:
    configure_logging(Settings(database_url="sqlite://", log_level="debug"))

    assert logging.getLogger("app").level == logging.DEBUG


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(Settings(database_url="sqlite://", log_level="chatty"))
