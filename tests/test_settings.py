"""Tests for the application settings helper."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from timetable.config.logging_config import configure_logging
from timetable.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Ensure environment variables are cleared between tests."""
    for name in ("TIMETABLE_DATA_DIR", "WEBSITE_INSTANCE_ID", "APP_DATA_DIR", "LOG_LEVEL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    yield


def test_get_settings_defaults():
    settings = get_settings()

    assert settings.data_dir == Path("data")
    assert settings.lesson_tables_directory == Path("data/lesson_tables")
    assert settings.lesson_tables_backup_directory == Path("data/lesson_tables_backup")
    assert settings.api_prefix == "/api/v1"
    assert settings.log_level == "INFO"


def test_get_settings_uses_data_dir_override(monkeypatch):
    """TIMETABLE_DATA_DIR must take precedence over Azure defaults."""
    monkeypatch.setenv("TIMETABLE_DATA_DIR", "/tmp/custom-data")
    monkeypatch.setenv("WEBSITE_INSTANCE_ID", "azure-instance")

    settings = get_settings()

    assert settings.data_dir == Path("/tmp/custom-data")
    assert settings.lessons_path == Path("/tmp/custom-data/lessons.json")


def test_get_settings_defaults_to_azure_persistent_storage(monkeypatch):
    monkeypatch.setenv("WEBSITE_INSTANCE_ID", "azure-instance")

    assert get_settings().data_dir == Path("/home/site/data")


def test_get_settings_allows_custom_azure_storage_path(monkeypatch):
    monkeypatch.setenv("WEBSITE_INSTANCE_ID", "azure-instance")
    monkeypatch.setenv("APP_DATA_DIR", "/home/site/custom-path")

    assert get_settings().data_dir == Path("/home/site/custom-path")


def test_get_settings_reads_log_level_and_port(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "9000")

    settings = get_settings()

    assert settings.log_level == "debug"
    assert settings.port == 9000


def test_configure_logging_accepts_unknown_levels(monkeypatch):
    received = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: received.update(kwargs))

    configure_logging("verbose")
    assert received["level"] == logging.INFO

    configure_logging("debug")
    assert received["level"] == logging.DEBUG
