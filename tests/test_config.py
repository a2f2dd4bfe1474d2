"""
Tests for environment-driven settings in app.config.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from app import config


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Skip .env loading and drop cached settings around each test.
    monkeypatch.setattr(config, "_load_env_once", lambda: None)
    config.get_csv_import_settings.cache_clear()
    config.get_database_settings.cache_clear()
    yield
    config.get_csv_import_settings.cache_clear()
    config.get_database_settings.cache_clear()


def test_csv_import_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CSV_IMPORT_ENCODING", raising=False)
    monkeypatch.delenv("CSV_IMPORT_LOG_ROW_ERRORS", raising=False)

    settings = config.get_csv_import_settings()

    assert settings.encoding == "utf-8-sig"
    assert settings.log_row_errors is True


def test_csv_import_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_IMPORT_ENCODING", "cp949")
    monkeypatch.setenv("CSV_IMPORT_LOG_ROW_ERRORS", "off")

    settings = config.get_csv_import_settings()

    assert settings.encoding == "cp949"
    assert settings.log_row_errors is False


def test_blank_encoding_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_IMPORT_ENCODING", "   ")
    assert config.get_csv_import_settings().encoding == "utf-8-sig"


def test_database_url_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgres://esg:secret@db:5432/esg")

    settings = config.get_database_settings()

    assert settings.url == "postgresql+psycopg://esg:secret@db:5432/esg"


def test_database_url_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert config.get_database_settings().url is None


def test_pool_settings_are_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "0")
    monkeypatch.setenv("DB_MAX_OVERFLOW", "-3")
    monkeypatch.setenv("DB_POOL_RECYCLE", "not-a-number")

    settings = config.get_database_settings()

    assert settings.pool_size == 1
    assert settings.max_overflow == 0
    assert settings.pool_recycle == 1800


def test_normalize_postgres_url_leaves_other_drivers() -> None:
    url = "postgresql+psycopg://localhost/esg"
    assert config.normalize_postgres_url(url) == url
    assert config.normalize_postgres_url("postgresql://localhost/esg") == url


def test_load_env_files_keeps_process_values(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path,
) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\n"
        "export CSV_IMPORT_ENCODING='latin-1'\n"
        'LOG_LEVEL="debug"\n'
        "not a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(config, "_PROJECT_ROOT", tmp_path)
    # setenv first so teardown removes whatever the file adds.
    monkeypatch.setenv("CSV_IMPORT_ENCODING", "placeholder")
    monkeypatch.delenv("CSV_IMPORT_ENCODING")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    config.load_env_files()

    assert os.environ["CSV_IMPORT_ENCODING"] == "latin-1"
    assert os.environ["LOG_LEVEL"] == "WARNING"
