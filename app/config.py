"""
app/config.py

Environment-driven settings for the disclosure import service.

Values come from the process environment, then `.env` and `.env.local` in
the project root. Settings objects are frozen and cached; tests that
change the environment call `cache_clear()` on the getter.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILES = (".env", ".env.local")
_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_env_files() -> None:
    """
    Copy KEY=VALUE lines from the project env files into os.environ.

    Variables already set in the process win. Blank lines, `#` comments and
    an optional leading `export ` are tolerated; surrounding quotes are removed.
    """

    for filename in _ENV_FILES:
        env_path = _PROJECT_ROOT / filename
        if not env_path.is_file():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if line.startswith("export "):
                line = line[len("export "):].lstrip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            if key:
                os.environ.setdefault(key, value.strip().strip("\"'"))


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _read_env(name: str) -> str | None:
    """
    Return the stripped value of *name*, or None when unset or blank.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip() or None


def _get_bool_env(name: str, default: bool) -> bool:
    value = _read_env(name)
    if value is None:
        return default
    return value.lower() in _TRUE_VALUES


def _get_int_env(name: str, default: int) -> int:
    value = _read_env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    return _read_env(name) or default


def normalize_postgres_url(url: str) -> str:
    """
    Rewrite bare postgres URLs to SQLAlchemy's psycopg (v3) driver form.

    >>> normalize_postgres_url("postgres://u:p@db/esg")
    'postgresql+psycopg://u:p@db/esg'
    >>> normalize_postgres_url("postgresql+psycopg://u:p@db/esg")
    'postgresql+psycopg://u:p@db/esg'
    """

    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CSVImportSettings:
    """
    Runtime settings for disclosure CSV imports.

    encoding:        codec used to decode uploads; utf-8-sig also accepts a BOM
    log_row_errors:  log every rejected row at WARNING
    """

    encoding: str = "utf-8-sig"
    log_row_errors: bool = True


@dataclass(frozen=True)
class DatabaseSettings:
    url: str | None = None
    echo: bool = False
    pool_size: int = 5
    max_overflow: int = 10
    pool_recycle: int = 1800


@lru_cache(maxsize=1)
def get_csv_import_settings() -> CSVImportSettings:
    return CSVImportSettings(
        encoding=_get_str_env("CSV_IMPORT_ENCODING", "utf-8-sig"),
        log_row_errors=_get_bool_env("CSV_IMPORT_LOG_ROW_ERRORS", True),
    )


@lru_cache(maxsize=1)
def get_database_settings() -> DatabaseSettings:
    """
    Return cached database settings.

    url stays None when DATABASE_URL is unset; callers that need a
    connection decide how to fail.
    """

    url = _read_env("DATABASE_URL")
    return DatabaseSettings(
        url=normalize_postgres_url(url) if url else None,
        echo=_get_bool_env("SQL_ECHO", False),
        pool_size=max(1, _get_int_env("DB_POOL_SIZE", 5)),
        max_overflow=max(0, _get_int_env("DB_MAX_OVERFLOW", 10)),
        pool_recycle=max(1, _get_int_env("DB_POOL_RECYCLE", 1800)),
    )


def get_log_level() -> str:
    return _get_str_env("LOG_LEVEL", "INFO").upper()
