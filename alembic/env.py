"""
Alembic environment for the disclosure store.

The target database comes from, in order:
    1) `alembic -x db_url=...`
    2) ALEMBIC_DATABASE_URL
    3) DATABASE_URL (via app.config)
"""

from __future__ import annotations

import os
from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy import create_engine, pool

import db.models  # noqa: F401
from app.config import get_database_settings, load_env_files, normalize_postgres_url
from db.base import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

_COMPARE_OPTIONS: dict[str, Any] = {
    "compare_type": True,
    "compare_server_default": True,
}


def _resolve_database_url() -> str:
    load_env_files()

    override = context.get_x_argument(as_dictionary=True).get("db_url")
    raw_url = override or os.getenv("ALEMBIC_DATABASE_URL") or get_database_settings().url
    if not raw_url:
        raise RuntimeError("No migration target. Set DATABASE_URL or pass -x db_url=...")

    url = normalize_postgres_url(raw_url.strip())
    if not url.startswith("postgresql"):
        raise RuntimeError("Migrations target PostgreSQL only.")
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=_resolve_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(_resolve_database_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            **_COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
