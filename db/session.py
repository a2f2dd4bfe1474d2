"""
db/session.py

Engine and session wiring for the disclosure store.

Nothing connects at import time: the engine is built on first use from
DatabaseSettings and cached for the life of the process.
"""

from __future__ import annotations

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config import DatabaseSettings, get_database_settings


def create_db_engine(settings: DatabaseSettings) -> Engine:
    """
    Build a pooled PostgreSQL engine.

    Raises RuntimeError when DATABASE_URL is missing or not PostgreSQL.
    """

    if not settings.url:
        raise RuntimeError("No database URL configured. Set DATABASE_URL.")
    if not settings.url.startswith("postgresql"):
        raise RuntimeError("Only PostgreSQL URLs are supported.")

    return create_engine(
        settings.url,
        echo=settings.echo,
        pool_pre_ping=True,
        pool_recycle=settings.pool_recycle,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
    )


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine(get_database_settings())


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    # Rows are committed one at a time during an import; keep loaded
    # objects usable after each commit.
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


def SessionLocal() -> Session:
    return get_session_factory()()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency yielding one session per request.
    """

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
