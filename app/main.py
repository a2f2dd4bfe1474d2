"""
app/main.py

FastAPI entrypoint for the ESG disclosure import API.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_database_settings, get_log_level
from app.schemas.data_import import HealthResponse

logger = logging.getLogger(__name__)


def _validate_env() -> None:
    """
    Fail fast on configuration problems, listing all of them at once.
    """

    errors: list[str] = []

    settings = get_database_settings()
    if not settings.url:
        errors.append("DATABASE_URL is not set.")
    elif not settings.url.startswith("postgresql"):
        errors.append(f"DATABASE_URL must point at PostgreSQL, got scheme {settings.url.split(':', 1)[0]!r}.")

    if errors:
        raise RuntimeError(
            "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, get_log_level(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _check_database() -> None:
    """
    Confirm the database answers and holds the companies and
    gri_data_items tables. Does NOT auto-migrate.
    """
    from sqlalchemy import inspect as sa_inspect
    from sqlalchemy import text

    import db.models  # noqa: F401
    from db.base import Base
    from db.session import get_engine

    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
            present = set(sa_inspect(connection).get_table_names())
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc

    missing = sorted(set(Base.metadata.tables) - present)
    if missing:
        logger.critical(
            "Disclosure tables missing: %s. Run 'alembic upgrade head' and restart.",
            ", ".join(missing),
        )
        raise RuntimeError(f"Database schema is missing tables: {', '.join(missing)}.")


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    _check_database()
    logger.info("Database reachable and disclosure schema present")
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    _configure_logging()

    application = FastAPI(
        title="ESG Disclosure Import API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import data_import_router

    application.include_router(data_import_router)

    @application.get("/health")
    def healthcheck() -> HealthResponse:
        return HealthResponse(status="ok")

    return application


app = create_app()
