"""
db/base.py

Declarative base for the disclosure store, plus the id and timestamp
columns every table carries.
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import Date, DateTime, Numeric, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Declarative base.

    Annotated columns resolve through type_annotation_map, so models only
    spell out a SQL type when it differs from these defaults. Uuid is the
    generic type: native UUID on PostgreSQL, CHAR(32) elsewhere.
    """

    type_annotation_map: dict[type, Any] = {
        uuid.UUID: Uuid(as_uuid=True),
        Decimal: Numeric,
        date: Date,
    }


class UUIDPrimaryKeyMixin:
    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Refreshed on every ORM UPDATE.
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )
