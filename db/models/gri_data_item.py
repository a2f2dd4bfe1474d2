"""
db/models/gri_data_item.py

Persisted GRI disclosure item, one per successfully imported CSV row.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from db.models.company import Company


class GriDataItem(UUIDPrimaryKeyMixin, Base, TimestampMixin):
    __tablename__ = "gri_data_items"

    company_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
    )
    standard_code: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="GRI series, e.g. 'GRI 302'",
    )
    disclosure_code: Mapped[str | None] = mapped_column(String(64), nullable=True)
    disclosure_title: Mapped[str] = mapped_column(String(255), nullable=False)
    disclosure_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    numeric_value: Mapped[Decimal | None] = mapped_column(nullable=True)
    unit: Mapped[str | None] = mapped_column(String(64), nullable=True)
    reporting_period_start: Mapped[date | None] = mapped_column(nullable=True)
    reporting_period_end: Mapped[date | None] = mapped_column(nullable=True)
    verification_status: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="unverified, in_progress, verified, failed (other values kept verbatim)",
    )
    verification_provider: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="environmental, social, governance, other",
    )

    company: Mapped[Company] = relationship("Company", back_populates="gri_data_items")

    __table_args__ = (
        Index("ix_gri_data_items_company_id", "company_id"),
        Index("ix_gri_data_items_standard_code", "standard_code"),
        Index("ix_gri_data_items_disclosure_code", "disclosure_code"),
        Index("ix_gri_data_items_category", "category"),
        Index(
            "ix_gri_data_items_reporting_period",
            "reporting_period_start",
            "reporting_period_end",
        ),
        Index("ix_gri_data_items_verification_status", "verification_status"),
        Index("ix_gri_data_items_company_category", "company_id", "category"),
    )

    def __repr__(self) -> str:
        return (
            f"<GriDataItem id={self.id} standard_code={self.standard_code!r} "
            f"category={self.category!r}>"
        )
