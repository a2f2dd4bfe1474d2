"""
db/models/company.py

Company model: the owner of every disclosure item.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from db.models.gri_data_item import GriDataItem


class Company(UUIDPrimaryKeyMixin, Base, TimestampMixin):
    """
    A reporting company. Imported disclosures are always scoped to one company.
    """

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    industry: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Industry classification used for peer comparisons",
    )

    is_active: Mapped[bool] = mapped_column(
        nullable=False,
        default=True,
        comment="Inactive companies cannot receive imports",
    )

    # ── Relationships ──────────────────────────────────────────────────────────

    gri_data_items: Mapped[list["GriDataItem"]] = relationship(
        "GriDataItem",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_companies_name"),
        Index("ix_companies_is_active", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<Company id={self.id} name={self.name!r}>"
