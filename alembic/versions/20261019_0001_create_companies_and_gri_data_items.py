"""create companies and gri_data_items tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 10:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "industry",
            sa.String(length=100),
            nullable=True,
            comment="Industry classification used for peer comparisons",
        ),
        sa.Column(
            "is_active",
            sa.Boolean(),
            nullable=False,
            comment="Inactive companies cannot receive imports",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_companies_name"),
    )
    op.create_index("ix_companies_is_active", "companies", ["is_active"], unique=False)

    op.create_table(
        "gri_data_items",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("company_id", sa.Uuid(), nullable=False),
        sa.Column(
            "standard_code",
            sa.String(length=64),
            nullable=False,
            comment="GRI series, e.g. 'GRI 302'",
        ),
        sa.Column("disclosure_code", sa.String(length=64), nullable=True),
        sa.Column("disclosure_title", sa.String(length=255), nullable=False),
        sa.Column("disclosure_value", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("numeric_value", sa.Numeric(), nullable=True),
        sa.Column("unit", sa.String(length=64), nullable=True),
        sa.Column("reporting_period_start", sa.Date(), nullable=True),
        sa.Column("reporting_period_end", sa.Date(), nullable=True),
        sa.Column(
            "verification_status",
            sa.String(length=64),
            nullable=False,
            comment="unverified, in_progress, verified, failed (other values kept verbatim)",
        ),
        sa.Column("verification_provider", sa.String(length=255), nullable=True),
        sa.Column(
            "category",
            sa.String(length=32),
            nullable=False,
            comment="environmental, social, governance, other",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_gri_data_items_company_id", "gri_data_items", ["company_id"], unique=False)
    op.create_index("ix_gri_data_items_standard_code", "gri_data_items", ["standard_code"], unique=False)
    op.create_index("ix_gri_data_items_disclosure_code", "gri_data_items", ["disclosure_code"], unique=False)
    op.create_index("ix_gri_data_items_category", "gri_data_items", ["category"], unique=False)
    op.create_index(
        "ix_gri_data_items_reporting_period",
        "gri_data_items",
        ["reporting_period_start", "reporting_period_end"],
        unique=False,
    )
    op.create_index(
        "ix_gri_data_items_verification_status",
        "gri_data_items",
        ["verification_status"],
        unique=False,
    )
    op.create_index(
        "ix_gri_data_items_company_category",
        "gri_data_items",
        ["company_id", "category"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_gri_data_items_company_category", table_name="gri_data_items")
    op.drop_index("ix_gri_data_items_verification_status", table_name="gri_data_items")
    op.drop_index("ix_gri_data_items_reporting_period", table_name="gri_data_items")
    op.drop_index("ix_gri_data_items_category", table_name="gri_data_items")
    op.drop_index("ix_gri_data_items_disclosure_code", table_name="gri_data_items")
    op.drop_index("ix_gri_data_items_standard_code", table_name="gri_data_items")
    op.drop_index("ix_gri_data_items_company_id", table_name="gri_data_items")
    op.drop_table("gri_data_items")
    op.drop_index("ix_companies_is_active", table_name="companies")
    op.drop_table("companies")
