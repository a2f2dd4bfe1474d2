"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.company import Company
from db.models.gri_data_item import GriDataItem

__all__ = [
    "Company",
    "GriDataItem",
]
