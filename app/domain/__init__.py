"""
app/domain package marker.
"""

from app.domain.disclosure import (
    BatchOutcome,
    DisclosureRecordInput,
    EsgCategory,
    RawRow,
    RowError,
    VerificationStatus,
)
from app.domain.errors import (
    CompanyNotFoundError,
    DisclosureImportError,
    DisclosurePersistenceError,
    EmptyImportError,
    MalformedInputError,
)

__all__ = [
    "BatchOutcome",
    "CompanyNotFoundError",
    "DisclosureImportError",
    "DisclosurePersistenceError",
    "DisclosureRecordInput",
    "EmptyImportError",
    "EsgCategory",
    "MalformedInputError",
    "RawRow",
    "RowError",
    "VerificationStatus",
]
