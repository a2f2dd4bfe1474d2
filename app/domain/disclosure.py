"""
app/domain/disclosure.py

Domain models used by the disclosure CSV import flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

RawRow = dict[str, str | None]


class EsgCategory:
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"
    OTHER = "other"


class VerificationStatus:
    UNVERIFIED = "unverified"
    IN_PROGRESS = "in_progress"
    VERIFIED = "verified"
    FAILED = "failed"


@dataclass(frozen=True)
class DisclosureRecordInput:
    """
    Normalized disclosure prepared for persistence.

    category is always computed from standard_code and title.
    """

    standard_code: str
    title: str
    category: str
    disclosure_code: str | None = None
    text_value: str | None = None
    description: str | None = None
    numeric_value: Decimal | None = None
    unit: str | None = None
    period_start: date | None = None
    period_end: date | None = None
    verification_status: str = VerificationStatus.UNVERIFIED
    verification_provider: str | None = None


@dataclass(frozen=True)
class RowError:
    """
    One rejected CSV row. row_number is the 1-based data row ordinal.
    """

    row_number: int
    kind: str
    message: str
    column: str | None = None
    value: str | None = None

    def describe(self) -> str:
        return f"row {self.row_number}: {self.message}"


@dataclass(frozen=True)
class BatchOutcome:
    """
    End-of-run import summary.
    """

    total_rows: int
    processed_rows: int
    error_rows: int
    errors: tuple[RowError, ...] = ()

    @property
    def success(self) -> bool:
        return self.error_rows == 0

    @property
    def error_messages(self) -> list[str]:
        return [error.describe() for error in self.errors]
