"""
app/validators/field_coercion.py

Pure text-to-value conversions for CSV cells. Nothing here raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from app.failure_codes import INVALID_DATE_FORMAT, INVALID_NUMBER_FORMAT

DATE_FORMAT = "YYYY-MM-DD"

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class FieldCoercion:
    """
    Outcome of one conversion: a value, a failure code, or neither (absent).
    """

    value: Any = None
    failure: str | None = None

    @property
    def is_absent(self) -> bool:
        return self.value is None and self.failure is None


ABSENT = FieldCoercion()


def coerce_decimal(raw: str | None) -> FieldCoercion:
    """
    Parse a decimal number, ignoring ',' grouping separators.

    "1,234.50" -> Decimal("1234.50"); "" -> absent; "abc" -> invalid_number_format.
    """

    if _is_blank(raw):
        return ABSENT

    cleaned = raw.strip().replace(",", "")
    if not _DECIMAL_LITERAL.fullmatch(cleaned):
        return FieldCoercion(failure=INVALID_NUMBER_FORMAT)
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return FieldCoercion(failure=INVALID_NUMBER_FORMAT)
    if not value.is_finite():
        return FieldCoercion(failure=INVALID_NUMBER_FORMAT)
    return FieldCoercion(value=value)


def coerce_date(raw: str | None) -> FieldCoercion:
    """
    Parse a calendar date written strictly as YYYY-MM-DD.
    """

    if _is_blank(raw):
        return ABSENT

    cleaned = raw.strip()
    if not _ISO_DATE.fullmatch(cleaned):
        return FieldCoercion(failure=INVALID_DATE_FORMAT)
    try:
        return FieldCoercion(value=date.fromisoformat(cleaned))
    except ValueError:
        return FieldCoercion(failure=INVALID_DATE_FORMAT)


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""
