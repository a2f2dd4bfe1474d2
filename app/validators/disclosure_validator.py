"""
app/validators/disclosure_validator.py

Row-level validation that turns one raw CSV row into a disclosure record.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from app.domain.disclosure import DisclosureRecordInput, RowError, VerificationStatus
from app.failure_codes import INVALID_PERIOD_ORDER, MISSING_REQUIRED_FIELD
from app.mappers.category_classifier import classify
from app.validators.field_coercion import DATE_FORMAT, FieldCoercion, coerce_date, coerce_decimal

_FIELD_LABELS: dict[str, str] = {
    "numericValue": "numeric value",
    "reportingPeriodStart": "reporting period start",
    "reportingPeriodEnd": "reporting period end",
}


class DisclosureRowValidator:
    """
    Validates and normalizes one disclosure row.

    Checks run in a fixed order and stop at the first problem, so each
    rejected row carries exactly one RowError.
    """

    def normalize(
        self,
        raw_row: Mapping[str, str | None],
        *,
        row_number: int,
    ) -> tuple[DisclosureRecordInput | None, RowError | None]:
        # A reversed period is reported even when other fields are also bad.
        period_start, error = self._parse_field(raw_row, "reportingPeriodStart", coerce_date, row_number)
        if error is not None:
            return None, error
        period_end, error = self._parse_field(raw_row, "reportingPeriodEnd", coerce_date, row_number)
        if error is not None:
            return None, error
        if period_start is not None and period_end is not None and period_start > period_end:
            order = f"{period_start.isoformat()} > {period_end.isoformat()}"
            return None, RowError(
                row_number=row_number,
                kind=INVALID_PERIOD_ORDER,
                column="reportingPeriodStart",
                value=order,
                message=f"Reporting period start is after its end: {order}",
            )

        standard_code, error = self._parse_required_string(raw_row, "standardCode", row_number)
        if error is not None:
            return None, error
        title, error = self._parse_required_string(raw_row, "disclosureTitle", row_number)
        if error is not None:
            return None, error

        numeric_value, error = self._parse_field(raw_row, "numericValue", coerce_decimal, row_number)
        if error is not None:
            return None, error

        return (
            DisclosureRecordInput(
                standard_code=standard_code,
                title=title,
                category=classify(standard_code, title),
                disclosure_code=self._parse_optional_string(raw_row.get("disclosureCode")),
                text_value=self._parse_optional_string(raw_row.get("disclosureValue")),
                description=self._parse_optional_string(raw_row.get("description")),
                numeric_value=numeric_value,
                unit=self._parse_optional_string(raw_row.get("unit")),
                period_start=period_start,
                period_end=period_end,
                verification_status=(
                    self._parse_optional_string(raw_row.get("verificationStatus"))
                    or VerificationStatus.UNVERIFIED
                ),
                verification_provider=self._parse_optional_string(raw_row.get("verificationProvider")),
            ),
            None,
        )

    def _parse_required_string(
        self,
        row: Mapping[str, str | None],
        column: str,
        row_number: int,
    ) -> tuple[str, RowError | None]:
        value = self._parse_optional_string(row.get(column))
        if value is None:
            return "", RowError(
                row_number=row_number,
                kind=MISSING_REQUIRED_FIELD,
                column=column,
                value=row.get(column),
                message=f"Missing required field: {column}",
            )
        return value, None

    def _parse_field(
        self,
        row: Mapping[str, str | None],
        column: str,
        coercer: Callable[[str | None], FieldCoercion],
        row_number: int,
    ) -> tuple[object, RowError | None]:
        raw = row.get(column)
        result = coercer(raw)
        if result.failure is None:
            return result.value, None

        label = _FIELD_LABELS.get(column, column)
        if coercer is coerce_date:
            message = f"Invalid {label} format, expected {DATE_FORMAT}: {raw}"
        else:
            message = f"Invalid {label} format: {raw}"
        return None, RowError(
            row_number=row_number,
            kind=result.failure,
            column=column,
            value=raw,
            message=message,
        )

    @staticmethod
    def _parse_optional_string(value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None
