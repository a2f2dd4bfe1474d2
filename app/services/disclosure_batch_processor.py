"""
app/services/disclosure_batch_processor.py

Runs every parsed row through validation and persistence, keeping
per-row failures out of the control flow of the batch.

Rows are handled strictly in file order, one at a time. A row that fails
validation or storage is recorded and skipped; rows already stored stay
stored.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from typing import Protocol

from app.domain.disclosure import BatchOutcome, DisclosureRecordInput, RowError
from app.domain.errors import DisclosurePersistenceError
from app.failure_codes import PERSISTENCE_FAILED
from app.validators.disclosure_validator import DisclosureRowValidator

logger = logging.getLogger(__name__)


class DisclosureGateway(Protocol):
    """
    Durable store for normalized disclosures.

    Implementations raise DisclosurePersistenceError when a record is rejected.
    Any other exception from save() is also recorded as a failed row.
    """

    def save(self, record: DisclosureRecordInput, company_id: uuid.UUID) -> None:
        ...


class DisclosureBatchProcessor:
    def __init__(
        self,
        *,
        gateway: DisclosureGateway,
        validator: DisclosureRowValidator | None = None,
        log_row_errors: bool = True,
    ) -> None:
        self._gateway = gateway
        self._validator = validator or DisclosureRowValidator()
        self._log_row_errors = log_row_errors

    def run(
        self,
        rows: Iterable[Mapping[str, str | None]],
        *,
        company_id: uuid.UUID,
    ) -> BatchOutcome:
        total_rows = 0
        processed_rows = 0
        errors: list[RowError] = []

        for row_number, raw_row in enumerate(rows, start=1):
            total_rows += 1
            record, error = self._validator.normalize(raw_row, row_number=row_number)
            if error is None and record is not None:
                error = self._store(record, company_id=company_id, row_number=row_number)

            if error is None:
                processed_rows += 1
            else:
                self._record_error(errors, error)

        return BatchOutcome(
            total_rows=total_rows,
            processed_rows=processed_rows,
            error_rows=len(errors),
            errors=tuple(errors),
        )

    def _store(
        self,
        record: DisclosureRecordInput,
        *,
        company_id: uuid.UUID,
        row_number: int,
    ) -> RowError | None:
        try:
            self._gateway.save(record, company_id)
        except DisclosurePersistenceError as exc:
            message = f"Could not be saved: {exc}"
        except Exception as exc:  # noqa: BLE001
            logger.exception(
                "Unexpected gateway failure row=%s standard_code=%r",
                row_number,
                record.standard_code,
            )
            message = f"Could not be saved: {type(exc).__name__}: {exc}"
        else:
            return None

        return RowError(
            row_number=row_number,
            kind=PERSISTENCE_FAILED,
            message=message,
            column=None,
            value=record.standard_code,
        )

    def _record_error(self, errors: list[RowError], error: RowError) -> None:
        if self._log_row_errors:
            logger.warning(
                "CSV row rejected row=%s kind=%s column=%s message=%s value=%r",
                error.row_number,
                error.kind,
                error.column,
                error.message,
                error.value,
            )
        errors.append(error)
