"""
app/services/disclosure_import_service.py

Service layer for disclosure CSV imports.

One import runs synchronously inside the request:

    1. Resolve the owning company (once, not per row).
    2. Read the whole upload. Undecodable bytes or broken quoting abort
       the import before any row is stored.
    3. Reject uploads with no data rows.
    4. Hand the rows to DisclosureBatchProcessor, which stores valid rows
       one by one and records the rest as row errors.

Steps 1-3 fail with a DisclosureImportError subclass. Once step 4 starts
the import always completes with a BatchOutcome.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from functools import lru_cache
from typing import Protocol

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.config import get_csv_import_settings
from app.domain.disclosure import BatchOutcome
from app.domain.errors import (
    CompanyNotFoundError,
    DisclosureImportError,
    EmptyImportError,
    MalformedInputError,
)
from app.logging_utils import log_import_event
from app.readers.tabular_reader import read_rows
from app.repositories.company_repository import CompanyRepository
from app.repositories.disclosure_repository import DisclosureRepository
from app.services.disclosure_batch_processor import DisclosureBatchProcessor, DisclosureGateway
from app.validators.disclosure_validator import DisclosureRowValidator
from db.models.company import Company

logger = logging.getLogger(__name__)


class CompanyLookup(Protocol):
    def find_company(self, company_id: uuid.UUID) -> Company | None:
        ...


class DisclosureImportService:
    """
    Coordinates company lookup, CSV reading, and the row batch.
    """

    def __init__(
        self,
        *,
        encoding: str,
        log_row_errors: bool,
        validator: DisclosureRowValidator | None = None,
        gateway_factory: Callable[[Session], DisclosureGateway] | None = None,
        company_lookup_factory: Callable[[Session], CompanyLookup] | None = None,
    ) -> None:
        self._encoding = encoding
        self._log_row_errors = log_row_errors
        self._validator = validator or DisclosureRowValidator()
        self._gateway_factory = gateway_factory or DisclosureRepository
        self._company_lookup_factory = company_lookup_factory or CompanyRepository

    def import_csv(
        self,
        *,
        upload_file: UploadFile,
        db: Session,
        company_id: uuid.UUID,
    ) -> BatchOutcome:
        """
        Import one uploaded disclosure CSV for *company_id*.

        Args:
            upload_file: File to import. The underlying stream is left open.
            db:          Active SQLAlchemy session (caller owns lifecycle).
            company_id:  Owner of every stored disclosure.

        Raises:
            CompanyNotFoundError: company missing or inactive.
            MalformedInputError:  upload is not decodable, parseable CSV.
            EmptyImportError:     upload has no data rows.
        """
        log_import_event(
            logger,
            logging.INFO,
            "import_started",
            company_id=company_id,
            file_name=upload_file.filename,
        )

        company = self._company_lookup_factory(db).find_company(company_id)
        if company is None:
            not_found = CompanyNotFoundError(f"Company not found: {company_id}")
            self._log_rejection(company_id, not_found)
            raise not_found

        raw_file = upload_file.file
        raw_file.seek(0)
        try:
            rows = list(read_rows(raw_file, encoding=self._encoding))
        except MalformedInputError as exc:
            self._log_rejection(company_id, exc)
            raise
        if not rows:
            empty = EmptyImportError("CSV file contains no data rows.")
            self._log_rejection(company_id, empty)
            raise empty

        processor = DisclosureBatchProcessor(
            gateway=self._gateway_factory(db),
            validator=self._validator,
            log_row_errors=self._log_row_errors,
        )
        outcome = processor.run(rows, company_id=company.id)

        log_import_event(
            logger,
            logging.INFO if outcome.success else logging.WARNING,
            "import_completed",
            company_id=company_id,
            total_rows=outcome.total_rows,
            processed_rows=outcome.processed_rows,
            error_rows=outcome.error_rows,
        )
        return outcome

    @staticmethod
    def _log_rejection(company_id: uuid.UUID, error: DisclosureImportError) -> None:
        log_import_event(
            logger,
            logging.WARNING,
            "import_rejected",
            company_id=company_id,
            code=error.code,
            reason=str(error),
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_disclosure_import_service() -> DisclosureImportService:
    """
    Build and cache the import service with env-driven settings.
    """
    settings = get_csv_import_settings()
    return DisclosureImportService(
        encoding=settings.encoding,
        log_row_errors=settings.log_row_errors,
    )
