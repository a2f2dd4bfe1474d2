"""
app/domain/errors.py

Exceptions raised by the disclosure import flow.

Only whole-batch failures are exceptions; row-level problems travel as
RowError values inside a BatchOutcome.
"""

from __future__ import annotations

from app.failure_codes import COMPANY_NOT_FOUND, EMPTY_FILE, MALFORMED_INPUT


class DisclosureImportError(ValueError):
    """
    Base class for failures that abort an import before any row is processed.
    """

    code = "import_failed"

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": str(self)}


class MalformedInputError(DisclosureImportError):
    """
    Raised when the upload cannot be decoded or parsed as CSV.
    """

    code = MALFORMED_INPUT


class EmptyImportError(DisclosureImportError):
    """
    Raised when the upload contains no data rows.
    """

    code = EMPTY_FILE


class CompanyNotFoundError(DisclosureImportError):
    """
    Raised when the owning company does not exist or is inactive.
    """

    code = COMPANY_NOT_FOUND


class DisclosurePersistenceError(RuntimeError):
    """
    Raised by a disclosure gateway when one record cannot be stored.
    """
