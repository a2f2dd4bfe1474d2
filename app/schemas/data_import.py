"""
app/schemas/data_import.py

Response schemas for disclosure import endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.disclosure import BatchOutcome


class RowErrorResponse(BaseModel):
    """
    API response model for one rejected row.
    """

    model_config = ConfigDict(populate_by_name=True)

    row_number: int = Field(..., ge=1, alias="rowNumber")
    kind: str
    message: str
    column: str | None = None
    value: str | None = None


class CsvUploadResponse(BaseModel):
    """
    API response model for a completed import, including partial failures.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    total_rows: int = Field(..., ge=0, alias="totalRows")
    processed_rows: int = Field(..., ge=0, alias="processedRows")
    error_rows: int = Field(..., ge=0, alias="errorRows")
    error_messages: list[str] = Field(default_factory=list, alias="errorMessages")
    row_errors: list[RowErrorResponse] = Field(default_factory=list, alias="rowErrors")

    @classmethod
    def from_outcome(cls, outcome: BatchOutcome) -> CsvUploadResponse:
        if outcome.success:
            message = f"Imported {outcome.processed_rows} of {outcome.total_rows} rows."
        else:
            message = (
                f"Imported {outcome.processed_rows} of {outcome.total_rows} rows; "
                f"{outcome.error_rows} rows were rejected."
            )
        return cls(
            success=outcome.success,
            message=message,
            total_rows=outcome.total_rows,
            processed_rows=outcome.processed_rows,
            error_rows=outcome.error_rows,
            error_messages=outcome.error_messages,
            row_errors=[
                RowErrorResponse(
                    row_number=error.row_number,
                    kind=error.kind,
                    message=error.message,
                    column=error.column,
                    value=error.value,
                )
                for error in outcome.errors
            ],
        )


class ImportFailureDetail(BaseModel):
    """
    Body of the `detail` field when a whole import is rejected.
    """

    code: str
    message: str


class ImportFailureResponse(BaseModel):
    detail: ImportFailureDetail


class HealthResponse(BaseModel):
    status: str = "ok"
