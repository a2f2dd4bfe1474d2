"""
app/schemas package marker.
"""

from app.schemas.data_import import (
    CsvUploadResponse,
    HealthResponse,
    ImportFailureDetail,
    ImportFailureResponse,
    RowErrorResponse,
)

__all__ = [
    "CsvUploadResponse",
    "HealthResponse",
    "ImportFailureDetail",
    "ImportFailureResponse",
    "RowErrorResponse",
]
