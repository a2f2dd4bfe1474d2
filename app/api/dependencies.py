"""
app/api/dependencies.py

Request-level guards shared by the data-import endpoints.
"""

from __future__ import annotations

from fastapi import File, HTTPException, UploadFile, status

from app.failure_codes import UNSUPPORTED_FILE_TYPE

CSV_EXTENSION = ".csv"

# Browsers on Windows report CSV uploads as the Excel MIME type.
CSV_CONTENT_TYPES = frozenset(
    {
        "text/csv",
        "application/csv",
        "application/vnd.ms-excel",
    }
)


def is_csv_upload(filename: str | None, content_type: str | None) -> bool:
    """
    True when the extension or the media type (parameters ignored) says CSV.
    """

    if (filename or "").strip().lower().endswith(CSV_EXTENSION):
        return True
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type in CSV_CONTENT_TYPES


def get_csv_upload(file: UploadFile = File(..., description="Disclosure CSV file")) -> UploadFile:
    if not is_csv_upload(file.filename, file.content_type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": UNSUPPORTED_FILE_TYPE,
                "message": f"Only CSV files are allowed: {file.filename or 'unnamed upload'}",
            },
        )
    return file
