"""
Tests for the CSV upload guard in app.api.dependencies.
"""

from __future__ import annotations

import pytest

from app.api.dependencies import is_csv_upload


@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("report.csv", "application/octet-stream"),
        ("REPORT.CSV", None),
        ("export", "text/csv"),
        ("export", "text/csv; charset=utf-8"),
        ("export", "application/vnd.ms-excel"),
        (None, "Application/CSV"),
    ],
)
def test_csv_uploads_accepted(filename: str | None, content_type: str | None) -> None:
    assert is_csv_upload(filename, content_type)


@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("report.pdf", "application/pdf"),
        ("report.csv.xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
        (None, None),
        ("", "text/plain"),
    ],
)
def test_other_uploads_rejected(filename: str | None, content_type: str | None) -> None:
    assert not is_csv_upload(filename, content_type)
