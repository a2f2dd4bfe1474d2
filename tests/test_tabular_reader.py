"""
tests/test_tabular_reader.py

Unit tests for app.readers.tabular_reader.read_rows.

Coverage
--------
- Header matching (BOM, case, unknown and reordered columns)
- Cell trimming, short lines, blank lines, quoted fields
- Empty and header-only files
- Fatal MalformedInputError for bad bytes, bad quoting, duplicate headers
  and unknown encodings
- The caller's stream stays open; rows are produced lazily
"""

from __future__ import annotations

import io

import pytest

from app.domain.errors import MalformedInputError
from app.readers.tabular_reader import DISCLOSURE_COLUMNS, read_rows


def _read(content: bytes, **kwargs) -> list[dict]:
    return list(read_rows(io.BytesIO(content), **kwargs))


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


def test_reads_rows_keyed_by_declared_columns() -> None:
    rows = _read(b"standardCode,disclosureTitle,numericValue\nGRI 302,Energy,100\n")

    assert len(rows) == 1
    assert rows[0]["standardCode"] == "GRI 302"
    assert rows[0]["disclosureTitle"] == "Energy"
    assert rows[0]["numericValue"] == "100"


def test_every_row_has_all_declared_columns() -> None:
    rows = _read(b"standardCode,disclosureTitle\nGRI 302,Energy\n")

    assert tuple(rows[0]) == DISCLOSURE_COLUMNS
    assert rows[0]["unit"] is None
    assert rows[0]["reportingPeriodStart"] is None


def test_strips_utf8_bom() -> None:
    rows = _read(b"\xef\xbb\xbfstandardCode,disclosureTitle\nGRI 302,Energy\n")
    assert rows[0]["standardCode"] == "GRI 302"


def test_header_is_case_insensitive() -> None:
    rows = _read(b"STANDARDCODE, DisclosureTitle \nGRI 302,Energy\n")
    assert rows[0]["standardCode"] == "GRI 302"
    assert rows[0]["disclosureTitle"] == "Energy"


def test_unknown_columns_are_ignored_and_order_is_free() -> None:
    rows = _read(b"internalId,disclosureTitle,standardCode\n77,Energy,GRI 302\n")

    assert "internalId" not in rows[0]
    assert rows[0]["standardCode"] == "GRI 302"
    assert rows[0]["disclosureTitle"] == "Energy"


def test_cells_are_trimmed() -> None:
    rows = _read(b"standardCode,disclosureTitle\n  GRI 302  ,\t Energy \n")
    assert rows[0]["standardCode"] == "GRI 302"
    assert rows[0]["disclosureTitle"] == "Energy"


def test_short_line_yields_none_for_missing_cells() -> None:
    rows = _read(b"standardCode,disclosureTitle,unit\nGRI 302\n")

    assert rows[0]["standardCode"] == "GRI 302"
    assert rows[0]["disclosureTitle"] is None
    assert rows[0]["unit"] is None


def test_empty_cell_is_empty_string() -> None:
    rows = _read(b"standardCode,disclosureTitle\nGRI 302,\n")
    assert rows[0]["disclosureTitle"] == ""


def test_blank_lines_are_skipped() -> None:
    rows = _read(b"\nstandardCode,disclosureTitle\n\nGRI 302,Energy\n\nGRI 305,Emissions\n")
    assert [row["standardCode"] for row in rows] == ["GRI 302", "GRI 305"]


def test_quoted_fields_keep_commas_and_newlines() -> None:
    rows = _read(b'standardCode,disclosureTitle,description\nGRI 302,"Energy, total","line one\nline two"\n')

    assert rows[0]["disclosureTitle"] == "Energy, total"
    assert rows[0]["description"] == "line one\nline two"


def test_crlf_line_endings() -> None:
    rows = _read(b"standardCode,disclosureTitle\r\nGRI 302,Energy\r\nGRI 305,Emissions\r\n")
    assert len(rows) == 2
    assert rows[1]["disclosureTitle"] == "Emissions"


def test_missing_required_column_is_not_fatal(caplog: pytest.LogCaptureFixture) -> None:
    rows = _read(b"standardCode,unit\nGRI 302,GJ\n")

    assert rows[0]["disclosureTitle"] is None
    assert "disclosureTitle" in caplog.text


def test_alternate_encoding() -> None:
    content = "standardCode,disclosureTitle\nGRI 302,Énergie\n".encode("latin-1")
    rows = _read(content, encoding="latin-1")
    assert rows[0]["disclosureTitle"] == "Énergie"


# ---------------------------------------------------------------------------
# Empty input
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("content", [b"", b"\n\n", b"\xef\xbb\xbf"])
def test_empty_file_yields_nothing(content: bytes) -> None:
    assert _read(content) == []


def test_header_only_file_yields_nothing() -> None:
    assert _read(b"standardCode,disclosureTitle\n") == []


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


def test_invalid_bytes_are_malformed() -> None:
    with pytest.raises(MalformedInputError) as exc_info:
        _read(b"standardCode,disclosureTitle\nGRI 302,\xff\xfe\n")
    assert exc_info.value.code == "malformed_input"


def test_invalid_quoting_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        _read(b'standardCode,disclosureTitle\n"GRI 302"x,Energy\n')


def test_duplicate_header_column_is_malformed() -> None:
    with pytest.raises(MalformedInputError, match="standardcode"):
        _read(b"standardCode,standardcode,disclosureTitle\nA,B,C\n")


def test_duplicate_unknown_columns_are_tolerated() -> None:
    rows = _read(b"note,note,standardCode,disclosureTitle\nx,y,GRI 302,Energy\n")
    assert rows[0]["standardCode"] == "GRI 302"


def test_unknown_encoding_is_malformed() -> None:
    with pytest.raises(MalformedInputError, match="encoding"):
        _read(b"standardCode\n", encoding="no-such-codec")


# ---------------------------------------------------------------------------
# Stream handling
# ---------------------------------------------------------------------------


def test_caller_stream_stays_open() -> None:
    stream = io.BytesIO(b"standardCode,disclosureTitle\nGRI 302,Energy\n")
    list(read_rows(stream))
    assert not stream.closed


def test_caller_stream_stays_open_after_error() -> None:
    stream = io.BytesIO(b"standardCode,disclosureTitle\n\xff\n")
    with pytest.raises(MalformedInputError):
        list(read_rows(stream))
    assert not stream.closed


def test_rows_are_produced_lazily() -> None:
    stream = io.BytesIO(b'standardCode,disclosureTitle\nGRI 302,Energy\n"bad"x,row\n')
    rows = read_rows(stream)

    assert next(rows)["standardCode"] == "GRI 302"
    with pytest.raises(MalformedInputError):
        next(rows)
