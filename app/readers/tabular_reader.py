"""
app/readers/tabular_reader.py

Decodes an uploaded byte stream into trimmed, header-keyed CSV rows.
"""

from __future__ import annotations

import codecs
import csv
import io
import logging
from collections.abc import Iterator
from typing import BinaryIO

from app.domain.disclosure import RawRow
from app.domain.errors import MalformedInputError

logger = logging.getLogger(__name__)

# Column contract for disclosure uploads, in template order.
DISCLOSURE_COLUMNS: tuple[str, ...] = (
    "standardCode",
    "disclosureCode",
    "disclosureTitle",
    "disclosureValue",
    "description",
    "numericValue",
    "unit",
    "reportingPeriodStart",
    "reportingPeriodEnd",
    "verificationStatus",
    "verificationProvider",
)

REQUIRED_COLUMNS: tuple[str, ...] = ("standardCode", "disclosureTitle")

_COLUMNS_BY_LOWER_NAME: dict[str, str] = {column.lower(): column for column in DISCLOSURE_COLUMNS}


def read_rows(stream: BinaryIO, *, encoding: str = "utf-8-sig") -> Iterator[RawRow]:
    """
    Yield one RawRow per data line of *stream*.

    The first non-blank line is the header. Header names are matched
    case-insensitively against DISCLOSURE_COLUMNS; other columns are
    dropped. Every row carries all DISCLOSURE_COLUMNS keys: cells are
    trimmed, and columns absent from the header or from a short line are None.

    Raises MalformedInputError when the bytes cannot be decoded, quoting is
    invalid, or a recognized column is declared twice. Errors past the
    header surface during iteration, so callers that need all-or-nothing
    reading should materialize the iterator first.
    """

    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise MalformedInputError(f"Unsupported encoding: {encoding}.") from exc

    text_stream = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        reader = csv.reader(text_stream, strict=True)
        header = _next_non_blank(reader)
        if header is None:
            return

        positions = _resolve_columns(header)
        for cells in reader:
            if not cells:
                continue
            row: RawRow = dict.fromkeys(DISCLOSURE_COLUMNS)
            for column, index in positions.items():
                if index < len(cells):
                    row[column] = cells[index].strip()
            yield row
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"CSV must be {encoding} encoded.") from exc
    except csv.Error as exc:
        raise MalformedInputError(f"Invalid CSV format: {exc}") from exc
    finally:
        # Leave the caller's byte stream open.
        try:
            text_stream.detach()
        except ValueError:
            pass


def _next_non_blank(reader: Iterator[list[str]]) -> list[str] | None:
    for cells in reader:
        if cells:
            return cells
    return None


def _resolve_columns(header: list[str]) -> dict[str, int]:
    positions: dict[str, int] = {}
    for index, raw_name in enumerate(header):
        column = _COLUMNS_BY_LOWER_NAME.get(raw_name.strip().lower())
        if column is None:
            continue
        if column in positions:
            raise MalformedInputError(f"Duplicate CSV header column: {raw_name.strip()}.")
        positions[column] = index

    missing = [column for column in REQUIRED_COLUMNS if column not in positions]
    if missing:
        logger.warning("CSV header is missing required columns: %s", ", ".join(missing))
    return positions
