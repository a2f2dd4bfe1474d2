"""
app/services/disclosure_templates.py

Downloadable CSV helpers: an empty upload template and a filled-in sample.
Both are generated from the reader's column contract so they can never
drift from what the importer accepts.
"""

from __future__ import annotations

import csv
import io

from app.readers.tabular_reader import DISCLOSURE_COLUMNS

TEMPLATE_FILENAMES: dict[str, str] = {
    "GRI": "gri-template.csv",
}

SAMPLE_FILENAME = "sample-gri-data.csv"

SAMPLE_ROWS: tuple[dict[str, str], ...] = (
    {
        "standardCode": "GRI 302",
        "disclosureCode": "302-1",
        "disclosureTitle": "Energy consumption within the organization",
        "numericValue": "15,000",
        "unit": "MWh",
        "reportingPeriodStart": "2023-01-01",
        "reportingPeriodEnd": "2023-12-31",
        "verificationStatus": "verified",
        "verificationProvider": "Korea Management Association Registrations",
    },
    {
        "standardCode": "GRI 305",
        "disclosureCode": "305-1",
        "disclosureTitle": "Direct (Scope 1) GHG emissions",
        "numericValue": "1,234.5",
        "unit": "tCO2eq",
        "reportingPeriodStart": "2023-01-01",
        "reportingPeriodEnd": "2023-12-31",
    },
    {
        "standardCode": "GRI 403",
        "disclosureCode": "403-9",
        "disclosureTitle": "Work-related injuries",
        "numericValue": "3",
        "unit": "cases",
        "reportingPeriodStart": "2023-01-01",
        "reportingPeriodEnd": "2023-12-31",
        "verificationStatus": "in_progress",
    },
    {
        "standardCode": "GRI 205",
        "disclosureCode": "205-2",
        "disclosureTitle": "Communication and training about anti-corruption policies",
        "disclosureValue": "All board members completed anti-corruption training.",
        "description": "Annual compliance program",
        "reportingPeriodStart": "2023-01-01",
        "reportingPeriodEnd": "2023-12-31",
    },
)


def template_filename(template_type: str) -> str | None:
    """
    Return the download name for a template type, or None if unsupported.
    """

    return TEMPLATE_FILENAMES.get(template_type.strip().upper())


def build_template_csv() -> str:
    return _render_csv(())


def build_sample_csv() -> str:
    return _render_csv(SAMPLE_ROWS)


def _render_csv(rows: tuple[dict[str, str], ...]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(
        buf,
        fieldnames=list(DISCLOSURE_COLUMNS),
        restval="",
        lineterminator="\r\n",
    )
    writer.writeheader()
    writer.writerows(rows)
    return buf.getvalue()
