"""
app/mappers/category_classifier.py

Assigns an ESG category to a disclosure from its GRI standard code,
falling back to keywords in the disclosure title.
No I/O, no state: the result depends only on the two inputs.
"""

from __future__ import annotations

import re

from app.domain.disclosure import EsgCategory

# GRI topic series, checked in this order. 300s are environmental,
# 400s social and 200s economic/governance.
CODE_RANGES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"30[1-8]"), EsgCategory.ENVIRONMENTAL),
    (re.compile(r"4[01][0-9]"), EsgCategory.SOCIAL),
    (re.compile(r"2[0-9][0-9]"), EsgCategory.GOVERNANCE),
)

# First match wins, so "biodiversity" must precede "diversity".
CATEGORY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("environment", EsgCategory.ENVIRONMENTAL),
    ("energy", EsgCategory.ENVIRONMENTAL),
    ("emission", EsgCategory.ENVIRONMENTAL),
    ("water", EsgCategory.ENVIRONMENTAL),
    ("waste", EsgCategory.ENVIRONMENTAL),
    ("biodiversity", EsgCategory.ENVIRONMENTAL),
    ("social", EsgCategory.SOCIAL),
    ("human rights", EsgCategory.SOCIAL),
    ("community", EsgCategory.SOCIAL),
    ("labor", EsgCategory.SOCIAL),
    ("labour", EsgCategory.SOCIAL),
    ("safety", EsgCategory.SOCIAL),
    ("health", EsgCategory.SOCIAL),
    ("diversity", EsgCategory.SOCIAL),
    ("inclusion", EsgCategory.SOCIAL),
    ("governance", EsgCategory.GOVERNANCE),
    ("ethics", EsgCategory.GOVERNANCE),
    ("transparency", EsgCategory.GOVERNANCE),
    ("anti-corruption", EsgCategory.GOVERNANCE),
    ("board", EsgCategory.GOVERNANCE),
    ("compliance", EsgCategory.GOVERNANCE),
)


def classify(standard_code: str | None, title: str | None) -> str:
    """
    Return the EsgCategory value for a disclosure.

    The code range always wins over title keywords:

    >>> classify("GRI 302", "Board oversight")
    'environmental'
    >>> classify("CUSTOM-1", "Water withdrawal")
    'environmental'
    >>> classify(None, "Miscellaneous")
    'other'
    """

    if standard_code:
        for pattern, category in CODE_RANGES:
            if pattern.search(standard_code):
                return category

    if title:
        lowered = title.lower()
        for keyword, category in CATEGORY_KEYWORDS:
            if keyword in lowered:
                return category

    return EsgCategory.OTHER
