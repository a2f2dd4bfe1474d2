"""
app/mappers package marker.
"""

from app.mappers.category_classifier import CATEGORY_KEYWORDS, CODE_RANGES, classify

__all__ = [
    "CATEGORY_KEYWORDS",
    "CODE_RANGES",
    "classify",
]
