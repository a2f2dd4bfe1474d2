"""
app/validators package marker.
"""

from app.validators.disclosure_validator import DisclosureRowValidator
from app.validators.field_coercion import FieldCoercion, coerce_date, coerce_decimal

__all__ = [
    "DisclosureRowValidator",
    "FieldCoercion",
    "coerce_date",
    "coerce_decimal",
]
