"""
app/repositories package marker.
"""

from app.repositories.company_repository import CompanyRepository
from app.repositories.disclosure_repository import DisclosureRepository

__all__ = [
    "CompanyRepository",
    "DisclosureRepository",
]
