"""
Shared in-memory collaborators for import tests. No database required.
"""

from __future__ import annotations

import uuid

import pytest

from app.domain.disclosure import DisclosureRecordInput
from app.domain.errors import DisclosurePersistenceError
from db.models.company import Company


class InMemoryGateway:
    """Records every saved disclosure; rejects configured standard codes."""

    def __init__(self, reject_codes: set[str] | None = None) -> None:
        self.saved: list[tuple[DisclosureRecordInput, uuid.UUID]] = []
        self._reject_codes = reject_codes or set()

    def save(self, record: DisclosureRecordInput, company_id: uuid.UUID) -> None:
        if record.standard_code in self._reject_codes:
            raise DisclosurePersistenceError("duplicate key value violates unique constraint")
        self.saved.append((record, company_id))


class StaticCompanyLookup:
    def __init__(self, *companies: Company) -> None:
        self._companies = {company.id: company for company in companies}
        self.calls = 0

    def find_company(self, company_id: uuid.UUID) -> Company | None:
        self.calls += 1
        return self._companies.get(company_id)


@pytest.fixture()
def company() -> Company:
    return Company(id=uuid.uuid4(), name="Gyeoul Energy", industry="utilities", is_active=True)


@pytest.fixture()
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture()
def company_lookup(company: Company) -> StaticCompanyLookup:
    return StaticCompanyLookup(company)
