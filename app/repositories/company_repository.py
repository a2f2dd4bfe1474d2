"""
app/repositories/company_repository.py

Company lookups used before an import starts.
"""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from db.models.company import Company


class CompanyRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_company(self, company_id: uuid.UUID, *, active_only: bool = True) -> Company | None:
        """
        Return the company, or None when it is missing or (by default) inactive.
        """

        company = self._session.get(Company, company_id)
        if company is None:
            return None
        if active_only and not company.is_active:
            return None
        return company
