"""
app/repositories/disclosure_repository.py

Persistence layer for imported GRI disclosure items.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.disclosure import DisclosureRecordInput
from app.domain.errors import DisclosurePersistenceError
from db.models.gri_data_item import GriDataItem

logger = logging.getLogger(__name__)


class DisclosureRepository:
    """
    Stores one disclosure per call, each in its own transaction.

    A failed save is rolled back and never affects rows saved before it.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, record: DisclosureRecordInput, company_id: uuid.UUID) -> None:
        item = self.to_model(record, company_id)
        try:
            self._session.add(item)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.warning(
                "Failed to persist disclosure standard_code=%r company_id=%s: %s",
                record.standard_code,
                company_id,
                exc,
            )
            raise DisclosurePersistenceError("Failed to persist disclosure row.") from exc
        except Exception:
            self._session.rollback()
            raise

    @staticmethod
    def to_model(record: DisclosureRecordInput, company_id: uuid.UUID) -> GriDataItem:
        return GriDataItem(
            company_id=company_id,
            standard_code=record.standard_code,
            disclosure_code=record.disclosure_code,
            disclosure_title=record.title,
            disclosure_value=record.text_value,
            description=record.description,
            numeric_value=record.numeric_value,
            unit=record.unit,
            reporting_period_start=record.period_start,
            reporting_period_end=record.period_end,
            verification_status=record.verification_status,
            verification_provider=record.verification_provider,
            category=record.category,
        )
