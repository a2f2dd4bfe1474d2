"""
app/services package marker.
"""

from app.services.disclosure_batch_processor import DisclosureBatchProcessor, DisclosureGateway
from app.services.disclosure_import_service import (
    CompanyLookup,
    DisclosureImportService,
    get_disclosure_import_service,
)

__all__ = [
    "CompanyLookup",
    "DisclosureBatchProcessor",
    "DisclosureGateway",
    "DisclosureImportService",
    "get_disclosure_import_service",
]
