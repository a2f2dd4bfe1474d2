"""
app/api/routers/data_import.py

Disclosure CSV import HTTP endpoints.

POST /api/data-import/csv        import one CSV for a company
GET  /api/data-import/template   header-only CSV template (type=GRI)
GET  /api/data-import/sample     CSV with example GRI rows
                                 (also served at /sample-gri-data)

A completed import always answers 200; `success` is false when some rows
were rejected. Imports rejected as a whole answer 400/404 with
`{"detail": {"code": ..., "message": ...}}`.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.dependencies import get_csv_upload
from app.domain.errors import CompanyNotFoundError, DisclosureImportError
from app.failure_codes import UNSUPPORTED_TEMPLATE_TYPE
from app.schemas.data_import import CsvUploadResponse, ImportFailureResponse
from app.services.disclosure_import_service import (
    DisclosureImportService,
    get_disclosure_import_service,
)
from app.services.disclosure_templates import (
    SAMPLE_FILENAME,
    build_sample_csv,
    build_template_csv,
    template_filename,
)
from db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/data-import", tags=["data-import"])


def _csv_attachment(content: str, filename: str) -> Response:
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/csv",
    response_model=CsvUploadResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ImportFailureResponse},
        status.HTTP_404_NOT_FOUND: {"model": ImportFailureResponse},
    },
)
def upload_csv(
    file: UploadFile = Depends(get_csv_upload),
    company_id: uuid.UUID = Query(..., description="Company that owns the imported disclosures"),
    db: Session = Depends(get_db),
    import_service: DisclosureImportService = Depends(get_disclosure_import_service),
) -> CsvUploadResponse:
    """
    Import one disclosure CSV into GRI data items.
    """

    logger.info("CSV upload received file=%r company_id=%s", file.filename, company_id)
    try:
        outcome = import_service.import_csv(upload_file=file, db=db, company_id=company_id)
    except CompanyNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.to_dict(),
        ) from exc
    except DisclosureImportError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.to_dict(),
        ) from exc
    finally:
        file.file.close()

    return CsvUploadResponse.from_outcome(outcome)


@router.get("/template")
def download_template(
    template_type: str = Query(..., alias="type", description='Template type, e.g. "GRI"'),
) -> Response:
    filename = template_filename(template_type)
    if filename is None:
        logger.warning("Unsupported template type requested: %r", template_type)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": UNSUPPORTED_TEMPLATE_TYPE,
                "message": f"Unsupported template type: {template_type}",
            },
        )
    return _csv_attachment(build_template_csv(), filename)


@router.get("/sample")
@router.get("/sample-gri-data")
def download_sample() -> Response:
    return _csv_attachment(build_sample_csv(), SAMPLE_FILENAME)
