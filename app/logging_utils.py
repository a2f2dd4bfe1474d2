"""
Structured logging helpers for disclosure imports.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any


def log_import_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    company_id: uuid.UUID | None,
    **fields: Any,
) -> None:
    """
    Emit one import lifecycle line as compact JSON, tagged with the company.
    """

    payload = {"event": event, "company_id": company_id, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))
