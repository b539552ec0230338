"""
FastAPI router for progress record endpoints.

One path serves both operations: GET lists every record, POST appends one.
Any other method is answered with 405.
"""

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from common.utils import (
    BadRequestException,
    InternalServerException,
    MethodNotAllowedException,
)
from fitracker.dependencies import get_progress_service
from fitracker.schemas.progress import (
    ProgressCreateRequest,
    ProgressCreateResponse,
    ProgressListResponse,
)
from fitracker.services.progress.progress_service import ProgressService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])

ALLOWED_METHODS = ["GET", "POST"]


@router.get(
    "",
    response_model=ProgressListResponse,
    response_model_exclude_none=True,
)
async def list_progress(
    progress_service: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Get all progress records, newest date first."""
    try:
        records = await progress_service.list_records()
    except Exception as e:
        logger.error(f"Failed to list progress records: {e}")
        raise InternalServerException(details=str(e) or type(e).__name__)

    return ProgressListResponse(data=records)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProgressCreateResponse,
    response_model_exclude_none=True,
)
async def create_progress(
    request: Request,
    progress_service: Annotated[ProgressService, Depends(get_progress_service)],
):
    """
    Save one progress record.

    The body is parsed by hand so that an empty or unparsable payload is a
    400 rather than FastAPI's 422.
    """
    raw = await request.body()
    if not raw.strip():
        raise BadRequestException("Missing request body", code="MISSING_BODY")

    try:
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise ValueError("expected a JSON object")
        candidate = ProgressCreateRequest.model_validate(payload)
    except (ValueError, ValidationError) as e:
        logger.warning(f"Rejected progress payload: {e}")
        raise BadRequestException("Invalid request body", code="INVALID_BODY")

    try:
        record = await progress_service.create_record(candidate)
    except Exception as e:
        logger.error(f"Failed to save progress record: {e}")
        raise InternalServerException(details=str(e) or type(e).__name__)

    return ProgressCreateResponse(data=record)


@router.api_route("", methods=["PUT", "PATCH", "DELETE"], include_in_schema=False)
async def progress_method_not_allowed():
    """Records are append-only."""
    raise MethodNotAllowedException(allowed=ALLOWED_METHODS)
