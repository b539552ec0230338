"""Fitracker request/response schemas."""

from fitracker.schemas.progress import (
    ProgressCreateRequest,
    ProgressRecord,
    ProgressListResponse,
    ProgressCreateResponse,
)

__all__ = [
    "ProgressCreateRequest",
    "ProgressRecord",
    "ProgressListResponse",
    "ProgressCreateResponse",
]
