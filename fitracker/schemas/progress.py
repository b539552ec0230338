"""
Pydantic models for progress request/response validation.

Field names are camelCase to match the JSON documents stored in MongoDB and
consumed by the client.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitracker.parsing import parse_grams, parse_text


# =============================================================================
# Request Schemas
# =============================================================================

class ProgressCreateRequest(BaseModel):
    """POST /api/progress

    Missing or malformed values are coerced to defaults instead of rejected.
    Client-supplied ``_id`` and ``createdAt`` are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    date: Optional[str] = None
    food: str = ""
    exercise: str = ""
    wheyGrams: Union[int, float] = 0
    creatineGrams: Union[int, float] = 0
    imageData: Optional[str] = Field(None, description="data:<mime>;base64,<payload>")
    imageName: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Optional[str]:
        return None if value is None else parse_text(value)

    @field_validator("food", "exercise", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return parse_text(value)

    @field_validator("wheyGrams", "creatineGrams", mode="before")
    @classmethod
    def _coerce_grams(cls, value: Any) -> Union[int, float]:
        return parse_grams(value)


# =============================================================================
# Response Schemas
# =============================================================================

class ProgressRecord(BaseModel):
    """A stored progress record."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    date: Optional[str] = None
    food: str = ""
    exercise: str = ""
    wheyGrams: Union[int, float] = 0
    creatineGrams: Union[int, float] = 0
    imageData: Optional[str] = None
    imageName: Optional[str] = None
    createdAt: datetime


class ProgressListResponse(BaseModel):
    """Response for GET /api/progress"""
    data: List[ProgressRecord]


class ProgressCreateResponse(BaseModel):
    """Response for POST /api/progress"""
    data: ProgressRecord
