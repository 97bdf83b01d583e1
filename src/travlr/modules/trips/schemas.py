"""Pydantic schemas for trip operations."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from travlr.core.constants import (
    MAX_IMAGE_LENGTH,
    MAX_NAME_LENGTH,
    MIN_NAME_LENGTH,
    MIN_TITLE_LENGTH,
)
from travlr.core.schemas import APIModel, Code, Price


class TripCreate(APIModel):
    """Schema for creating a trip."""

    code: Code
    name: str = Field(..., min_length=MIN_TITLE_LENGTH, max_length=MAX_NAME_LENGTH)
    length: int = Field(..., ge=1, description="Duration in days")
    start: datetime
    resort: str = Field(..., min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH)
    per_person: Price
    image: str = Field(..., min_length=1, max_length=MAX_IMAGE_LENGTH)
    description: str = Field(..., min_length=1)


class TripUpdate(APIModel):
    """Schema for updating a trip. All fields are optional."""

    code: Code | None = None
    name: str | None = Field(None, min_length=MIN_TITLE_LENGTH, max_length=MAX_NAME_LENGTH)
    length: int | None = Field(None, ge=1)
    start: datetime | None = None
    resort: str | None = Field(None, min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH)
    per_person: Price | None = None
    image: str | None = Field(None, min_length=1, max_length=MAX_IMAGE_LENGTH)
    description: str | None = Field(None, min_length=1)


class TripResponse(APIModel):
    """Trip as returned by the API."""

    id: UUID
    code: str
    name: str
    length: int
    start: datetime
    resort: str
    per_person: float
    image: str
    description: str
    schema_version: int
    created_at: datetime
    updated_at: datetime


class TripDeleteResponse(APIModel):
    """Response for a deleted trip."""

    message: str = "Trip deleted successfully"
    trip: TripResponse
