"""Pydantic schemas for room operations."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from travlr.core.constants import (
    MAX_IMAGE_LENGTH,
    MAX_NAME_LENGTH,
    MIN_TITLE_LENGTH,
    RoomType,
)
from travlr.core.schemas import APIModel, Code, Price, TrimmedList


class RoomCreate(APIModel):
    """Schema for creating a room."""

    code: Code
    name: str = Field(..., min_length=MIN_TITLE_LENGTH, max_length=MAX_NAME_LENGTH)
    type: RoomType
    beds: int = Field(..., ge=1)
    max_occupancy: int = Field(..., ge=1)
    price_per_night: Price
    image: str = Field(..., min_length=1, max_length=MAX_IMAGE_LENGTH)
    description: str = Field(..., min_length=1)
    amenities: TrimmedList = Field(default_factory=list)
    available: bool = True
    trip_id: UUID | None = None


class RoomUpdate(APIModel):
    """Schema for updating a room. All fields are optional."""

    code: Code | None = None
    name: str | None = Field(None, min_length=MIN_TITLE_LENGTH, max_length=MAX_NAME_LENGTH)
    type: RoomType | None = None
    beds: int | None = Field(None, ge=1)
    max_occupancy: int | None = Field(None, ge=1)
    price_per_night: Price | None = None
    image: str | None = Field(None, min_length=1, max_length=MAX_IMAGE_LENGTH)
    description: str | None = Field(None, min_length=1)
    amenities: TrimmedList | None = None
    available: bool | None = None
    trip_id: UUID | None = None


class RoomResponse(APIModel):
    """Room as returned by the API."""

    id: UUID
    code: str
    name: str
    type: str
    beds: int
    max_occupancy: int
    price_per_night: float
    image: str
    description: str
    amenities: list[str]
    available: bool
    trip_id: UUID | None
    schema_version: int
    created_at: datetime
    updated_at: datetime


class RoomDeleteResponse(APIModel):
    """Response for a deleted room."""

    message: str = "Room deleted successfully"
    room: RoomResponse
