"""Pydantic schemas for meal operations."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from travlr.core.constants import (
    MAX_IMAGE_LENGTH,
    MAX_NAME_LENGTH,
    MIN_TITLE_LENGTH,
    MealType,
)
from travlr.core.schemas import APIModel, Code, Price, TrimmedList


class MealCreate(APIModel):
    """Schema for creating a meal."""

    code: Code
    name: str = Field(..., min_length=MIN_TITLE_LENGTH, max_length=MAX_NAME_LENGTH)
    cuisine: str = Field(..., min_length=1, max_length=100)
    meal_type: MealType
    price: Price
    image: str = Field(..., min_length=1, max_length=MAX_IMAGE_LENGTH)
    description: str = Field(..., min_length=1)
    ingredients: TrimmedList = Field(default_factory=list)
    allergens: TrimmedList = Field(default_factory=list)
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    available: bool = True
    trip_id: UUID | None = None


class MealUpdate(APIModel):
    """Schema for updating a meal. All fields are optional."""

    code: Code | None = None
    name: str | None = Field(None, min_length=MIN_TITLE_LENGTH, max_length=MAX_NAME_LENGTH)
    cuisine: str | None = Field(None, min_length=1, max_length=100)
    meal_type: MealType | None = None
    price: Price | None = None
    image: str | None = Field(None, min_length=1, max_length=MAX_IMAGE_LENGTH)
    description: str | None = Field(None, min_length=1)
    ingredients: TrimmedList | None = None
    allergens: TrimmedList | None = None
    vegetarian: bool | None = None
    vegan: bool | None = None
    gluten_free: bool | None = None
    available: bool | None = None
    trip_id: UUID | None = None


class MealResponse(APIModel):
    """Meal as returned by the API."""

    id: UUID
    code: str
    name: str
    cuisine: str
    meal_type: str
    price: float
    image: str
    description: str
    ingredients: list[str]
    allergens: list[str]
    vegetarian: bool
    vegan: bool
    gluten_free: bool
    available: bool
    trip_id: UUID | None
    schema_version: int
    created_at: datetime
    updated_at: datetime


class MealDeleteResponse(APIModel):
    """Response for a deleted meal."""

    message: str = "Meal deleted successfully"
    meal: MealResponse
