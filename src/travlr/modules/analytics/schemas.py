"""Pydantic schemas for analytics responses."""

from typing import Generic, TypeVar

from travlr.core.schemas import APIModel


ItemT = TypeVar("ItemT")


class ItemsResponse(APIModel, Generic[ItemT]):
    """Envelope for aggregate results."""

    items: list[ItemT]


class TripsByResortItem(APIModel):
    """Number of trips departing from a resort in one calendar month."""

    resort: str
    year: int
    month: int
    trip_count: int


class MealPriceStatsItem(APIModel):
    """Price statistics for one cuisine."""

    cuisine: str
    avg_price: float
    min_price: float
    max_price: float
    count: int


class RoomAvailabilityItem(APIModel):
    """Number of rooms of one type in one availability state."""

    type: str
    available: bool
    count: int
