"""Analytics API routes."""

from datetime import datetime
from typing import Annotated

from fastapi import Query

from travlr.modules.analytics import router
from travlr.modules.analytics.schemas import (
    ItemsResponse,
    MealPriceStatsItem,
    RoomAvailabilityItem,
    TripsByResortItem,
)
from travlr.modules.analytics.services import AnalyticsSvc


@router.get(
    "/trips-by-resort",
    response_model=ItemsResponse[TripsByResortItem],
    summary="Trips per resort per month",
)
async def trips_by_resort(
    service: AnalyticsSvc,
    start_date: Annotated[datetime | None, Query(alias="startDate")] = None,
    end_date: Annotated[datetime | None, Query(alias="endDate")] = None,
) -> ItemsResponse[TripsByResortItem]:
    items = await service.trips_by_resort(start_date=start_date, end_date=end_date)
    return ItemsResponse[TripsByResortItem](items=items)


@router.get(
    "/meal-price-stats",
    response_model=ItemsResponse[MealPriceStatsItem],
    summary="Meal price statistics per cuisine",
)
async def meal_price_stats(service: AnalyticsSvc) -> ItemsResponse[MealPriceStatsItem]:
    items = await service.meal_price_stats()
    return ItemsResponse[MealPriceStatsItem](items=items)


@router.get(
    "/room-availability",
    response_model=ItemsResponse[RoomAvailabilityItem],
    summary="Room availability per type",
)
async def room_availability(
    service: AnalyticsSvc,
) -> ItemsResponse[RoomAvailabilityItem]:
    items = await service.room_availability()
    return ItemsResponse[RoomAvailabilityItem](items=items)
