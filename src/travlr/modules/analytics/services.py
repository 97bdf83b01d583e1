"""Read-only aggregate queries over the catalogue."""

from datetime import datetime
from typing import Annotated

from fastapi import Depends
from sqlalchemy import extract, func, select

from travlr.api.dependencies import DBSession
from travlr.modules.analytics.schemas import (
    MealPriceStatsItem,
    RoomAvailabilityItem,
    TripsByResortItem,
)
from travlr.modules.meals.models import Meal
from travlr.modules.rooms.models import Room
from travlr.modules.trips.models import Trip


class AnalyticsService:
    """Aggregations for the admin dashboard."""

    def __init__(self, db: DBSession) -> None:
        self.db = db

    async def trips_by_resort(
        self,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[TripsByResortItem]:
        """Count trips per resort and departure month.

        Args:
            start_date: Only trips starting at or after this time
            end_date: Only trips starting at or before this time

        Returns:
            Rows sorted by resort, year, month
        """
        year = extract("year", Trip.start).label("year")
        month = extract("month", Trip.start).label("month")
        stmt = select(Trip.resort, year, month, func.count(Trip.id).label("trip_count"))

        if start_date is not None:
            stmt = stmt.where(Trip.start >= start_date)
        if end_date is not None:
            stmt = stmt.where(Trip.start <= end_date)

        stmt = stmt.group_by(Trip.resort, year, month).order_by(Trip.resort, year, month)
        result = await self.db.execute(stmt)

        return [
            TripsByResortItem(
                resort=row.resort,
                year=int(row.year),
                month=int(row.month),
                trip_count=row.trip_count,
            )
            for row in result
        ]

    async def meal_price_stats(self) -> list[MealPriceStatsItem]:
        """Average, minimum and maximum meal price per cuisine, priciest first."""
        avg_price = func.avg(Meal.price).label("avg_price")
        stmt = (
            select(
                Meal.cuisine,
                avg_price,
                func.min(Meal.price).label("min_price"),
                func.max(Meal.price).label("max_price"),
                func.count(Meal.id).label("total"),
            )
            .group_by(Meal.cuisine)
            .order_by(avg_price.desc())
        )
        result = await self.db.execute(stmt)

        return [
            MealPriceStatsItem(
                cuisine=row.cuisine,
                avg_price=float(row.avg_price),
                min_price=float(row.min_price),
                max_price=float(row.max_price),
                count=row.total,
            )
            for row in result
        ]

    async def room_availability(self) -> list[RoomAvailabilityItem]:
        """Room counts per type, available rooms listed first within a type."""
        stmt = (
            select(Room.type, Room.available, func.count(Room.id).label("total"))
            .group_by(Room.type, Room.available)
            .order_by(Room.type, Room.available.desc())
        )
        result = await self.db.execute(stmt)

        return [
            RoomAvailabilityItem(type=row.type, available=row.available, count=row.total)
            for row in result
        ]


# Type alias for dependency injection
AnalyticsSvc = Annotated[AnalyticsService, Depends(AnalyticsService)]
