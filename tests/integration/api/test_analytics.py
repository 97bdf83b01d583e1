"""Integration tests for analytics endpoints."""

from datetime import UTC, datetime

import pytest
from httpx import AsyncClient

from tests.factories.catalogue import meal_row, room_row, trip_row


pytestmark = pytest.mark.integration


@pytest.fixture
async def catalogue(database):
    async with database.session() as session:
        session.add_all(
            [
                trip_row(resort="Emerald Bay", start=datetime(2027, 3, 5, tzinfo=UTC)),
                trip_row(resort="Emerald Bay", start=datetime(2027, 3, 20, tzinfo=UTC)),
                trip_row(resort="Emerald Bay", start=datetime(2027, 4, 2, tzinfo=UTC)),
                trip_row(resort="Coral Cove", start=datetime(2027, 3, 9, tzinfo=UTC)),
                meal_row(cuisine="Caribbean", price=10.0),
                meal_row(cuisine="Caribbean", price=20.0),
                meal_row(cuisine="Mediterranean", price=45.0),
                room_row(type="Suite", available=True),
                room_row(type="Suite", available=False),
                room_row(type="Suite", available=True),
                room_row(type="Double", available=True),
            ]
        )


class TestAnalytics:
    async def test_trips_by_resort(self, client: AsyncClient, catalogue):
        response = await client.get("/api/v1/analytics/trips-by-resort")

        assert response.status_code == 200
        assert response.json()["items"] == [
            {"resort": "Coral Cove", "year": 2027, "month": 3, "tripCount": 1},
            {"resort": "Emerald Bay", "year": 2027, "month": 3, "tripCount": 2},
            {"resort": "Emerald Bay", "year": 2027, "month": 4, "tripCount": 1},
        ]

    async def test_trips_by_resort_date_range(self, client: AsyncClient, catalogue):
        response = await client.get(
            "/api/v1/analytics/trips-by-resort",
            params={"startDate": "2027-04-01T00:00:00Z", "endDate": "2027-12-31T00:00:00Z"},
        )

        assert response.json()["items"] == [
            {"resort": "Emerald Bay", "year": 2027, "month": 4, "tripCount": 1},
        ]

    async def test_meal_price_stats(self, client: AsyncClient, catalogue):
        response = await client.get("/api/v1/analytics/meal-price-stats")

        assert response.json()["items"] == [
            {
                "cuisine": "Mediterranean",
                "avgPrice": 45.0,
                "minPrice": 45.0,
                "maxPrice": 45.0,
                "count": 1,
            },
            {
                "cuisine": "Caribbean",
                "avgPrice": 15.0,
                "minPrice": 10.0,
                "maxPrice": 20.0,
                "count": 2,
            },
        ]

    async def test_room_availability(self, client: AsyncClient, catalogue):
        response = await client.get("/api/v1/analytics/room-availability")

        assert response.json()["items"] == [
            {"type": "Double", "available": True, "count": 1},
            {"type": "Suite", "available": True, "count": 2},
            {"type": "Suite", "available": False, "count": 1},
        ]

    async def test_empty_catalogue(self, client: AsyncClient):
        for path in ("trips-by-resort", "meal-price-stats", "room-availability"):
            response = await client.get(f"/api/v1/analytics/{path}")

            assert response.status_code == 200
            assert response.json() == {"items": []}
