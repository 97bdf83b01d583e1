"""Integration tests for trip endpoints."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from travlr.core.audit import AuditLog
from tests.factories.catalogue import TripCreateFactory, trip_row


pytestmark = pytest.mark.integration

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def trip_payload(**overrides) -> dict:
    return TripCreateFactory.build(**overrides).model_dump(mode="json", by_alias=True)


@pytest.fixture
async def trips(database):
    """Twenty-five trips created one minute apart."""
    async with database.session() as session:
        for i in range(25):
            trip = trip_row(code=f"TRIP{i:03d}", name=f"Trip number {i}")
            trip.created_at = BASE_TIME + timedelta(minutes=i)
            session.add(trip)


@pytest.fixture
async def gale_reef(database):
    async with database.session() as session:
        session.add(
            trip_row(code="GALR210214", name="Gale Reef", resort="Emerald Bay, 3 stars")
        )


class TestListTrips:
    """Tests for GET /api/v1/trips."""

    async def test_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/trips")

        assert response.status_code == 200
        assert response.json() == {"items": [], "hasMore": False, "nextCursor": None}

    async def test_cursor_walk(self, client: AsyncClient, trips):
        """Pages of 10, 10 and 5 cover every trip exactly once, newest first."""
        codes: list[str] = []
        sizes: list[int] = []
        params = {"limit": 10}

        while True:
            response = await client.get("/api/v1/trips", params=params)
            assert response.status_code == 200
            data = response.json()
            codes.extend(item["code"] for item in data["items"])
            sizes.append(len(data["items"]))
            if not data["hasMore"]:
                assert data["nextCursor"] is None
                break
            params = {"limit": 10, "cursor": data["nextCursor"]}

        assert sizes == [10, 10, 5]
        assert codes == [f"TRIP{i:03d}" for i in reversed(range(25))]

    async def test_default_page_size(self, client: AsyncClient, trips):
        response = await client.get("/api/v1/trips")

        data = response.json()
        assert len(data["items"]) == 20
        assert data["hasMore"] is True

    async def test_search(self, client: AsyncClient, trips, gale_reef):
        response = await client.get(
            "/api/v1/trips", params={"q": "emerald", "limit": 50}
        )

        items = response.json()["items"]
        assert len(items) == 26

        response = await client.get("/api/v1/trips", params={"q": "gale"})

        assert [item["code"] for item in response.json()["items"]] == ["GALR210214"]

    async def test_search_wildcards_match_literally(
        self, client: AsyncClient, database, gale_reef
    ):
        async with database.session() as session:
            session.add(trip_row(code="SALE50", name="Reef Week 50% Off"))

        for q, expected in [("50%", ["SALE50"]), ("%", ["SALE50"]), ("_", [])]:
            response = await client.get("/api/v1/trips", params={"q": q})

            assert [item["code"] for item in response.json()["items"]] == expected

    async def test_response_shape(self, client: AsyncClient, gale_reef):
        response = await client.get("/api/v1/trips")

        item = response.json()["items"][0]
        assert item["perPerson"] == 799.0
        assert item["schemaVersion"] == 1
        assert {"id", "createdAt", "updatedAt", "start", "resort"} <= item.keys()

    @pytest.mark.parametrize("limit", [0, 101, "ten"])
    async def test_invalid_limit(self, client: AsyncClient, limit):
        response = await client.get("/api/v1/trips", params={"limit": limit})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    async def test_invalid_cursor(self, client: AsyncClient):
        response = await client.get("/api/v1/trips", params={"cursor": "yesterday"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestGetTrip:
    """Tests for GET /api/v1/trips/{code}."""

    async def test_get_is_public_and_case_insensitive(self, client: AsyncClient, gale_reef):
        response = await client.get("/api/v1/trips/galr210214")

        assert response.status_code == 200
        assert response.json()["name"] == "Gale Reef"

    async def test_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/trips/NOPE123")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "NOT_FOUND"
        assert data["message"] == "Trip not found"


class TestCreateTrip:
    """Tests for POST /api/v1/trips."""

    async def test_create(self, client: AsyncClient, admin_headers):
        payload = trip_payload(code="newtrip1")
        payload["perPerson"] = "$1,299.00"

        response = await client.post("/api/v1/trips", json=payload, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["code"] == "NEWTRIP1"
        assert data["perPerson"] == 1299.0

    async def test_requires_token(self, client: AsyncClient):
        response = await client.post("/api/v1/trips", json=trip_payload())

        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHORIZED"

    async def test_requires_admin(self, client: AsyncClient, user_headers):
        response = await client.post(
            "/api/v1/trips", json=trip_payload(), headers=user_headers
        )

        assert response.status_code == 403
        assert response.json() == {
            "message": "Access denied. Insufficient permissions.",
            "error": "FORBIDDEN",
            "details": {"requiredRoles": ["admin"], "userRole": "user"},
        }

    async def test_duplicate_code(self, client: AsyncClient, admin_headers, gale_reef):
        response = await client.post(
            "/api/v1/trips", json=trip_payload(code="GALR210214"), headers=admin_headers
        )

        assert response.status_code == 409
        data = response.json()
        assert data["error"] == "CONFLICT"
        assert data["message"] == "Trip with code GALR210214 already exists"

    async def test_start_in_past(self, client: AsyncClient, admin_headers):
        payload = trip_payload(start=datetime.now(UTC) - timedelta(days=3))

        response = await client.post("/api/v1/trips", json=payload, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["details"]["errors"] == [
            {"field": "start", "message": "Trip start date must not be in the past"}
        ]

    async def test_missing_fields(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/trips", json={"code": "ABC123"}, headers=admin_headers
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["details"]["errors"]}
        assert {"name", "perPerson", "start"} <= fields

    async def test_create_is_audited(
        self, client: AsyncClient, database, admin_user, admin_headers
    ):
        response = await client.post(
            "/api/v1/trips",
            json=trip_payload(code="AUDITED1"),
            headers={**admin_headers, "X-Request-ID": "req-audit"},
        )
        assert response.status_code == 201

        async with database.session() as session:
            entry = (
                await session.execute(
                    select(AuditLog).where(AuditLog.resource_id == "AUDITED1")
                )
            ).scalar_one()

        assert entry.action == "create"
        assert entry.resource_type == "trips"
        assert entry.user_id == admin_user.id
        assert entry.request_id == "req-audit"


class TestUpdateTrip:
    """Tests for PUT /api/v1/trips/{code}."""

    async def test_partial_update(self, client: AsyncClient, admin_headers, gale_reef):
        response = await client.put(
            "/api/v1/trips/GALR210214",
            json={"length": 6, "perPerson": "899"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["length"] == 6
        assert data["perPerson"] == 899.0
        assert data["name"] == "Gale Reef"

    async def test_rename_code_to_taken_code(
        self, client: AsyncClient, admin_headers, gale_reef, trips
    ):
        response = await client.put(
            "/api/v1/trips/GALR210214", json={"code": "TRIP001"}, headers=admin_headers
        )

        assert response.status_code == 409

    async def test_not_found(self, client: AsyncClient, admin_headers):
        response = await client.put(
            "/api/v1/trips/NOPE123", json={"length": 6}, headers=admin_headers
        )

        assert response.status_code == 404

    async def test_requires_admin(self, client: AsyncClient, user_headers, gale_reef):
        response = await client.put(
            "/api/v1/trips/GALR210214", json={"length": 6}, headers=user_headers
        )

        assert response.status_code == 403


class TestDeleteTrip:
    """Tests for DELETE /api/v1/trips/{code}."""

    async def test_delete(self, client: AsyncClient, admin_headers, gale_reef):
        response = await client.delete("/api/v1/trips/GALR210214", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Trip deleted successfully"
        assert data["trip"]["code"] == "GALR210214"

        response = await client.get("/api/v1/trips/GALR210214")
        assert response.status_code == 404

    async def test_not_found(self, client: AsyncClient, admin_headers):
        response = await client.delete("/api/v1/trips/NOPE123", headers=admin_headers)

        assert response.status_code == 404
