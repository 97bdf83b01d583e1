"""Trip API routes."""

from typing import Annotated

from fastapi import Depends, Query, status

from travlr.config import settings
from travlr.core.auth.dependencies import require_roles
from travlr.core.constants import Role
from travlr.core.pagination import Page
from travlr.modules.trips import router
from travlr.modules.trips.schemas import (
    TripCreate,
    TripDeleteResponse,
    TripResponse,
    TripUpdate,
)
from travlr.modules.trips.services import TripSvc


admin_only = [Depends(require_roles(Role.ADMIN))]


@router.get(
    "",
    response_model=Page[TripResponse],
    summary="List trips",
    description="Newest first, cursor paginated. `q` searches name, description and resort.",
)
async def list_trips(
    service: TripSvc,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    cursor: str | None = None,
    q: str | None = None,
) -> Page[TripResponse]:
    page = await service.list(limit=limit, cursor=cursor, q=q)
    return Page[TripResponse].model_validate(page)


@router.get("/{code}", response_model=TripResponse, summary="Get trip by code")
async def get_trip(code: str, service: TripSvc) -> TripResponse:
    trip = await service.get_by_code(code)
    return TripResponse.model_validate(trip)


@router.post(
    "",
    response_model=TripResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
    summary="Create trip",
)
async def create_trip(data: TripCreate, service: TripSvc) -> TripResponse:
    trip = await service.create(data)
    return TripResponse.model_validate(trip)


@router.put(
    "/{code}",
    response_model=TripResponse,
    dependencies=admin_only,
    summary="Update trip",
)
async def update_trip(code: str, data: TripUpdate, service: TripSvc) -> TripResponse:
    trip = await service.update(code, data)
    return TripResponse.model_validate(trip)


@router.delete(
    "/{code}",
    response_model=TripDeleteResponse,
    dependencies=admin_only,
    summary="Delete trip",
)
async def delete_trip(code: str, service: TripSvc) -> TripDeleteResponse:
    trip = await service.delete(code)
    return TripDeleteResponse(trip=TripResponse.model_validate(trip))
