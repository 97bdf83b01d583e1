"""Room API routes."""

from typing import Annotated

from fastapi import Depends, Query, status

from travlr.config import settings
from travlr.core.auth.dependencies import require_roles
from travlr.core.constants import Role
from travlr.core.pagination import Page
from travlr.modules.rooms import router
from travlr.modules.rooms.schemas import (
    RoomCreate,
    RoomDeleteResponse,
    RoomResponse,
    RoomUpdate,
)
from travlr.modules.rooms.services import RoomSvc


admin_only = [Depends(require_roles(Role.ADMIN))]


@router.get(
    "",
    response_model=Page[RoomResponse],
    summary="List rooms",
    description="Newest first, cursor paginated.",
)
async def list_rooms(
    service: RoomSvc,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    cursor: str | None = None,
    q: str | None = None,
    only_available: Annotated[bool, Query(alias="onlyAvailable")] = False,
) -> Page[RoomResponse]:
    page = await service.list(
        limit=limit,
        cursor=cursor,
        q=q,
        only_available=only_available,
    )
    return Page[RoomResponse].model_validate(page)


@router.get("/{code}", response_model=RoomResponse, summary="Get room by code")
async def get_room(code: str, service: RoomSvc) -> RoomResponse:
    room = await service.get_by_code(code)
    return RoomResponse.model_validate(room)


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
    summary="Create room",
)
async def create_room(data: RoomCreate, service: RoomSvc) -> RoomResponse:
    room = await service.create(data)
    return RoomResponse.model_validate(room)


@router.put(
    "/{code}",
    response_model=RoomResponse,
    dependencies=admin_only,
    summary="Update room",
)
async def update_room(code: str, data: RoomUpdate, service: RoomSvc) -> RoomResponse:
    room = await service.update(code, data)
    return RoomResponse.model_validate(room)


@router.delete(
    "/{code}",
    response_model=RoomDeleteResponse,
    dependencies=admin_only,
    summary="Delete room",
)
async def delete_room(code: str, service: RoomSvc) -> RoomDeleteResponse:
    room = await service.delete(code)
    return RoomDeleteResponse(room=RoomResponse.model_validate(room))
