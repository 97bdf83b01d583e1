"""Room service for business logic."""

from typing import Annotated, Any

from fastapi import Depends

from travlr.core.services import CodeResourceService, search_filter
from travlr.modules.rooms.models import Room
from travlr.modules.rooms.repos import RoomRepo
from travlr.modules.rooms.validators import validate_occupancy


class RoomService(CodeResourceService[Room]):
    """Service for room catalogue operations."""

    resource_name = "Room"

    def __init__(self, repo: RoomRepo) -> None:
        super().__init__(repo)

    def build_filters(
        self,
        *,
        q: str | None = None,
        only_available: bool = False,
        **_: Any,
    ) -> list[Any]:
        filters: list[Any] = []
        if q:
            filters.append(search_filter(q, Room.name, Room.description))
        if only_available:
            filters.append(Room.available.is_(True))
        return filters

    def check_rules(self, obj: Room, *, is_new: bool) -> list[dict[str, str]]:
        return validate_occupancy(obj.beds, obj.max_occupancy)


# Type alias for dependency injection
RoomSvc = Annotated[RoomService, Depends(RoomService)]
