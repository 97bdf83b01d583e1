"""Room repository for database operations."""

from typing import Annotated

from fastapi import Depends

from travlr.core.repository import CodeRepository
from travlr.modules.rooms.models import Room


class RoomRepository(CodeRepository[Room]):
    """Repository for Room database operations."""

    model = Room


# Type alias for dependency injection
RoomRepo = Annotated[RoomRepository, Depends(RoomRepository)]
