"""Trip repository for database operations."""

from typing import Annotated

from fastapi import Depends

from travlr.core.repository import CodeRepository
from travlr.modules.trips.models import Trip


class TripRepository(CodeRepository[Trip]):
    """Repository for Trip database operations."""

    model = Trip


# Type alias for dependency injection
TripRepo = Annotated[TripRepository, Depends(TripRepository)]
