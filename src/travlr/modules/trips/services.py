"""Trip service for business logic."""

from typing import Annotated, Any

from fastapi import Depends

from travlr.core.services import CodeResourceService, search_filter
from travlr.modules.trips.models import Trip
from travlr.modules.trips.repos import TripRepo
from travlr.modules.trips.validators import validate_trip_start


class TripService(CodeResourceService[Trip]):
    """Service for trip catalogue operations."""

    resource_name = "Trip"

    def __init__(self, repo: TripRepo) -> None:
        super().__init__(repo)

    def build_filters(self, *, q: str | None = None, **_: Any) -> list[Any]:
        """Free-text search over name, description and resort."""
        if not q:
            return []
        return [search_filter(q, Trip.name, Trip.description, Trip.resort)]

    def check_rules(self, obj: Trip, *, is_new: bool) -> list[dict[str, str]]:
        return validate_trip_start(obj.start, is_new=is_new)


# Type alias for dependency injection
TripSvc = Annotated[TripService, Depends(TripService)]
