"""Business rules for trips."""

from datetime import UTC, date, datetime


def validate_trip_start(
    start: datetime,
    *,
    is_new: bool,
    today: date | None = None,
) -> list[dict[str, str]]:
    """New trips may not start before today (UTC). Existing trips may."""
    if not is_new:
        return []

    today = today or datetime.now(UTC).date()
    if start.tzinfo is not None:
        start = start.astimezone(UTC)
    if start.date() < today:
        return [{"field": "start", "message": "Trip start date must not be in the past"}]
    return []
