"""Business rules for rooms."""


def validate_occupancy(beds: int, max_occupancy: int) -> list[dict[str, str]]:
    """A room must sleep at least as many guests as it has beds."""
    if max_occupancy < beds:
        return [
            {
                "field": "maxOccupancy",
                "message": "Max occupancy must be greater than or equal to number of beds",
            }
        ]
    return []
