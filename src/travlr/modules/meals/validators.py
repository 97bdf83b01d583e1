"""Business rules for meals."""


def validate_dietary_flags(vegetarian: bool, vegan: bool) -> list[dict[str, str]]:
    """Vegan implies vegetarian."""
    if vegan and not vegetarian:
        return [
            {
                "field": "vegan",
                "message": "Vegan meals must also be marked as vegetarian",
            }
        ]
    return []
