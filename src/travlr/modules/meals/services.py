"""Meal service for business logic."""

from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import func

from travlr.core.services import CodeResourceService, search_filter
from travlr.modules.meals.models import Meal
from travlr.modules.meals.repos import MealRepo
from travlr.modules.meals.validators import validate_dietary_flags


class MealService(CodeResourceService[Meal]):
    """Service for meal catalogue operations."""

    resource_name = "Meal"

    def __init__(self, repo: MealRepo) -> None:
        super().__init__(repo)

    def build_filters(
        self,
        *,
        q: str | None = None,
        only_available: bool = False,
        meal_type: str | None = None,
        cuisine: str | None = None,
        **_: Any,
    ) -> list[Any]:
        filters: list[Any] = []
        if q:
            filters.append(search_filter(q, Meal.name, Meal.description))
        if only_available:
            filters.append(Meal.available.is_(True))
        if meal_type:
            filters.append(Meal.meal_type == meal_type)
        if cuisine:
            filters.append(func.lower(Meal.cuisine) == cuisine.strip().lower())
        return filters

    def check_rules(self, obj: Meal, *, is_new: bool) -> list[dict[str, str]]:
        return validate_dietary_flags(obj.vegetarian, obj.vegan)


# Type alias for dependency injection
MealSvc = Annotated[MealService, Depends(MealService)]
