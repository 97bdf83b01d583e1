"""Meal repository for database operations."""

from typing import Annotated

from fastapi import Depends

from travlr.core.repository import CodeRepository
from travlr.modules.meals.models import Meal


class MealRepository(CodeRepository[Meal]):
    """Repository for Meal database operations."""

    model = Meal


# Type alias for dependency injection
MealRepo = Annotated[MealRepository, Depends(MealRepository)]
