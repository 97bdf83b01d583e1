"""Meal API routes."""

from typing import Annotated

from fastapi import Depends, Query, status

from travlr.config import settings
from travlr.core.auth.dependencies import require_roles
from travlr.core.constants import MealType, Role
from travlr.core.pagination import Page
from travlr.modules.meals import router
from travlr.modules.meals.schemas import (
    MealCreate,
    MealDeleteResponse,
    MealResponse,
    MealUpdate,
)
from travlr.modules.meals.services import MealSvc


admin_only = [Depends(require_roles(Role.ADMIN))]


@router.get(
    "",
    response_model=Page[MealResponse],
    summary="List meals",
    description="Newest first, cursor paginated. Filter by type, cuisine or availability.",
)
async def list_meals(
    service: MealSvc,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    cursor: str | None = None,
    q: str | None = None,
    only_available: Annotated[bool, Query(alias="onlyAvailable")] = False,
    meal_type: Annotated[MealType | None, Query(alias="mealType")] = None,
    cuisine: str | None = None,
) -> Page[MealResponse]:
    page = await service.list(
        limit=limit,
        cursor=cursor,
        q=q,
        only_available=only_available,
        meal_type=meal_type,
        cuisine=cuisine,
    )
    return Page[MealResponse].model_validate(page)


@router.get("/{code}", response_model=MealResponse, summary="Get meal by code")
async def get_meal(code: str, service: MealSvc) -> MealResponse:
    meal = await service.get_by_code(code)
    return MealResponse.model_validate(meal)


@router.post(
    "",
    response_model=MealResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
    summary="Create meal",
)
async def create_meal(data: MealCreate, service: MealSvc) -> MealResponse:
    meal = await service.create(data)
    return MealResponse.model_validate(meal)


@router.put(
    "/{code}",
    response_model=MealResponse,
    dependencies=admin_only,
    summary="Update meal",
)
async def update_meal(code: str, data: MealUpdate, service: MealSvc) -> MealResponse:
    meal = await service.update(code, data)
    return MealResponse.model_validate(meal)


@router.delete(
    "/{code}",
    response_model=MealDeleteResponse,
    dependencies=admin_only,
    summary="Delete meal",
)
async def delete_meal(code: str, service: MealSvc) -> MealDeleteResponse:
    meal = await service.delete(code)
    return MealDeleteResponse(meal=MealResponse.model_validate(meal))
