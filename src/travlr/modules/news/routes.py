"""News API routes."""

from typing import Annotated

from fastapi import Depends, Query, status

from travlr.config import settings
from travlr.core.auth.dependencies import AdminClaims, require_roles
from travlr.core.constants import NewsCategory, Role
from travlr.core.pagination import Page
from travlr.modules.news import router
from travlr.modules.news.schemas import (
    NewsCreate,
    NewsDeleteResponse,
    NewsResponse,
    NewsUpdate,
)
from travlr.modules.news.services import NewsSvc


admin_only = [Depends(require_roles(Role.ADMIN))]


@router.get(
    "",
    response_model=Page[NewsResponse],
    summary="List news articles",
    description="Most recently published first, cursor paginated. "
    "Only published articles are returned unless `published=false` is given.",
)
async def list_news(
    service: NewsSvc,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    cursor: str | None = None,
    q: str | None = None,
    category: NewsCategory | None = None,
    featured: bool | None = None,
    published: bool = True,
) -> Page[NewsResponse]:
    page = await service.list(
        limit=limit,
        cursor=cursor,
        q=q,
        category=category,
        featured=featured,
        published=published,
    )
    return Page[NewsResponse].model_validate(page)


@router.get("/{code}", response_model=NewsResponse, summary="Get news article by code")
async def get_news(code: str, service: NewsSvc) -> NewsResponse:
    news = await service.get_by_code(code)
    return NewsResponse.model_validate(news)


@router.post(
    "",
    response_model=NewsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create news article",
)
async def create_news(
    data: NewsCreate,
    service: NewsSvc,
    claims: AdminClaims,
) -> NewsResponse:
    news = await service.create(
        data,
        author_id=claims.user_id,
        author_name=claims.name,
    )
    return NewsResponse.model_validate(news)


@router.put(
    "/{code}",
    response_model=NewsResponse,
    dependencies=admin_only,
    summary="Update news article",
)
async def update_news(code: str, data: NewsUpdate, service: NewsSvc) -> NewsResponse:
    news = await service.update(code, data)
    return NewsResponse.model_validate(news)


@router.delete(
    "/{code}",
    response_model=NewsDeleteResponse,
    dependencies=admin_only,
    summary="Delete news article",
)
async def delete_news(code: str, service: NewsSvc) -> NewsDeleteResponse:
    news = await service.delete(code)
    return NewsDeleteResponse(news=NewsResponse.model_validate(news))
