"""Pydantic schemas for news operations."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from travlr.core.constants import (
    MAX_IMAGE_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SUMMARY_LENGTH,
    MIN_NEWS_TITLE_LENGTH,
    NewsCategory,
)
from travlr.core.schemas import APIModel, Code, TrimmedList


class NewsCreate(APIModel):
    """Schema for creating a news article.

    The author is taken from the access token, not the body.
    """

    code: Code
    title: str = Field(
        ..., min_length=MIN_NEWS_TITLE_LENGTH, max_length=MAX_NAME_LENGTH
    )
    category: NewsCategory
    publish_date: datetime | None = None
    image: str = Field(..., min_length=1, max_length=MAX_IMAGE_LENGTH)
    summary: str = Field(..., min_length=1, max_length=MAX_SUMMARY_LENGTH)
    content: str = Field(..., min_length=1)
    tags: TrimmedList = Field(default_factory=list)
    featured: bool = False
    published: bool = True
    trip_id: UUID | None = None


class NewsUpdate(APIModel):
    """Schema for updating a news article. All fields are optional."""

    code: Code | None = None
    title: str | None = Field(
        None, min_length=MIN_NEWS_TITLE_LENGTH, max_length=MAX_NAME_LENGTH
    )
    category: NewsCategory | None = None
    publish_date: datetime | None = None
    image: str | None = Field(None, min_length=1, max_length=MAX_IMAGE_LENGTH)
    summary: str | None = Field(None, min_length=1, max_length=MAX_SUMMARY_LENGTH)
    content: str | None = Field(None, min_length=1)
    tags: TrimmedList | None = None
    featured: bool | None = None
    published: bool | None = None
    trip_id: UUID | None = None


class NewsResponse(APIModel):
    """News article as returned by the API."""

    id: UUID
    code: str
    title: str
    category: str
    author_id: UUID
    author_name: str | None
    publish_date: datetime
    image: str
    summary: str
    content: str
    tags: list[str]
    featured: bool
    published: bool
    trip_id: UUID | None
    schema_version: int
    created_at: datetime
    updated_at: datetime


class NewsDeleteResponse(APIModel):
    """Response for a deleted news article."""

    message: str = "News article deleted successfully"
    news: NewsResponse
