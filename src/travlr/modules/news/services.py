"""News service for business logic."""

from typing import Annotated, Any

from fastapi import Depends
from pydantic import BaseModel

from travlr.core.services import CodeResourceService, search_filter
from travlr.modules.news.models import News
from travlr.modules.news.repos import NewsRepo
from travlr.modules.news.validators import validate_summary


class NewsService(CodeResourceService[News]):
    """Service for news article operations."""

    resource_name = "News article"

    def __init__(self, repo: NewsRepo) -> None:
        super().__init__(repo)

    def build_filters(
        self,
        *,
        q: str | None = None,
        category: str | None = None,
        featured: bool | None = None,
        published: bool | None = True,
        **_: Any,
    ) -> list[Any]:
        """Build listing filters; only published articles unless asked otherwise."""
        filters: list[Any] = []
        if q:
            filters.append(search_filter(q, News.title, News.summary, News.content))
        if category:
            filters.append(News.category == category)
        if featured is not None:
            filters.append(News.featured.is_(featured))
        if published is not None:
            filters.append(News.published.is_(published))
        return filters

    def new_instance(self, data: BaseModel, **extra: Any) -> News:
        # Let the column default stamp publish_date when none was given
        return News(**data.model_dump(exclude_none=True), **extra)

    def check_rules(self, obj: News, *, is_new: bool) -> list[dict[str, str]]:
        return validate_summary(obj.summary, obj.content)


# Type alias for dependency injection
NewsSvc = Annotated[NewsService, Depends(NewsService)]
