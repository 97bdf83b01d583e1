"""News repository for database operations."""

from typing import Annotated

from fastapi import Depends

from travlr.core.repository import CodeRepository
from travlr.modules.news.models import News


class NewsRepository(CodeRepository[News]):
    """Repository for News database operations.

    Listings are ordered by publication date rather than creation time.
    """

    model = News
    cursor_field = "publish_date"


# Type alias for dependency injection
NewsRepo = Annotated[NewsRepository, Depends(NewsRepository)]
