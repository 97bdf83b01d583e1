"""Cursor-based pagination over SQLAlchemy models.

A cursor is the value of the sort field on the last item of a page.
The next page is everything strictly after that value in sort order:

    page 1:  ORDER BY created_at DESC LIMIT n + 1
    page 2:  WHERE created_at < :cursor ORDER BY created_at DESC LIMIT n + 1

Fetching one extra row tells us whether a successor exists without a
separate COUNT query.

There is no secondary tie-break key. Two rows sharing the same cursor
value can be skipped or repeated across a page boundary, and rows
inserted or deleted between fetches can shift the window.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

import structlog
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from travlr.core.constants import DEFAULT_PAGE_SIZE
from travlr.core.errors import ValidationError
from travlr.core.schemas import APIModel


logger = structlog.get_logger()

ModelT = TypeVar("ModelT")
ItemT = TypeVar("ItemT")


class Page(APIModel, Generic[ItemT]):
    """One page of a cursor-paginated listing.

    Attributes:
        items: Items in sort order, at most ``limit`` of them
        has_more: Whether another page exists after this one
        next_cursor: Cursor to pass back for the next page, or None
    """

    items: list[ItemT]
    has_more: bool
    next_cursor: str | None = None


@dataclass(frozen=True)
class CursorPage(Generic[ModelT]):
    """Result of :func:`paginate` before serialization."""

    items: list[ModelT]
    has_more: bool
    next_cursor: str | None


def encode_cursor(value: Any) -> str | None:
    """Render a sort-field value as an opaque cursor string.

    Datetimes are normalized to UTC and written with a ``Z`` suffix so
    the cursor survives query-string encoding untouched.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).isoformat().replace("+00:00", "Z")
    return str(value)


def decode_cursor(raw: str, python_type: type) -> Any:
    """Parse a cursor string back into a value comparable with the column.

    Raises:
        ValidationError: If the cursor cannot be parsed for the column type
    """
    try:
        if python_type is datetime:
            value = datetime.fromisoformat(raw)
            if value.tzinfo is None:
                value = value.replace(tzinfo=UTC)
            return value.astimezone(UTC)
        if python_type is UUID:
            return UUID(raw)
        if python_type in (int, float):
            return python_type(raw)
    except ValueError as e:
        raise ValidationError(
            "Invalid pagination cursor",
            errors=[{"field": "cursor", "message": str(e)}],
        ) from e
    return raw


def build_cursor_query(
    model: type[ModelT],
    *,
    filters: Sequence[ColumnElement[bool]] = (),
    cursor_field: str = "created_at",
    descending: bool = True,
    limit: int = DEFAULT_PAGE_SIZE,
    cursor: str | None = None,
) -> Select[tuple[ModelT]]:
    """Build the SELECT for one page, fetching ``limit + 1`` rows.

    Args:
        model: Mapped class to query
        filters: Caller filter clauses, ANDed together
        cursor_field: Attribute used both for ordering and as the cursor
        descending: Sort direction on ``cursor_field``
        limit: Page size requested by the caller
        cursor: Cursor from a previous page, if any

    Returns:
        The select statement
    """
    column = getattr(model, cursor_field)
    stmt = select(model).where(*filters)

    if cursor:
        value = decode_cursor(cursor, column.type.python_type)
        stmt = stmt.where(column < value if descending else column > value)

    order = column.desc() if descending else column.asc()
    return stmt.order_by(order).limit(limit + 1)


async def paginate(
    session: AsyncSession,
    model: type[ModelT],
    *,
    filters: Sequence[ColumnElement[bool]] = (),
    cursor_field: str = "created_at",
    descending: bool = True,
    limit: int = DEFAULT_PAGE_SIZE,
    cursor: str | None = None,
) -> CursorPage[ModelT]:
    """Fetch one page of ``model`` rows.

    Args:
        session: Database session
        model: Mapped class to query
        filters: Caller filter clauses, ANDed together
        cursor_field: Attribute used both for ordering and as the cursor
        descending: Sort direction on ``cursor_field``
        limit: Maximum number of items to return
        cursor: Cursor from a previous page, if any

    Returns:
        CursorPage with at most ``limit`` items

    Raises:
        ValidationError: If ``limit`` is below 1 or the cursor is malformed
    """
    if limit < 1:
        raise ValidationError(
            "Invalid page size",
            errors=[{"field": "limit", "message": "limit must be at least 1"}],
        )

    stmt = build_cursor_query(
        model,
        filters=filters,
        cursor_field=cursor_field,
        descending=descending,
        limit=limit,
        cursor=cursor,
    )
    result = await session.execute(stmt)
    rows = list(result.scalars().all())

    has_more = len(rows) > limit
    items = rows[:limit]
    next_cursor = (
        encode_cursor(getattr(items[-1], cursor_field)) if has_more and items else None
    )

    logger.debug(
        "page_fetched",
        model=model.__name__,
        count=len(items),
        has_more=has_more,
    )

    return CursorPage(items=items, has_more=has_more, next_cursor=next_cursor)
