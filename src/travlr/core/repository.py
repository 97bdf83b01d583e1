"""Base repository for models addressed by a unique business code."""

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Column, select
from sqlalchemy.sql import ColumnElement

from travlr.api.dependencies import DBSession
from travlr.core.constants import DEFAULT_PAGE_SIZE
from travlr.core.pagination import CursorPage, paginate


ModelT = TypeVar("ModelT", bound=Any)


class CodeRepository(Generic[ModelT]):
    """Database operations shared by the catalogue models.

    Subclasses set ``model`` and, when listing is not ordered by
    ``created_at``, ``cursor_field``.
    """

    model: ClassVar[type[Any]]
    cursor_field: ClassVar[str] = "created_at"

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_code(self, code: str) -> ModelT | None:
        """Get a row by its code, case-insensitively."""
        stmt = select(self.model).where(self.model.code == code.strip().upper())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        *,
        filters: Sequence[ColumnElement[bool]] = (),
        limit: int = DEFAULT_PAGE_SIZE,
        cursor: str | None = None,
    ) -> CursorPage[ModelT]:
        """Fetch one page, newest first."""
        return await paginate(
            self.session,
            self.model,
            filters=filters,
            cursor_field=self.cursor_field,
            descending=True,
            limit=limit,
            cursor=cursor,
        )

    async def create(self, obj: ModelT) -> ModelT:
        """Insert a row and return it with server-side values loaded."""
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def update(self, obj: ModelT) -> ModelT:
        """Flush pending changes on a row."""
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def reference_exists(self, target: Column[Any], value: Any) -> bool:
        """Check that a foreign-key value points at an existing row."""
        stmt = select(target).where(target == value).limit(1)
        return await self.session.scalar(stmt) is not None

    async def delete(self, obj: ModelT) -> None:
        """Delete a row."""
        await self.session.delete(obj)
        await self.session.flush()
