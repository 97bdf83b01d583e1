"""Base service for code-addressed catalogue resources.

Each resource module subclasses :class:`CodeResourceService` and supplies
its listing filters and business rules.
"""

from collections.abc import Collection
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import or_
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql import ColumnElement

from travlr.core.errors import ConflictError, NotFoundError, ValidationError
from travlr.core.pagination import CursorPage
from travlr.core.repository import CodeRepository


logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=Any)

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def search_filter(q: str, *columns: InstrumentedAttribute[Any]) -> ColumnElement[bool]:
    """Case-insensitive substring match of ``q`` against any of ``columns``."""
    pattern = f"%{escape_like(q.strip())}%"
    return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns))


class CodeResourceService(Generic[ModelT]):
    """CRUD over a :class:`CodeRepository` with business-rule checks.

    Rules are pure functions returning ``[{"field", "message"}]``; they
    run on the merged row state before anything is flushed.
    """

    resource_name: ClassVar[str] = "Resource"

    def __init__(self, repo: CodeRepository[ModelT]) -> None:
        self.repo = repo

    def build_filters(self, **options: Any) -> list[Any]:
        """Translate list options into SQL filter clauses."""
        return []

    def check_rules(self, obj: ModelT, *, is_new: bool) -> list[dict[str, str]]:
        """Return business-rule violations for ``obj``."""
        return []

    def new_instance(self, data: BaseModel, **extra: Any) -> ModelT:
        """Build an unsaved model from create data."""
        return self.repo.model(**data.model_dump(), **extra)

    async def list(
        self,
        *,
        limit: int,
        cursor: str | None = None,
        **options: Any,
    ) -> CursorPage[ModelT]:
        """Fetch one page of rows matching ``options``."""
        filters = self.build_filters(**options)
        return await self.repo.list(filters=filters, limit=limit, cursor=cursor)

    async def get_by_code(self, code: str) -> ModelT:
        """Get a row by code.

        Raises:
            NotFoundError: If no row has this code
        """
        obj = await self.repo.get_by_code(code)
        if obj is None:
            raise NotFoundError(resource=self.resource_name, resource_id=code.upper())
        return obj

    async def create(self, data: BaseModel, **extra: Any) -> ModelT:
        """Create a row.

        Args:
            data: Validated create schema
            **extra: Values not supplied by the client (e.g. author)

        Raises:
            ConflictError: If the code is already taken
            ValidationError: If a referenced row is missing or a business
                rule fails
        """
        obj = self.new_instance(data, **extra)
        await self._ensure_code_free(obj.code)
        await self._ensure_references_exist(obj)
        self._enforce_rules(obj, is_new=True)

        obj = await self.repo.create(obj)
        logger.info(
            "resource_created",
            resource=self.resource_name,
            code=obj.code,
        )
        return obj

    async def update(self, code: str, data: BaseModel) -> ModelT:
        """Apply a partial update to a row.

        Only fields present in the request are changed.

        Raises:
            NotFoundError: If no row has this code
            ConflictError: If the code is changed to one already taken
            ValidationError: If a referenced row is missing or a business
                rule fails
        """
        obj = await self.get_by_code(code)
        columns = self.repo.model.__table__.columns
        # An explicit null only clears nullable columns
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or columns[field].nullable
        }

        new_code = changes.get("code")
        if new_code and new_code != obj.code:
            await self._ensure_code_free(new_code)

        for field, value in changes.items():
            setattr(obj, field, value)
        await self._ensure_references_exist(obj, fields=changes.keys())
        self._enforce_rules(obj, is_new=False)

        obj = await self.repo.update(obj)
        logger.info(
            "resource_updated",
            resource=self.resource_name,
            code=obj.code,
            fields=sorted(changes),
        )
        return obj

    async def delete(self, code: str) -> ModelT:
        """Delete a row and return it.

        Raises:
            NotFoundError: If no row has this code
        """
        obj = await self.get_by_code(code)
        await self.repo.delete(obj)
        logger.info("resource_deleted", resource=self.resource_name, code=obj.code)
        return obj

    async def _ensure_code_free(self, code: str) -> None:
        if await self.repo.get_by_code(code) is not None:
            raise ConflictError(
                f"{self.resource_name} with code {code} already exists",
                details={"field": "code", "value": code},
            )

    async def _ensure_references_exist(
        self,
        obj: ModelT,
        fields: Collection[str] | None = None,
    ) -> None:
        """Reject foreign keys that point at missing rows.

        Only ``fields`` are checked when given; null references are allowed.
        """
        errors: list[dict[str, str]] = []
        for fk in self.repo.model.__table__.foreign_keys:
            key = fk.parent.key
            if fields is not None and key not in fields:
                continue
            value = getattr(obj, key)
            if value is None:
                continue
            if not await self.repo.reference_exists(fk.column, value):
                noun = fk.column.table.name.removesuffix("s")
                errors.append(
                    {"field": to_camel(key), "message": f"No {noun} exists with id {value}"}
                )
        if errors:
            raise ValidationError(errors=errors)

    def _enforce_rules(self, obj: ModelT, *, is_new: bool) -> None:
        errors = self.check_rules(obj, is_new=is_new)
        if errors:
            raise ValidationError(errors=errors)
