"""SQLAlchemy declarative base and common mixins."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from travlr.core.constants import MAX_CODE_LENGTH


# JSON column stored as JSONB on PostgreSQL
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UUIDMixin:
    """Mixin that adds a UUID primary key."""

    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
        index=True,
    )


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps.

    Timestamps are generated client-side with microsecond precision
    because ``created_at`` doubles as the pagination cursor.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )


class CodeMixin:
    """Mixin for catalogue entities addressed by a unique business code."""

    code: Mapped[str] = mapped_column(
        String(MAX_CODE_LENGTH),
        unique=True,
        index=True,
        nullable=False,
    )
    schema_version: Mapped[int] = mapped_column(
        Integer,
        default=1,
        nullable=False,
    )


class AuditMixin:
    """Marker mixin to enable automatic audit logging.

    Models that inherit from this mixin will have their changes
    automatically captured in the audit log when they are created,
    updated, or deleted.

    The SQLAlchemy event listeners in travlr.core.audit.listeners
    check for the __audit__ attribute to determine if a model
    should be audited.
    """

    # Marker attribute checked by audit listeners
    __audit__: bool = True
