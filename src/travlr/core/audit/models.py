"""Audit log database model.

Stores one row per create, update or delete on an audited model.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from travlr.core.constants import MAX_IPV6_LENGTH
from travlr.core.database.base import Base, JSONType, UUIDMixin, utcnow


class AuditLog(Base, UUIDMixin):
    """Audit log entry for tracking changes.

    Attributes:
        user_id: The user who performed the action (null for system actions)
        action: create, update or delete
        resource_type: Table name of the affected model
        resource_id: Business code of the affected row, or its UUID
        ip_address: Client IP address
        user_agent: Client user agent string
        request_id: Correlation ID for request tracing
        changes: Field changes {field: {old: x, new: y}}
        created_at: When the action occurred
    """

    __tablename__ = "audit_logs"

    user_id: Mapped[UUID | None] = mapped_column(
        nullable=True,
        index=True,
    )

    # What happened
    action: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
    )
    resource_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )
    resource_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )

    # Request context
    ip_address: Mapped[str | None] = mapped_column(
        String(MAX_IPV6_LENGTH),
        nullable=True,
    )
    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    request_id: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )

    changes: Mapped[dict[str, Any] | None] = mapped_column(
        JSONType,
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, action={self.action}, "
            f"resource_type={self.resource_type}, resource_id={self.resource_id})>"
        )
