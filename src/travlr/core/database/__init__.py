"""Database layer - session management, base models, and mixins."""

from travlr.core.database.base import (
    AuditMixin,
    Base,
    CodeMixin,
    JSONType,
    TimestampMixin,
    UUIDMixin,
    utcnow,
)
from travlr.core.database.session import Database, get_db


__all__ = [
    "AuditMixin",
    "Base",
    "CodeMixin",
    "Database",
    "JSONType",
    "TimestampMixin",
    "UUIDMixin",
    "get_db",
    "utcnow",
]
