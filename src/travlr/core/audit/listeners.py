"""Automatic audit capture via SQLAlchemy event listeners.

Models inheriting ``AuditMixin`` get an ``AuditLog`` row added to the
same flush whenever they are created, updated or deleted.
"""

from contextvars import ContextVar
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

import structlog
from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from travlr.core.audit.models import AuditLog


log = structlog.get_logger()

# Never copied into audit rows
REDACTED_FIELDS = frozenset({"password_hash"})


# Each async task/request gets its own isolated context
_audit_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "audit_context", default=None
)


def set_audit_context(
    user_id: UUID | None = None,
    request_id: str | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> None:
    """Set the audit context for the current request.

    Called by middleware so that flushes made while handling the
    request are attributed to the caller.
    """
    _audit_context.set(
        {
            "user_id": user_id,
            "request_id": request_id,
            "ip_address": ip_address,
            "user_agent": user_agent,
        }
    )


def clear_audit_context() -> None:
    """Clear the audit context after request completes."""
    _audit_context.set(None)


def get_audit_context() -> dict[str, Any]:
    """Return a shallow copy of the current audit context, or ``{}``."""
    ctx = _audit_context.get()
    if ctx is None:
        return {}
    return ctx.copy()


def _serialize_value(value: Any) -> Any:
    """Convert a value to JSON-compatible primitives."""
    if value is None or isinstance(value, str | int | float | bool):
        return value

    result: Any
    if isinstance(value, UUID):
        result = str(value)
    elif isinstance(value, datetime | date):
        result = value.isoformat()
    elif isinstance(value, Decimal):
        result = str(value)
    elif isinstance(value, Enum):
        result = value.value
    elif isinstance(value, dict):
        result = {k: _serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list | tuple | set | frozenset):
        result = [_serialize_value(item) for item in value]
    else:
        result = str(value)

    return result


def _get_changes(obj: Any) -> dict[str, dict[str, Any]]:
    """Extract changes from a modified object as {field: {old, new}}."""
    changes = {}
    state = inspect(obj)

    for attr in inspect(obj.__class__).column_attrs:
        if attr.key in REDACTED_FIELDS:
            continue

        history = state.attrs[attr.key].history
        if history.has_changes():
            old_value = history.deleted[0] if history.deleted else None
            new_value = history.added[0] if history.added else None
            changes[attr.key] = {
                "old": _serialize_value(old_value),
                "new": _serialize_value(new_value),
            }

    return changes


def _should_audit(obj: Any) -> bool:
    return getattr(obj, "__audit__", False)


def _resource_id(obj: Any) -> str | None:
    code = getattr(obj, "code", None)
    if code:
        return str(code)
    # Primary key defaults are applied during flush, after this hook
    if getattr(obj, "id", None) is None:
        obj.id = uuid4()
    return str(obj.id)


def _create_audit_entry(
    session: Session,
    action: str,
    obj: Any,
    changes: dict[str, Any] | None = None,
) -> None:
    context = get_audit_context()

    entry = AuditLog(
        user_id=context.get("user_id"),
        action=action,
        resource_type=obj.__tablename__,
        resource_id=_resource_id(obj),
        request_id=context.get("request_id"),
        ip_address=context.get("ip_address"),
        user_agent=context.get("user_agent"),
        changes=changes,
    )
    session.add(entry)

    log.debug(
        "audit_recorded",
        action=action,
        resource_type=entry.resource_type,
        resource_id=entry.resource_id,
    )


def _before_flush(
    session: Session,
    _flush_context: Any,
    _instances: Any,
) -> None:
    """Capture changes before they're flushed to the database."""
    for obj in list(session.new):
        if _should_audit(obj):
            _create_audit_entry(session, "create", obj)

    for obj in list(session.dirty):
        if _should_audit(obj) and session.is_modified(obj):
            changes = _get_changes(obj)
            if changes:
                _create_audit_entry(session, "update", obj, changes)

    for obj in list(session.deleted):
        if _should_audit(obj):
            _create_audit_entry(session, "delete", obj)


def setup_audit_listeners() -> None:
    """Enable automatic audit logging for models with ``__audit__ = True``.

    Safe to call more than once.
    """
    if not event.contains(Session, "before_flush", _before_flush):
        event.listen(Session, "before_flush", _before_flush)
