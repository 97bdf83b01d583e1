"""Audit logging for catalogue and user changes."""

from travlr.core.audit.listeners import (
    clear_audit_context,
    get_audit_context,
    set_audit_context,
    setup_audit_listeners,
)
from travlr.core.audit.models import AuditLog


__all__ = [
    "AuditLog",
    "clear_audit_context",
    "get_audit_context",
    "set_audit_context",
    "setup_audit_listeners",
]
