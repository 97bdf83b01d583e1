"""Observability: OpenTelemetry tracing."""

from travlr.core.observability.tracing import (
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)


__all__ = ["instrument_sqlalchemy", "setup_tracing", "shutdown_tracing"]
