"""OpenTelemetry tracing configuration.

Instruments FastAPI requests and SQLAlchemy queries. Spans are exported
to an OTLP-compatible backend when OTLP_ENDPOINT is configured, or to
the console in debug mode.
"""

import structlog
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from sqlalchemy.ext.asyncio import AsyncEngine

from travlr import __version__
from travlr.config import Settings


log = structlog.get_logger()


def setup_tracing(app: FastAPI, settings: Settings) -> bool:
    """Configure OpenTelemetry tracing for the application.

    Args:
        app: The FastAPI application instance to instrument
        settings: Application settings

    Returns:
        True if tracing was enabled
    """
    resource = Resource.create(
        {
            "service.name": settings.app_name.lower().replace(" ", "-"),
            "service.version": __version__,
            "deployment.environment": settings.environment,
        }
    )
    provider = TracerProvider(resource=resource)

    if settings.otlp_endpoint:
        exporter = OTLPSpanExporter(
            endpoint=settings.otlp_endpoint,
            insecure=not settings.otlp_endpoint.startswith("https"),
        )
        provider.add_span_processor(BatchSpanProcessor(exporter))
        log.info("tracing_configured", exporter="otlp", endpoint=settings.otlp_endpoint)
    elif settings.debug:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        log.info("tracing_configured", exporter="console")
    else:
        log.info("tracing_disabled", reason="no OTLP_ENDPOINT configured")
        return False

    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls="health/.*,docs,redoc,openapi.json",
    )
    log.debug("instrumented_fastapi")
    return True


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument an async SQLAlchemy engine for tracing."""
    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    log.debug("instrumented_sqlalchemy")


def shutdown_tracing() -> None:
    """Flush pending spans and stop the tracer provider."""
    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()
        log.info("tracing_shutdown_complete")
