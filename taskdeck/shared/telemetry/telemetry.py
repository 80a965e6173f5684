"""OpenTelemetry tracing for the taskdeck API.

configure_tracing() builds the tracer provider from Settings (console, OTLP
gRPC, or no exporter) and keeps it as the provider used by @traced service
spans. instrument_app() then attaches FastAPI, SQLAlchemy and logging
instrumentation to the same provider. Disabled unless TELEMETRY_ENABLED=true.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from taskdeck.core.config import Settings

logger = logging.getLogger(__name__)

# Health checks are not traced.
_EXCLUDED_URLS = "/api/v1/health"

_provider: TracerProvider | None = None
_provider_lock = threading.RLock()


def get_tracer_provider() -> TracerProvider | None:
    """Return the provider set by configure_tracing(), if any."""
    with _provider_lock:
        return _provider


def build_exporter(settings: Settings) -> SpanExporter | None:
    """Return the span exporter named by settings.telemetry_exporter (validated by Settings)."""
    kind = settings.telemetry_exporter
    if kind == "none":
        return None
    if kind == "otlp":
        endpoint = settings.telemetry_otlp_endpoint
        if endpoint:
            return OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
        return OTLPSpanExporter()
    return ConsoleSpanExporter()


def configure_tracing(
    settings: Settings, span_processor: SpanProcessor | None = None
) -> TracerProvider:
    """Create the service tracer provider and make it current for @traced.

    span_processor defaults to a BatchSpanProcessor over build_exporter().
    """
    global _provider
    provider = TracerProvider(
        resource=Resource(
            attributes={
                SERVICE_NAME: settings.app_name,
                SERVICE_VERSION: settings.app_version,
                "deployment.environment": settings.telemetry_environment,
            }
        ),
        sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
    )
    if span_processor is None:
        exporter = build_exporter(settings)
        if exporter is not None:
            span_processor = BatchSpanProcessor(exporter)
    if span_processor is not None:
        provider.add_span_processor(span_processor)
    with _provider_lock:
        _provider = provider
    logger.info(
        "Tracing configured: exporter=%s sample_rate=%s",
        settings.telemetry_exporter,
        settings.telemetry_sample_rate,
    )
    return provider


def instrument_app(app: FastAPI, engine: AsyncEngine) -> None:
    """Trace HTTP requests and SQL statements, and stamp trace ids on log records."""
    provider = get_tracer_provider()
    if provider is None:
        return
    try:
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=provider, excluded_urls=_EXCLUDED_URLS
        )
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine, tracer_provider=provider, enable_commenter=True
        )
        LoggingInstrumentor().instrument(tracer_provider=provider, set_logging_format=True)
    except Exception:
        logger.exception("Failed to instrument taskdeck for tracing")


def shutdown_tracing() -> None:
    """Flush pending spans and forget the provider."""
    global _provider
    with _provider_lock:
        provider, _provider = _provider, None
    if provider is not None:
        provider.shutdown()
        logger.info("Tracing shut down")
