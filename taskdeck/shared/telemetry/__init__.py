"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from taskdeck.shared.telemetry.logging import get_logger, setup_logging
from taskdeck.shared.telemetry.telemetry import (
    build_exporter,
    configure_tracing,
    get_tracer_provider,
    instrument_app,
    shutdown_tracing,
)
from taskdeck.shared.telemetry.tracing import (
    add_span_attributes,
    get_trace_id,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "build_exporter",
    "configure_tracing",
    "get_tracer_provider",
    "instrument_app",
    "shutdown_tracing",
    "traced",
    "add_span_attributes",
    "get_trace_id",
]
