"""Spans around task service operations.

@traced("task.update") wraps an async service method in a span named after the
operation. Owner and task identifiers are read from the bound call arguments
(positional or keyword) and recorded as taskdeck.* attributes; titles,
descriptions and other user content are never recorded.
"""

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from taskdeck.shared.telemetry.telemetry import get_tracer_provider

P = ParamSpec("P")
R = TypeVar("R")

TRACER_NAME = "taskdeck.tasks"

# Argument names copied onto the span as strings.
_ID_ARGS = ("owner_id", "task_id", "status")


def _tracer() -> trace.Tracer:
    # Falls back to the global (no-op unless configured) provider.
    return trace.get_tracer(TRACER_NAME, tracer_provider=get_tracer_provider())


def _call_attributes(signature: inspect.Signature, args: tuple, kwargs: dict) -> dict[str, Any]:
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        return {}
    attributes: dict[str, Any] = {}
    for name in _ID_ARGS:
        value = bound.arguments.get(name)
        if value is not None:
            attributes[f"taskdeck.{name}"] = str(value)
    task_ids = bound.arguments.get("task_ids")
    if task_ids is not None:
        attributes["taskdeck.task_count"] = len(task_ids)
    return attributes


def traced(operation: str) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run the decorated coroutine inside a span named operation."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            attributes = _call_attributes(signature, args, kwargs)
            with _tracer().start_as_current_span(
                operation,
                attributes=attributes,
                record_exception=False,
                set_status_on_exception=False,
            ) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as exc:
                    span.record_exception(exc)
                    span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Record taskdeck.<key> attributes on the current span, if it is recording."""
    span = trace.get_current_span()
    if not span.is_recording():
        return
    for key, value in attributes.items():
        span.set_attribute(f"taskdeck.{key}", value)


def get_trace_id() -> str | None:
    """Return the current trace ID as 32-char hex, or None outside a span."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        return format(ctx.trace_id, "032x")
    return None
