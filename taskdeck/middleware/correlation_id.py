"""Correlation ID middleware.

Forwards X-Correlation-ID from the client, else reuses the request id.
Raw ASGI (no BaseHTTPMiddleware).
"""

import uuid
from typing import Callable

from taskdeck.middleware._asgi import append_response_header, get_header
from taskdeck.middleware.request_id import sanitize_request_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward the correlation id header. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        raw = get_header(scope, header_name)
        correlation_id = (
            sanitize_request_id(raw)
            if raw
            else state.get("request_id") or str(uuid.uuid4())
        )
        state["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                append_response_header(message, header_name, correlation_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
