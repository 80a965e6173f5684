"""Request body size limit middleware.

Rejects requests whose body exceeds max_request_size with 413. Checks the
declared Content-Length up front and counts streamed bytes otherwise.
Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

from taskdeck.middleware._asgi import get_header, send_json_error


async def _reject(send: Callable, max_bytes: int, actual: int) -> None:
    await send_json_error(
        send,
        413,
        "PAYLOAD_TOO_LARGE",
        f"Request body must be at most {max_bytes} bytes",
        {"max_bytes": max_bytes, "content_length": actual},
    )


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared and declared.isdigit() and int(declared) > max_bytes:
            await _reject(send, max_bytes, int(declared))
            return

        received = 0
        rejected = False

        async def counting_receive() -> dict:
            nonlocal received, rejected
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > max_bytes:
                    rejected = True
                    await _reject(send, max_bytes, received)
                    return {"type": "http.disconnect"}
            return message

        async def guarded_send(message: dict) -> None:
            if not rejected:
                await send(message)

        try:
            await app(scope, counting_receive, guarded_send)
        except Exception:
            # The app sees a disconnect after a 413 was sent; its error is moot.
            if not rejected:
                raise

    return asgi_app
