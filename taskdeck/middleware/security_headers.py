"""Response hardening headers for the taskdeck API.

Every response gets a locked-down CSP and the usual browser hardening
headers; the Swagger UI under docs_prefix is exempt from the CSP because it
loads scripts and styles. Responses to requests carrying an Authorization
header hold a user's tasks or profile and are marked Cache-Control: no-store.
Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

API_HEADERS: tuple[tuple[bytes, bytes], ...] = (
    (b"content-security-policy", b"default-src 'none'; frame-ancestors 'none'"),
    (b"strict-transport-security", b"max-age=31536000; includeSubDomains"),
    (b"x-content-type-options", b"nosniff"),
    (b"x-frame-options", b"DENY"),
    (b"referrer-policy", b"no-referrer"),
)

NO_STORE = (b"cache-control", b"no-store")


def SecurityHeadersMiddleware(app: Callable, docs_prefix: str = "/docs") -> Callable:
    """Add API_HEADERS (and no-store for authenticated calls) unless already set."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        extra = [
            header
            for header in API_HEADERS
            if not (
                header[0] == b"content-security-policy"
                and scope.get("path", "").startswith(docs_prefix)
            )
        ]
        if any(name.lower() == b"authorization" for name, _ in scope.get("headers", [])):
            extra.append(NO_STORE)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                headers.extend(h for h in extra if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
