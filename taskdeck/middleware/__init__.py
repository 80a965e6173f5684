"""HTTP middleware: timeout, request size limit, request ID, correlation ID, security headers, owner context.

Applied in main app; order matters (last added = outermost).
"""

from taskdeck.middleware.correlation_id import CorrelationIDMiddleware
from taskdeck.middleware.owner_context import OwnerContextMiddleware
from taskdeck.middleware.request_id import RequestIDMiddleware
from taskdeck.middleware.request_size_limit import RequestSizeLimitMiddleware
from taskdeck.middleware.security_headers import SecurityHeadersMiddleware
from taskdeck.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "OwnerContextMiddleware",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
