"""FastAPI application entry point for the taskdeck API.

create_app() wires lifespan, exception handlers, middleware and the v1
routers; everything is served under API_PREFIX, interactive docs included.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskdeck.api.v1.router import api_router
from taskdeck.core.config import Settings, get_settings
from taskdeck.core.exception_handlers import register_exception_handlers
from taskdeck.core.lifespan import create_lifespan
from taskdeck.core.limiter import limiter
from taskdeck.middleware import (
    CorrelationIDMiddleware,
    OwnerContextMiddleware,
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)

API_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness and database readiness."},
    {"name": "auth", "description": "Registration, login and password changes."},
    {"name": "tasks", "description": "The caller's tasks, filters, statistics and bulk status."},
    {"name": "profiles", "description": "The caller's profile and admin user management."},
]


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    # Last added runs first: timeout, size limit, request ID, correlation ID,
    # security headers, owner context, CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", settings.request_id_header],
        expose_headers=[settings.request_id_header, settings.correlation_id_header],
    )
    app.add_middleware(OwnerContextMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, docs_prefix=f"{API_PREFIX}/docs")
    app.add_middleware(CorrelationIDMiddleware, header_name=settings.correlation_id_header)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_size)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)


def create_app() -> FastAPI:
    """Build the taskdeck FastAPI application from current settings."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        summary="Personal task management API",
        debug=settings.debug,
        lifespan=create_lifespan,
        openapi_tags=OPENAPI_TAGS,
        openapi_url=f"{API_PREFIX}/openapi.json",
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=None,
    )
    app.state.limiter = limiter

    register_exception_handlers(app)
    _add_middleware(app, settings)
    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()
