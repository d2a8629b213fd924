"""
Thoughts API — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn thoughts_api.main:app`) or the
       `thoughts-api` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Rate Limit  │→│ Req ID   │→│  Logging        │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────────┐ ┌─────────┐ ┌──────┐ │
    │  │ GET /    │ │ /thoughts/*  │ │ /login  │ │health│ │
    │  └──────────┘ └──────────────┘ │/register│ └──────┘ │
    │                                └─────────┘          │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ 400 Validation │ 401 Auth │ 403 │ 404 │ 500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from thoughts_api import __version__
from thoughts_api.config import settings
from thoughts_api.database import dispose_engine
from thoughts_api.exceptions import (
    AuthenticationError,
    DatabaseError,
    NotFoundError,
    PermissionDeniedError,
    ThoughtsAPIError,
    ValidationError,
)
from thoughts_api.middleware.logging import RequestLoggingMiddleware
from thoughts_api.middleware.rate_limit import RateLimitMiddleware
from thoughts_api.middleware.request_id import RequestIDMiddleware, request_id_var
from thoughts_api.routes import auth, health, index, thoughts

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party libraries that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, validate settings.
    Shutdown: dispose the database engine (close pooled connections).

    Schema creation is left to Alembic (`alembic upgrade head`).
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Thoughts API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving so /health can report the problem
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("API docs: http://%s:%d/docs", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Thoughts API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (bad query params / JSON body)
        AuthenticationError     → 401 Unauthorized
        PermissionDeniedError   → 403 Forbidden
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 Internal Server Error
        ThoughtsAPIError (base) → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Security: 5xx responses never include internal details; those are logged.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, details=exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        # 400 rather than FastAPI's default 422, so every client input error
        # shares one status code
        errors = [
            {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return _error_response(400, "validation_error", message, details={"errors": errors})

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(401, "unauthorized", exc.message)

    @app.exception_handler(PermissionDeniedError)
    async def handle_permission_denied(request: Request, exc: PermissionDeniedError):
        logger.warning("[%s] Permission denied: %s", request_id_var.get(""), exc.context)
        return _error_response(403, "forbidden", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(ThoughtsAPIError)
    async def handle_app_error(request: Request, exc: ThoughtsAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again later.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fresh instance each call, which lets tests build an app with
    their own dependency overrides.
    """
    app = FastAPI(
        title="Thoughts API",
        description=(
            "Post short thoughts, like them, and manage your own posts "
            "after registering for an access token."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RateLimit → RequestID → Logging → CORS → route
    allow_any_origin = "*" in settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any_origin else settings.cors_origins_list,
        # Tokens travel in the Authorization header, not cookies
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Retry-After"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware)

    register_exception_handlers(app)

    app.include_router(index.router)
    app.include_router(thoughts.router)
    app.include_router(auth.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(
        "thoughts_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
