"""
Contact Book Backend — FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn contactbook.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌─────────┐  │
    │  │  Req ID  │→│  Logging    │→│ GZip │→│  CORS   │  │
    │  └──────────┘ └─────────────┘ └──────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────┐ ┌───────────────┐  │
    │  │ /signup      │ │ /contacts  │ │ / and /health │  │
    │  │ /signin      │ │ /contacts/ │ │               │  │
    │  └──────────────┘ └────────────┘ └───────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ Auth→401 │ 404 │ Database→500 │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → create missing tables (DB_CREATE_TABLES) → ready
    Shutdown: dispose database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from contactbook import __version__
from contactbook.config import settings
from contactbook.database import create_tables, dispose_engine
from contactbook.exceptions import (
    AuthenticationError,
    ContactBookError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from contactbook.middleware.logging import RequestLoggingMiddleware
from contactbook.middleware.request_id import RequestIDMiddleware, request_id_var
from contactbook.routes import auth, contacts, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout
    (container runtimes capture stdout).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Startup sequence:
        1. Setup logging
        2. Create missing tables when DB_CREATE_TABLES is enabled
        3. Log successful startup

    Shutdown sequence:
        1. Dispose database engine (close all pooled connections)
    """
    setup_logging()
    logger.info("Contact Book backend starting up...")

    if settings.db_create_tables:
        try:
            await create_tables()
            logger.info("Database tables verified")
        except Exception as e:
            # Keep serving: /health reports the database as disconnected
            logger.error("Failed to connect to the database: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Contact Book backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details=None) -> dict:
    return {
        "error": error,
        "message": message,
        "details": details,
        "request_id": request_id_var.get(""),
    }


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed JSON, bad path params)
        AuthenticationError     → 401 Unauthorized
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 Internal Server Error
        ContactBookError (base) → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Security: 500 responses never include exception context; it is logged.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        fields = [".".join(str(part) for part in err.get("loc", ())) for err in errors]
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), fields)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", message, {"fields": fields}),
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content=_error_body("authentication_error", exc.message),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(ContactBookError)
    async def handle_app_error(request: Request, exc: ContactBookError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace to the log, generic message to the client."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again later.",
            ),
            # Rendered by ServerErrorMiddleware, outside RequestIDMiddleware
            headers={"X-Request-ID": request_id_var.get("")},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Contact Book API",
        description="Account sign-up/sign-in and company contact management.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(contacts.router)

    return app


# uvicorn expects `contactbook.main:app` to be importable
app = create_app()
