"""
GameStore Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers, routes and the
       store provider, and returns the configured app.
Who:   uvicorn (uvicorn gamestore.main:app) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:  GET /   /games[/{id}]   /genres   /health │
    │                                                     │
    │  Store provider (app.state.store_provider):         │
    │      memory → one InMemoryGameStore                 │
    │      sql    → one AsyncSession per request          │
    │                                                     │
    │  Exception Handlers:                                │
    │   ValidationError, InvalidGenreError → 400          │
    │   NotFoundError → 404   DatabaseError, other → 500  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging; with the default SQL store, create tables
              and seed genres (settings.db_auto_create)
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from gamestore import __version__
from gamestore.config import settings
from gamestore.exceptions import (
    DatabaseError,
    GameStoreError,
    InvalidGenreError,
    NotFoundError,
    ValidationError,
)
from gamestore.middleware.logging import RequestLoggingMiddleware
from gamestore.middleware.request_id import RequestIDMiddleware, request_id_var
from gamestore.routes import games, genres, health, root
from gamestore.stores.providers import StoreProvider, build_store_provider

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup and shutdown procedures.

    The database is only touched when the app owns it, i.e. it was built
    without an explicit store provider and store_backend is "sql".
    """
    setup_logging()
    logger.info("GameStore Backend starting up (store=%s)...", app.state.store_backend)

    owns_database = app.state.owns_database
    if owns_database:
        from gamestore.database import engine, init_database

        if settings.db_auto_create:
            await init_database(engine)
            logger.info("Database schema ready")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("GameStore Backend shutting down...")
    if owns_database:
        from gamestore.database import dispose_engine

        await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _field_name(loc) -> str:
    """Wire name of the offending field from a Pydantic error location."""
    parts = [str(part) for part in loc if part not in ("body", "path", "query")]
    return ".".join(parts) if parts else "body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        RequestValidationError → 400 (body could not be decoded into a DTO)
        ValidationError        → 400 (field rules failed)
        InvalidGenreError      → 400 ("Invalid genre id: {id}")
        NotFoundError          → 404, empty body
        DatabaseError          → 500, generic message
        GameStoreError (base)  → 500
        Exception (fallback)   → 500, stack trace logged only
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed body: same response shape as a failed field rule."""
        rid = request_id_var.get("")
        errors = [
            {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
            for error in exc.errors()
        ]
        logger.warning("[%s] Request validation failed: %s", rid, errors)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "One or more fields are invalid",
                "details": {"errors": errors},
                "request_id": rid,
            },
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.errors)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": {"errors": exc.errors},
                "request_id": rid,
            },
        )

    @app.exception_handler(InvalidGenreError)
    async def handle_invalid_genre(request: Request, exc: InvalidGenreError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=400,
            content={
                "error": "invalid_genre",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return Response(status_code=404)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the client, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(GameStoreError)
    async def handle_app_error(request: Request, exc: GameStoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: no stack trace in the response, full trace in the log."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store_provider: Optional[StoreProvider] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store_provider: Where handlers get their GameStore. Defaults to the
            backend named by settings.store_backend. Tests pass their own
            (a seeded in-memory store, or SQL on a temporary database).

    Returns: Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="GameStore API",
        description="CRUD service for a catalog of video games and their genres.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Store ─────────────────────────────────────────────────────────────
    # Built once per process; handlers reach it through get_game_store
    app.state.owns_database = store_provider is None and settings.store_backend == "sql"
    app.state.store_backend = settings.store_backend if store_provider is None else "custom"
    app.state.store_provider = store_provider or build_store_provider(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(games.router)
    app.include_router(genres.router)
    app.include_router(health.router)

    return app


# uvicorn expects `gamestore.main:app` to be importable
app = create_app()
