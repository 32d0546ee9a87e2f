"""
Haste Store — FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, collaborator wiring
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn haste.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐        │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │        │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────────────────────┐  │
    │  │ GET /health  │ │ /{path} → classify → handler │  │
    │  └──────────────┘ └──────────────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ StoreError→500 │ HasteError→500 │ *→500      │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → (database backend) create tables
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from haste import __version__
from haste.config import settings
from haste.database import create_tables, dispose_engine
from haste.exceptions import HasteError, StoreError
from haste.middleware.logging import RequestLoggingMiddleware
from haste.middleware.request_id import RequestIDMiddleware, request_id_var
from haste.routes import dispatch, health
from haste.services.asset_service import AssetService
from haste.services.document_store import DocumentStore
from haste.services.key_generator import KeyGenerator
from haste.services.kv_store import SQLKeyValueStore, build_kv_store

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
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request noise; haste.access already logs each request once
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Haste Store %s starting up...", __version__)

    try:
        settings.validate_runtime()
    except ValueError as e:
        # Keep serving: the paste API works without a static site
        logger.error("Configuration error: %s", str(e))

    store = app.state.document_store
    if isinstance(store.kv, SQLKeyValueStore) and settings.db_create_tables:
        await create_tables()
        logger.info("Documents table ready")

    logger.info("Key length: %d", store.key_generator.length)
    logger.info("Static root: %s", app.state.asset_service.root)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Haste Store shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        StoreError          → 500 (backing store failed; generic message)
        HasteError (base)   → 500 (catch-all for custom errors)
        Exception           → 500 (unexpected errors; stack trace logged)

    Not handled here:
        - document misses: not exceptions, answered with a 200 message body
        - AssetError: recovered by the static fallback handler

    Security: responses never include context dicts or stack traces.
    """

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        """Backing store failed — generic message to user, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "store_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(HasteError)
    async def handle_haste_error(request: Request, exc: HasteError):
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
        """Catch-all for truly unexpected errors; stack trace is logged, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    document_store: Optional[DocumentStore] = None,
    asset_service: Optional[AssetService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        document_store: Store to use instead of the one built from settings
                        (tests pass one over MemoryKeyValueStore).
        asset_service:  Asset lookup to use instead of settings.static_root.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Haste Store",
        description="Minimal text-paste store with a static single-page frontend.",
        version=__version__,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
        lifespan=lifespan,
    )

    # ── Collaborators ─────────────────────────────────────────────────────
    app.state.document_store = document_store or DocumentStore(
        build_kv_store(settings),
        KeyGenerator(length=settings.key_length),
    )
    app.state.asset_service = asset_service or AssetService(
        settings.static_root,
        cache_control=settings.static_cache_control,
    )
    app.state.static_index = settings.static_index

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # dispatch is a catch-all and must come last
    app.include_router(health.router)
    dispatch.register(app)

    return app


app = create_app()
