"""
CMS API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                          PERSONAL CMS API                                   │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌──────────┐ ┌──────────┐ ┌────────────┐ ┌──────────┐     │          │
│   │  │  Health  │ │ Content  │ │ Categories │ │  Media   │     │          │
│   │  └──────────┘ └──────────┘ └────────────┘ └──────────┘     │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │          app.state.store  (MemoryStore, injected)           │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
======
    # Run with uvicorn
    uvicorn cms.api.main:app --host 0.0.0.0 --port 3000 --reload

    # Or via the console script
    personal-cms

    # Or programmatically, around your own store
    from cms.api.main import create_application
    from cms.shared.db import MemoryStore
    app = create_application(store=MemoryStore())
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from cms.config.settings import settings
from cms.shared.db import MemoryStore, init_store
from cms.shared.core.logging import clear_log_context, log_context, logger
from cms.shared.models.enums import ContentStatus
from cms.shared.services import CategoryService, ContentService, MediaService
from cms.api.middleware import setup_exception_handlers
from cms.api.routes import register_routes


async def summarize_store(store: MemoryStore) -> dict[str, int]:
    """Record counts for the startup log line."""
    content_service = ContentService(store)
    return {
        "content": await content_service.count(),
        "published": await content_service.count(
            filters={"status": ContentStatus.PUBLISHED}
        ),
        "categories": await CategoryService(store).count(),
        "media": await MediaService(store).count(),
    }


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup logs what the store holds; shutdown notes that in-memory data
    is discarded with the process.
    """
    logger.info(
        "Starting Personal CMS API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        **await summarize_store(app.state.store),
    )

    yield

    logger.info("Personal CMS API shutdown complete, in-memory data discarded")


def create_application(store: Optional[MemoryStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve. When omitted a fresh one is built, seeded with
            sample data if SEED_SAMPLE_DATA is set.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Attaches the store to app.state
    3. Adds middleware (CORS)
    4. Sets up exception handlers and per-request log context
    5. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Personal content management API",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    if store is None:
        store = init_store(seed=settings.SEED_SAMPLE_DATA)
    app.state.store = store

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        log_context(method=request.method, path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_log_context()

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(
        "cms.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


# Create the application instance
app = create_application()
