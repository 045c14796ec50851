"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready     → Health check endpoints
    /api/content        → Content items (CRUD, slug lookup, filters)
    /api/categories     → Categories (CRUD, slug lookup)
    /api/media          → Media metadata (CRUD)

Usage:
======
    from cms.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from cms.api.handlers import (
    category_handler,
    content_handler,
    health_handler,
    media_handler,
)


API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Content endpoints
    app.include_router(
        content_handler.router,
        prefix=f"{API_PREFIX}/content",
        tags=["Content"],
    )

    # Category endpoints
    app.include_router(
        category_handler.router,
        prefix=f"{API_PREFIX}/categories",
        tags=["Categories"],
    )

    # Media endpoints
    app.include_router(
        media_handler.router,
        prefix=f"{API_PREFIX}/media",
        tags=["Media"],
    )
