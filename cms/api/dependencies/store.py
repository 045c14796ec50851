"""
Store Dependency

FastAPI dependency that hands route handlers the application's MemoryStore.

The store is created once in create_application() and attached to
``app.state.store``; nothing reads it from a module global, so tests can
build an app around their own store.

Usage:
======
    from cms.api.dependencies.store import StoreDep

    @router.get("/stats")
    async def stats(store: StoreDep):
        return store.counts()
"""

from typing import Annotated

from fastapi import Depends, Request

from cms.shared.db.store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """
    FastAPI dependency for the application store.

    Returns:
        MemoryStore: The store attached to the running application
    """
    return request.app.state.store


# Type alias for cleaner route signatures
StoreDep = Annotated[MemoryStore, Depends(get_store)]
