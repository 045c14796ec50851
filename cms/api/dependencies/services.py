"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold a store reference)
- All requests share the one application store
- The store lock serializes access to the collections

Usage:
======
    from cms.api.dependencies.services import get_content_service

    @router.get("/{content_id}")
    async def get_content(
        content_id: str,
        content_service: ContentService = Depends(get_content_service),
    ):
        return await content_service.get(content_id)
"""

from fastapi import Depends

from cms.api.dependencies.store import get_store
from cms.shared.db.store import MemoryStore
from cms.shared.services.content_service import ContentService
from cms.shared.services.category_service import CategoryService
from cms.shared.services.media_service import MediaService


async def get_content_service(
    store: MemoryStore = Depends(get_store),
) -> ContentService:
    """
    Dependency to get ContentService instance.

    Creates a new service instance per request over the application store.
    """
    return ContentService(store)


async def get_category_service(
    store: MemoryStore = Depends(get_store),
) -> CategoryService:
    """
    Dependency to get CategoryService instance.
    """
    return CategoryService(store)


async def get_media_service(
    store: MemoryStore = Depends(get_store),
) -> MediaService:
    """
    Dependency to get MediaService instance.
    """
    return MediaService(store)
