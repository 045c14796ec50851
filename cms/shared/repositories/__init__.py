"""
Repository Pattern Implementations

This module provides the Repository pattern for store operations.
Repositories encapsulate collection access and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── ContentRepository          ← Slug, category, status, search
         ├── CategoryRepository         ← Slug lookup
         └── MediaRepository            ← CRUD only

Usage Example:
==============
    from cms.shared.repositories import ContentRepository

    async def find_welcome_post(store: MemoryStore):
        repo = ContentRepository(store)
        return await repo.get_by_slug("welcome-to-your-cms")
"""

from cms.shared.repositories.base import BaseRepository
from cms.shared.repositories.content_repository import ContentRepository
from cms.shared.repositories.category_repository import CategoryRepository
from cms.shared.repositories.media_repository import MediaRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "ContentRepository",
    "CategoryRepository",
    "MediaRepository",
]
