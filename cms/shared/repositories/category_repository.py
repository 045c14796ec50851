"""
Category Repository

Store operations specific to the Category model.
"""

from typing import Optional

from cms.shared.db.store import MemoryStore
from cms.shared.models.category import Category
from cms.shared.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category store operations."""

    def __init__(self, store: MemoryStore) -> None:
        super().__init__(Category, store)

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        """
        Get a category by slug.

        Slug uniqueness is not enforced; the earliest created match wins.
        """
        return await self.find_one(lambda category: category.slug == slug)
