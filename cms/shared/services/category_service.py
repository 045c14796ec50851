"""
Category Service

Business logic for category operations. Categories are listed in the order
they were created.

Content.category holds a category slug, but nothing checks that the slug
exists, and deleting a category leaves its content untouched.
"""

from typing import Optional

from cms.shared.core.exceptions import CategoryNotFoundError
from cms.shared.db.store import MemoryStore
from cms.shared.models.category import Category
from cms.shared.repositories.category_repository import CategoryRepository
from cms.shared.services.base import BaseService


class CategoryService(BaseService[Category]):
    """Service for category CRUD and slug lookup."""

    not_found_error = CategoryNotFoundError

    def __init__(self, store: MemoryStore) -> None:
        self.category_repo = CategoryRepository(store)
        super().__init__(self.category_repo)

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        """Get a category by slug, or None."""
        return await self.category_repo.get_by_slug(slug)
