"""
Content Service

Business logic for content operations.

LISTING RULES:
- With no filter, content is ordered by most recently updated first
- At most one filter is applied, in priority order: search > category > status
- Filtered results keep insertion order
- Empty filter values count as absent

Usage:
======
    from cms.shared.services.content_service import ContentService

    service = ContentService(store)
    posts = await service.list_content(category="blog")
"""

from typing import List, Optional

from cms.shared.core.exceptions import ContentNotFoundError
from cms.shared.db.store import MemoryStore
from cms.shared.models.content import Content
from cms.shared.repositories.content_repository import ContentRepository
from cms.shared.services.base import BaseService


class ContentService(BaseService[Content]):
    """
    Service for content-related business logic.

    Handles:
    - CRUD with partial-update merge semantics
    - Slug lookup
    - Filtered listing (search, category, status)
    """

    not_found_error = ContentNotFoundError

    def __init__(self, store: MemoryStore) -> None:
        """
        Initialize ContentService.

        Args:
            store: Application MemoryStore
        """
        self.content_repo = ContentRepository(store)
        super().__init__(self.content_repo)

    async def list_all(self) -> List[Content]:
        """All content, most recently updated first."""
        return await self.content_repo.list(order_by="updated_at", order_desc=True)

    async def list_content(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Content]:
        """
        List content, honouring at most one filter.

        Args:
            category: Category slug to match exactly
            status: Publication state to match; unknown values match nothing
            search: Free-text query (title, body, tags)

        Returns:
            Matching content
        """
        if search:
            return await self.content_repo.search(search)
        if category:
            return await self.content_repo.list_by_category(category)
        if status:
            return await self.content_repo.list_by_status(status)
        return await self.list_all()

    async def get_by_slug(self, slug: str) -> Optional[Content]:
        """Get content by slug, or None."""
        return await self.content_repo.get_by_slug(slug)
