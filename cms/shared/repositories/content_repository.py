"""
Content Repository

Store operations specific to the Content model.

Common Operations:
==================
- get_by_slug()        → Find content by its URL slug
- list_by_category()   → All content pointing at a category slug
- list_by_status()     → All content in a publication state
- search()             → Case-insensitive match on title, body and tags
"""

from typing import List, Optional

from cms.shared.db.store import MemoryStore
from cms.shared.models.content import Content
from cms.shared.repositories.base import BaseRepository


class ContentRepository(BaseRepository[Content]):
    """
    Repository for Content store operations.

    Filtered queries return matches in insertion order, unlike
    ContentService.list_content() which orders by last update.
    """

    def __init__(self, store: MemoryStore) -> None:
        """
        Initialize ContentRepository.

        Args:
            store: Application MemoryStore
        """
        super().__init__(Content, store)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_slug(self, slug: str) -> Optional[Content]:
        """
        Get content by slug.

        Slugs are not unique; the earliest created match wins.

        Args:
            slug: URL slug, e.g. "welcome-to-your-cms"

        Returns:
            Content if found, None otherwise
        """
        return await self.find_one(lambda content: content.slug == slug)

    async def list_by_category(self, category: str) -> List[Content]:
        """
        Get all content in a category.

        Args:
            category: Category slug (exact match)
        """
        return await self.list(filters={"category": category})

    async def list_by_status(self, status: str) -> List[Content]:
        """Get all content with the given status."""
        return await self.list(filters={"status": status})

    async def search(self, query: str) -> List[Content]:
        """
        Search content by free text.

        A record matches when the lowercased query is a substring of its
        title, its body, or any one of its tags.

        Args:
            query: Text to look for

        Returns:
            Matching content in insertion order

        Example:
            await repo.search("cms")  # matches title "Welcome to Your CMS"
        """
        needle = query.lower()

        def matches(content: Content) -> bool:
            return (
                needle in content.title.lower()
                or needle in content.content.lower()
                or any(needle in tag.lower() for tag in content.tags)
            )

        return await self.find(matches)
