"""
Media Service

Business logic for media metadata. Newest uploads are listed first.
"""

from typing import List

from cms.shared.core.exceptions import MediaNotFoundError
from cms.shared.db.store import MemoryStore
from cms.shared.models.media import Media
from cms.shared.repositories.media_repository import MediaRepository
from cms.shared.services.base import BaseService


class MediaService(BaseService[Media]):
    """Service for media CRUD."""

    not_found_error = MediaNotFoundError

    def __init__(self, store: MemoryStore) -> None:
        super().__init__(MediaRepository(store))

    async def list_all(self) -> List[Media]:
        """All media, most recently created first."""
        return await self.repo.list(order_by="created_at", order_desc=True)
