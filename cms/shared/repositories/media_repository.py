"""
Media Repository

Store operations for Media metadata. Only the generic CRUD set is needed.
"""

from cms.shared.db.store import MemoryStore
from cms.shared.models.media import Media
from cms.shared.repositories.base import BaseRepository


class MediaRepository(BaseRepository[Media]):
    """Repository for Media store operations."""

    def __init__(self, store: MemoryStore) -> None:
        super().__init__(Media, store)
