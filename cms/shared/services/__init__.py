"""
Business Logic Services

Services encapsulate business logic and sit between handlers and repositories.

Service Pattern:
================
    Handler → Service → Repository → MemoryStore

Services should:
- Contain business logic (listing rules, not-found policy)
- Log mutations
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- ContentService: Content CRUD, slug lookup, filtered listing and search
- CategoryService: Category CRUD and slug lookup
- MediaService: Media metadata CRUD

Usage:
======
    from cms.shared.services import ContentService

    service = ContentService(store)
    post = await service.create(ContentCreate(...))
"""

from cms.shared.services.base import BaseService
from cms.shared.services.content_service import ContentService
from cms.shared.services.category_service import CategoryService
from cms.shared.services.media_service import MediaService

__all__ = [
    "BaseService",
    "ContentService",
    "CategoryService",
    "MediaService",
]
