"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Store: get_store(), StoreDep
- Services: get_*_service() functions

Usage:
======
    from cms.api.dependencies import StoreDep, get_content_service
"""

from cms.api.dependencies.store import (
    get_store,
    StoreDep,
)
from cms.api.dependencies.services import (
    get_content_service,
    get_category_service,
    get_media_service,
)

__all__ = [
    # Store
    "get_store",
    "StoreDep",
    # Services
    "get_content_service",
    "get_category_service",
    "get_media_service",
]
