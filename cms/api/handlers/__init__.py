"""
API Handlers

Route handlers for the CMS API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Raise NotFoundError where the contract returns 404

All business logic is delegated to the service layer.
"""

from cms.api.handlers import (
    category_handler,
    content_handler,
    health_handler,
    media_handler,
)

__all__ = [
    "category_handler",
    "content_handler",
    "health_handler",
    "media_handler",
]
