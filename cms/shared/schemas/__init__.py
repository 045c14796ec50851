"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, error responses, health
- content: Content create/update bodies
- category: Category create/update bodies
- media: Media create/update bodies

Stored entities (cms.shared.models) double as response models.

Usage:
======
    from cms.shared.schemas import ContentCreate, ContentUpdate, ErrorResponse
"""

from cms.shared.schemas.common import (
    BaseSchema,
    PartialSchema,
    ErrorResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
    HealthResponse,
)
from cms.shared.schemas.content import ContentCreate, ContentUpdate
from cms.shared.schemas.category import CategoryCreate, CategoryUpdate
from cms.shared.schemas.media import MediaCreate, MediaUpdate

__all__ = [
    # Common
    "BaseSchema",
    "PartialSchema",
    "ErrorResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "HealthResponse",
    # Content
    "ContentCreate",
    "ContentUpdate",
    # Category
    "CategoryCreate",
    "CategoryUpdate",
    # Media
    "MediaCreate",
    "MediaUpdate",
]
