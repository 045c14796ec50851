"""
CMS Entity Models

This package contains the pydantic models for every entity held in the store.

Models Overview:
================
- Base: EntityModel and TimestampMixin
- Content: Rich text posts and page-builder pages
- Category: Groups content by slug
- Media: Metadata for externally hosted files

Usage:
======
    from cms.shared.models import Content, ContentStatus

    drafts = [c for c in items if c.status == ContentStatus.DRAFT]
"""

from cms.shared.models.base import EntityModel, TimestampMixin, utcnow
from cms.shared.models.enums import ContentStatus, ContentType
from cms.shared.models.content import Content
from cms.shared.models.category import Category
from cms.shared.models.media import Media

__all__ = [
    # Base classes and mixins
    "EntityModel",
    "TimestampMixin",
    "utcnow",
    # Enums
    "ContentStatus",
    "ContentType",
    # Entities
    "Content",
    "Category",
    "Media",
]
