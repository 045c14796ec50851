"""
Content-related Pydantic schemas.
"""

from typing import List, Optional

from pydantic import Field

from cms.shared.models.enums import ContentStatus, ContentType
from cms.shared.schemas.common import BaseSchema, PartialSchema


class ContentCreate(BaseSchema):
    """Request to create content. Everything except id and timestamps."""

    title: str
    content: str = Field(description="Body payload, usually HTML")
    excerpt: Optional[str] = None
    slug: str = Field(description="URL-safe identifier")
    category: str = Field(description="Slug of the category this content belongs to")
    tags: List[str]
    status: ContentStatus
    featured_image: Optional[str] = None
    content_type: ContentType = ContentType.RICHTEXT
    page_css: Optional[str] = Field(default=None, alias="pageCSS")


class ContentUpdate(PartialSchema):
    """Request to update content. Only supplied fields change."""

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    slug: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[ContentStatus] = None
    featured_image: Optional[str] = None
    content_type: Optional[ContentType] = None
    page_css: Optional[str] = Field(default=None, alias="pageCSS")
