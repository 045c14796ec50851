"""
Content Entity Model

A single piece of publishable content: a rich text post or a page-builder page.

SAMPLE CONTENT RECORD (wire format):
┌──────────────────────────────────────────────────────────────────────────────┐
│ id            │ 550e8400-e29b-41d4-a716-446655440000                         │
│ title         │ "Welcome to Your CMS"                                        │
│ content       │ "<h1>Welcome ...</h1>"                                       │
│ slug          │ "welcome-to-your-cms"                                        │
│ category      │ "blog"                  (soft reference to Category.slug)    │
│ tags          │ ["welcome", "cms", "getting-started"]                        │
│ status        │ "published"                                                  │
│ contentType   │ "richtext"                                                   │
│ createdAt     │ 2024-01-15T10:30:00Z                                         │
│ updatedAt     │ 2024-01-16T14:45:30Z                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from cms.shared.models.base import EntityModel, TimestampMixin
from cms.shared.models.enums import ContentStatus, ContentType


class Content(TimestampMixin, EntityModel):
    """
    Content model.

    Attributes:
        title: Display title
        content: Body payload; opaque string, usually HTML
        excerpt: Optional short summary
        slug: URL-safe identifier (uniqueness is not enforced)
        category: Slug of a Category; never checked against the categories collection
        tags: Ordered list of free-form tags
        status: draft / published / archived
        featured_image: Optional image URL
        content_type: richtext or page
        page_css: Stylesheet for page-builder content
    """

    collection_name: ClassVar[str] = "content"

    title: str
    content: str
    excerpt: Optional[str] = None
    slug: str
    category: str
    tags: List[str]
    status: ContentStatus
    featured_image: Optional[str] = None
    content_type: ContentType = ContentType.RICHTEXT
    page_css: Optional[str] = Field(default=None, alias="pageCSS")
