"""
Category Entity Model

Groups content. Content items point at a category by its slug.

SAMPLE CATEGORY RECORD (wire format):
┌──────────────────────────────────────────────────────────────────────────────┐
│ id          │ 550e8400-e29b-41d4-a716-446655440000                           │
│ name        │ "Blog"                                                         │
│ description │ "Blog posts and articles"                                      │
│ color       │ "#3B82F6"                                                      │
│ slug        │ "blog"                                                         │
│ createdAt   │ 2024-01-15T10:30:00Z                                           │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import ClassVar, Optional

from cms.shared.models.base import EntityModel


class Category(EntityModel):
    """Category model. Has no updated_at; edits leave timestamps untouched."""

    collection_name: ClassVar[str] = "categories"

    name: str
    description: Optional[str] = None
    color: str
    slug: str
