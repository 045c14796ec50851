"""
Category-related Pydantic schemas.
"""

from typing import Optional

from cms.shared.schemas.common import BaseSchema, PartialSchema


class CategoryCreate(BaseSchema):
    """Request to create a category."""

    name: str
    description: Optional[str] = None
    color: str
    slug: str


class CategoryUpdate(PartialSchema):
    """Request to update a category."""

    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    slug: Optional[str] = None
