"""
Media-related Pydantic schemas.
"""

from typing import Optional

from pydantic import Field

from cms.shared.schemas.common import BaseSchema, PartialSchema


class MediaCreate(BaseSchema):
    """Request to register a media file hosted elsewhere."""

    filename: str
    original_name: str
    mime_type: str
    size: int = Field(ge=0, description="Size in bytes")
    url: str = Field(description="Where the file is hosted")
    alt: Optional[str] = None


class MediaUpdate(PartialSchema):
    """Request to update media metadata."""

    filename: Optional[str] = None
    original_name: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = Field(default=None, ge=0)
    url: Optional[str] = None
    alt: Optional[str] = None
