"""
Media Entity Model

Metadata for an externally hosted file. The bytes themselves live wherever
``url`` points; the store never holds binary data.
"""

from typing import ClassVar, Optional

from cms.shared.models.base import EntityModel


class Media(EntityModel):
    """
    Media model.

    Attributes:
        filename: Stored file name
        original_name: File name as uploaded by the user
        mime_type: e.g. "image/png"
        size: Size in bytes
        url: Where the file is hosted
        alt: Optional alternative text
    """

    collection_name: ClassVar[str] = "media"

    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    alt: Optional[str] = None
