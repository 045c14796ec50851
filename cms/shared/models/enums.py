"""
Enums used across the application.
"""

from enum import Enum


class ContentStatus(str, Enum):
    """Publication lifecycle state of a content item."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ContentType(str, Enum):
    """
    Editor a content item was authored with.

    RICHTEXT bodies come from the rich text editor. PAGE bodies are
    page-builder markup and usually travel with a ``pageCSS`` stylesheet.
    """

    RICHTEXT = "richtext"
    PAGE = "page"
