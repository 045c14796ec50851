"""
Base Model Classes

This module provides the foundational class for every entity held in the
in-memory store, plus the timestamp mixin for entities that track edits.

Model Hierarchy:
================
    EntityModel             ← id + created_at, camelCase wire aliases
       │
       └── TimestampMixin   ← updated_at, bumped on every mutation

Usage:
======
    from cms.shared.models.base import EntityModel, TimestampMixin

    class Category(EntityModel):
        collection_name: ClassVar[str] = "categories"
        name: str

    class Content(TimestampMixin, EntityModel):
        collection_name: ClassVar[str] = "content"
        title: str

    category = Category.new(name="Blog")
    category.id          # "6f1c..." (uuid4)
    category.created_at  # 2024-01-15T10:30:00+00:00
"""

import uuid
from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class EntityModel(BaseModel):
    """
    Base class for all stored entities.

    Provides:
    - id: uuid4 string, assigned once by ``new()`` and never reassigned
    - created_at: set once by ``new()``
    - camelCase aliases on the wire (``createdAt``), snake_case in Python

    Subclasses name the store collection they live in through
    ``collection_name``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    collection_name: ClassVar[str]

    id: str
    created_at: datetime

    @classmethod
    def has_field(cls, name: str) -> bool:
        return name in cls.model_fields

    @classmethod
    def new(cls, **fields: Any) -> "EntityModel":
        """
        Build a fresh entity with a generated id and creation timestamps.

        A single clock read is used, so ``created_at == updated_at`` for
        entities that carry both.
        """
        now = utcnow()
        stamps: dict[str, Any] = {"created_at": now}
        if cls.has_field("updated_at"):
            stamps["updated_at"] = now
        return cls(id=str(uuid.uuid4()), **fields, **stamps)


class TimestampMixin(BaseModel):
    """
    Mixin that adds edit tracking to entities.

    updated_at starts equal to created_at and is refreshed by the
    repository on every update.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    updated_at: datetime
