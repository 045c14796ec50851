"""
Common Schemas

Shared schemas used across the application for consistent API requests and responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, populate_by_name)
- PartialSchema: Base for PATCH bodies, rejects null on every field
- Error Responses: ErrorResponse, ValidationErrorResponse
- HealthResponse: Liveness check payload

Usage:
======
    from cms.shared.schemas.common import BaseSchema, PartialSchema

    class CategoryCreate(BaseSchema):
        name: str
        color: str

    class CategoryUpdate(PartialSchema):
        name: Optional[str] = None
        color: Optional[str] = None
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cms.shared.models.base import utcnow


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request schemas should inherit from this class.
    Provides:
    - alias_generator: camelCase keys on the wire (``contentType``)
    - populate_by_name: snake_case keys are accepted as well
    - unknown keys (including ``id``/``createdAt``) are ignored
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PartialSchema(BaseSchema):
    """
    Base for partial-update bodies.

    Every field is optional so that only supplied keys are merged (read them
    with ``model_dump(exclude_unset=True)``). A key may be omitted but never
    sent as ``null``.
    """

    @field_validator("*")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may be omitted but cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Fields explicitly present in the request, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {"error": "Content not found"}
    """

    error: str = Field(description="Human-readable error message")


class ValidationErrorDetail(BaseModel):
    """One field-level validation failure."""

    loc: list[Any] = Field(description="Path to the offending value, e.g. ['body', 'title']")
    msg: str
    type: str


class ValidationErrorResponse(ErrorResponse):
    """
    Error response for rejected request bodies (400).

    Example:
        {
            "error": "Invalid data",
            "details": [{"loc": ["body", "title"], "msg": "Field required", "type": "missing"}]
        }
    """

    details: list[ValidationErrorDetail] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "ok"
    timestamp: datetime = Field(default_factory=utcnow)
    version: Optional[str] = None
