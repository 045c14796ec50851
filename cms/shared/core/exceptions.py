"""
Custom Exceptions

Application-specific exceptions with HTTP status codes.

Exception Hierarchy:
====================
    CMSException (base, 500)
       │
       ├── NotFoundError (404)          ← Referenced entity does not exist
       │      ├── ContentNotFoundError
       │      ├── CategoryNotFoundError
       │      └── MediaNotFoundError
       └── ValidationError (400)        ← Invalid input data

Usage:
======
    from cms.shared.core.exceptions import ContentNotFoundError

    raise ContentNotFoundError(content_id)
    # Results in: 404 {"error": "Content not found"}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": "Content not found"
    }

    Validation failures additionally carry a field-level list:
    {
        "error": "Invalid data",
        "details": [{"loc": ["body", "title"], "msg": "Field required", "type": "missing"}]
    }
"""

from typing import Any, Optional


class CMSException(Exception):
    """
    Base exception for all CMS application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        details: Optional field-level error list, only rendered when present
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            ``{"error": message}`` plus ``"details"`` when there are any
        """
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(CMSException):
    """
    Resource not found error (404 Not Found).

    The id is kept on the exception for logging but not echoed to the client.

    Example:
        raise NotFoundError("Content", content_id)
        # Message: "Content not found"
    """

    def __init__(self, resource: str, resource_id: Optional[str] = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(message=f"{resource} not found", status_code=404)


class ContentNotFoundError(NotFoundError):
    """Content not found error."""

    def __init__(self, content_id: Optional[str] = None) -> None:
        super().__init__(resource="Content", resource_id=content_id)


class CategoryNotFoundError(NotFoundError):
    """Category not found error."""

    def __init__(self, category_id: Optional[str] = None) -> None:
        super().__init__(resource="Category", resource_id=category_id)


class MediaNotFoundError(NotFoundError):
    """Media not found error."""

    def __init__(self, media_id: Optional[str] = None) -> None:
        super().__init__(resource="Media", resource_id=media_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(CMSException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Invalid data",
        details: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message=message, status_code=400, details=details)
