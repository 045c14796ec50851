"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses. Nothing
propagates past this boundary.

Error Response Format:
======================
    {"error": "Content not found"}

    {
        "error": "Invalid data",
        "details": [{"loc": ["body", "title"], "msg": "Field required", "type": "missing"}]
    }

Exception Handling:
===================
1. CMSException subclasses → Use their status_code and to_dict()
2. Request validation (FastAPI / pydantic) → 400 with field-level details
3. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from cms.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from cms.shared.core.exceptions import CMSException, ValidationError as CMSValidationError
from cms.shared.core.logging import logger


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Reduce pydantic error dicts to JSON-safe ``loc``/``msg``/``type`` entries.

    pydantic puts the raw input and exception objects in ``input``/``ctx``,
    which are not always serializable and may echo request data back.
    """
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(CMSException)
    async def cms_exception_handler(
        request: Request,
        exc: CMSException,
    ) -> JSONResponse:
        """
        Handle CMS-specific exceptions.

        All custom exceptions inherit from CMSException and include:
        - status_code: HTTP status code
        - message: Human-readable message
        - details: Optional field-level list
        """
        logger.warning(
            "Application error",
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request body / query validation errors.

        FastAPI answers these with 422 by default; the API contract is 400.
        The store is never reached when this fires.
        """
        details = format_validation_errors(exc.errors())
        logger.warning(
            "Validation error",
            errors=details,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content=CMSValidationError(details=details).to_dict(),
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle pydantic validation errors raised inside handlers.
        """
        details = format_validation_errors(exc.errors())
        logger.warning(
            "Validation error",
            errors=details,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content=CMSValidationError(details=details).to_dict(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )
