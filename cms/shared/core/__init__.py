"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from cms.shared.core.logging import logger, get_logger
    from cms.shared.core.exceptions import CMSException, NotFoundError

    logger.info("Content created", content_id=content.id)
"""

from cms.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from cms.shared.core.exceptions import (
    CMSException,
    NotFoundError,
    ContentNotFoundError,
    CategoryNotFoundError,
    MediaNotFoundError,
    ValidationError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "CMSException",
    "NotFoundError",
    "ContentNotFoundError",
    "CategoryNotFoundError",
    "MediaNotFoundError",
    "ValidationError",
]
