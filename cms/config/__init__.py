"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from cms.config.settings import settings

    port = settings.PORT
    seed = settings.SEED_SAMPLE_DATA
"""

from cms.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
