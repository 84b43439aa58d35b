"""Configuration management for ddlkit.

Usage:
    >>> from ddlkit.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.log_level)
"""

from ddlkit.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
