"""
Configuration package.

This package contains application configuration and settings.
"""

from order_processing.core.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
