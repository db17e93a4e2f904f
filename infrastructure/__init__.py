"""
Infrastructure layer - Configuration for the ambient services.

Contains:
- Settings
"""

from .settings import LoggingSettings, Settings, get_settings


__all__ = [
    "LoggingSettings",
    "Settings",
    "get_settings",
]
