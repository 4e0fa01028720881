"""
Configuration package for the phrase store.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "get_settings",
    "reload_settings",
]
