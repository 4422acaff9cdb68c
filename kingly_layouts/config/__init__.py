"""Configuration package."""

from .settings import KinglyLayoutsSettings, LoggingSettings, get_settings, reset_settings

__all__ = ["KinglyLayoutsSettings", "LoggingSettings", "get_settings", "reset_settings"]
