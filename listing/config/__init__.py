"""Configuration management."""

from .settings import AppSettings, SearchSettings, SourceSettings, WindowSettings

__all__ = ["AppSettings", "SearchSettings", "SourceSettings", "WindowSettings"]
