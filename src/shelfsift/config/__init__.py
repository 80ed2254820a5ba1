"""Configuration management."""

from shelfsift.config.settings import GoogleBooksSettings, Settings

__all__ = ["GoogleBooksSettings", "Settings"]
