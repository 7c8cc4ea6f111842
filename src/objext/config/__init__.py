"""Configuration module using Pydantic Settings.

Provides typed configuration for the JSON codec and HTTP helpers with
environment variable support.

Usage:
    from objext.config import JsonSettings, HttpSettings

    settings = JsonSettings(indent=None)
    http = HttpSettings(timeout=5.0)
"""

from objext.config.settings import HttpSettings, JsonSettings, NamingPolicy

__all__ = [
    "JsonSettings",
    "HttpSettings",
    "NamingPolicy",
]
