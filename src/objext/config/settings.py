"""Configuration settings using Pydantic Settings.

Provides typed defaults for the JSON codec and HTTP helpers with environment
variable support.

Usage:
    from objext.config import JsonSettings, HttpSettings

    # Load from environment variables (OBJEXT_JSON_*, OBJEXT_HTTP_*)
    json_settings = JsonSettings()
    http_settings = HttpSettings()

    # Or override with explicit values
    compact = JsonSettings(indent=None, naming="snake")
"""

from __future__ import annotations

from typing import Literal

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e

NamingPolicy = Literal["camel", "pascal", "snake"]


class JsonSettings(BaseSettings):  # type: ignore[misc]
    """Options for JSON serialization.

    Attributes:
        naming: How member names are written ("camel": fullName,
            "pascal": FullName, "snake": full_name as declared).
        indent: Indentation width, or None for compact output.
        ensure_ascii: Escape non-ASCII characters.

    Environment Variables:
        OBJEXT_JSON_NAMING
        OBJEXT_JSON_INDENT
        OBJEXT_JSON_ENSURE_ASCII
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJEXT_JSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    naming: NamingPolicy = "camel"
    indent: int | None = 2
    ensure_ascii: bool = False


class HttpSettings(BaseSettings):  # type: ignore[misc]
    """Options for HTTP clients created by objext.

    Attributes:
        timeout: Request timeout in seconds.
        base_url: Base URL prepended to relative request URLs.

    Environment Variables:
        OBJEXT_HTTP_TIMEOUT
        OBJEXT_HTTP_BASE_URL
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJEXT_HTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout: float = 30.0
    base_url: str = ""
