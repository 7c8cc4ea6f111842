"""Small standalone helpers: text checks, numbers, enum descriptions, logging."""

from objext.common.enums import describe, get_enum_description
from objext.common.logging import configure_logging
from objext.common.numbers import round_to, to_percent
from objext.common.text import is_null_or_empty, is_null_or_whitespace

__all__ = [
    # Text
    "is_null_or_whitespace",
    "is_null_or_empty",
    # Numbers
    "round_to",
    "to_percent",
    # Enums
    "describe",
    "get_enum_description",
    # Logging
    "configure_logging",
]
