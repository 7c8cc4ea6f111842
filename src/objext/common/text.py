"""String checks."""

from __future__ import annotations


def is_null_or_whitespace(value: str | None) -> bool:
    """True if value is None, empty or only whitespace."""
    return value is None or not value.strip()


def is_null_or_empty(value: str | None) -> bool:
    """True if value is None or empty."""
    return not value
