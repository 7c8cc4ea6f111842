"""Shared exception types."""

from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing (None)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name


def require(value: Any, name: str) -> None:
    """Raise InvalidArgumentError if value is None.

    Args:
        value: Argument value to check.
        name: Argument name used in the error message.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(name)
