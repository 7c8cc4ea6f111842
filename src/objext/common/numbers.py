"""Numeric rounding and formatting."""

from __future__ import annotations

_MAX_DIGITS = 15


def _check_digits(digits: int) -> None:
    if not 0 <= digits <= _MAX_DIGITS:
        raise ValueError(f"digits must be between 0 and {_MAX_DIGITS}, got {digits}")


def round_to(value: float, digits: int = 2) -> float:
    """Round value to digits decimal places (ties to even).

    Raises:
        ValueError: If digits is outside 0-15.
    """
    _check_digits(digits)
    return round(value, digits)


def to_percent(value: float, digits: int = 2) -> str:
    """Format a ratio as a percentage string.

    Examples:
        >>> to_percent(0.1234)
        '12.34 %'
        >>> to_percent(0.12345, 3)
        '12.345 %'
        >>> to_percent(1, 0)
        '100 %'
    """
    percent = round_to(value * 100, digits)
    text = str(int(percent)) if float(percent).is_integer() else str(percent)
    return f"{text} %"
