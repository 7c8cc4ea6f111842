"""Human-readable descriptions for enum members.

Usage:
    @describe(PENDING="Waiting for payment", PAID="Paid in full")
    class OrderStatus(Enum):
        PENDING = 1
        PAID = 2
        SHIPPED = 3

    get_enum_description(OrderStatus.PAID)     # "Paid in full"
    get_enum_description(OrderStatus.SHIPPED)  # "SHIPPED"
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

_DESCRIPTIONS_ATTR = "__member_descriptions__"


def describe[E: type[Enum]](**descriptions: str) -> Callable[[E], E]:
    """Attach descriptions to enum members by name.

    Args:
        **descriptions: Member name to description.

    Returns:
        Class decorator.

    Raises:
        ValueError: If a name is not a member of the decorated enum.
    """

    def decorator(cls: E) -> E:
        unknown = sorted(set(descriptions) - set(cls.__members__))
        if unknown:
            raise ValueError(f"{cls.__name__} has no members named {', '.join(unknown)}")
        inherited = getattr(cls, _DESCRIPTIONS_ATTR, {})
        setattr(cls, _DESCRIPTIONS_ATTR, {**inherited, **descriptions})
        return cls

    return decorator


def get_enum_description(member: Enum) -> str:
    """Get the description of an enum member.

    Looks up, in order: a description attached with @describe, a
    ``description`` string attribute on the member, the member's name.
    """
    name = member.name if member.name is not None else str(member.value)
    descriptions: dict[str, str] = getattr(type(member), _DESCRIPTIONS_ATTR, {})
    if name in descriptions:
        return descriptions[name]
    description = getattr(member, "description", None)
    if isinstance(description, str):
        return description
    return name
