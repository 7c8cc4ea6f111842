"""Shape models: member classification and descriptors.

A shape is the ordered set of members of a type that can be both read and
written, each tagged with how a copy treats it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto


class MemberKind(Enum):
    """How a member is transferred from source to target."""

    SCALAR_OR_REFERENCE = auto()  # Assign source value onto target
    MERGEABLE_COLLECTION = auto()  # Clear target collection, refill from source


@dataclass(frozen=True, slots=True)
class MemberDescriptor:
    """A single readable and writable member of a type."""

    name: str
    kind: MemberKind = MemberKind.SCALAR_OR_REFERENCE
    item_type: object | None = None  # Element type for mergeable collections

    @property
    def is_mergeable(self) -> bool:
        return self.kind is MemberKind.MERGEABLE_COLLECTION


@dataclass(frozen=True, slots=True)
class Shape:
    """Ordered member descriptors of a type.

    Immutable - derived once per type and shared by every plan built for it.
    """

    cls: type
    members: tuple[MemberDescriptor, ...] = ()

    def __iter__(self) -> Iterator[MemberDescriptor]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, name: object) -> bool:
        return any(m.name == name for m in self.members)

    def names(self) -> tuple[str, ...]:
        """Member names in declaration order."""
        return tuple(m.name for m in self.members)

    def without(self, excluded: frozenset[str]) -> tuple[MemberDescriptor, ...]:
        """Members whose names are not in excluded, order preserved."""
        return tuple(m for m in self.members if m.name not in excluded)
