"""Pure functions building and running copy plan steps."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from objext.core.shape import MemberDescriptor, Shape
from objext.sync.models import CopyPlan, PlanKey, Step

# Value of a member that is declared but was never assigned.
UNSET = object()


def exclusion_key(excluded: Iterable[str]) -> str:
    """Canonical, order-independent form of an exclusion set.

    Args:
        excluded: Member names.

    Returns:
        Unique names sorted and joined with ``|``.
    """
    return "|".join(sorted(set(excluded)))


def plan_key(excluded: Iterable[str] = (), merge_collections: bool = False) -> PlanKey:
    """Build the cache key for a plan variant."""
    return PlanKey(excluded=exclusion_key(excluded), merge_collections=merge_collections)


def merge_collection(target: Any, source: Iterable[Any]) -> None:
    """Replace the contents of target with the items of source, in place.

    Source items are snapshotted before target is cleared, so target and
    source may be the same collection.

    Args:
        target: Collection supporting clear() and append().
        source: Items to copy, in iteration order.
    """
    items = list(source)
    target.clear()
    for item in items:
        target.append(item)


def assign_member(name: str) -> Step:
    """Step replacing target.<name> with source.<name>.

    Does nothing if source has no value for the member.
    """

    def assign(target: Any, source: Any) -> None:
        value = getattr(source, name, UNSET)
        if value is not UNSET:
            setattr(target, name, value)

    return assign


def merge_member(name: str) -> Step:
    """Step merging source.<name> into the collection held by target.<name>.

    Does nothing unless both sides hold a collection.
    """

    def merge(target: Any, source: Any) -> None:
        target_items = getattr(target, name, None)
        source_items = getattr(source, name, None)
        if target_items is None or source_items is None:
            return
        merge_collection(target_items, source_items)

    return merge


def build_step(member: MemberDescriptor, merge_collections: bool) -> Step:
    if merge_collections and member.is_mergeable:
        return merge_member(member.name)
    return assign_member(member.name)


def build_plan(
    shape: Shape,
    excluded: frozenset[str] = frozenset(),
    merge_collections: bool = False,
) -> CopyPlan:
    """Compile the copy procedure for a shape.

    Args:
        shape: Members of the type to copy.
        excluded: Member names neither read nor written.
        merge_collections: Merge bindable collections instead of replacing them.

    Returns:
        CopyPlan with one step per included member (no steps if none remain).
    """
    members = shape.without(excluded)
    return CopyPlan(
        cls=shape.cls,
        excluded=excluded,
        merge_collections=merge_collections,
        members=tuple(m.name for m in members),
        steps=tuple(build_step(m, merge_collections) for m in members),
    )
