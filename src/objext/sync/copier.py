"""Copy member values from one instance onto another, in place.

Usage:
    @dataclass
    class Person:
        name: str
        age: int
        tags: ObservableCollection[str] | None = None

    copy_properties_fast(view_model, loaded)                     # replace everything
    copy_properties_excluding(view_model, loaded, "age")         # keep view_model.age
    copy_properties_excluding_selected(view_model, loaded, lambda p: p.age)
    copy_properties_merging_collections(view_model, loaded)      # keep tags instance

Every function:
    - raises InvalidArgumentError if target or source is None
    - does nothing if target and source are the same instance
    - raises TypeError if target and source are unrelated types
    - skips members declared on the class but never assigned on source
"""

from __future__ import annotations

from typing import Any

from objext.core.errors import require
from objext.core.selector import MemberSelector, resolve_member_names
from objext.core.shape import describe_shape
from objext.sync.cache import get_plan_cache
from objext.sync.operations import UNSET


def _copy_type(target: Any, source: Any) -> type | None:
    """Validate arguments and pick the type whose members are copied.

    Returns:
        The less derived of the two instance types, or None when target and
        source are the same instance.

    Raises:
        InvalidArgumentError: If target or source is None.
        TypeError: If neither instance is an instance of the other's type.
    """
    require(target, "target")
    require(source, "source")

    if target is source:
        return None

    if isinstance(source, type(target)):
        return type(target)
    if isinstance(target, type(source)):
        return type(source)
    raise TypeError(
        f"Cannot copy {type(source).__name__} onto {type(target).__name__}: "
        f"instances must share a type"
    )


def copy_properties(target: Any, source: Any) -> None:
    """Copy every readable and writable member of source onto target.

    Walks the memoized shape of the type on each call. Collections are
    replaced, not merged. Members source never assigned are skipped.

    Args:
        target: Instance receiving values.
        source: Instance providing values. Never modified.
    """
    cls = _copy_type(target, source)
    if cls is None:
        return

    for member in describe_shape(cls):
        value = getattr(source, member.name, UNSET)
        if value is not UNSET:
            setattr(target, member.name, value)


def copy_properties_fast(target: Any, source: Any) -> None:
    """Copy every readable and writable member using the cached plan.

    Same result as copy_properties; the per-member work is prepared once per
    type and reused.
    """
    cls = _copy_type(target, source)
    if cls is None:
        return

    get_plan_cache().get_plan(cls)(target, source)


def copy_properties_excluding(target: Any, source: Any, *excluded: str) -> None:
    """Copy members using the cached plan, skipping the named members.

    Excluded members are neither read from source nor written to target.
    Collections are replaced, not merged.

    Args:
        target: Instance receiving values.
        source: Instance providing values.
        *excluded: Member names to skip. Unknown names are ignored.
    """
    cls = _copy_type(target, source)
    if cls is None:
        return

    get_plan_cache().get_plan(cls, excluded)(target, source)


def copy_properties_excluding_selected(
    target: Any, source: Any, *selectors: MemberSelector
) -> None:
    """Copy members using the cached plan, skipping the selected members.

    Each selector must access a member directly, e.g. ``lambda p: p.age``.
    Selectors that do not are ignored.

    Args:
        target: Instance receiving values.
        source: Instance providing values.
        *selectors: Callables selecting members to skip.
    """
    cls = _copy_type(target, source)
    if cls is None:
        return

    excluded = resolve_member_names(selectors)
    get_plan_cache().get_plan(cls, excluded)(target, source)


def copy_properties_merging_collections(target: Any, source: Any) -> None:
    """Copy members, merging bindable collections instead of replacing them.

    Members typed ``ObservableCollection[T]`` or ``BindingList[T]`` keep the
    target's collection instance: it is cleared and refilled with the source's
    items, so existing subscribers stay attached. If either side holds None
    for such a member, the member is left untouched. All other members are
    assigned as in copy_properties_fast.
    """
    cls = _copy_type(target, source)
    if cls is None:
        return

    get_plan_cache().get_plan(cls, merge_collections=True)(target, source)
