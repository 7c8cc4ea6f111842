"""Shape introspection: enumerate the readable and writable members of a type.

Usage:
    @dataclass
    class Person:
        name: str
        tags: ObservableCollection[str] | None = None

    shape = describe_shape(Person)
    shape.names()  # ("name", "tags")
    [m.kind for m in shape]  # [SCALAR_OR_REFERENCE, MERGEABLE_COLLECTION]

Discovery rules:
    dataclass       -> dataclasses.fields (none if frozen)
    Pydantic model  -> model_fields (none if frozen, frozen fields skipped)
    other classes   -> annotated attributes along the MRO (ClassVar skipped)
    all             -> plus property objects that have a setter
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from logging import getLogger
from typing import Any, ClassVar, Union, get_args, get_origin, get_type_hints

from objext.collections.binding import BindingList
from objext.collections.observable import ObservableCollection
from objext.core.shape.models import MemberDescriptor, MemberKind, Shape

log = getLogger(__name__)

# The two list kinds used for data binding. Subclasses also qualify.
MERGEABLE_COLLECTION_TYPES: tuple[type, ...] = (ObservableCollection, BindingList)

_shapes: dict[type, Shape] = {}


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _unwrap_optional(hint: Any) -> Any:
    """Reduce ``X | None`` to ``X``; other unions are returned unchanged."""
    if get_origin(hint) in (Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def classify(hint: Any) -> tuple[MemberKind, Any]:
    """Classify a member by its declared type.

    A member is mergeable only when its type is one of the bindable list kinds
    parameterized with exactly one element type.

    Args:
        hint: Resolved type hint of the member (may be None when unknown).

    Returns:
        Tuple of (kind, element type or None).
    """
    hint = _unwrap_optional(hint)
    origin = get_origin(hint)
    if isinstance(origin, type) and issubclass(origin, MERGEABLE_COLLECTION_TYPES):
        args = get_args(hint)
        if len(args) == 1:
            return MemberKind.MERGEABLE_COLLECTION, args[0]
    return MemberKind.SCALAR_OR_REFERENCE, None


def _annotations(cls: type) -> dict[str, Any]:
    """Resolved annotations along the MRO, base classes first.

    Falls back to raw (possibly string) annotations when forward references
    cannot be resolved; such members are then treated as plain references.
    """
    try:
        return get_type_hints(cls)
    except (NameError, TypeError) as e:
        log.debug("Could not resolve annotations of %s: %s", cls.__qualname__, e)
    merged: dict[str, Any] = {}
    for base in reversed(cls.__mro__):
        if base is object:
            continue
        merged.update(inspect.get_annotations(base))
    return merged


def _is_classvar(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(("ClassVar", "typing.ClassVar"))
    return hint is ClassVar or get_origin(hint) is ClassVar


def _field_members(cls: type, hints: dict[str, Any]) -> list[tuple[str, Any]]:
    """Writable data members: fields for dataclasses/models, annotations otherwise."""
    if dataclasses.is_dataclass(cls):
        params = getattr(cls, "__dataclass_params__", None)
        if params is not None and params.frozen:
            return []
        return [(f.name, hints.get(f.name, f.type)) for f in dataclasses.fields(cls)]

    if _is_pydantic(cls):
        if cls.model_config.get("frozen", False):  # type: ignore[attr-defined]
            return []
        return [
            (name, info.annotation)
            for name, info in cls.model_fields.items()  # type: ignore[attr-defined]
            if not info.frozen
        ]

    return [(name, hint) for name, hint in hints.items() if not _is_classvar(hint)]


def _property_members(cls: type) -> list[tuple[str, Any]]:
    """Read-write properties in definition order, base classes first."""
    names: list[str] = []
    for base in reversed(cls.__mro__):
        for name, attr in vars(base).items():
            if isinstance(attr, property) and name not in names:
                names.append(name)

    members = []
    for name in names:
        # Effective attribute: a subclass may have dropped the setter.
        prop = inspect.getattr_static(cls, name)
        if not isinstance(prop, property) or prop.fget is None or prop.fset is None:
            continue
        try:
            hint = get_type_hints(prop.fget).get("return")
        except (NameError, TypeError):
            hint = None
        members.append((name, hint))
    return members


def _build_shape(cls: type) -> Shape:
    hints = _annotations(cls)
    seen: set[str] = set()
    members: list[MemberDescriptor] = []

    for name, hint in _field_members(cls, hints) + _property_members(cls):
        if name.startswith("_") or name in seen:
            continue
        seen.add(name)
        kind, item_type = classify(hint)
        members.append(MemberDescriptor(name=name, kind=kind, item_type=item_type))

    return Shape(cls=cls, members=tuple(members))


def describe_shape(cls: type) -> Shape:
    """Get the shape of a type, introspecting it on first use.

    Args:
        cls: Type whose readable and writable members are enumerated.

    Returns:
        Memoized Shape for cls.

    Raises:
        TypeError: If cls is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    shape = _shapes.get(cls)
    if shape is None:
        # Building is pure, so a concurrent duplicate build is harmless.
        shape = _shapes.setdefault(cls, _build_shape(cls))
        log.debug("Described %s: %s", cls.__qualname__, ", ".join(shape.names()))
    return shape
