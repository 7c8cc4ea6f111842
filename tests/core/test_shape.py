"""Tests for shape introspection.

Critical Invariants:
- Only readable AND writable members are included
- Member order is deterministic (declaration order, bases first)
- Only parameterized bindable lists are mergeable
"""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest
from pydantic import BaseModel, ConfigDict, Field

from objext import BindingList, ObservableCollection
from objext.core.shape import MemberKind, classify, describe_shape


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Customer:
    name: str
    tags: ObservableCollection[str]
    aliases: BindingList[str] | None = None
    orders: list[int] = field(default_factory=list)
    raw: ObservableCollection = field(default_factory=ObservableCollection)
    _secret: str = ""


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


@dataclass
class BaseRecord:
    id: int


@dataclass
class DerivedRecord(BaseRecord):
    label: str = ""


class Account(BaseModel):
    owner: str
    number: str = Field(default="", frozen=True)
    labels: ObservableCollection[str] | None = None


class FrozenAccount(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str


class Gauge:
    """Plain annotated class with properties."""

    kind: ClassVar[str] = "gauge"
    label: str
    reading: float

    def __init__(self, label: str, reading: float) -> None:
        self.label = label
        self.reading = reading
        self._unit = "C"

    @property
    def unit(self) -> str:
        return self._unit

    @unit.setter
    def unit(self, value: str) -> None:
        self._unit = value

    @property
    def display(self) -> str:
        return f"{self.reading}{self._unit}"


class TypedHistory(ObservableCollection[int]):
    pass


@dataclass
class Timeline:
    points: TypedHistory | None = None


def test_dataclass_members_in_declaration_order():
    """Fields come back in declaration order.

    Why: Plan cache keys and copy order must be deterministic.
    """
    shape = describe_shape(Customer)

    assert shape.names() == ("name", "tags", "aliases", "orders", "raw")


def test_private_members_are_excluded():
    assert "_secret" not in describe_shape(Customer)


def test_bindable_lists_are_mergeable():
    """ObservableCollection[T] and BindingList[T] (optional or not) merge in place."""
    kinds = {m.name: m.kind for m in describe_shape(Customer)}

    assert kinds["tags"] is MemberKind.MERGEABLE_COLLECTION
    assert kinds["aliases"] is MemberKind.MERGEABLE_COLLECTION


def test_other_collections_are_replaced():
    """list[T] and unparameterized bindable lists are plain references."""
    kinds = {m.name: m.kind for m in describe_shape(Customer)}

    assert kinds["orders"] is MemberKind.SCALAR_OR_REFERENCE
    assert kinds["raw"] is MemberKind.SCALAR_OR_REFERENCE
    assert kinds["name"] is MemberKind.SCALAR_OR_REFERENCE


def test_mergeable_member_records_item_type():
    tags = next(m for m in describe_shape(Customer) if m.name == "tags")

    assert tags.item_type is str
    assert tags.is_mergeable


def test_frozen_dataclass_has_no_members():
    """Frozen fields cannot be written, so nothing is copyable."""
    assert len(describe_shape(FrozenPoint)) == 0


def test_inherited_fields_come_first():
    assert describe_shape(DerivedRecord).names() == ("id", "label")


def test_pydantic_model_fields():
    """Pydantic fields are members; frozen fields are excluded."""
    shape = describe_shape(Account)

    assert shape.names() == ("owner", "labels")
    labels = next(m for m in shape if m.name == "labels")
    assert labels.kind is MemberKind.MERGEABLE_COLLECTION


def test_frozen_pydantic_model_has_no_members():
    assert len(describe_shape(FrozenAccount)) == 0


def test_plain_class_annotations_and_properties():
    """Annotated attributes plus read-write properties; ClassVar and read-only skipped."""
    shape = describe_shape(Gauge)

    assert shape.names() == ("label", "reading", "unit")
    assert "display" not in shape
    assert "kind" not in shape


def test_subclass_of_bindable_list_is_not_generic():
    """A concrete subclass without a type parameter is replaced, not merged.

    Why: Only generic, single-parameter bindable lists qualify.
    """
    points = describe_shape(Timeline).members[0]

    assert points.kind is MemberKind.SCALAR_OR_REFERENCE


def test_classify_unwraps_optional_only():
    assert classify(ObservableCollection[int] | None)[0] is MemberKind.MERGEABLE_COLLECTION
    assert classify(ObservableCollection[int] | list[int])[0] is MemberKind.SCALAR_OR_REFERENCE
    assert classify(None)[0] is MemberKind.SCALAR_OR_REFERENCE


def test_shape_is_memoized():
    assert describe_shape(Address) is describe_shape(Address)


def test_describe_requires_class():
    with pytest.raises(TypeError, match="Expected a class"):
        describe_shape(Address("a", "b"))  # type: ignore[arg-type]
