"""Tests for property copying.

Critical Invariants:
- Same instance is a no-op; None arguments fail before any write
- Excluded members are neither read nor written
- Merging keeps the target's collection instance and its subscribers
"""

import operator
from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel, ConfigDict

from objext import (
    BindingList,
    CollectionChangeAction,
    InvalidArgumentError,
    ListChangedType,
    ObservableCollection,
    copy_properties,
    copy_properties_excluding,
    copy_properties_excluding_selected,
    copy_properties_fast,
    copy_properties_merging_collections,
)

ALL_COPIERS = [copy_properties, copy_properties_fast, copy_properties_merging_collections]


@dataclass
class Person:
    name: str
    age: int
    tags: ObservableCollection[str] | None = None


@dataclass
class Employee(Person):
    badge: int = 0


@dataclass
class Invoice:
    number: str


class Account(BaseModel):
    owner: str
    balance: float = 0.0
    labels: ObservableCollection[str] | None = None


class CheckedAccount(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    owner: str
    labels: ObservableCollection[str] | None = None


class ViewModel:
    """Declares tags but only assigns it when given."""

    name: str
    tags: ObservableCollection[str] | None

    def __init__(self, name: str, tags: ObservableCollection[str] | None = None) -> None:
        self.name = name
        if tags is not None:
            self.tags = tags


class Audited:
    """Records every read of its secret member."""

    name: str

    def __init__(self, name: str, secret: str) -> None:
        self.name = name
        self._secret = secret
        self.reads = 0

    @property
    def secret(self) -> str:
        self.reads += 1
        return self._secret

    @secret.setter
    def secret(self, value: str) -> None:
        self._secret = value

    @property
    def shout(self) -> str:
        return self.name.upper()


def make_pair():
    r = ObservableCollection(["p"])
    s = ObservableCollection(["q", "r"])
    return Person("X", 1, r), Person("Y", 2, s), r, s


# Scenarios


def test_merge_scenario():
    """Scalars are replaced, the bindable list keeps its instance and takes new contents."""
    a, b, r, _ = make_pair()

    copy_properties_merging_collections(a, b)

    assert a.name == "Y"
    assert a.age == 2
    assert a.tags is r
    assert list(a.tags) == ["q", "r"]


def test_exclusion_scenario():
    """Excluded members keep their value; collections are replaced wholesale."""
    a, b, _, s = make_pair()

    copy_properties_excluding(a, b, "age")

    assert a.name == "Y"
    assert a.age == 1
    assert a.tags is s


def test_source_is_never_modified():
    a, b, _, s = make_pair()

    copy_properties_merging_collections(a, b)

    assert (b.name, b.age) == ("Y", 2)
    assert b.tags is s
    assert list(s) == ["q", "r"]


# Preconditions


@pytest.mark.parametrize("copier", ALL_COPIERS)
def test_same_instance_is_noop(copier):
    a, _, r, _ = make_pair()

    copier(a, a)

    assert (a.name, a.age) == ("X", 1)
    assert a.tags is r
    assert list(r) == ["p"]


@pytest.mark.parametrize("copier", ALL_COPIERS)
def test_none_arguments_fail_fast(copier):
    """CRITICAL: None target or source raises before anything is written."""
    a, _, _, _ = make_pair()

    with pytest.raises(InvalidArgumentError, match="target"):
        copier(None, a)
    with pytest.raises(InvalidArgumentError, match="source"):
        copier(a, None)

    assert (a.name, a.age) == ("X", 1)


def test_none_arguments_fail_fast_with_exclusions():
    with pytest.raises(InvalidArgumentError):
        copy_properties_excluding(None, Person("a", 1), "age")
    with pytest.raises(InvalidArgumentError):
        copy_properties_excluding_selected(Person("a", 1), None, lambda p: p.age)


def test_unrelated_types_are_rejected():
    with pytest.raises(TypeError, match="must share a type"):
        copy_properties_fast(Person("a", 1), Invoice("n-1"))


def test_derived_source_copies_base_members():
    target = Person("a", 1)

    copy_properties_fast(target, Employee("b", 2, badge=7))

    assert (target.name, target.age) == ("b", 2)


def test_base_source_leaves_derived_members():
    target = Employee("a", 1, badge=7)

    copy_properties_fast(target, Person("b", 2))

    assert (target.name, target.age, target.badge) == ("b", 2, 7)


# Copy variants


def test_copy_replaces_collections():
    """Baseline copy assigns the source's collection reference."""
    a, b, _, s = make_pair()

    copy_properties(a, b)

    assert a.tags is s


def test_none_member_is_copied():
    a, _, _, _ = make_pair()

    copy_properties_fast(a, Person("Z", 3, None))

    assert a.tags is None


def test_excluded_member_is_not_read():
    """Excluded members are skipped entirely, getter included."""
    target = Audited("a", "target-secret")
    source = Audited("b", "source-secret")

    copy_properties_excluding(target, source, "secret")

    assert target.name == "b"
    assert source.reads == 0
    assert target._secret == "target-secret"


def test_read_only_property_is_ignored():
    target = Audited("a", "x")
    source = Audited("b", "y")

    copy_properties(target, source)

    assert target.name == "b"
    assert target.secret == "y"


def test_empty_exclusion_copies_everything():
    a, b, _, s = make_pair()

    copy_properties_excluding(a, b)

    assert (a.name, a.age, a.tags) == ("Y", 2, s)


def test_selector_exclusion():
    a, b, _, _ = make_pair()

    copy_properties_excluding_selected(a, b, lambda p: p.age, operator.attrgetter("tags"))

    assert a.name == "Y"
    assert a.age == 1
    assert list(a.tags) == ["p"]


def test_unresolvable_selectors_are_ignored():
    """A selector that is not a member access excludes nothing."""
    a, b, _, s = make_pair()

    copy_properties_excluding_selected(a, b, lambda p: p.age + 1, lambda p: p.name.lower())

    assert (a.name, a.age, a.tags) == ("Y", 2, s)


def test_pydantic_model_copy():
    target = Account(owner="a", balance=1.0)
    source = Account(owner="b", balance=2.5)

    copy_properties_excluding(target, source, "balance")

    assert target.owner == "b"
    assert target.balance == 1.0


# Collection merging


def test_merge_notifies_subscribers():
    """Subscribers on the target collection observe a reset followed by adds."""
    a, b, r, _ = make_pair()
    actions = []
    r.subscribe(lambda sender, event: actions.append(event.action))

    copy_properties_merging_collections(a, b)

    assert actions == [
        CollectionChangeAction.RESET,
        CollectionChangeAction.ADD,
        CollectionChangeAction.ADD,
    ]


def test_merge_skips_none_source_collection():
    """A None source collection does not clear the target."""
    a, _, r, _ = make_pair()

    copy_properties_merging_collections(a, Person("Y", 2, None))

    assert a.tags is r
    assert list(r) == ["p"]
    assert a.name == "Y"


def test_merge_does_not_create_target_collection():
    target = Person("X", 1, None)

    copy_properties_merging_collections(target, Person("Y", 2, ObservableCollection(["q"])))

    assert target.tags is None


def test_merge_with_shared_collection_keeps_contents():
    """CRITICAL: Target and source holding the same collection must not lose items.

    Why: Clearing before reading the source would empty both sides.
    """
    shared = ObservableCollection(["q", "r"])
    a = Person("X", 1, shared)
    b = Person("Y", 2, shared)

    copy_properties_merging_collections(a, b)

    assert a.tags is shared
    assert list(shared) == ["q", "r"]


def test_merge_binding_list(roster_cls):
    members = BindingList(["ann"])
    changes = []
    members.subscribe(lambda sender, event: changes.append(event.change_type))
    target = roster_cls("old", members, ["x"])
    history = ["y", "z"]

    copy_properties_merging_collections(target, roster_cls("new", BindingList(["bob"]), history))

    assert target.title == "new"
    assert target.members is members
    assert list(members) == ["bob"]
    assert changes == [ListChangedType.RESET, ListChangedType.ITEM_ADDED]
    # Plain lists are not bindable and are replaced
    assert target.history is history


def test_merge_pydantic_model_collection():
    target = Account(owner="a", labels=ObservableCollection(["x"]))
    original = target.labels

    copy_properties_merging_collections(
        target, Account(owner="b", labels=ObservableCollection(["y", "z"]))
    )

    assert target.labels is original
    assert list(target.labels) == ["y", "z"]


# Properties


@given(
    name=st.text(),
    age=st.integers(),
    tags=st.none() | st.lists(st.text(), max_size=5),
)
def test_reflective_and_cached_copies_agree(name, age, tags):
    """PROPERTY: copy_properties and copy_properties_fast produce the same target."""
    source = Person(name, age, None if tags is None else ObservableCollection(tags))
    reflective = Person("x", 0)
    cached = Person("x", 0)

    copy_properties(reflective, source)
    copy_properties_fast(cached, source)

    assert reflective == cached == source
    assert reflective.tags is source.tags


@given(
    excluded=st.sets(st.sampled_from(["name", "age", "tags"])),
    name=st.text(),
    age=st.integers(),
)
def test_excluded_members_keep_target_values(excluded, name, age):
    """PROPERTY: excluded members keep the target's values, others take the source's."""
    original_tags = ObservableCollection(["t"])
    target = Person("target", -1, original_tags)
    source = Person(name, age, ObservableCollection(["s"]))

    copy_properties_excluding(target, source, *excluded)

    originals = {"name": "target", "age": -1, "tags": original_tags}
    for member, original in originals.items():
        expected = original if member in excluded else getattr(source, member)
        assert getattr(target, member) == expected


# Declared but unassigned members


@pytest.mark.parametrize(
    "copier", ALL_COPIERS + [lambda t, s: copy_properties_excluding(t, s, "name")]
)
def test_unassigned_source_member_is_skipped(copier):
    """CRITICAL: A member the source never assigned is skipped, not an error.

    Why: Plain classes may declare members they only set on some paths.
    """
    tags = ObservableCollection(["t"])
    target = ViewModel("a", tags)

    copier(target, ViewModel("b"))

    assert target.tags is tags
    assert list(tags) == ["t"]


def test_unassigned_target_collection_is_not_merged():
    source_tags = ObservableCollection(["s"])
    target = ViewModel("a")

    copy_properties_merging_collections(target, ViewModel("b", source_tags))

    assert target.name == "b"
    assert not hasattr(target, "tags")


def test_unassigned_source_member_still_copies_others():
    target = ViewModel("a")

    copy_properties_fast(target, ViewModel("b"))

    assert target.name == "b"


# Models validating assignments


def test_validated_assignment_keeps_source_collection():
    """Copying onto a model that validates assignments keeps the collection reference."""
    labels = ObservableCollection(["x"])
    target = CheckedAccount(owner="a")
    source = CheckedAccount(owner="b", labels=labels)

    copy_properties(target, source)

    assert source.labels is labels
    assert target.labels is labels


def test_model_construction_keeps_subscribed_collection():
    labels = ObservableCollection(["x"])
    actions = []
    labels.subscribe(lambda sender, event: actions.append(event.action))

    target = Account(owner="a", labels=labels)
    copy_properties_merging_collections(
        target, Account(owner="b", labels=ObservableCollection(["y"]))
    )

    assert target.labels is labels
    assert list(labels) == ["y"]
    assert actions == [CollectionChangeAction.RESET, CollectionChangeAction.ADD]
