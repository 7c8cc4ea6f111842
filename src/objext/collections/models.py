"""Change notification models for bindable collections."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class CollectionChangeAction(Enum):
    """What happened to an ObservableCollection."""

    ADD = auto()
    REMOVE = auto()
    REPLACE = auto()
    MOVE = auto()
    RESET = auto()  # Contents changed wholesale (e.g. clear)


class ListChangedType(Enum):
    """What happened to a BindingList."""

    ITEM_ADDED = auto()
    ITEM_DELETED = auto()
    ITEM_CHANGED = auto()
    RESET = auto()


@dataclass(frozen=True, slots=True)
class CollectionChangedEvent:
    """Describes a single change to an ObservableCollection.

    Indexes are -1 when not applicable to the action.
    """

    action: CollectionChangeAction
    new_items: tuple[Any, ...] = ()
    old_items: tuple[Any, ...] = ()
    new_index: int = -1
    old_index: int = -1


@dataclass(frozen=True, slots=True)
class ListChangedEvent:
    """Describes a single change to a BindingList."""

    change_type: ListChangedType
    new_index: int = -1
    old_index: int = -1


CollectionChangedHandler = Callable[[Any, CollectionChangedEvent], None]
ListChangedHandler = Callable[[Any, ListChangedEvent], None]
