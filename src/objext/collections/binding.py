"""Binding list: a list that reports changes by index to bound views."""

from __future__ import annotations

from collections.abc import Iterable

from objext.collections.base import NotifyingList
from objext.collections.models import ListChangedEvent, ListChangedType


class BindingList[T](NotifyingList[T]):
    """Mutable sequence emitting a ListChangedEvent per change.

    Set ``raise_list_changed_events`` to False to batch changes, then call
    ``reset_bindings()`` to tell views to refresh.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__(items)
        self.raise_list_changed_events = True

    def reset_bindings(self) -> None:
        """Notify handlers that the whole list should be re-read."""
        self._raise(ListChangedEvent(ListChangedType.RESET))

    def reset_item(self, index: int) -> None:
        """Notify handlers that the item at index changed in place."""
        index = range(len(self._items))[index]
        self._raise(ListChangedEvent(ListChangedType.ITEM_CHANGED, new_index=index))

    def _raise(self, event: ListChangedEvent) -> None:
        if self.raise_list_changed_events:
            self._notify(event)

    def _inserted(self, index: int, value: T) -> None:
        self._raise(ListChangedEvent(ListChangedType.ITEM_ADDED, new_index=index))

    def _removed(self, index: int, value: T) -> None:
        self._raise(ListChangedEvent(ListChangedType.ITEM_DELETED, new_index=index))

    def _replaced(self, index: int, old: T, new: T) -> None:
        self._raise(ListChangedEvent(ListChangedType.ITEM_CHANGED, new_index=index))

    def _reset(self) -> None:
        self._raise(ListChangedEvent(ListChangedType.RESET))
