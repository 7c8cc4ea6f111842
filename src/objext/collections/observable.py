"""Observable collection: a list that reports adds, removes, moves and resets.

Usage:
    tags = ObservableCollection(["a"])
    tags.subscribe(lambda sender, event: print(event.action, event.new_items))
    tags.append("b")  # ADD ('b',)
    tags.clear()      # RESET ()
"""

from __future__ import annotations

from objext.collections.base import NotifyingList
from objext.collections.models import CollectionChangeAction, CollectionChangedEvent


class ObservableCollection[T](NotifyingList[T]):
    """Mutable sequence emitting a CollectionChangedEvent per change."""

    def move(self, old_index: int, new_index: int) -> None:
        """Move the item at old_index to new_index.

        Args:
            old_index: Current position of the item.
            new_index: Position the item ends up at.

        Raises:
            IndexError: If either index is out of range.
        """
        self._check_reentrancy()
        old_index = range(len(self._items))[old_index]
        new_index = range(len(self._items))[new_index]
        item = self._items.pop(old_index)
        self._items.insert(new_index, item)
        self._notify(
            CollectionChangedEvent(
                CollectionChangeAction.MOVE,
                new_items=(item,),
                old_items=(item,),
                new_index=new_index,
                old_index=old_index,
            )
        )

    def _inserted(self, index: int, value: T) -> None:
        self._notify(
            CollectionChangedEvent(CollectionChangeAction.ADD, new_items=(value,), new_index=index)
        )

    def _removed(self, index: int, value: T) -> None:
        self._notify(
            CollectionChangedEvent(
                CollectionChangeAction.REMOVE, old_items=(value,), old_index=index
            )
        )

    def _replaced(self, index: int, old: T, new: T) -> None:
        self._notify(
            CollectionChangedEvent(
                CollectionChangeAction.REPLACE,
                new_items=(new,),
                old_items=(old,),
                new_index=index,
                old_index=index,
            )
        )

    def _reset(self) -> None:
        self._notify(CollectionChangedEvent(CollectionChangeAction.RESET))
