"""Shared list storage of the bindable collections.

NotifyingList holds the items and the subscriber list, guards against
changes made while handlers run, and tells Pydantic how to validate and
serialize the collections. ObservableCollection and BindingList turn its
mutation hooks into their own events.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any, get_args, overload

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class NotifyingList[T](MutableSequence[T]):
    """List storage that reports every mutation to subscribed handlers.

    Subclasses turn the mutation hooks into their own event type. Handlers are
    called as ``handler(sender, event)``.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._handlers: list[Callable[[Any, Any], None]] = []
        self._notifying = False

    # Subscription

    def subscribe(self, handler: Callable[[Any, Any], None]) -> None:
        """Register a change handler."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[[Any, Any], None]) -> None:
        """Remove a previously registered change handler.

        Raises:
            ValueError: If handler is not subscribed.
        """
        self._handlers.remove(handler)

    def _notify(self, event: Any) -> None:
        self._notifying = True
        try:
            for handler in list(self._handlers):
                handler(self, event)
        finally:
            self._notifying = False

    def _check_reentrancy(self) -> None:
        if self._notifying:
            raise RuntimeError(
                f"Cannot change {type(self).__name__} while it notifies handlers"
            )

    # Hooks for subclasses

    def _inserted(self, index: int, value: T) -> None:
        raise NotImplementedError

    def _removed(self, index: int, value: T) -> None:
        raise NotImplementedError

    def _replaced(self, index: int, old: T, new: T) -> None:
        raise NotImplementedError

    def _reset(self) -> None:
        raise NotImplementedError

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:  # type: ignore[override]
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice assignment")
        self._check_reentrancy()
        index = range(len(self._items))[index]
        old = self._items[index]
        self._items[index] = value
        self._replaced(index, old, value)

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice deletion")
        self._check_reentrancy()
        index = range(len(self._items))[index]
        value = self._items.pop(index)
        self._removed(index, value)

    def insert(self, index: int, value: T) -> None:
        self._check_reentrancy()
        size = len(self._items)
        index = max(size + index, 0) if index < 0 else min(index, size)
        self._items.insert(index, value)
        self._inserted(index, value)

    def clear(self) -> None:
        """Remove all items with a single reset notification."""
        self._check_reentrancy()
        self._items.clear()
        self._reset()

    # Copying and validation

    def __getstate__(self) -> dict[str, Any]:
        # Subscribers belong to the original instance, not to copies.
        state = self.__dict__.copy()
        state["_handlers"] = []
        state["_notifying"] = False
        return state

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate as this class, keeping existing instances.

        Instances pass through unchanged so their subscribers stay attached.
        Any other iterable is validated as a list of the item type and wrapped.
        """
        args = get_args(source)
        item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        from_items = core_schema.no_info_before_validator_function(
            lambda v: list(v) if isinstance(v, NotifyingList) else v,
            core_schema.no_info_after_validator_function(
                cls, core_schema.list_schema(item_schema)
            ),
        )
        return core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_items],
            mode="left_to_right",
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NotifyingList):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, str | bytes):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
