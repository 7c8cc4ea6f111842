"""Pure helpers over iterables and collections."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from objext.core.errors import require


def add_range[T](collection: Any, items: Iterable[T]) -> None:
    """Append every item to collection, in order.

    Works with anything exposing ``append`` (lists, bindable collections) or
    ``add`` (sets).

    Args:
        collection: Collection to extend in place.
        items: Items to add.

    Raises:
        InvalidArgumentError: If collection or items is None.
        TypeError: If collection has neither append nor add.
    """
    require(collection, "collection")
    require(items, "items")
    add = getattr(collection, "append", None) or getattr(collection, "add", None)
    if add is None:
        raise TypeError(f"{type(collection).__name__} supports neither append nor add")
    for item in items:
        add(item)


def for_each[I: Iterable[Any]](values: I, action: Callable[[Any], object]) -> I:
    """Run action on every element and return values for chaining.

    Raises:
        InvalidArgumentError: If values or action is None.
    """
    require(values, "values")
    require(action, "action")
    for item in values:
        action(item)
    return values


async def for_each_async[I: Iterable[Any]](
    values: I, func: Callable[[Any], Awaitable[object]]
) -> I:
    """Await func on every element sequentially, preserving order.

    Args:
        values: Elements to visit.
        func: Coroutine function called once per element.

    Returns:
        The original values.

    Raises:
        InvalidArgumentError: If values or func is None.
    """
    require(values, "values")
    require(func, "func")
    for item in values:
        await func(item)
    return values
