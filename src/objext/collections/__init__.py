"""Bindable collections and collection helpers.

Usage:
    from objext.collections import ObservableCollection, BindingList, add_range

    names = ObservableCollection[str]()
    names.subscribe(on_change)
    add_range(names, ["a", "b"])
"""

from objext.collections.binding import BindingList
from objext.collections.models import (
    CollectionChangeAction,
    CollectionChangedEvent,
    CollectionChangedHandler,
    ListChangedEvent,
    ListChangedHandler,
    ListChangedType,
)
from objext.collections.observable import ObservableCollection
from objext.collections.operations import add_range, for_each, for_each_async

__all__ = [
    # Collections
    "ObservableCollection",
    "BindingList",
    # Models
    "CollectionChangeAction",
    "CollectionChangedEvent",
    "CollectionChangedHandler",
    "ListChangedType",
    "ListChangedEvent",
    "ListChangedHandler",
    # Operations
    "add_range",
    "for_each",
    "for_each_async",
]
