"""Deep-clone objects by round-tripping them through a codec.

Usage:
    copy = binary_clone(order)  # pickle round-trip
    copy = json_clone(order)    # to_json / from_json round-trip
    copy = deep_clone(order)    # copy.deepcopy

Subscribers of bindable collections are not carried over to clones.
"""

from __future__ import annotations

import copy
import pickle
from typing import Any

from objext.serialization.codec import from_json, to_json


def binary_clone[T](obj: T) -> T:
    """Clone via pickle. obj must be picklable."""
    return pickle.loads(pickle.dumps(obj, protocol=pickle.HIGHEST_PROTOCOL))


def json_clone[T](obj: T) -> T | None:
    """Clone via the JSON codec.

    Only state that survives JSON serialization is kept. obj's type must be
    something Pydantic can validate (dataclass, model, builtin container).

    Returns:
        The clone, or None if obj is None.
    """
    if obj is None:
        return None
    cls: Any = type(obj)
    return from_json(to_json(obj), cls)


def deep_clone[T](obj: T) -> T:
    """Clone via copy.deepcopy."""
    return copy.deepcopy(obj)
