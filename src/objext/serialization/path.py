"""Extract fragments of a JSON document by path.

Usage:
    doc = '{"user": {"name": "Ann"}, "items": [{"price": 9.5}]}'

    get_json_fragment(doc, "user.name")                # '"Ann"'
    get_json_fragment(doc, "items[0]")                 # '{"price":9.5}'
    get_json_value(doc, "items[0].price", float)       # 9.5
    has_json_path(doc, "items[3]")                     # False

Path grammar: dot-separated segments, each a property name optionally
followed by one or more ``[index]`` suffixes (``matrix[1][0]``), or a bare
``[index]`` applied to the current array. Empty segments are skipped.
"""

from __future__ import annotations

import json
import re
from logging import getLogger
from typing import Any

from pydantic import ValidationError

from objext.serialization.codec import from_json

log = getLogger(__name__)

_SEGMENT = re.compile(r"^(?P<name>[^\[\]]*)(?P<indexes>(?:\[[^\[\]]*\])*)$")
_INDEX = re.compile(r"\[([^\[\]]*)\]")

_MISSING = object()


def _parse_index(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def _navigate(document: Any, path: str) -> Any:
    """Walk document along path.

    Returns:
        The element at path (possibly None for a JSON null), or _MISSING.
    """
    current = document
    for part in path.split("."):
        part = part.strip()
        if not part:
            continue

        match = _SEGMENT.match(part)
        if match is None:
            return _MISSING

        name = match.group("name")
        if name:
            if not isinstance(current, dict) or name not in current:
                return _MISSING
            current = current[name]

        for raw_index in _INDEX.findall(match.group("indexes")):
            index = _parse_index(raw_index)
            if index is None or not isinstance(current, list):
                return _MISSING
            if index < 0 or index >= len(current):
                return _MISSING
            current = current[index]

    return current


def _load(text: str | None, path: str | None) -> Any:
    """Parse text and navigate to path, _MISSING on any failure."""
    if text is None or path is None or not text.strip() or not path.strip():
        return _MISSING
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        log.debug("Invalid JSON while resolving %r: %s", path, e)
        return _MISSING
    return _navigate(document, path)


def get_json_fragment(text: str | None, path: str | None) -> str | None:
    """Get the JSON text of the element at path.

    Args:
        text: JSON document.
        path: Element path, e.g. "user.name" or "items[0].price".

    Returns:
        Compact JSON text of the element ("null" for a JSON null), or None if
        the input is blank or invalid or the path does not exist.
    """
    element = _load(text, path)
    if element is _MISSING:
        return None
    return json.dumps(element, ensure_ascii=False, separators=(",", ":"))


def get_json_value[T](text: str | None, path: str | None, type_: type[T]) -> T | None:
    """Get the element at path deserialized into type_.

    Returns:
        The validated value, or None if the path does not exist or the
        element does not fit type_.
    """
    fragment = get_json_fragment(text, path)
    if fragment is None:
        return None
    try:
        return from_json(fragment, type_)
    except (json.JSONDecodeError, ValidationError) as e:
        log.debug("Element at %r is not a valid %s: %s", path, type_, e)
        return None


def has_json_path(text: str | None, path: str | None) -> bool:
    """Check whether path exists in the document (a JSON null counts)."""
    return _load(text, path) is not _MISSING
