"""Member selectors: map an accessor callable to the member name it reads.

Usage:
    resolve_member_name(lambda p: p.age)             # "age"
    resolve_member_name(operator.attrgetter("age"))  # "age"
    resolve_member_name(lambda p: p.address.city)    # None (not a direct member)
    resolve_member_name(lambda p: p.name.upper())    # None (method call)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from logging import getLogger
from typing import Any

log = getLogger(__name__)

MemberSelector = Callable[[Any], Any]

# Errors a selector can raise while running against the recorder.
_SELECTOR_ERRORS = (AttributeError, TypeError, ValueError, KeyError, IndexError)


class _MemberRecorder:
    """Stand-in instance that records the chain of attribute accesses."""

    __slots__ = ("_path",)

    def __init__(self, path: tuple[str, ...] = ()) -> None:
        object.__setattr__(self, "_path", path)

    def __getattr__(self, name: str) -> _MemberRecorder:
        return _MemberRecorder(self._path + (name,))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Selectors must not assign members")


def resolve_member_name(selector: MemberSelector) -> str | None:
    """Resolve a selector to the name of the member it accesses.

    Only a single attribute access on the selector's argument resolves.
    Anything else yields None.

    Args:
        selector: Callable taking an instance and returning one of its members.

    Returns:
        Member name, or None if the selector is not a direct member access.
    """
    try:
        result = selector(_MemberRecorder())
    except _SELECTOR_ERRORS as e:
        log.debug("Selector %r is not a member access: %s", selector, e)
        return None

    if isinstance(result, _MemberRecorder) and len(result._path) == 1:
        return result._path[0]

    log.debug("Selector %r is not a direct member access, ignoring", selector)
    return None


def resolve_member_names(selectors: Iterable[MemberSelector]) -> frozenset[str]:
    """Resolve selectors to member names, dropping those that do not resolve.

    Args:
        selectors: Selector callables.

    Returns:
        Set of resolved member names (possibly empty).
    """
    names = (resolve_member_name(s) for s in selectors)
    return frozenset(n for n in names if n is not None)
