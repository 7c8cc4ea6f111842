"""Selector functionality: resolve accessor callables to member names."""

from objext.core.selector.core import MemberSelector, resolve_member_name, resolve_member_names

__all__ = [
    "MemberSelector",
    "resolve_member_name",
    "resolve_member_names",
]
