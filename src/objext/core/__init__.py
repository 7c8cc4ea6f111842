"""Core functionalities: stateless introspection primitives.

Architecture Note:
    core/ contains pure functionality with no runtime state beyond memoized
    type introspection. For the stateful plan cache, see sync/.
"""

from objext.core.errors import InvalidArgumentError, require
from objext.core.selector import MemberSelector, resolve_member_name, resolve_member_names
from objext.core.shape import (
    MERGEABLE_COLLECTION_TYPES,
    MemberDescriptor,
    MemberKind,
    Shape,
    classify,
    describe_shape,
)

__all__ = [
    # Errors
    "InvalidArgumentError",
    "require",
    # Shape
    "MemberKind",
    "MemberDescriptor",
    "Shape",
    "describe_shape",
    "classify",
    "MERGEABLE_COLLECTION_TYPES",
    # Selector
    "MemberSelector",
    "resolve_member_name",
    "resolve_member_names",
]
