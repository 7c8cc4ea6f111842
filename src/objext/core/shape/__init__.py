"""Shape functionality: member descriptors and type introspection."""

from objext.core.shape.core import MERGEABLE_COLLECTION_TYPES, classify, describe_shape
from objext.core.shape.models import MemberDescriptor, MemberKind, Shape

__all__ = [
    # Models
    "MemberKind",
    "MemberDescriptor",
    "Shape",
    # Core
    "describe_shape",
    "classify",
    "MERGEABLE_COLLECTION_TYPES",
]
