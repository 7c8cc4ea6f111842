"""objext: object utilities for data-bound Python applications.

Usage:
    from dataclasses import dataclass
    from objext import ObservableCollection, copy_properties_merging_collections

    @dataclass
    class Person:
        name: str
        tags: ObservableCollection[str] | None = None

    view = Person("old", ObservableCollection(["a"]))
    view.tags.subscribe(on_tags_changed)

    loaded = Person("new", ObservableCollection(["b", "c"]))
    copy_properties_merging_collections(view, loaded)
    # view.name == "new"; view.tags is the same instance, now ["b", "c"]
"""

__version__ = "0.1.0"

# Bindable collections
from objext.collections import (
    BindingList,
    CollectionChangeAction,
    CollectionChangedEvent,
    ListChangedEvent,
    ListChangedType,
    ObservableCollection,
    add_range,
    for_each,
    for_each_async,
)

# Small helpers
from objext.common import (
    configure_logging,
    describe,
    get_enum_description,
    is_null_or_empty,
    is_null_or_whitespace,
    round_to,
    to_percent,
)

# Configuration
from objext.config import HttpSettings, JsonSettings

# Core primitives
from objext.core import (
    InvalidArgumentError,
    MemberDescriptor,
    MemberKind,
    Shape,
    describe_shape,
    resolve_member_name,
)

# HTTP
from objext.http import create_client, execute_post, post_as

# Serialization
from objext.serialization import (
    binary_clone,
    deep_clone,
    from_json,
    get_json_fragment,
    get_json_value,
    has_json_path,
    json_clone,
    to_json,
    try_from_json,
)

# Property synchronization
from objext.sync import (
    CopyPlan,
    PlanCache,
    copy_properties,
    copy_properties_excluding,
    copy_properties_excluding_selected,
    copy_properties_fast,
    copy_properties_merging_collections,
    get_plan_cache,
)

__all__ = [
    # Version
    "__version__",
    # Sync
    "copy_properties",
    "copy_properties_fast",
    "copy_properties_excluding",
    "copy_properties_excluding_selected",
    "copy_properties_merging_collections",
    "CopyPlan",
    "PlanCache",
    "get_plan_cache",
    # Core
    "InvalidArgumentError",
    "MemberKind",
    "MemberDescriptor",
    "Shape",
    "describe_shape",
    "resolve_member_name",
    # Collections
    "ObservableCollection",
    "BindingList",
    "CollectionChangeAction",
    "CollectionChangedEvent",
    "ListChangedType",
    "ListChangedEvent",
    "add_range",
    "for_each",
    "for_each_async",
    # Serialization
    "to_json",
    "from_json",
    "try_from_json",
    "get_json_fragment",
    "get_json_value",
    "has_json_path",
    "binary_clone",
    "json_clone",
    "deep_clone",
    # HTTP
    "create_client",
    "execute_post",
    "post_as",
    # Config
    "JsonSettings",
    "HttpSettings",
    # Common
    "is_null_or_whitespace",
    "is_null_or_empty",
    "round_to",
    "to_percent",
    "describe",
    "get_enum_description",
    "configure_logging",
]
