"""Serialization helpers: JSON codec, JSON path fragments and cloning."""

from objext.serialization.clone import binary_clone, deep_clone, json_clone
from objext.serialization.codec import default_settings, from_json, to_json, try_from_json
from objext.serialization.path import get_json_fragment, get_json_value, has_json_path

__all__ = [
    # Codec
    "to_json",
    "from_json",
    "try_from_json",
    "default_settings",
    # Path
    "get_json_fragment",
    "get_json_value",
    "has_json_path",
    # Clone
    "binary_clone",
    "json_clone",
    "deep_clone",
]
