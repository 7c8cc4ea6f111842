"""JSON codec with a member naming policy.

Usage:
    @dataclass
    class Order:
        order_id: int
        line_items: list[str]

    text = to_json(Order(1, ["a"]))
    # {
    #   "orderId": 1,
    #   "lineItems": ["a"]
    # }
    order = from_json(text, Order)
    ok, order = try_from_json("not json", Order)  # (False, None)

Member names of dataclasses and Pydantic models go through the naming policy
in both directions. Mapping keys are left as they are.
"""

from __future__ import annotations

import dataclasses
import json
import types
from collections.abc import Callable, Mapping, Sequence, Set
from logging import getLogger
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel, to_pascal
from pydantic_core import to_jsonable_python

from objext.config import JsonSettings, NamingPolicy

log = getLogger(__name__)

_RENAMERS: dict[NamingPolicy, Callable[[str], str]] = {
    "camel": to_camel,
    "pascal": to_pascal,
    "snake": lambda name: name,
}

_default_settings: JsonSettings | None = None
_adapters: dict[Any, TypeAdapter[Any]] = {}


def default_settings() -> JsonSettings:
    """JSON settings loaded from the environment on first use."""
    global _default_settings
    if _default_settings is None:
        _default_settings = JsonSettings()
    return _default_settings


def _adapter(type_: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapters.get(type_)
    except TypeError:  # Unhashable type expression
        return TypeAdapter(type_)
    if adapter is None:
        adapter = _adapters.setdefault(type_, TypeAdapter(type_))
    return adapter


def _is_structured(tp: Any) -> bool:
    """Dataclass or Pydantic model class."""
    return isinstance(tp, type) and (
        dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)
    )


def _member_types(tp: type) -> dict[str, Any]:
    if issubclass(tp, BaseModel):
        return {name: info.annotation for name, info in tp.model_fields.items()}
    hints = get_type_hints(tp)
    return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(tp)}


def _to_plain(value: Any, rename: Callable[[str], str]) -> Any:
    """Convert value to JSON-compatible data, renaming member names."""
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, BaseModel):
        return {
            rename(name): _to_plain(getattr(value, name), rename)
            for name in type(value).model_fields
        }
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            rename(f.name): _to_plain(getattr(value, f.name), rename)
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {to_jsonable_python(k): _to_plain(v, rename) for k, v in value.items()}
    if isinstance(value, Sequence | Set) and not isinstance(value, bytes | bytearray):
        return [_to_plain(item, rename) for item in value]
    return to_jsonable_python(value)


def _from_plain(data: Any, tp: Any, rename: Callable[[str], str]) -> Any:
    """Map renamed member names in data back to declared names, guided by tp."""
    if data is None:
        return None

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Annotated:
        return _from_plain(data, args[0], rename)

    if origin in (Union, types.UnionType):
        for arg in args:
            if arg is type(None):
                continue
            if isinstance(data, dict) and (_is_structured(arg) or _is_mapping(arg)):
                return _from_plain(data, arg, rename)
            if isinstance(data, list) and _is_sequence(arg):
                return _from_plain(data, arg, rename)
        return data

    if isinstance(data, dict) and _is_structured(tp):
        member_types = _member_types(tp)
        declared = {rename(name): name for name in member_types}
        result = {}
        for key, value in data.items():
            name = declared.get(key, key)
            result[name] = _from_plain(value, member_types.get(name, Any), rename)
        return result

    if isinstance(data, dict) and _is_mapping(tp):
        value_type = args[1] if len(args) == 2 else Any
        return {key: _from_plain(value, value_type, rename) for key, value in data.items()}

    if isinstance(data, list) and _is_sequence(tp):
        if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
            return [_from_plain(v, t, rename) for v, t in zip(data, args, strict=False)]
        item_type = args[0] if args else Any
        return [_from_plain(item, item_type, rename) for item in data]

    return data


def _is_mapping(tp: Any) -> bool:
    cls = get_origin(tp) or tp
    return isinstance(cls, type) and issubclass(cls, Mapping)


def _is_sequence(tp: Any) -> bool:
    cls = get_origin(tp) or tp
    return (
        isinstance(cls, type)
        and hasattr(cls, "__iter__")
        and not issubclass(cls, (str, bytes, Mapping))
        and not _is_structured(cls)
    )


def to_json(value: Any, settings: JsonSettings | None = None) -> str:
    """Serialize value to a JSON string.

    Args:
        value: Dataclass, Pydantic model, mapping, sequence or primitive.
            None serializes to "null".
        settings: Output options. Defaults to environment-loaded JsonSettings.

    Returns:
        JSON text.
    """
    settings = settings or default_settings()
    plain = _to_plain(value, _RENAMERS[settings.naming])
    return json.dumps(plain, indent=settings.indent, ensure_ascii=settings.ensure_ascii)


def from_json[T](
    text: str | None, type_: type[T], settings: JsonSettings | None = None
) -> T | None:
    """Deserialize JSON text into type_.

    Args:
        text: JSON document. None or blank text yields None.
        type_: Target type (anything Pydantic can validate).
        settings: Naming options. Defaults to environment-loaded JsonSettings.

    Returns:
        Validated instance, or None for blank input or a JSON null.

    Raises:
        ValueError: If text is not valid JSON.
        pydantic.ValidationError: If the document does not fit type_.
    """
    if text is None or not text.strip():
        return None
    settings = settings or default_settings()
    data = json.loads(text)
    if data is None:
        return None
    return _adapter(type_).validate_python(_from_plain(data, type_, _RENAMERS[settings.naming]))


def try_from_json[T](text: str | None, type_: type[T]) -> tuple[bool, T | None]:
    """Deserialize without raising.

    Returns:
        (True, instance) on success; (False, None) for blank input, invalid
        JSON, a JSON null or a validation failure.
    """
    if text is None or not text.strip():
        return False, None
    try:
        result = from_json(text, type_)
    except (json.JSONDecodeError, ValidationError) as e:
        log.debug("Could not deserialize %s: %s", getattr(type_, "__name__", type_), e)
        return False, None
    return result is not None, result
