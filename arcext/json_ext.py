"""Lenient JSON mapping of objects: missing keys keep their current values."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

_T = TypeVar("_T")


def _field_names(obj: Any, fields: Iterable[str] | None) -> list[str]:
    if fields is not None:
        return list(fields)
    if dataclasses.is_dataclass(obj):
        return [f.name for f in dataclasses.fields(obj)]
    raise TypeError(f"no field list given for {type(obj).__name__}")


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return _encode(value.value)
    if isinstance(value, Mapping):
        return {str(k): _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json(value)
    return value


def _decode(name: str, current: Any, raw: Any) -> Any:
    if raw is None or current is None:
        return raw
    if isinstance(current, Enum):
        try:
            return type(current)(raw)
        except ValueError as exc:
            raise ValueError(f"field {name!r}: {exc}") from exc
    if dataclasses.is_dataclass(current) and not isinstance(current, type):
        if not isinstance(raw, Mapping):
            raise TypeError(f"field {name!r} expects an object")
        return from_json(dataclasses.replace(current), raw)
    if isinstance(current, bool):
        if not isinstance(raw, bool):
            raise TypeError(f"field {name!r} expects a boolean")
        return raw
    if isinstance(current, int):
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"field {name!r} expects an integer")
        return raw
    if isinstance(current, float):
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise TypeError(f"field {name!r} expects a number")
        return float(raw)
    if isinstance(current, str):
        if not isinstance(raw, str):
            raise TypeError(f"field {name!r} expects a string")
        return raw
    if isinstance(current, (list, tuple)):
        if not isinstance(raw, list):
            raise TypeError(f"field {name!r} expects an array")
        return type(current)(raw)
    if isinstance(current, Mapping):
        if not isinstance(raw, Mapping):
            raise TypeError(f"field {name!r} expects an object")
        return dict(raw)
    return raw


def to_json(obj: Any, fields: Iterable[str] | None = None) -> dict[str, Any]:
    """Return a JSON-ready dict of the named attributes of ``obj``.

    Without ``fields`` the fields of a dataclass are used. None stays None (null).
    """
    return {name: _encode(getattr(obj, name)) for name in _field_names(obj, fields)}


def from_json(obj: _T, data: Mapping[str, Any], fields: Iterable[str] | None = None) -> _T:
    """Set the named attributes of ``obj`` from ``data`` and return ``obj``.

    Keys absent from ``data`` leave the attribute untouched; a null value
    clears it to None. A value of the wrong kind raises TypeError, an enum
    value without a member raises ValueError.
    """
    if not isinstance(data, Mapping):
        raise TypeError("JSON data must be an object")
    for name in _field_names(obj, fields):
        if name in data:
            setattr(obj, name, _decode(name, getattr(obj, name), data[name]))
    return obj