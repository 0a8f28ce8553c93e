"""Thin wrappers around :mod:`json` for plain objects and dataclasses."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    """Fallback encoder: dataclasses as field dicts, objects as public attributes."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *obj*.

    Examples:
        >>> to_json([1, 2, 3])
        '[1,2,3]'
        >>> to_json({"width": 10, "height": 20})
        '{"width":10,"height":20}'
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        obj,
        default=_encode_default,
        indent=indent,
        separators=separators,
        sort_keys=sort_keys,
    )


def from_json(cls: type[T], text: str) -> T:
    """Return an instance of *cls* carrying the attributes encoded in *text*.

    The instance is created without calling ``cls.__init__``; the parsed
    keys are set directly as attributes, so frozen dataclasses work too.

    Raises:
        json.JSONDecodeError: *text* is not valid JSON.
        TypeError: the payload is not a JSON object.
    """
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in payload.items():
        object.__setattr__(obj, key, value)
    return obj
