"""JSON helpers: dump plain values or dataclasses, load into a given type."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are written as an object of their fields.
    """
    return json.dumps(obj, default=_default, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and construct an instance of *cls* from its fields.

    The JSON must be an object whose keys match the constructor's keyword
    arguments, e.g. ``from_json(Rectangle, '{"width": 10, "height": 20}')``.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    return cls(**data)
