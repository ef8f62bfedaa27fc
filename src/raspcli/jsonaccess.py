"""Tolerant typed accessors for loosely-typed JSON documents.

The schedule API does not guarantee its schema, so every field read from a
provider payload goes through one of these helpers. Each one returns the
field when it is present and of the expected JSON type, and the supplied
default otherwise (missing key, ``null``, wrong type, or a *node* that is
not an object at all). None of them raise.

JSON booleans decode to Python ``bool``, which is a subclass of ``int``;
the numeric accessors reject them explicitly.
"""

from __future__ import annotations

from typing import Any


def _field(node: Any, key: str) -> Any:
    if not isinstance(node, dict):
        return None
    return node.get(key)


def get_string(node: Any, key: str, default: str) -> str:
    """Return ``node[key]`` if it is a string, else *default*."""
    value = _field(node, key)
    if isinstance(value, str):
        return value
    return default


def get_int(node: Any, key: str, default: int) -> int:
    """Return ``node[key]`` if it is an integer (not a bool), else *default*."""
    value = _field(node, key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def get_float(node: Any, key: str, default: float) -> float:
    """Return ``node[key]`` as a float if it is any JSON number, else *default*."""
    value = _field(node, key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return default


def get_bool(node: Any, key: str, default: bool) -> bool:
    """Return ``node[key]`` if it is a boolean, else *default*."""
    value = _field(node, key)
    if isinstance(value, bool):
        return value
    return default


def get_list(node: Any, key: str) -> list[Any] | None:
    """Return ``node[key]`` if it is an array, else ``None``."""
    value = _field(node, key)
    if isinstance(value, list):
        return value
    return None


def get_object(node: Any, key: str) -> dict[str, Any]:
    """Return ``node[key]`` if it is an object, else an empty dict."""
    value = _field(node, key)
    if isinstance(value, dict):
        return value
    return {}
