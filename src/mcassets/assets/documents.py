"""
Parsing, copying, narrowing and merging of JSON documents.

Parsed documents are plain ``dict``/``list``/scalar trees. Resolvers narrow
the parts they depend on with ``expect_mapping``/``expect_sequence`` so a
wrong shape fails with ``ShapeError`` instead of an ``AttributeError`` deep
inside a resolver.
"""

import copy
from typing import Any, Dict, List, cast

import orjson

from .errors import ParseError, ShapeError
from .models import Node


def parse_document(data: bytes | str | Any, path: str | None = None) -> Node:
    """Parse raw bytes, text, or an already-parsed object.

    Already-parsed objects are serialized and parsed again so the result
    never aliases the caller's data.

    Raises:
        ParseError: if the input is not valid JSON
    """
    try:
        if isinstance(data, (bytes, bytearray, memoryview, str)):
            return orjson.loads(data)
        return orjson.loads(orjson.dumps(data))
    except (orjson.JSONDecodeError, orjson.JSONEncodeError) as e:
        raise ParseError(path, str(e)) from e


def clone(node: Node) -> Node:
    """Return a deep, independent copy of a document."""
    return copy.deepcopy(node)


def expect_mapping(node: Any, what: str, path: str | None = None) -> Dict[str, Any]:
    if not isinstance(node, dict):
        raise ShapeError(path, f"expected {what} to be an object, got {type(node).__name__}")
    return cast(Dict[str, Any], node)


def expect_sequence(node: Any, what: str, path: str | None = None) -> List[Any]:
    if not isinstance(node, list):
        raise ShapeError(path, f"expected {what} to be an array, got {type(node).__name__}")
    return cast(List[Any], node)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` on top of ``base`` and return a new mapping.

    Mappings present on both sides are merged key by key; any other value
    in ``override`` replaces the value in ``base`` wholesale. Neither
    argument is modified and the result shares no containers with them.
    """
    merged: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(cast(Dict[str, Any], current), cast(Dict[str, Any], value))
        else:
            merged[key] = copy.deepcopy(value)
    return merged
