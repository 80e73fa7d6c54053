"""Serialization of document nodes to BEMJSON-shaped data.

Converts built nodes to/from JSON-compatible values. Useful for:
- Handing the tree to a JavaScript template engine
- Golden-file tests and debugging

Absent (None) fields are omitted, field names use the wire spelling
(``elem_mods`` becomes ``elemMods``), ``RawHtml`` becomes ``{"html": ...}``
and tuples become lists.

Example:
    >>> node = NodeBuilder().link("/x", None, "a&b")
    >>> to_data(node)
    {'elem': 'a', 'content': ['a&amp;b'], 'url': '/x'}

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from bemjson_md.nodes import DocumentNode, RawHtml

# Field name -> wire key, where they differ
_WIRE_KEYS: dict[str, str] = {"elem_mods": "elemMods"}
_FIELD_NAMES: dict[str, str] = {v: k for k, v in _WIRE_KEYS.items()}


def to_dict(node: DocumentNode | RawHtml) -> dict[str, Any]:
    """Convert a node or raw-text wrapper to a dict.

    Args:
        node: A DocumentNode or RawHtml

    Returns:
        Dict with the node's present fields only.

    """
    if isinstance(node, RawHtml):
        return {"html": node.html}

    result: dict[str, Any] = {}
    for f in fields(node):
        value = getattr(node, f.name)
        if value is None:
            continue
        result[_WIRE_KEYS.get(f.name, f.name)] = to_data(value)
    return result


def to_data(value: Any) -> Any:
    """Convert any built value (node, item, nested tuples) to plain data."""
    match value:
        case DocumentNode() | RawHtml():
            return to_dict(value)
        case tuple() | list():
            return [to_data(item) for item in value]
        case Mapping():
            return {key: to_data(item) for key, item in value.items()}
        case _:
            # Primitives: str, int, float, bool
            return value


def from_data(data: Any) -> Any:
    """Rebuild nodes from plain data produced by ``to_data``.

    Dicts with an ``elem`` key become DocumentNode, ``{"html": ...}``
    becomes RawHtml, lists become tuples.

    Raises:
        ValueError: If a dict is neither a node nor a raw-text wrapper.

    """
    match data:
        case list():
            return tuple(from_data(item) for item in data)
        case {"elem": _}:
            return from_dict(data)
        case {"html": str() as html} if len(data) == 1:
            return RawHtml(html)
        case dict():
            msg = f"Not a document node: keys {sorted(data)!r}"
            raise ValueError(msg)
        case _:
            return data


def from_dict(data: Mapping[str, Any]) -> DocumentNode:
    """Reconstruct a DocumentNode from a dict.

    Unknown keys are ignored.

    Raises:
        ValueError: If ``elem`` is missing.

    """
    if "elem" not in data:
        msg = "Missing 'elem' field in serialized node"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = _FIELD_NAMES.get(key, key)
        if name in _NODE_FIELDS:
            kwargs[name] = value if name in _MAPPING_FIELDS else from_data(value)
    return DocumentNode(**kwargs)


_NODE_FIELDS = frozenset(f.name for f in fields(DocumentNode))
_MAPPING_FIELDS = frozenset({"elem_mods", "attrs"})


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Serialize built nodes to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        value: Node, item, or tuple of them
        indent: JSON indentation level (None for compact)

    Returns:
        JSON string.

    """
    return json.dumps(to_data(value), sort_keys=True, indent=indent)


def from_json(data: str) -> Any:
    """Deserialize built nodes from a JSON string (as produced by to_json)."""
    return from_data(json.loads(data))


__all__ = ["from_data", "from_dict", "from_json", "to_data", "to_dict", "to_json"]
