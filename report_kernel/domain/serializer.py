"""
Serializer -- Node / DynamicValue to JSON.

Responsibility:
    Converts DynamicValues and Node trees into plain JSON-equivalent Python
    data (``str``, ``float``, ``bool``, ``list``, ``dict``) and into compact
    JSON text for hand-off to the remote renderer.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Depth-first, lossless, order-preserving: lists keep element order and
      maps keep key insertion order.
    - Sparse emission: a serialized Node carries ``props`` only if its props
      are non-empty and ``children`` only if it has children.  Consumers
      read an absent key as "none"; an empty object or array in its place
      is a compatibility break.
    - Numbers are emitted as floats with no integral truncation.

Failure modes:
    - TypeError for a value outside the closed union (programming error).
    - ValueError from ``stringify`` / ``stringify_value`` for a NaN or
      infinite ``Number``: JSON has no such literals.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from report_kernel.domain.node import Node
from report_kernel.domain.values import (
    Boolean,
    DynamicValue,
    List,
    Map,
    Number,
    Text,
)

JsonData = str | float | bool | list[Any] | dict[str, Any]

_COMPACT = (",", ":")


def serialize_value(value: DynamicValue) -> JsonData:
    """Convert a DynamicValue into JSON-equivalent Python data."""
    if isinstance(value, Text):
        return value.value
    if isinstance(value, Boolean):
        return value.value
    if isinstance(value, Number):
        return value.value
    if isinstance(value, List):
        return [serialize_value(item) for item in value.items]
    if isinstance(value, Map):
        return serialize_props(value.entries)
    raise TypeError(f"Not a dynamic value: {type(value).__name__}")


def serialize_props(entries: Mapping[str, DynamicValue]) -> dict[str, Any]:
    """Serialize a key -> DynamicValue mapping, keeping key order."""
    return {key: serialize_value(val) for key, val in entries.items()}


def serialize_node(node: Node) -> dict[str, Any]:
    """
    Convert a Node tree into ``{type, props?, children?}``.

    Postconditions:
        - ``"props"`` present iff ``node.props`` is non-empty.
        - ``"children"`` present iff ``node.children`` is non-empty.
    """
    out: dict[str, Any] = {"type": node.type}
    if node.props:
        out["props"] = serialize_props(node.props)
    if node.children:
        out["children"] = [serialize_node(child) for child in node.children]
    return out


def deserialize_value(data: Any) -> DynamicValue:
    """
    Rebuild a DynamicValue from JSON-equivalent data.

    Inverse of ``serialize_value``; ints are widened to ``Number``.

    Raises:
        TypeError: for ``null`` or any non-JSON type.
    """
    if isinstance(data, str):
        return Text(data)
    if isinstance(data, bool):
        return Boolean(data)
    if isinstance(data, (int, float)):
        return Number(data)
    if isinstance(data, list):
        return List(tuple(deserialize_value(item) for item in data))
    if isinstance(data, dict):
        return Map({str(k): deserialize_value(v) for k, v in data.items()})
    raise TypeError(f"Cannot deserialize {type(data).__name__} as a dynamic value")


def stringify(node: Node) -> str:
    """
    Compact JSON text for a Node tree.

    Raises:
        ValueError: if the tree holds a non-finite Number.
    """
    return json.dumps(
        serialize_node(node), ensure_ascii=False, separators=_COMPACT, allow_nan=False
    )


def stringify_value(value: DynamicValue) -> str:
    """Compact JSON text for a DynamicValue."""
    return json.dumps(
        serialize_value(value), ensure_ascii=False, separators=_COMPACT, allow_nan=False
    )
