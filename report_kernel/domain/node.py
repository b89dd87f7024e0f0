"""
Node -- Immutable UI description tree.

Responsibility:
    Defines ``Node`` (type tag + props + ordered children) and the
    primitive constructors every named tag builds on: ``element`` and
    ``text``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Named tag constructors live in ``report_kernel.domain.tags``;
    wire encoding lives in ``report_kernel.domain.serializer``.

Invariants enforced:
    - A Node is a finite tree built bottom-up; children are held in a tuple
      and props in a read-only mapping, so no back-references can form.
    - A ``#text`` node is a leaf whose single prop ``value`` holds the text.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from report_kernel.domain.values import DynamicValue, Map, Text, to_entries

TEXT_NODE_TYPE = "#text"

PropsLike = Mapping[str, Any] | Map | None


@dataclass(frozen=True, slots=True, eq=False)
class Node:
    """
    One element of the UI description tree.

    Contract:
        ``type`` is an element tag (``"div"``) or a component name
        (``"Recharts.LineChart"``, ``"Table"``).  ``props`` values are
        DynamicValues; plain Python data is lifted on construction.

    Guarantees:
        - Immutable once built (frozen dataclass, tuple children,
          read-only props).
        - Empty props / children are represented as empty collections,
          never ``None``.
        - Unhashable: props are a mapping.
    """

    type: str
    props: Mapping[str, DynamicValue] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", MappingProxyType(to_entries(self.props)))
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, Node):
                raise TypeError(
                    f"Node children must be Node, got {type(child).__name__}"
                )
        object.__setattr__(self, "children", children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.type == other.type
            and dict(self.props) == dict(other.props)
            and self.children == other.children
        )

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_NODE_TYPE


def element(
    type: str,
    children: Iterable[Node] = (),
    props: PropsLike = None,
) -> Node:
    """Build a node of an arbitrary type tag."""
    return Node(type=type, props=props or {}, children=tuple(children))


def text(value: str) -> Node:
    """Build a ``#text`` leaf carrying ``value``."""
    return Node(type=TEXT_NODE_TYPE, props={"value": Text(value)})


def props(**kwargs: Any) -> Map:
    """Props helper: ``props(className="x", size=3)``."""
    return Map(to_entries(kwargs))


def props_from(mapping: Mapping[str, Any]) -> Map:
    """Props helper for keys that are not valid identifiers (``aria-label``)."""
    return Map(to_entries(mapping))


def none() -> tuple[Node, ...]:
    """An empty child list."""
    return ()
