"""
Values -- The closed dynamic value union.

Responsibility:
    Provides ``DynamicValue``, the universal payload type for node props and
    table cells: exactly one of ``Text``, ``Number``, ``Boolean``, ``List``
    or ``Map``.  Plain Python data is lifted into the union with
    ``to_value``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by node, serializer, filters and table_builder.

Invariants enforced:
    - No shape outside the five variants is representable.  There is no
      null and no "other" escape hatch.
    - Values are immutable after construction: ``List`` holds a tuple and
      ``Map`` a read-only mapping.
    - ``Map`` preserves key insertion order so re-serialization is stable.

Failure modes:
    - TypeError from ``to_value`` for ``None``, unsupported Python types, or
      non-string map keys.
    - TypeError from a variant constructor whose payload has the wrong type
      (``Text(None)``, ``Boolean(1)``, ``List((1,))``, ``Map({"a": None})``).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Text:
    """String variant."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Text value must be str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Number:
    """
    Numeric variant, always stored as a double.

    Integral inputs are widened to ``float``; callers that need integral
    display pre-format the value to ``Text``.
    """

    value: float

    def __post_init__(self) -> None:
        # bool is an int subclass
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, Decimal)):
            raise TypeError(f"Number value must be numeric, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class Boolean:
    """Boolean variant."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean value must be bool, got {type(self.value).__name__}")

    def __bool__(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class List:
    """Ordered sequence of dynamic values."""

    items: tuple[DynamicValue, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            _check_variant(item, "List item")
        object.__setattr__(self, "items", items)

    def __iter__(self) -> Iterator[DynamicValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> DynamicValue:
        return self.items[index]


@dataclass(frozen=True, slots=True, eq=False)
class Map:
    """
    String-keyed mapping of dynamic values.

    Equality ignores key order; iteration and serialization follow
    insertion order.  Unhashable, like the dict it wraps.
    """

    entries: Mapping[str, DynamicValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        entries = dict(self.entries)
        for key, val in entries.items():
            if not isinstance(key, str):
                raise TypeError(f"Map keys must be str, got {type(key).__name__}")
            _check_variant(val, f"Map value for {key!r}")
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> DynamicValue:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def get(self, key: str, default: DynamicValue | None = None) -> DynamicValue | None:
        return self.entries.get(key, default)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()


DynamicValue: TypeAlias = Text | Number | Boolean | List | Map

VARIANTS: tuple[type, ...] = (Text, Number, Boolean, List, Map)


def _check_variant(obj: Any, what: str) -> None:
    if not isinstance(obj, VARIANTS):
        raise TypeError(f"{what} must be a dynamic value, got {type(obj).__name__}")


def to_value(obj: Any) -> DynamicValue:
    """
    Lift plain Python data into the DynamicValue union.

    Preconditions:
        - ``obj`` is a DynamicValue, str, bool, int, float, Decimal,
          list/tuple of such, or a mapping with ``str`` keys.
    Postconditions:
        - Existing DynamicValue instances are returned unchanged.
    Raises:
        TypeError: for ``None``, any other type, or a non-string map key.
    """
    if isinstance(obj, VARIANTS):
        return obj
    if isinstance(obj, str):
        return Text(obj)
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, (int, float, Decimal)):
        return Number(float(obj))
    if isinstance(obj, Mapping):
        return Map(to_entries(obj))
    if isinstance(obj, (list, tuple)):
        return List(tuple(to_value(item) for item in obj))
    raise TypeError(
        f"Cannot represent {type(obj).__name__} as a dynamic value"
    )


def to_entries(mapping: Mapping[str, Any] | Map | None) -> dict[str, DynamicValue]:
    """Lift a mapping's values, keeping key order."""
    if mapping is None:
        return {}
    if isinstance(mapping, Map):
        return dict(mapping.entries)
    entries: dict[str, DynamicValue] = {}
    for key, val in mapping.items():
        if not isinstance(key, str):
            raise TypeError(f"Map keys must be str, got {type(key).__name__}")
        entries[key] = to_value(val)
    return entries


def to_values(items: Iterable[Any]) -> tuple[DynamicValue, ...]:
    """Lift every element of an iterable."""
    return tuple(to_value(item) for item in items)
