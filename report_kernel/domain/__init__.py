"""
Pure domain layer.

Document-construction primitives with NO dependencies on:
- Network or server calls
- Disk
- Time/clock

All values and nodes are immutable; the table builder is the only
stateful object and is owned by a single report invocation.
"""

from report_kernel.domain.filters import (
    FilterConfig,
    FilterOption,
    FilterType,
    SearchOperator,
    ValueMode,
    filter_type_token,
    search_operator_token,
)
from report_kernel.domain.node import Node, element, none, props, props_from, text
from report_kernel.domain.serializer import (
    deserialize_value,
    serialize_node,
    serialize_value,
    stringify,
    stringify_value,
)
from report_kernel.domain.table_builder import ColumnMode, TableBuilder, TableColumn
from report_kernel.domain.values import (
    Boolean,
    DynamicValue,
    List,
    Map,
    Number,
    Text,
    to_value,
)

__all__ = [
    # Values
    "DynamicValue",
    "Text",
    "Number",
    "Boolean",
    "List",
    "Map",
    "to_value",
    # Nodes
    "Node",
    "element",
    "text",
    "props",
    "props_from",
    "none",
    # Serialization
    "serialize_value",
    "serialize_node",
    "deserialize_value",
    "stringify",
    "stringify_value",
    # Filters
    "FilterType",
    "SearchOperator",
    "ValueMode",
    "FilterOption",
    "FilterConfig",
    "filter_type_token",
    "search_operator_token",
    # Table
    "ColumnMode",
    "TableColumn",
    "TableBuilder",
]
