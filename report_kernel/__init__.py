"""
Report Kernel - declarative UI document construction.

A small, pure core used by report plugins:
- DynamicValue: closed JSON-compatible value union
- Node: immutable UI tree with a named tag catalog
- Serializer with sparse emission of props/children
- TableBuilder: accumulates columns, rows, filters and flags into
  the table properties consumed by the remote renderer
"""

__version__ = "0.1.0"
