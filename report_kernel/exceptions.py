"""
Typed Exception Hierarchy for the Report Kernel.

===============================================================================
SCOPE
===============================================================================

The document-construction core (values, nodes, serializer, table builder)
is total over its declared inputs.  It raises only:

  - ``TypeError`` for a Python object outside the closed DynamicValue union
    (a programming error, never a data error), and
  - ``DuplicateColumnError`` when a builder was explicitly put in strict
    column mode.

Everything else in this module belongs to the report glue: data-source
adapters raise ``DataSourceError`` subclasses and report services catch,
log and continue with partial data.  Those errors never cross into the
core.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    ReportKernelError (base)
    |
    +-- TableError
    |   +-- DuplicateColumnError
    |
    +-- DataSourceError
    |   +-- ServerCallError
    |   +-- RecordNotFoundError
    |
    +-- ReportConfigError
        +-- InvalidReportConfigError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category     | Code                    | When Raised
-------------|-------------------------|-------------------------------------
Table        | DUPLICATE_COLUMN        | Column key re-added in strict mode
-------------|-------------------------|-------------------------------------
Data source  | SERVER_CALL_FAILED      | Upstream server call failed
             | RECORD_NOT_FOUND        | Requested record does not exist
-------------|-------------------------|-------------------------------------
Config       | INVALID_REPORT_CONFIG   | Unknown or malformed config keys

===============================================================================
"""


class ReportKernelError(Exception):
    """
    Base exception for all report kernel errors.

    All subclasses carry a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "REPORT_KERNEL_ERROR"


# Table-related exceptions


class TableError(ReportKernelError):
    """Base exception for table description errors."""

    code: str = "TABLE_ERROR"


class DuplicateColumnError(TableError):
    """Column key was added twice to a strict-mode builder."""

    code: str = "DUPLICATE_COLUMN"

    def __init__(self, table_name: str, column_key: str):
        self.table_name = table_name
        self.column_key = column_key
        super().__init__(
            f"Column {column_key!r} already defined in table {table_name!r}"
        )


# Data-source exceptions


class DataSourceError(ReportKernelError):
    """Base exception for upstream data-source failures."""

    code: str = "DATA_SOURCE_ERROR"


class ServerCallError(DataSourceError):
    """An upstream server call failed."""

    code: str = "SERVER_CALL_FAILED"

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class RecordNotFoundError(DataSourceError):
    """A requested upstream record does not exist."""

    code: str = "RECORD_NOT_FOUND"

    def __init__(self, record_type: str, record_id: str):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(f"{record_type} not found: {record_id}")


# Configuration exceptions


class ReportConfigError(ReportKernelError):
    """Base exception for report configuration errors."""

    code: str = "REPORT_CONFIG_ERROR"


class InvalidReportConfigError(ReportConfigError):
    """Report configuration contains unknown or malformed entries."""

    code: str = "INVALID_REPORT_CONFIG"

    def __init__(self, reason: str, keys: tuple[str, ...] = ()):
        self.reason = reason
        self.keys = keys
        suffix = f": {', '.join(keys)}" if keys else ""
        super().__init__(f"Invalid report config ({reason}){suffix}")
