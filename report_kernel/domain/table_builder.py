"""
TableBuilder -- Stateful table description accumulator.

Responsibility:
    Accumulates column definitions, row data, ordering / id / visibility
    flags and optional total-row data for one table, and emits the single
    ``Map`` of table properties that becomes the props of a ``Table`` node.

Architecture position:
    Kernel > Domain -- pure in-memory builder, zero I/O.
    One instance per report invocation; not shared across threads.

Invariants enforced:
    - ``data.structure`` lists column keys in ``add_column`` call order.
    - ``structure`` holds one description per distinct key (last write wins).
    - ``totalData`` is present iff ``set_total_data`` received a non-empty
      sequence.
    - ``build_table_properties`` never mutates state; repeated calls return
      equal maps.

Preconditions (not enforced):
    - Column keys are unique (see ``ColumnMode``).
    - Each row is positional and aligned with the column declaration order:
      cell ``i`` belongs to the ``i``-th key of ``data.structure``.
    - ``set_id_column`` / ``set_order_by`` name declared columns.

    Breaking a precondition yields a structurally valid but inconsistent
    document.  ``consistency_issues()`` reports such inconsistencies, and a
    builder created with ``debug_checks=True`` logs them when building.

Failure modes:
    - DuplicateColumnError when a key is re-added in ``ColumnMode.STRICT``.
    - TypeError when a cell is outside the DynamicValue union.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from report_kernel.domain.filters import FilterConfig
from report_kernel.domain.values import DynamicValue, List, Map, to_value, to_values
from report_kernel.exceptions import DuplicateColumnError
from report_kernel.logging_config import get_logger

logger = get_logger("domain.table_builder")


class ColumnMode(str, Enum):
    """How a builder treats a column key that is added twice."""

    # Key is appended to the order list again; the description is replaced.
    LEGACY = "legacy"
    # Re-adding a key raises DuplicateColumnError.
    STRICT = "strict"


@dataclass(frozen=True)
class TableColumn:
    """
    Column descriptor.

    ``label`` is the display-label token the renderer translates;
    ``order`` is the numeric display order.
    """

    key: str
    label: str
    order: float = 0.0
    filter: FilterConfig | None = None
    exported: bool = True
    sortable: bool = True

    def to_value(self) -> Map:
        """Column description: ``name, order, export, sort[, filter]``."""
        out: dict[str, Any] = {
            "name": self.label,
            "order": self.order,
            "export": self.exported,
            "sort": self.sortable,
        }
        if self.filter is not None:
            out["filter"] = self.filter.to_value()
        return to_value(out)


class TableBuilder:
    """
    Incrementally configured table description.

    Contract:
        Mutated only through its own methods; ``build_table_properties``
        is the sole artifact consumers read.

    Guarantees:
        - Setters are last-write-wins and never validate.
        - Output key order is fixed: ``name, idCol, orderBy, autoSave,
          showRefreshBtn, showBookmarksBtn, showExportBtn, showTotal,
          totalDataTitle[, totalData], data, structure``.

    Non-goals:
        - Does NOT check rows against columns or ids against keys, apart
          from the opt-in debug report.
    """

    DEFAULT_ORDER_BY: tuple[str, str] = ("id", "DESC")

    def __init__(
        self,
        table_name: str,
        *,
        column_mode: ColumnMode = ColumnMode.LEGACY,
        debug_checks: bool = False,
    ):
        self._table_name = table_name
        self._column_mode = ColumnMode(column_mode)
        self._debug_checks = debug_checks

        self._id_column = ""
        self._column_order: list[str] = []
        self._structure: dict[str, Map] = {}
        self._rows: list[List] = []
        self._order_by: tuple[str, str] = self.DEFAULT_ORDER_BY

        self._auto_save_enabled = False
        self._refresh_button_enabled = True
        self._bookmarks_button_enabled = True
        self._export_button_enabled = True
        self._total_enabled = False

        self._total_data_title = ""
        self._total_data: tuple[DynamicValue, ...] = ()

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def column_mode(self) -> ColumnMode:
        return self._column_mode

    @property
    def column_keys(self) -> tuple[str, ...]:
        return tuple(self._column_order)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    # =========================================================================
    # Columns and rows
    # =========================================================================

    def add_column(self, column: TableColumn) -> None:
        """Append ``column.key`` to the display order and store its description."""
        if column.key in self._structure:
            if self._column_mode is ColumnMode.STRICT:
                raise DuplicateColumnError(self._table_name, column.key)
            logger.debug(
                "table_column_redefined",
                extra={"table": self._table_name, "column": column.key},
            )
        self._column_order.append(column.key)
        self._structure[column.key] = column.to_value()

    def add_columns(self, columns: Iterable[TableColumn]) -> None:
        for column in columns:
            self.add_column(column)

    def add_row(self, values: Iterable[Any]) -> None:
        """Append one positional row; cells are lifted into DynamicValues."""
        self._rows.append(List(to_values(values)))

    # =========================================================================
    # Setters
    # =========================================================================

    def set_id_column(self, key: str) -> None:
        self._id_column = key

    def set_order_by(self, key: str, direction: str = "DESC") -> None:
        self._order_by = (key, direction)

    def enable_auto_save(self, enabled: bool) -> None:
        self._auto_save_enabled = enabled

    def enable_refresh_button(self, enabled: bool) -> None:
        self._refresh_button_enabled = enabled

    def enable_bookmarks_button(self, enabled: bool) -> None:
        self._bookmarks_button_enabled = enabled

    def enable_export_button(self, enabled: bool) -> None:
        self._export_button_enabled = enabled

    def enable_total(self, enabled: bool) -> None:
        self._total_enabled = enabled

    def set_total_data_title(self, title: str) -> None:
        self._total_data_title = title

    def set_total_data(self, rows: Iterable[Mapping[str, Any] | Map]) -> None:
        """Replace the aggregate rows shown in the total line."""
        self._total_data = to_values(rows)

    # =========================================================================
    # Output
    # =========================================================================

    def build_table_properties(self) -> Map:
        """
        Assemble the table properties map.

        Postconditions:
            - Pure: builder state is unchanged.
            - ``totalData`` present iff total data is non-empty.
        """
        if self._debug_checks:
            for issue in self.consistency_issues():
                logger.warning(
                    "table_consistency_issue",
                    extra={"table": self._table_name, "issue": issue},
                )

        props: dict[str, Any] = {
            "name": self._table_name,
            "idCol": self._id_column,
            "orderBy": list(self._order_by),
            "autoSave": self._auto_save_enabled,
            "showRefreshBtn": self._refresh_button_enabled,
            "showBookmarksBtn": self._bookmarks_button_enabled,
            "showExportBtn": self._export_button_enabled,
            "showTotal": self._total_enabled,
            "totalDataTitle": self._total_data_title,
        }
        if self._total_data:
            props["totalData"] = List(self._total_data)
        props["data"] = {
            "rows": List(tuple(self._rows)),
            "structure": list(self._column_order),
        }
        props["structure"] = Map(self._structure)

        logger.debug(
            "table_properties_built",
            extra={
                "table": self._table_name,
                "columns": len(self._structure),
                "rows": len(self._rows),
            },
        )
        return to_value(props)

    def consistency_issues(self) -> tuple[str, ...]:
        """
        Describe every broken precondition; empty when consistent.

        Checks: duplicate order-list keys, id / order-by columns that were
        never declared, and rows whose length differs from the length of
        the display order (``data.structure``).
        """
        issues: list[str] = []

        seen: set[str] = set()
        for key in self._column_order:
            if key in seen:
                issues.append(f"column {key!r} appears more than once in display order")
            seen.add(key)

        if self._id_column and self._id_column not in self._structure:
            issues.append(f"id column {self._id_column!r} is not a declared column")

        order_key = self._order_by[0]
        if self._structure and order_key not in self._structure:
            issues.append(f"order-by column {order_key!r} is not a declared column")

        width = len(self._column_order)
        for index, row in enumerate(self._rows):
            if len(row) != width:
                issues.append(
                    f"row {index} has {len(row)} cells, expected {width}"
                )

        return tuple(issues)
