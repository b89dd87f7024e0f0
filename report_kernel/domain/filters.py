"""
Filters -- Per-column query affordances.

Responsibility:
    Models the filter a table column offers to the renderer: its kind
    (text search, select, date/time pickers), an optional search operator,
    the value domain, select options and presentation hints.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Consumed by ``TableColumn`` in ``report_kernel.domain.table_builder``.

Invariants enforced:
    - ``kind`` is mandatory; every other field is absent by default and
      only emitted when set (sparse encoding).
    - Token spelling is fixed by the renderer: filter kinds are
      hyphen-separated (``date-time-sec``), search operators are
      underscore-separated (``not_equal``).  The asymmetry is deliberate
      and must not be normalized.

Failure modes:
    - None.  Token conversion is total: an unrecognized kind or operator
      falls back to ``search`` / ``like`` and logs a warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from report_kernel.domain.values import Map, to_value
from report_kernel.logging_config import get_logger

logger = get_logger("domain.filters")


class FilterType(str, Enum):
    """Kind of filter control rendered above a column."""

    SEARCH = "search"
    SELECT = "select"
    DATE = "date"
    DATE_TIME = "date-time"
    DATE_TIME_SEC = "date-time-sec"
    DATE_INPUT = "date-input"
    DATE_TIME_INPUT = "date-time-input"
    DATE_TIME_SEC_INPUT = "date-time-sec-input"


class SearchOperator(str, Enum):
    """Comparison applied by the renderer's query."""

    LIKE = "like"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    BETWEEN = "between"
    OUTSIDE = "outside"
    BELOW = "below"
    BELOW_OR_EQUAL = "below_or_equal"
    ABOVE = "above"
    ABOVE_OR_EQUAL = "above_or_equal"
    SELECT = "select"
    SELECT_EXCEPT = "select_except"


class ValueMode(str, Enum):
    """Value domain of the filtered column."""

    STRING = "string"
    NUMBER = "number"


DEFAULT_FILTER_TYPE = FilterType.SEARCH
DEFAULT_SEARCH_OPERATOR = SearchOperator.LIKE


def filter_type_token(kind: Any) -> str:
    """Canonical renderer token for a filter kind."""
    if isinstance(kind, FilterType):
        return kind.value
    logger.warning("filter_type_fallback", extra={"kind": repr(kind)})
    return DEFAULT_FILTER_TYPE.value


def search_operator_token(operator: Any) -> str:
    """Canonical renderer token for a search operator."""
    if isinstance(operator, SearchOperator):
        return operator.value
    logger.warning("search_operator_fallback", extra={"operator": repr(operator)})
    return DEFAULT_SEARCH_OPERATOR.value


@dataclass(frozen=True)
class FilterOption:
    """One entry of a select filter."""

    label: str
    value: str | float

    def to_value(self) -> Map:
        return Map({"label": to_value(self.label), "value": to_value(self.value)})


@dataclass(frozen=True)
class FilterConfig:
    """
    Filter configuration for one column.

    Contract:
        Only ``kind`` is required.  ``None`` means "not set" for every
        optional field and keeps the key out of the emitted description.

    Guarantees:
        - ``to_value()`` always emits ``type`` first, then the set optional
          fields in a fixed order.
    """

    kind: FilterType
    search_operator: SearchOperator | None = None
    value_mode: ValueMode | None = None
    options: tuple[FilterOption, ...] | None = None
    option_search_key: str | None = None
    virtualized: bool | None = None
    virtualized_list_height: float | None = None
    virtualized_item_height: float | None = None
    exact: bool | None = None
    return_unix: bool | None = None

    def __post_init__(self) -> None:
        if self.options is not None:
            object.__setattr__(self, "options", tuple(self.options))

    def to_value(self) -> Map:
        """Sparse renderer description of this filter."""
        out: dict[str, Any] = {"type": filter_type_token(self.kind)}
        if self.search_operator is not None:
            out["search_type"] = search_operator_token(self.search_operator)
        if self.value_mode is not None:
            out["mode"] = self.value_mode.value
        if self.options:
            out["options"] = [option.to_value() for option in self.options]
        if self.option_search_key is not None:
            out["search_option_key"] = self.option_search_key
        if self.virtualized is not None:
            out["is_virtualized_options"] = self.virtualized
        if self.virtualized_list_height is not None:
            out["virtualized_options_height"] = self.virtualized_list_height
        if self.virtualized_item_height is not None:
            out["virtualized_option_height"] = self.virtualized_item_height
        if self.exact is not None:
            out["is_exact"] = self.exact
        if self.return_unix is not None:
            out["is_return_unix"] = self.return_unix
        return to_value(out)

    @classmethod
    def search(cls, operator: SearchOperator | None = None) -> FilterConfig:
        """Free-text search filter."""
        return cls(kind=FilterType.SEARCH, search_operator=operator)

    @classmethod
    def select(
        cls,
        options: tuple[FilterOption, ...],
        operator: SearchOperator | None = SearchOperator.SELECT,
    ) -> FilterConfig:
        """Select filter over a fixed option list."""
        return cls(kind=FilterType.SELECT, search_operator=operator, options=options)
