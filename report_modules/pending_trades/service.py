"""
Pending Trades Report Service (``report_modules.pending_trades.service``).

Responsibility
--------------
Generates the pending trades report: pending orders placed by accounts of
a selected group over a period, with account name, open time, order type,
symbol, volume, prices, stops, swap, amount and comment, all converted
into the report currency.  Bridges the ``TradingServer`` port to the
document core (``TableBuilder`` + tag catalog + serializer).

Architecture position
---------------------
**Modules layer** -- thin glue.  ``PendingTradesReportService`` is the
sole public entry point.  Constructor: ``server`` + ``config``.

Invariants enforced
-------------------
* Read-only -- the service never writes to the trading server.
* Upstream failures never reach the document core: every server call is
  wrapped, logged and replaced by empty / default data.
* Rows are positional and follow ``PENDING_TRADES_COLUMNS`` order.

Failure modes
-------------
* Trades or groups unavailable  -> empty table, logged.
* Account lookup fails  -> row rendered with an empty account name and
  ``N/A`` group currency, logged.
* Conversion rate unavailable or non-finite  -> amounts left unconverted
  (multiplier 1), logged.
* Non-finite amount (NaN / infinity) from the server  -> cell rendered as
  0, logged.  The response stays valid JSON.
"""

from __future__ import annotations

import math
import time
from typing import Any
from uuid import uuid4

from report_kernel.domain.filters import FilterConfig, FilterType
from report_kernel.domain.node import Node, text
from report_kernel.domain.table_builder import TableBuilder, TableColumn
from report_kernel.domain.tags import Column, Table, h1
from report_kernel.exceptions import DataSourceError
from report_kernel.logging_config import LogContext, get_logger
from report_modules.models import AccountRecord, GroupRecord, TradeRecord
from report_modules.pending_trades.config import PendingTradesConfig
from report_modules.pending_trades.formatting import (
    format_timestamp,
    group_currency,
    order_type_label,
    truncate_double,
)
from report_modules.pending_trades.layout import build_modal
from report_modules.pending_trades.models import ReportInfo, ReportKind, ReportRequest
from report_modules.ports import TradingServer

logger = get_logger("modules.pending_trades.service")

REPORT_INFO = ReportInfo(
    version=1,
    name="Pending Trades report",
    description=(
        "Summary data on pending trades executed by a selected group of "
        "traders over a specified day. Includes date, symbol, price, profit, "
        "volume, s / l, t / p, commission, swap and account information."
    ),
    kind=ReportKind.DAILY_GROUP,
)

SEARCH_FILTER = FilterConfig(kind=FilterType.SEARCH)
DATE_TIME_FILTER = FilterConfig(kind=FilterType.DATE_TIME)

PENDING_TRADES_COLUMNS: tuple[TableColumn, ...] = (
    TableColumn("order", "ORDER", 1, SEARCH_FILTER),
    TableColumn("login", "LOGIN", 2, SEARCH_FILTER),
    TableColumn("name", "NAME", 3, SEARCH_FILTER),
    TableColumn("open_time", "OPEN_TIME", 4, DATE_TIME_FILTER),
    TableColumn("type", "TYPE", 5, SEARCH_FILTER),
    TableColumn("symbol", "SYMBOL", 6, SEARCH_FILTER),
    TableColumn("volume", "VOLUME", 7, SEARCH_FILTER),
    TableColumn("open_price", "OPEN_PRICE", 8, SEARCH_FILTER),
    TableColumn("sl", "S / L", 9, SEARCH_FILTER),
    TableColumn("tp", "T / P", 10, SEARCH_FILTER),
    TableColumn("storage", "SWAP", 11, SEARCH_FILTER),
    TableColumn("profit", "AMOUNT", 12, SEARCH_FILTER),
    TableColumn("comment", "COMMENT", 13, SEARCH_FILTER),
    TableColumn("currency", "CURRENCY", 14, SEARCH_FILTER),
)


class PendingTradesReportService:
    """
    Pending trades report generation service.

    Contract
    --------
    * ``about()`` returns the report self-description.
    * ``create_report(request)`` returns the host response dict
      ``{"ui": {"modal": {...}}}`` and never raises for upstream failures.

    Non-goals
    ---------
    * Does NOT validate business data from the server; values are formatted
      as delivered.
    * Does NOT cache server responses between runs.
    """

    def __init__(
        self,
        server: TradingServer,
        config: PendingTradesConfig | None = None,
    ):
        self._server = server
        self._config = config or PendingTradesConfig.with_defaults()

        logger.info(
            "pending_trades_service_initialized",
            extra={
                "report_currency": self._config.report_currency,
                "timezone": self._config.timezone,
            },
        )

    # =========================================================================
    # Internal helpers
    # =========================================================================

    def _fetch_trades(self, request: ReportRequest) -> list[TradeRecord]:
        try:
            return list(
                self._server.get_pending_trades_by_group(
                    request.group, request.start, request.end
                )
            )
        except DataSourceError:
            logger.exception(
                "pending_trades_fetch_failed",
                extra={"group_mask": request.group},
            )
            return []

    def _fetch_groups(self) -> list[GroupRecord]:
        try:
            return list(self._server.get_all_groups())
        except DataSourceError:
            logger.exception("groups_fetch_failed")
            return []

    def _fetch_account(self, login: int) -> AccountRecord:
        try:
            return self._server.get_account_by_login(login)
        except DataSourceError:
            logger.exception("account_fetch_failed", extra={"login": login})
            return AccountRecord()

    def _conversion_multiplier(self, currency: str, cmd: int) -> float:
        target = self._config.report_currency
        if currency == target:
            return 1.0
        try:
            rate = self._server.calculate_convert_rate(currency, target, cmd)
        except DataSourceError:
            logger.exception(
                "conversion_rate_unavailable",
                extra={"from_currency": currency, "to_currency": target},
            )
            return 1.0
        if not math.isfinite(rate):
            logger.warning(
                "conversion_rate_not_finite",
                extra={"from_currency": currency, "to_currency": target},
            )
            return 1.0
        return rate

    def _amount(self, value: float, column: str, order: int | None = None) -> float:
        """Truncate ``value`` to 2 decimals; non-finite values become 0."""
        amount = truncate_double(value, 2)
        if math.isfinite(amount):
            return amount
        logger.warning(
            "non_finite_trade_value",
            extra={"order": order, "column": column},
        )
        return 0.0

    def _new_table_builder(self) -> TableBuilder:
        builder = TableBuilder(
            self._config.table_name,
            column_mode=self._config.builder_column_mode,
            debug_checks=self._config.debug_checks,
        )
        builder.set_id_column("order")
        builder.set_order_by("order", "DESC")
        builder.enable_auto_save(False)
        builder.enable_refresh_button(False)
        builder.enable_bookmarks_button(False)
        builder.enable_export_button(True)
        builder.enable_total(True)
        builder.set_total_data_title(self._config.total_data_title)
        builder.add_columns(PENDING_TRADES_COLUMNS)
        return builder

    def _trade_row(
        self,
        trade: TradeRecord,
        account: AccountRecord,
        multiplier: float,
    ) -> list[Any]:
        """One row, positionally aligned with PENDING_TRADES_COLUMNS."""
        return [
            truncate_double(trade.order, 0),
            truncate_double(trade.login, 0),
            account.name,
            format_timestamp(
                trade.open_time, self._config.zone, self._config.timestamp_format
            ),
            order_type_label(trade.cmd),
            trade.symbol,
            self._amount(trade.volume / 100.0, "volume", trade.order),
            self._amount(trade.open_price * multiplier, "open_price", trade.order),
            self._amount(trade.sl * multiplier, "sl", trade.order),
            self._amount(trade.tp * multiplier, "tp", trade.order),
            self._amount(trade.storage * multiplier, "storage", trade.order),
            self._amount(trade.profit * multiplier, "profit", trade.order),
            trade.comment,
            self._config.report_currency,
        ]

    # =========================================================================
    # Public API
    # =========================================================================

    def about(self) -> dict[str, Any]:
        """Report self-description for the host's report list."""
        return REPORT_INFO.to_dict()

    def build_document(self, request: ReportRequest) -> Node:
        """
        Build the report body: a title above the trades table.

        Postconditions:
            - Returns ``Column[h1[#text(title)], Table(props)]``.
        """
        t0 = time.monotonic()
        trades = self._fetch_trades(request)
        groups = self._fetch_groups()

        builder = self._new_table_builder()
        total_volume = 0.0

        for trade in trades:
            account = self._fetch_account(trade.login)
            currency = group_currency(groups, account.group)
            multiplier = self._conversion_multiplier(currency, trade.cmd)
            if math.isfinite(trade.volume):
                total_volume += trade.volume
            builder.add_row(self._trade_row(trade, account, multiplier))

        builder.set_total_data([
            {
                "volume": self._amount(total_volume / 100.0, "total_volume"),
                "currency": self._config.report_currency,
            }
        ])

        logger.info(
            "pending_trades_report_built",
            extra={
                "trades": len(trades),
                "groups": len(groups),
                "duration_ms": round((time.monotonic() - t0) * 1000, 2),
            },
        )

        table_node = Table(props=builder.build_table_properties())
        return Column([h1([text(self._config.title)]), table_node])

    def create_report(self, request: ReportRequest | dict[str, Any]) -> dict[str, Any]:
        """Generate the report and wrap it into the host's modal response."""
        if not isinstance(request, ReportRequest):
            request = ReportRequest.from_dict(request)

        with LogContext.bind(
            report_name=REPORT_INFO.name,
            request_id=str(uuid4()),
            group=request.group,
        ):
            logger.info(
                "pending_trades_report_requested",
                extra={"start": request.start, "end": request.end},
            )
            document = self.build_document(request)
            return build_modal(
                document,
                header_title=self._config.header_title,
                size=self._config.modal_size,
            )
