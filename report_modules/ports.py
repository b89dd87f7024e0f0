"""TradingServer -- the upstream data source a report reads from.

Reports depend on the ``TradingServer`` protocol only.  Server adapters
raise ``DataSourceError`` subclasses; report services catch and log them
and carry on with partial data.  ``InMemoryTradingServer`` backs the demo
script and the test suite.
"""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase
from typing import Protocol, runtime_checkable

from report_kernel.exceptions import RecordNotFoundError, ServerCallError
from report_kernel.logging_config import get_logger
from report_modules.models import (
    AccountRecord,
    GroupRecord,
    TradeRecord,
)

logger = get_logger("modules.ports")


@runtime_checkable
class TradingServer(Protocol):
    """Protocol for the trading server calls used by reports."""

    def get_pending_trades_by_group(
        self,
        group_mask: str,
        start: int,
        end: int,
    ) -> list[TradeRecord]:
        """Pending trades of accounts whose group matches ``group_mask``."""
        ...

    def get_account_by_login(self, login: int) -> AccountRecord:
        """Raises RecordNotFoundError when no account has ``login``."""
        ...

    def get_all_groups(self) -> list[GroupRecord]:
        ...

    def calculate_convert_rate(
        self,
        from_currency: str,
        to_currency: str,
        cmd: int,
    ) -> float:
        """Multiplier converting ``from_currency`` amounts to ``to_currency``."""
        ...


class InMemoryTradingServer:
    """
    TradingServer over in-memory records.

    Group masks are comma-separated shell patterns (``"real*,demo"``); an
    empty mask or ``"*"`` matches every group.  Trades are selected by
    ``start <= open_time <= end`` unless both bounds are zero.
    """

    def __init__(
        self,
        trades: Iterable[TradeRecord] = (),
        accounts: Iterable[AccountRecord] = (),
        groups: Iterable[GroupRecord] = (),
        rates: dict[tuple[str, str], float] | None = None,
    ):
        self._trades = list(trades)
        self._accounts = {account.login: account for account in accounts}
        self._groups = list(groups)
        self._rates = dict(rates or {})

    def get_pending_trades_by_group(
        self,
        group_mask: str,
        start: int,
        end: int,
    ) -> list[TradeRecord]:
        patterns = [p.strip() for p in group_mask.split(",") if p.strip()] or ["*"]
        selected = []
        for trade in self._trades:
            account = self._accounts.get(trade.login)
            if account is None:
                continue
            if not any(fnmatchcase(account.group, p) for p in patterns):
                continue
            if (start or end) and not (start <= trade.open_time <= end):
                continue
            selected.append(trade)
        logger.debug(
            "in_memory_trades_selected",
            extra={"group_mask": group_mask, "count": len(selected)},
        )
        return selected

    def get_account_by_login(self, login: int) -> AccountRecord:
        try:
            return self._accounts[login]
        except KeyError:
            raise RecordNotFoundError("Account", str(login)) from None

    def get_all_groups(self) -> list[GroupRecord]:
        return list(self._groups)

    def calculate_convert_rate(
        self,
        from_currency: str,
        to_currency: str,
        cmd: int,
    ) -> float:
        if from_currency == to_currency:
            return 1.0
        rate = self._rates.get((from_currency, to_currency))
        if rate is None:
            raise ServerCallError(
                "CalculateConvertRateByCurrency",
                f"no rate for {from_currency}/{to_currency}",
            )
        return rate
