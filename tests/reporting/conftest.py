"""
Reporting-specific test fixtures.

Provides:
- PendingTradesConfig instances
- PendingTradesReportService wired to the in-memory server
- A server whose calls always fail, for degradation tests
"""

import pytest

from report_kernel.exceptions import ServerCallError
from report_modules.pending_trades.config import PendingTradesConfig
from report_modules.pending_trades.service import PendingTradesReportService


@pytest.fixture
def report_config() -> PendingTradesConfig:
    """Standard report configuration for tests."""
    return PendingTradesConfig.with_defaults()


@pytest.fixture
def report_service(server, report_config) -> PendingTradesReportService:
    """PendingTradesReportService wired to the in-memory server."""
    return PendingTradesReportService(server=server, config=report_config)


class FailingTradingServer:
    """TradingServer whose every call raises ServerCallError."""

    def get_pending_trades_by_group(self, group_mask, start, end):
        raise ServerCallError("GetPendingTradesByGroup", "connection reset")

    def get_account_by_login(self, login):
        raise ServerCallError("GetAccountByLogin", "connection reset")

    def get_all_groups(self):
        raise ServerCallError("GetAllGroups", "connection reset")

    def calculate_convert_rate(self, from_currency, to_currency, cmd):
        raise ServerCallError("CalculateConvertRateByCurrency", "connection reset")


@pytest.fixture
def failing_server() -> FailingTradingServer:
    return FailingTradingServer()
