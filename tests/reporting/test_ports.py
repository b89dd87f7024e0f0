"""
Tests for the TradingServer protocol and the in-memory adapter.
"""

import pytest

from report_kernel.exceptions import (
    DataSourceError,
    RecordNotFoundError,
    ServerCallError,
)
from report_modules.models import AccountRecord, TradeRecord
from report_modules.ports import InMemoryTradingServer, TradingServer

# 2025-01-01 00:00:00 UTC
DAY_START = 1_735_689_600


class TestProtocol:

    def test_in_memory_server_satisfies_protocol(self, server):
        assert isinstance(server, TradingServer)

    def test_failing_server_satisfies_protocol(self, failing_server):
        assert isinstance(failing_server, TradingServer)


class TestPendingTradesByGroup:

    @pytest.mark.parametrize(
        "mask, orders",
        [
            ("", [50001, 50002]),
            ("*", [50001, 50002]),
            ("real-usd", [50001]),
            ("real-*", [50001, 50002]),
            ("demo*", []),
            ("demo, real-eur", [50002]),
        ],
    )
    def test_group_masks(self, server, mask, orders):
        trades = server.get_pending_trades_by_group(mask, 0, 0)
        assert [t.order for t in trades] == orders

    def test_time_window(self, server):
        trades = server.get_pending_trades_by_group("*", DAY_START, DAY_START + 3_600)
        assert [t.order for t in trades] == [50001]

    def test_trades_of_unknown_accounts_skipped(self, accounts, groups):
        orphan = TradeRecord(
            order=1, login=9999, symbol="X", cmd=0, volume=1,
            open_time=DAY_START, open_price=1.0,
        )
        server = InMemoryTradingServer(trades=[orphan], accounts=accounts, groups=groups)
        assert server.get_pending_trades_by_group("*", 0, 0) == []


class TestLookups:

    def test_account_by_login(self, server):
        assert server.get_account_by_login(1001) == AccountRecord(1001, "Alice", "real-usd")

    def test_missing_account(self, server):
        with pytest.raises(RecordNotFoundError) as exc_info:
            server.get_account_by_login(4242)
        assert exc_info.value.record_id == "4242"
        assert isinstance(exc_info.value, DataSourceError)

    def test_all_groups(self, server, groups):
        assert server.get_all_groups() == groups


class TestConvertRate:

    def test_same_currency(self, server):
        assert server.calculate_convert_rate("JPY", "JPY", 0) == 1.0

    def test_known_rate(self, server):
        assert server.calculate_convert_rate("EUR", "USD", 2) == 2.0

    def test_missing_rate(self, server):
        with pytest.raises(ServerCallError) as exc_info:
            server.calculate_convert_rate("USD", "EUR", 0)
        assert exc_info.value.operation == "CalculateConvertRateByCurrency"
        assert exc_info.value.code == "SERVER_CALL_FAILED"
