"""
Pytest fixtures for the report kernel test suite.

Provides:
- Structured logging configuration and log capture
- Sample trading-server records and an in-memory server
- Common builder fixtures

No network, database or filesystem access outside ``tmp_path``.
"""

import json
import logging
from io import StringIO

import pytest

from report_kernel.domain.filters import FilterConfig, FilterType
from report_kernel.domain.table_builder import TableBuilder, TableColumn
from report_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from report_modules.models import AccountRecord, GroupRecord, TradeRecord
from report_modules.ports import InMemoryTradingServer

# 2025-01-01 00:00:00 UTC
DAY_START = 1_735_689_600


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture report_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            builder.build_table_properties()
            logs = captured_logs()
            assert any(r["message"] == "table_properties_built" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("report_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Builder fixtures
# =============================================================================


@pytest.fixture
def search_filter() -> FilterConfig:
    return FilterConfig(kind=FilterType.SEARCH)


@pytest.fixture
def builder() -> TableBuilder:
    """Empty legacy-mode builder."""
    return TableBuilder("TestTable")


@pytest.fixture
def order_column(search_filter) -> TableColumn:
    return TableColumn(key="order", label="ORDER", order=1, filter=search_filter)


# =============================================================================
# Trading server fixtures
# =============================================================================


@pytest.fixture
def groups() -> list[GroupRecord]:
    return [
        GroupRecord(group="real-usd", currency="USD"),
        GroupRecord(group="real-eur", currency="EUR"),
    ]


@pytest.fixture
def accounts() -> list[AccountRecord]:
    return [
        AccountRecord(login=1001, name="Alice", group="real-usd"),
        AccountRecord(login=1002, name="Bruno", group="real-eur"),
    ]


@pytest.fixture
def trades() -> list[TradeRecord]:
    return [
        TradeRecord(
            order=50001,
            login=1001,
            symbol="EURUSD",
            cmd=3,
            volume=150,
            open_time=DAY_START + 3_600,
            open_price=1.5,
            sl=1.25,
            tp=1.75,
            comment="first",
        ),
        TradeRecord(
            order=50002,
            login=1002,
            symbol="XAUUSD",
            cmd=6,
            volume=50,
            open_time=DAY_START + 7_200,
            open_price=2000.0,
            sl=2050.0,
            tp=1900.0,
            storage=-2.5,
            profit=10.0,
        ),
    ]


@pytest.fixture
def server(trades, accounts, groups) -> InMemoryTradingServer:
    return InMemoryTradingServer(
        trades=trades,
        accounts=accounts,
        groups=groups,
        rates={("EUR", "USD"): 2.0},
    )
