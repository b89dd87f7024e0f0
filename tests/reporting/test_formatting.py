"""
Tests for pending trades display formatting.
"""

import math
from datetime import UTC
from zoneinfo import ZoneInfo

import pytest

from report_modules.models import GroupRecord
from report_modules.pending_trades.formatting import (
    UNKNOWN_CURRENCY,
    format_timestamp,
    group_currency,
    order_type_label,
    truncate_double,
)

# 2025-01-01 00:00:00 UTC
DAY_START = 1_735_689_600


class TestTruncateDouble:

    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            (1.239, 2, 1.23),
            (-1.239, 2, -1.23),
            (2.5, 0, 2.0),
            (-2.5, 0, -2.0),
            (50001, 0, 50001.0),
            (0.0, 2, 0.0),
        ],
    )
    def test_truncates_toward_zero(self, value, digits, expected):
        assert truncate_double(value, digits) == expected

    def test_nan_passes_through(self):
        assert math.isnan(truncate_double(math.nan, 2))

    @pytest.mark.parametrize("value", [math.inf, -math.inf, 1e308])
    def test_unscalable_values_unchanged(self, value):
        assert truncate_double(value, 2) == value


class TestFormatTimestamp:

    def test_utc(self):
        assert format_timestamp(DAY_START + 3_661, UTC) == "2025.01.01 01:01:01"

    def test_zone_offset(self):
        assert format_timestamp(DAY_START, ZoneInfo("Asia/Tokyo")) == "2025.01.01 09:00:00"

    def test_custom_format(self):
        assert format_timestamp(DAY_START, UTC, "%d/%m/%Y") == "01/01/2025"


class TestGroupCurrency:

    def test_known_group(self):
        groups = [GroupRecord("real-usd", "USD"), GroupRecord("real-eur", "EUR")]
        assert group_currency(groups, "real-eur") == "EUR"

    def test_unknown_group(self):
        assert group_currency([GroupRecord("real-usd", "USD")], "demo") == UNKNOWN_CURRENCY
        assert group_currency([], "") == "N/A"


class TestOrderTypeLabel:

    @pytest.mark.parametrize(
        "cmd, label",
        [
            (0, "buy"),
            (1, "sell"),
            (2, "unknown"),
            (3, "buy limit"),
            (4, "sell limit"),
            (5, "buy limit"),
            (6, "sell limit"),
            (7, "unknown"),
            (-1, "unknown"),
        ],
    )
    def test_labels(self, cmd, label):
        assert order_type_label(cmd) == label
