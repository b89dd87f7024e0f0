"""Display formatting for pending trades rows."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime, tzinfo

from report_modules.models import GroupRecord

UNKNOWN_CURRENCY = "N/A"

# Trading-server cmd codes; 3/5 and 4/6 share a label
_ORDER_TYPE_LABELS: dict[int, str] = {
    0: "buy",
    1: "sell",
    3: "buy limit",
    4: "sell limit",
    5: "buy limit",
    6: "sell limit",
}


def format_timestamp(
    timestamp: int,
    tz: tzinfo,
    fmt: str = "%Y.%m.%d %H:%M:%S",
) -> str:
    """Render epoch seconds as local time in ``tz``."""
    return datetime.fromtimestamp(timestamp, tz=tz).strftime(fmt)


def truncate_double(value: float, digits: int) -> float:
    """
    Cut ``value`` to ``digits`` decimals, toward zero.

    Truncation, not rounding: ``truncate_double(1.239, 2) == 1.23`` and
    ``truncate_double(-1.239, 2) == -1.23``.  NaN and infinities are
    returned unchanged.
    """
    scaled = value * 10.0 ** digits
    if not math.isfinite(scaled):
        return value
    return math.trunc(scaled) / 10.0 ** digits


def group_currency(groups: Iterable[GroupRecord], group_name: str) -> str:
    """Deposit currency of ``group_name``; ``"N/A"`` when unknown."""
    for group in groups:
        if group.group == group_name:
            return group.currency
    return UNKNOWN_CURRENCY


def order_type_label(cmd: int) -> str:
    return _ORDER_TYPE_LABELS.get(cmd, "unknown")
