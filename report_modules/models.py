"""
Trading Server Records (``report_modules.models``).

Responsibility
--------------
Frozen dataclass value objects for the records reports read from the
trading server: pending trades, accounts and account groups.

Architecture position
---------------------
**Modules layer** -- pure data definitions with ZERO I/O.  Produced by a
``TradingServer`` adapter (``report_modules.ports``) and consumed by report
services.

Invariants enforced
-------------------
* All models are ``frozen=True`` (immutable after construction).
* Timestamps are epoch seconds; prices and amounts are floats as delivered
  by the server.  Display formatting is the report's concern.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TradeRecord:
    """A pending order as stored by the trading server."""

    order: int
    login: int
    symbol: str
    cmd: int
    volume: float  # in hundredths of a lot
    open_time: int  # epoch seconds
    open_price: float
    sl: float = 0.0
    tp: float = 0.0
    storage: float = 0.0  # swap
    profit: float = 0.0
    comment: str = ""


@dataclass(frozen=True)
class AccountRecord:
    """Trading account; an empty record stands in for a failed lookup."""

    login: int = 0
    name: str = ""
    group: str = ""


@dataclass(frozen=True)
class GroupRecord:
    """Account group and its deposit currency."""

    group: str
    currency: str
