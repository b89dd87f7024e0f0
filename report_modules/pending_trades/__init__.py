"""
Pending Trades Report (``report_modules.pending_trades``).

Responsibility
--------------
Read-only report listing pending orders of a selected account group over
a period, converted into a single report currency, with a total volume
line.  Output is the host's modal response wrapping a
``Column[h1, Table]`` document.

Failure modes
-------------
* Upstream server failures are logged and replaced by empty / default
  data; the report is always produced.
"""

from report_modules.pending_trades.config import PendingTradesConfig
from report_modules.pending_trades.models import ReportInfo, ReportKind, ReportRequest
from report_modules.pending_trades.service import (
    PENDING_TRADES_COLUMNS,
    REPORT_INFO,
    PendingTradesReportService,
)

__all__ = [
    # Service
    "PendingTradesReportService",
    "PENDING_TRADES_COLUMNS",
    "REPORT_INFO",
    # Config
    "PendingTradesConfig",
    # Models
    "ReportKind",
    "ReportInfo",
    "ReportRequest",
]
