#!/usr/bin/env python3
"""
Demo: Pending Trades Report.

Seeds an in-memory trading server with a handful of accounts and pending
orders, runs the pending trades report and prints the host response JSON
to stdout.

Usage:
    python3 scripts/demo_pending_trades.py
    python3 scripts/demo_pending_trades.py --group "real*" --pretty
    python3 scripts/demo_pending_trades.py --config scripts/pending_trades.yaml
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DAY_START = 1_735_689_600  # 2025-01-01 00:00:00 UTC
DAY_END = DAY_START + 86_399


def build_demo_server():
    from report_modules.models import AccountRecord, GroupRecord, TradeRecord
    from report_modules.ports import InMemoryTradingServer

    groups = [
        GroupRecord(group="real-usd", currency="USD"),
        GroupRecord(group="real-eur", currency="EUR"),
        GroupRecord(group="demo", currency="USD"),
    ]
    accounts = [
        AccountRecord(login=1001, name="Alice Trader", group="real-usd"),
        AccountRecord(login=1002, name="Bruno Rossi", group="real-eur"),
        AccountRecord(login=2001, name="Demo Account", group="demo"),
    ]
    trades = [
        TradeRecord(
            order=50001, login=1001, symbol="EURUSD", cmd=3, volume=150,
            open_time=DAY_START + 3_600, open_price=1.0825, sl=1.07, tp=1.1,
            comment="limit below market",
        ),
        TradeRecord(
            order=50002, login=1002, symbol="XAUUSD", cmd=6, volume=20,
            open_time=DAY_START + 7_200, open_price=2050.0, sl=2075.0, tp=2000.0,
            storage=-1.5,
        ),
        TradeRecord(
            order=50003, login=2001, symbol="GBPUSD", cmd=5, volume=100,
            open_time=DAY_START + 10_800, open_price=1.27,
        ),
    ]
    return InMemoryTradingServer(
        trades=trades,
        accounts=accounts,
        groups=groups,
        rates={("EUR", "USD"): 1.08},
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render the pending trades report from demo data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  python3 scripts/demo_pending_trades.py --pretty\n"
            "  python3 scripts/demo_pending_trades.py --group 'real*'\n"
        ),
    )
    parser.add_argument("--group", type=str, default="*", help="group mask")
    parser.add_argument("--from", dest="start", type=int, default=DAY_START)
    parser.add_argument("--to", dest="end", type=int, default=DAY_END)
    parser.add_argument("--config", type=Path, help="YAML report config")
    parser.add_argument("--pretty", action="store_true", help="indent JSON output")
    parser.add_argument("--verbose", action="store_true", help="log to stderr")
    args = parser.parse_args(argv)

    from report_kernel.logging_config import configure_logging
    from report_modules.pending_trades import (
        PendingTradesConfig,
        PendingTradesReportService,
    )

    configure_logging(level=logging.DEBUG if args.verbose else logging.ERROR)

    config = (
        PendingTradesConfig.from_yaml(args.config)
        if args.config
        else PendingTradesConfig.with_defaults()
    )
    service = PendingTradesReportService(build_demo_server(), config)
    response = service.create_report(
        {"group": args.group, "from": args.start, "to": args.end}
    )

    if args.pretty:
        print(json.dumps(response, indent=2, ensure_ascii=False))
    else:
        print(json.dumps(response, ensure_ascii=False, separators=(",", ":")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
