"""
Pending Trades Report Configuration Schema.

Controls the report currency, display time zone, table and modal
presentation, and the table builder's column mode / debug checks.
Loadable from a dict or a YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from report_kernel.domain.table_builder import ColumnMode
from report_kernel.exceptions import InvalidReportConfigError
from report_kernel.logging_config import get_logger

logger = get_logger("modules.pending_trades.config")


@dataclass
class PendingTradesConfig:
    """
    Configuration schema for the pending trades report.

    Amounts are converted into ``report_currency``; timestamps are
    rendered in ``timezone`` with ``timestamp_format``.
    """

    # Currency every amount is converted into
    report_currency: str = "USD"

    # IANA zone used to render open times
    timezone: str = "UTC"
    timestamp_format: str = "%Y.%m.%d %H:%M:%S"

    # Table
    table_name: str = "PendingTradesReportTable"
    total_data_title: str = "TOTAL"
    column_mode: str = ColumnMode.LEGACY.value
    debug_checks: bool = False

    # Modal
    title: str = "Pending Trades Report"
    header_title: str = "Pending Trades report"
    modal_size: str = "xxxl"

    def __post_init__(self):
        if len(self.report_currency) != 3:
            raise ValueError("report_currency must be a 3-letter ISO 4217 code")
        self.report_currency = self.report_currency.upper()
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone}") from exc
        valid_modes = {mode.value for mode in ColumnMode}
        if self.column_mode not in valid_modes:
            raise ValueError(
                f"column_mode must be one of {sorted(valid_modes)}, got {self.column_mode!r}"
            )

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def builder_column_mode(self) -> ColumnMode:
        return ColumnMode(self.column_mode)

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with standard defaults."""
        logger.info("pending_trades_config_created_with_defaults")
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from a dictionary; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = tuple(sorted(set(data) - known))
        if unknown:
            raise InvalidReportConfigError("unknown keys", unknown)
        logger.info(
            "pending_trades_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path | str) -> Self:
        """
        Create config from a YAML file.

        The file may hold the settings at top level or under a
        ``pending_trades`` key.

        Raises:
            FileNotFoundError: if the file does not exist.
            yaml.YAMLError: if the file contains invalid YAML.
            InvalidReportConfigError: if the document is not a mapping or
                holds unknown keys.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise InvalidReportConfigError("top-level YAML must be a mapping")
        section = data.get("pending_trades", data)
        if not isinstance(section, dict):
            raise InvalidReportConfigError("pending_trades section must be a mapping")
        logger.info("pending_trades_config_loading_from_yaml", extra={"path": str(path)})
        return cls.from_dict(section)
