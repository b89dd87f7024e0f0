"""
Pending Trades Report Models (``report_modules.pending_trades.models``).

Responsibility
--------------
Frozen dataclass value objects for the incoming report request and the
report's self-description.

Architecture position
---------------------
**Modules layer** -- pure data definitions with ZERO I/O.

Failure modes
-------------
* ``ReportRequest.from_dict`` never raises: missing, mistyped or
  non-finite fields fall back to defaults.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ReportKind(str, Enum):
    """How the host schedules and parameterizes a report."""

    DAILY_GROUP = "daily_group"


@dataclass(frozen=True)
class ReportInfo:
    """Self-description returned by the about call."""

    version: int
    name: str
    description: str
    kind: ReportKind

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "name": self.name,
            "description": self.description,
            "type": self.kind.value,
        }


@dataclass(frozen=True)
class ReportRequest:
    """Parameters of one report run."""

    group: str = ""
    start: int = 0
    end: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportRequest:
        """Read ``group``, ``from`` and ``to``; ignore anything mistyped."""
        group = data.get("group")
        start = data.get("from")
        end = data.get("to")
        return cls(
            group=group if isinstance(group, str) else "",
            start=int(start) if _is_number(start) else 0,
            end=int(end) if _is_number(end) else 0,
        )


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)
