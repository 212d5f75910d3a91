"""Exception types raised by report_stack."""

from __future__ import annotations

from typing import Iterable


class ReportStackError(Exception):
    """Base class for all report_stack errors."""


class UnknownKindError(ReportStackError, ValueError):
    """
    Raised when a base report, stage, sort key or delivery service is requested
    by a name that is not registered.
    """

    def __init__(self, category: str, name: str, available: Iterable[str]) -> None:
        self.category = category
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown {category} '{name}'. Available: {', '.join(self.available)}"
        )


__all__ = ["ReportStackError", "UnknownKindError"]
