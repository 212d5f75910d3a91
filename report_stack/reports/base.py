"""
Base reports: the only stages that create records.

Each base report pulls its records from a record source once, at construction,
and exposes them in its natural ordering.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from report_stack.config import get_settings
from report_stack.domain.models import Record
from report_stack.reports.abstract import AbstractReport
from report_stack.reports.sources import RecordSource, sales_source, user_source


class BaseReport(AbstractReport):
    """
    Holds the records produced by a source and orders them by `sort_key`.
    """

    kind: str = "base"
    label: str = "Report"
    sort_key: Callable[[Record], object]

    def __init__(self, source: RecordSource) -> None:
        self._records: Tuple[Record, ...] = tuple(
            sorted(source(), key=type(self).sort_key)
        )

    @property
    def title(self) -> str:
        return self.label

    def get_records(self) -> List[Record]:
        return list(self._records)


class SalesReport(BaseReport):
    """
    Date-ordered sales entries.
    """

    kind: str = "sales"
    label: str = "Sales Report"

    @staticmethod
    def sort_key(record: Record) -> object:
        return record.date

    def __init__(self, source: Optional[RecordSource] = None, seed: Optional[int] = None) -> None:
        if source is None:
            settings = get_settings()
            source = sales_source(
                count=settings.sales_record_count,
                days_back=settings.sales_days_back,
                seed=seed if seed is not None else settings.report_seed,
            )
        super().__init__(source)


class UserReport(BaseReport):
    """
    User-ordered entries, one per user, tagged with a role.
    """

    kind: str = "user"
    label: str = "User Report"

    @staticmethod
    def sort_key(record: Record) -> object:
        return record.user_id

    def __init__(self, source: Optional[RecordSource] = None, seed: Optional[int] = None) -> None:
        if source is None:
            settings = get_settings()
            source = user_source(
                count=settings.user_record_count,
                days_back=settings.user_days_back,
                seed=seed if seed is not None else settings.report_seed,
            )
        super().__init__(source)


__all__ = ["BaseReport", "SalesReport", "UserReport"]
