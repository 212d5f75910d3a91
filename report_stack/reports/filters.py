"""
Filter stages: narrow the inner report's records without reordering them.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Union

from report_stack.domain.models import (
    DATE_FORMAT,
    AmountLike,
    Record,
    as_calendar_date,
    as_decimal,
    format_amount,
)
from report_stack.reports.abstract import Report, ReportDecorator


class DateRangeFilter(ReportDecorator):
    """
    Keep records dated within [date_from, date_to], both inclusive.

    Bounds are truncated to calendar dates. An inverted range is not an error;
    it simply matches nothing.
    """

    kind: str = "date"

    def __init__(
        self,
        inner: Report,
        date_from: Union[dt.date, dt.datetime],
        date_to: Union[dt.date, dt.datetime],
    ) -> None:
        super().__init__(inner)
        self.date_from = as_calendar_date(date_from)
        self.date_to = as_calendar_date(date_to)

    @property
    def title(self) -> str:
        return (
            f"Date Filter: {self.date_from.strftime(DATE_FORMAT)} "
            f"to {self.date_to.strftime(DATE_FORMAT)}"
        )

    def _apply(self, records: List[Record]) -> List[Record]:
        return [r for r in records if self.date_from <= r.date <= self.date_to]


class MinimumAmountFilter(ReportDecorator):
    """Keep records whose amount is at least `min_amount`."""

    kind: str = "amount"

    def __init__(self, inner: Report, min_amount: AmountLike) -> None:
        super().__init__(inner)
        self.min_amount = as_decimal(min_amount)

    @property
    def title(self) -> str:
        return f"Filter: Amount >= {format_amount(self.min_amount)}"

    def _apply(self, records: List[Record]) -> List[Record]:
        return [r for r in records if r.amount >= self.min_amount]


class AttributeFilter(ReportDecorator):
    """
    Keep records whose `extra` tag contains `attribute` (case-sensitive).
    An empty attribute matches every record.
    """

    kind: str = "attribute"

    def __init__(self, inner: Report, attribute: str) -> None:
        super().__init__(inner)
        self.attribute = attribute

    @property
    def title(self) -> str:
        return f"User Attribute Filter: {self.attribute}"

    def _apply(self, records: List[Record]) -> List[Record]:
        return [r for r in records if self.attribute in r.extra]


__all__ = ["AttributeFilter", "DateRangeFilter", "MinimumAmountFilter"]
