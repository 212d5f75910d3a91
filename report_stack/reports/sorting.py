"""
Sort stage: the only stage that reorders without filtering.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Tuple

from report_stack.domain.models import Record
from report_stack.exceptions import UnknownKindError
from report_stack.reports.abstract import Report, ReportDecorator


class SortKey(str, Enum):
    DATE_ASC = "date_asc"
    DATE_DESC = "date_desc"
    AMOUNT_ASC = "amount_asc"
    AMOUNT_DESC = "amount_desc"
    USER = "user"

    @classmethod
    def parse(cls, value: "SortKey | str") -> "SortKey":
        """Resolve a key from its value or member name, case-insensitively."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise UnknownKindError("sort key", str(value), (m.value for m in cls))


# key -> (field accessor, descending)
_ORDERINGS: Dict[SortKey, Tuple[Callable[[Record], object], bool]] = {
    SortKey.DATE_ASC: (lambda r: r.date, False),
    SortKey.DATE_DESC: (lambda r: r.date, True),
    SortKey.AMOUNT_ASC: (lambda r: r.amount, False),
    SortKey.AMOUNT_DESC: (lambda r: r.amount, True),
    SortKey.USER: (lambda r: r.user_id, False),
}


class SortReport(ReportDecorator):
    """
    Stable sort of the inner records by one key from SortKey.

    Ties keep their input order for descending keys too.
    """

    kind: str = "sort"

    def __init__(self, inner: Report, key: "SortKey | str" = SortKey.DATE_ASC) -> None:
        super().__init__(inner)
        self.key = SortKey.parse(key)

    @property
    def title(self) -> str:
        return f"Sorted by {self.key.value}"

    def _apply(self, records: List[Record]) -> List[Record]:
        accessor, descending = _ORDERINGS[self.key]
        return sorted(records, key=accessor, reverse=descending)


__all__ = ["SortKey", "SortReport"]
