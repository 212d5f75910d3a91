"""
Record sources for the base reports.

A record source is any zero-argument callable returning records. The default
sources produce deterministic pseudo-random data from a seed, so tests and
callers can pin the data set or inject fixtures instead.
"""

from __future__ import annotations

import datetime as dt
import random
from typing import Callable, Iterable, Optional, Sequence

from report_stack.domain.models import Record

RecordSource = Callable[[], Sequence[Record]]

USER_ROLES = ("buyer", "vip", "guest")


def fixed_source(records: Iterable[Record]) -> RecordSource:
    """Wrap an explicit set of records as a source."""
    frozen = tuple(records)

    def _source() -> Sequence[Record]:
        return frozen

    return _source


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def sales_source(
    count: int = 12,
    days_back: int = 90,
    seed: Optional[int] = None,
    today: Optional[dt.date] = None,
) -> RecordSource:
    """
    Random sales entries: dates within the last `days_back` days, amounts
    between 100 and 1000, users U1-U5 and products Product#1-Product#9.
    """

    def _source() -> Sequence[Record]:
        rng = _rng(seed)
        anchor = today or dt.date.today()
        return tuple(
            Record(
                date=anchor - dt.timedelta(days=rng.randrange(days_back)),
                amount=round(100 + rng.random() * 900, 2),
                user_id=f"U{rng.randint(1, 5)}",
                extra=f"Product#{rng.randint(1, 9)}",
            )
            for _ in range(count)
        )

    return _source


def user_source(
    count: int = 10,
    days_back: int = 100,
    seed: Optional[int] = None,
    today: Optional[dt.date] = None,
) -> RecordSource:
    """
    Random per-user entries: users User1..UserN, amounts below 1000 and a
    role tag drawn from USER_ROLES.
    """

    def _source() -> Sequence[Record]:
        rng = _rng(seed)
        anchor = today or dt.date.today()
        return tuple(
            Record(
                date=anchor - dt.timedelta(days=rng.randrange(days_back)),
                amount=round(rng.random() * 1000, 2),
                user_id=f"User{index + 1}",
                extra=f"role:{rng.choice(USER_ROLES)}",
            )
            for index in range(count)
        )

    return _source


__all__ = [
    "RecordSource",
    "USER_ROLES",
    "fixed_source",
    "sales_source",
    "user_source",
]
