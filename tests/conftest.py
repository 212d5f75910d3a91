"""
Pytest configuration for report_stack.

Provides fixtures for:
- Deterministic record sets and base reports built from them
- A fixed clock for PDF-style rendering
- Settings cache isolation between tests
"""

from __future__ import annotations

import datetime as dt
import logging
from decimal import Decimal
from typing import Callable, Generator, List

import pytest

from report_stack.config import get_settings
from report_stack.domain.models import Record
from report_stack.reports.base import SalesReport, UserReport
from report_stack.reports.sources import fixed_source

FIXED_NOW = dt.datetime(2024, 3, 1, 12, 30, 0)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """
    Drop the cached Settings before and after each test so monkeypatched
    environment variables take effect and do not leak.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """
    The CLI reconfigures root logging against the runner's temporary streams;
    drop those stream handlers once the test is done.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def scenario_sales_records() -> List[Record]:
    """Three sales, two of them in January 2024, inserted out of date order."""
    return [
        Record(date=dt.date(2024, 1, 5), amount=Decimal("100"), user_id="U1", extra="P1"),
        Record(date=dt.date(2024, 2, 10), amount=Decimal("900"), user_id="U2", extra="P2"),
        Record(date=dt.date(2024, 1, 20), amount=Decimal("500"), user_id="U1", extra="P3"),
    ]


@pytest.fixture
def sales_report(scenario_sales_records: List[Record]) -> SalesReport:
    return SalesReport(source=fixed_source(scenario_sales_records))


@pytest.fixture
def user_records() -> List[Record]:
    """Three users, exactly one tagged as vip."""
    return [
        Record(date=dt.date(2024, 1, 3), amount=Decimal("250.50"), user_id="User2", extra="role:buyer"),
        Record(date=dt.date(2024, 1, 9), amount=Decimal("999.99"), user_id="User1", extra="role:vip"),
        Record(date=dt.date(2024, 2, 1), amount=Decimal("10"), user_id="User3", extra="role:guest"),
    ]


@pytest.fixture
def user_report(user_records: List[Record]) -> UserReport:
    return UserReport(source=fixed_source(user_records))


@pytest.fixture
def ties_records() -> List[Record]:
    """Records with repeated dates and amounts, tagged by insertion order."""
    return [
        Record(date=dt.date(2024, 1, 2), amount=Decimal("50"), user_id="B", extra="first"),
        Record(date=dt.date(2024, 1, 1), amount=Decimal("50"), user_id="A", extra="second"),
        Record(date=dt.date(2024, 1, 2), amount=Decimal("10"), user_id="C", extra="third"),
        Record(date=dt.date(2024, 1, 1), amount=Decimal("10"), user_id="A", extra="fourth"),
    ]


@pytest.fixture
def fixed_clock() -> Callable[[], dt.datetime]:
    return lambda: FIXED_NOW
