import datetime as dt
from decimal import Decimal

import pytest

from report_stack.reports.base import SalesReport
from report_stack.reports.filters import AttributeFilter, DateRangeFilter, MinimumAmountFilter
from report_stack.reports.sources import fixed_source, sales_source


class TestDateRangeFilter:
    def test_keeps_only_records_in_range(self, sales_report):
        stage = DateRangeFilter(sales_report, dt.date(2024, 1, 1), dt.date(2024, 1, 31))
        assert [r.extra for r in stage.get_records()] == ["P1", "P3"]

    def test_bounds_are_inclusive(self, sales_report):
        stage = DateRangeFilter(sales_report, dt.date(2024, 1, 5), dt.date(2024, 1, 20))
        assert [r.date.day for r in stage.get_records()] == [5, 20]

    def test_inverted_range_is_empty(self, sales_report):
        stage = DateRangeFilter(sales_report, dt.date(2024, 2, 1), dt.date(2024, 1, 1))
        assert stage.get_records() == []
        assert stage.generate().splitlines()[1:] == []

    def test_datetime_bounds_are_truncated(self, sales_report):
        stage = DateRangeFilter(
            sales_report, dt.datetime(2024, 1, 5, 18, 0), dt.datetime(2024, 1, 20, 0, 1)
        )
        assert stage.date_from == dt.date(2024, 1, 5)
        assert stage.date_to == dt.date(2024, 1, 20)
        assert len(stage.get_records()) == 2

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_result_is_subset_within_range(self, seed):
        today = dt.date(2024, 6, 30)
        base = SalesReport(source=sales_source(count=30, seed=seed, today=today))
        start, end = today - dt.timedelta(days=40), today - dt.timedelta(days=10)
        kept = DateRangeFilter(base, start, end).get_records()
        everything = base.get_records()
        assert all(r in everything for r in kept)
        assert all(start <= r.date <= end for r in kept)
        assert kept == [r for r in everything if start <= r.date <= end]

    def test_generate_uses_filter_header(self, sales_report):
        stage = DateRangeFilter(sales_report, dt.date(2024, 1, 1), dt.date(2024, 1, 31))
        lines = stage.generate().splitlines()
        assert lines[0].strip() == "Date Filter: 2024-01-01 to 2024-01-31"
        assert lines[1:] == [r.line() for r in stage.get_records()]


class TestMinimumAmountFilter:
    def test_threshold_is_inclusive(self, sales_report):
        stage = MinimumAmountFilter(sales_report, 500)
        assert [r.amount for r in stage.get_records()] == [Decimal("500"), Decimal("900")]

    def test_accepts_float_threshold(self, sales_report):
        stage = MinimumAmountFilter(sales_report, 499.99)
        assert len(stage.get_records()) == 2
        assert stage.title == "Filter: Amount >= 499.99"

    def test_high_threshold_is_empty(self, sales_report):
        assert MinimumAmountFilter(sales_report, Decimal("10000")).get_records() == []

    def test_preserves_inner_order(self, user_report):
        stage = MinimumAmountFilter(user_report, 0)
        assert stage.get_records() == user_report.get_records()


class TestAttributeFilter:
    def test_vip_scenario(self, user_report):
        kept = AttributeFilter(user_report, "vip").get_records()
        assert len(kept) == 1
        assert kept[0].extra == "role:vip"
        assert kept[0].user_id == "User1"

    def test_is_case_sensitive(self, user_report):
        assert AttributeFilter(user_report, "VIP").get_records() == []

    def test_empty_pattern_matches_all(self, user_report):
        assert AttributeFilter(user_report, "").get_records() == user_report.get_records()

    def test_substring_match(self, user_records):
        report = SalesReport(source=fixed_source(user_records))
        kept = AttributeFilter(report, "role:").get_records()
        assert len(kept) == 3

    def test_header(self, user_report):
        stage = AttributeFilter(user_report, "role:vip")
        assert stage.generate().splitlines()[0].strip() == "User Attribute Filter: role:vip"


def test_filters_do_not_mutate_inner(sales_report):
    before = sales_report.get_records()
    DateRangeFilter(sales_report, dt.date(2024, 1, 1), dt.date(2024, 1, 1)).get_records()
    MinimumAmountFilter(sales_report, 1000).get_records()
    assert sales_report.get_records() == before


def test_decorator_rejects_non_report():
    with pytest.raises(TypeError):
        AttributeFilter(object(), "vip")
