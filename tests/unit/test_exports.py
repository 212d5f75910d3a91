import datetime as dt
from decimal import Decimal

from report_stack.domain.models import Record
from report_stack.reports.base import SalesReport
from report_stack.reports.exports import CsvExport, PdfExport
from report_stack.reports.filters import DateRangeFilter, MinimumAmountFilter
from report_stack.reports.sorting import SortReport
from report_stack.reports.sources import fixed_source


def test_csv_renders_header_and_rows(sales_report):
    assert CsvExport(sales_report).generate().splitlines() == [
        "Date,User,Amount,Extra",
        "2024-01-05,U1,100,P1",
        "2024-01-20,U1,500,P3",
        "2024-02-10,U2,900,P2",
    ]


def test_csv_over_empty_filter_is_header_only(sales_report):
    empty = MinimumAmountFilter(sales_report, 10_000)
    assert CsvExport(empty).generate() == "Date,User,Amount,Extra\n"


def test_csv_quotes_values_with_commas():
    record = Record(date=dt.date(2024, 1, 1), amount=Decimal("1.5"), user_id="U1", extra="a,b")
    rendered = CsvExport(SalesReport(source=fixed_source([record]))).generate()
    assert rendered.splitlines()[1] == '2024-01-01,U1,1.5,"a,b"'


def test_pdf_frames_records(sales_report, fixed_clock):
    rendered = PdfExport(sales_report, clock=fixed_clock).generate().splitlines()
    assert rendered[0] == "<<PDF REPORT>>"
    assert rendered[1] == "Generated at: 2024-03-01 12:30:00"
    assert rendered[2:-1] == [r.line() for r in sales_report.get_records()]
    assert rendered[-1] == "<<END PDF>>"


def test_pdf_over_empty_set(sales_report, fixed_clock):
    empty = DateRangeFilter(sales_report, dt.date(2030, 1, 1), dt.date(2030, 12, 31))
    assert PdfExport(empty, clock=fixed_clock).generate().splitlines() == [
        "<<PDF REPORT>>",
        "Generated at: 2024-03-01 12:30:00",
        "<<END PDF>>",
    ]


def test_render_stages_pass_records_through(sales_report, fixed_clock):
    inner = SortReport(sales_report, "amount_desc")
    for stage in (CsvExport(inner), PdfExport(inner, clock=fixed_clock)):
        assert stage.get_records() == inner.get_records()


def test_render_stages_stack(sales_report, fixed_clock):
    # CSV under PDF: the outer stage decides the rendering, records are unchanged.
    stacked = PdfExport(CsvExport(sales_report), clock=fixed_clock)
    assert stacked.get_records() == sales_report.get_records()
    assert stacked.generate().startswith("<<PDF REPORT>>\n")

    filtered = MinimumAmountFilter(CsvExport(sales_report), 500)
    assert len(filtered.get_records()) == 2
    assert filtered.generate().splitlines()[0].strip() == "Filter: Amount >= 500"
