"""
Render stages: pass the inner records through unchanged and only replace the
text rendering (CSV or a PDF-style framed listing).
"""

from __future__ import annotations

import csv
import datetime as dt
import io
from typing import Callable, List, Optional

from report_stack.domain.models import DATE_FORMAT, Record, format_amount
from report_stack.reports.abstract import Report, ReportDecorator

CSV_HEADER = ("Date", "User", "Amount", "Extra")
PDF_BEGIN = "<<PDF REPORT>>"
PDF_END = "<<END PDF>>"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], dt.datetime]


class _PassThrough(ReportDecorator):
    def _apply(self, records: List[Record]) -> List[Record]:
        return records


class CsvExport(_PassThrough):
    """
    Render records as CSV with a `Date,User,Amount,Extra` header.

    Values containing a delimiter or quote are quoted per RFC 4180.
    """

    kind: str = "csv"

    @property
    def title(self) -> str:
        return "CSV Export"

    def generate(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for record in self.get_records():
            writer.writerow(
                [
                    record.date.strftime(DATE_FORMAT),
                    record.user_id,
                    format_amount(record.amount),
                    record.extra,
                ]
            )
        return buffer.getvalue()


class PdfExport(_PassThrough):
    """
    Simulated PDF export: begin marker, generation timestamp, one line per
    record, end marker.
    """

    kind: str = "pdf"

    def __init__(self, inner: Report, clock: Optional[Clock] = None) -> None:
        super().__init__(inner)
        self._clock: Clock = clock or dt.datetime.now

    @property
    def title(self) -> str:
        return "PDF Export"

    def generate(self) -> str:
        lines = [PDF_BEGIN, f"Generated at: {self._clock().strftime(TIMESTAMP_FORMAT)}"]
        lines.extend(record.line() for record in self.get_records())
        lines.append(PDF_END)
        return "\n".join(lines) + "\n"


__all__ = [
    "CSV_HEADER",
    "CsvExport",
    "PDF_BEGIN",
    "PDF_END",
    "PdfExport",
]
