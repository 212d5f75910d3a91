"""
Reports package for report_stack.

Re-exports the report contract and every concrete stage so downstream code can
import from `report_stack.reports` directly.
"""

from report_stack.reports.abstract import (
    AbstractReport,
    Report,
    ReportDecorator,
    render_lines,
)
from report_stack.reports.base import BaseReport, SalesReport, UserReport
from report_stack.reports.exports import CsvExport, PdfExport
from report_stack.reports.filters import AttributeFilter, DateRangeFilter, MinimumAmountFilter
from report_stack.reports.sorting import SortKey, SortReport
from report_stack.reports.sources import RecordSource, fixed_source, sales_source, user_source

__all__ = [
    # Contract
    "AbstractReport",
    "Report",
    "ReportDecorator",
    "render_lines",
    # Base reports and their sources
    "BaseReport",
    "RecordSource",
    "SalesReport",
    "UserReport",
    "fixed_source",
    "sales_source",
    "user_source",
    # Stages
    "AttributeFilter",
    "CsvExport",
    "DateRangeFilter",
    "MinimumAmountFilter",
    "PdfExport",
    "SortKey",
    "SortReport",
]
