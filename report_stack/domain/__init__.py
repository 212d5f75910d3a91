"""
Domain package for report_stack.

Exports the record model shared by every report stage. Keep this package
focused on data definitions and validation concerns.
"""

from report_stack.domain.models import (
    DATE_FORMAT,
    Record,
    as_calendar_date,
    as_decimal,
    format_amount,
)

__all__ = [
    "DATE_FORMAT",
    "Record",
    "as_calendar_date",
    "as_decimal",
    "format_amount",
]
