"""
report_stack - layered in-memory reporting pipeline.

A base report (sales or user) produces dated monetary records; any number of
stages can be stacked on top at runtime without changing the base or each
other:

- Filters by date range, minimum amount, or attribute substring
- A stable sort over a closed set of keys
- CSV and PDF-style render stages

Also ships a small delivery collaborator showing adapters from an internal
delivery contract onto three incompatible carrier APIs.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from report_stack.config import Settings, get_settings
from report_stack.domain.models import Record
from report_stack.exceptions import ReportStackError, UnknownKindError
from report_stack.pipeline import (
    StageSpec,
    available_bases,
    available_stages,
    build_pipeline,
    create_base,
    describe_chain,
    wrap,
)
from report_stack.reports.abstract import AbstractReport, Report, ReportDecorator
from report_stack.reports.sorting import SortKey
from report_stack.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    # Errors
    "ReportStackError",
    "UnknownKindError",
    # Assembly
    "StageSpec",
    "available_bases",
    "available_stages",
    "build_pipeline",
    "create_base",
    "describe_chain",
    "wrap",
    # Report abstractions
    "AbstractReport",
    "Report",
    "ReportDecorator",
    "SortKey",
    # Logging
    "configure_logging",
    "get_logger",
]
