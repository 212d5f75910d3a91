"""
Pipeline assembly: builds report chains from registry names.

Usage:
    from report_stack.pipeline import StageSpec, build_pipeline, create_base, wrap

    report = create_base("sales", seed=7)
    report = wrap(report, "date", {"date_from": date(2024, 1, 1), "date_to": date(2024, 1, 31)})
    report = wrap(report, "sort", {"key": "date_asc"})
    print(report.generate())

Every `wrap` returns a new outer stage; the handle passed in is left untouched
and remains valid on its own.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field

from report_stack.exceptions import UnknownKindError
from report_stack.reports.abstract import Report, ReportDecorator
from report_stack.reports.base import SalesReport, UserReport
from report_stack.reports.exports import CsvExport, PdfExport
from report_stack.reports.filters import AttributeFilter, DateRangeFilter, MinimumAmountFilter
from report_stack.reports.sorting import SortReport
from report_stack.reports.sources import RecordSource
from report_stack.utils.logging import get_logger

log = get_logger(__name__)

BaseFactory = Callable[[Optional[RecordSource], Optional[int]], Report]
StageFactory = Callable[..., Report]


class StageSpec(BaseModel):
    """A stage to attach: its registry name and constructor keyword arguments."""

    kind: str
    params: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


def _base_factories() -> Dict[str, BaseFactory]:
    """Registry of base reports."""
    return {
        "sales": lambda source, seed: SalesReport(source=source, seed=seed),
        "user": lambda source, seed: UserReport(source=source, seed=seed),
    }


def _stage_factories() -> Dict[str, StageFactory]:
    """Registry of decorator stages."""
    return {
        "date": DateRangeFilter,
        "amount": MinimumAmountFilter,
        "attribute": AttributeFilter,
        "sort": SortReport,
        "csv": CsvExport,
        "pdf": PdfExport,
    }


def available_bases() -> List[str]:
    """List available base report names."""
    return sorted(_base_factories().keys())


def available_stages() -> List[str]:
    """List available stage names."""
    return sorted(_stage_factories().keys())


def _normalize(kind: str) -> str:
    return str(kind).strip().lower()


def create_base(
    kind: str,
    source: Optional[RecordSource] = None,
    seed: Optional[int] = None,
) -> Report:
    """
    Create a base report.

    Parameters
    ----------
    kind : str
        "sales" or "user".
    source : RecordSource | None
        Injected record source; defaults to seeded pseudo-random data.
    seed : int | None
        Seed for the default source; ignored when `source` is given.

    Raises
    ------
    UnknownKindError
        If `kind` is not a registered base report.
    """
    factories = _base_factories()
    name = _normalize(kind)
    if name not in factories:
        raise UnknownKindError("report kind", kind, factories)
    report = factories[name](source, seed)
    log.debug(
        "Base report created",
        extra={"report": name, "records": len(report.get_records()), "seed": seed},
    )
    return report


def wrap(report: Report, kind: str, params: Optional[Mapping[str, Any]] = None) -> Report:
    """
    Attach one stage on top of `report` and return the new chain head.

    Parameters
    ----------
    report : Report
        Current chain head.
    kind : str
        Stage name (see `available_stages()`).
    params : Mapping[str, Any] | None
        Keyword arguments for the stage constructor.

    Raises
    ------
    UnknownKindError
        If `kind` is not a registered stage.
    """
    factories = _stage_factories()
    name = _normalize(kind)
    if name not in factories:
        raise UnknownKindError("stage", kind, factories)
    stage = factories[name](report, **dict(params or {}))
    log.debug(
        f"Stage attached: {stage.title}",
        extra={"stage": name, "params": dict(params or {})},
    )
    return stage


def build_pipeline(base: Report, stages: Iterable[StageSpec]) -> Report:
    """Fold `stages` over `wrap`, innermost first."""
    report = base
    for spec in stages:
        report = wrap(report, spec.kind, spec.params)
    return report


def describe_chain(report: Report) -> List[str]:
    """Titles of every stage, from the outermost stage down to the base report."""
    titles: List[str] = []
    current: Optional[Report] = report
    while current is not None:
        titles.append(current.title)
        current = current.inner if isinstance(current, ReportDecorator) else None
    return titles


__all__ = [
    "StageSpec",
    "available_bases",
    "available_stages",
    "build_pipeline",
    "create_base",
    "describe_chain",
    "wrap",
]
