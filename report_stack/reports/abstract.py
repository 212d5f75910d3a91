"""
Report contract shared by every stage of a report chain.

Concrete stages (base reports, filters, sort, render stages) implement the
Report protocol: `get_records()` yields the stage's view of the records and
`generate()` renders it as text. Decorator stages wrap exactly one inner report
and derive everything from it on every call, so a chain can be queried any
number of times with identical results.
"""

from __future__ import annotations

import abc
from typing import Iterable, List, Protocol, runtime_checkable

from report_stack.domain.models import Record


@runtime_checkable
class Report(Protocol):
    """
    Common interface all report stages must implement.

    Attributes
    ----------
    kind : str
        Registry name of the stage (e.g. "sales", "date", "csv").
    title : str
        Header line used by the default text rendering.
    """

    kind: str

    @property
    def title(self) -> str:
        ...

    def get_records(self) -> List[Record]:
        """
        Return the records visible at this stage, in order.

        Returns
        -------
        List[Record]
            A fresh list; callers may mutate it without affecting the chain.
        """
        ...

    def generate(self) -> str:
        """
        Render the stage as text. The rendered records must match
        `get_records()` one to one and in the same order.
        """
        ...


def render_lines(title: str, records: Iterable[Record]) -> str:
    """Default rendering: a header line followed by one line per record."""
    lines = [f" {title} "]
    lines.extend(record.line() for record in records)
    return "\n".join(lines) + "\n"


class AbstractReport(abc.ABC):
    """
    ABC helper for class-based stages.

    Subclasses set `kind`, provide `title` and implement `get_records`.
    """

    kind: str

    @property
    @abc.abstractmethod
    def title(self) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def get_records(self) -> List[Record]:  # pragma: no cover - interface only
        """Return the stage's records."""
        raise NotImplementedError

    def generate(self) -> str:
        return render_lines(self.title, self.get_records())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self.title!r})"


class ReportDecorator(AbstractReport):
    """
    A stage that wraps one inner report and re-exposes the same contract.

    The inner report is owned by this stage and never modified by it; the
    caller keeps the returned decorator as the new chain head while the inner
    handle stays independently queryable.
    """

    def __init__(self, inner: Report) -> None:
        if not isinstance(inner, Report):
            raise TypeError(f"inner must implement Report, got {type(inner).__name__}")
        self._inner = inner

    @property
    def inner(self) -> Report:
        return self._inner

    @abc.abstractmethod
    def _apply(self, records: List[Record]) -> List[Record]:
        """Transform the inner stage's records; must not mutate the input list."""
        raise NotImplementedError

    def get_records(self) -> List[Record]:
        """
        Evaluate the chain without recursion: walk down to the first
        non-decorator report, then apply the stages innermost first.
        """
        stages: List[ReportDecorator] = []
        current: Report = self
        while isinstance(current, ReportDecorator):
            stages.append(current)
            current = current.inner

        records = current.get_records()
        for stage in reversed(stages):
            records = stage._apply(records)
        return records


__all__ = [
    "AbstractReport",
    "Report",
    "ReportDecorator",
    "render_lines",
]
