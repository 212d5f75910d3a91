from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from report_stack.domain.models import DATE_FORMAT, Record, format_amount


def records_table(records: Sequence[Record], title: str = "Records", caption: Optional[str] = None) -> Table:
    """
    Build a rich table with one row per record, in the given order.
    """
    table = Table(title=title, box=box.ROUNDED, caption=caption)

    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("User", style="magenta")
    table.add_column("Amount", justify="right", style="bold green")
    table.add_column("Extra", style="yellow")

    for index, record in enumerate(records, start=1):
        table.add_row(
            str(index),
            record.date.strftime(DATE_FORMAT),
            escape(record.user_id),
            format_amount(record.amount),
            escape(record.extra),
        )
    return table


def print_records(
    records: Sequence[Record],
    title: str = "Records",
    chain: Optional[Sequence[str]] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render records as a rich table; `chain` (outermost first) becomes the caption.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return

    caption = escape(" <- ".join(chain)) if chain else None
    console.print(records_table(records, title=escape(title), caption=caption))


def print_delivery_results(
    results: List[Dict[str, Any]], console: Optional[Console] = None
) -> None:
    """
    Render delivery/status/cost results as a rich table. Failed calls show
    their error in red.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(title="Delivery", box=box.ROUNDED)
    table.add_column("Service", style="cyan", no_wrap=True)
    table.add_column("Order", style="magenta")
    table.add_column("Operation")
    table.add_column("OK", justify="center")
    table.add_column("Value", justify="right", style="green")
    table.add_column("Error", style="red")

    for res in results:
        if "cost" in res:
            operation = "cost"
            value = f"{res['cost']:,.2f}" if res.get("cost") is not None else "N/A"
        elif "status" in res:
            operation = "status"
            value = res.get("status") or "N/A"
        else:
            operation = "deliver"
            value = ""
        table.add_row(
            escape(res.get("service", "Unknown")),
            escape(res.get("order_id", "")),
            operation,
            "[green]yes[/green]" if res.get("ok") else "[red]no[/red]",
            escape(value),
            escape(res.get("error") or ""),
        )

    console.print(table)


__all__ = ["print_delivery_results", "print_records", "records_table"]
