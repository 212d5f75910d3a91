from __future__ import annotations

import datetime as dt
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

import typer

from report_stack.config import get_settings
from report_stack.delivery import available_services, create_delivery_service
from report_stack.exceptions import UnknownKindError
from report_stack.pipeline import (
    StageSpec,
    available_bases,
    available_stages,
    build_pipeline,
    create_base,
    describe_chain,
)
from report_stack.reporter import print_delivery_results, print_records
from report_stack.reports.sorting import SortKey
from report_stack.utils.logging import configure_logging

app = typer.Typer(help="Layered in-memory reports: base report + filter/sort/export stages.")

_STAGE_ALIASES = {"attr": "attribute", "sum": "amount"}

STAGE_HELP = (
    "Stage to attach, innermost first. Repeatable. Forms: date:FROM..TO, amount:MIN, "
    "attribute:TEXT, sort:KEY, csv, pdf."
)


def _parse_date(text: str) -> dt.date:
    try:
        return dt.date.fromisoformat(text.strip())
    except ValueError:
        raise typer.BadParameter(f"'{text}' is not a YYYY-MM-DD date") from None


def parse_stage(text: str) -> StageSpec:
    """
    Parse and validate a stage description such as `date:2024-01-01..2024-01-31`.

    Raises typer.BadParameter on unknown stages or malformed parameters so
    nothing invalid ever reaches pipeline assembly.
    """
    kind, _, arg = text.partition(":")
    kind = kind.strip().lower()
    kind = _STAGE_ALIASES.get(kind, kind)

    if kind == "date":
        start, sep, end = arg.partition("..")
        if not sep:
            raise typer.BadParameter(f"date stage expects FROM..TO, got '{arg}'")
        return StageSpec(kind=kind, params={"date_from": _parse_date(start), "date_to": _parse_date(end)})

    if kind == "amount":
        try:
            minimum = Decimal(arg.strip())
        except InvalidOperation:
            raise typer.BadParameter(f"amount stage expects a number, got '{arg}'") from None
        if not minimum.is_finite() or minimum < 0:
            raise typer.BadParameter(f"amount threshold must be a non-negative number, got '{arg}'")
        return StageSpec(kind=kind, params={"min_amount": minimum})

    if kind == "attribute":
        return StageSpec(kind=kind, params={"attribute": arg})

    if kind == "sort":
        try:
            key = SortKey.parse(arg or SortKey.DATE_ASC.value)
        except UnknownKindError as exc:
            raise typer.BadParameter(str(exc)) from None
        return StageSpec(kind=kind, params={"key": key})

    if kind in ("csv", "pdf"):
        if arg:
            raise typer.BadParameter(f"{kind} stage takes no parameters, got '{arg}'")
        return StageSpec(kind=kind)

    raise typer.BadParameter(
        f"Unknown stage '{kind}'. Available: {', '.join(available_stages())}"
    )


@app.callback()
def _setup(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    settings = get_settings()
    configure_logging(level=(log_level or settings.log_level).upper(), json_logs=settings.json_logs)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} seed={settings.report_seed} | "
        f"sales={settings.sales_record_count}x{settings.sales_days_back}d "
        f"users={settings.user_record_count}x{settings.user_days_back}d | "
        f"delivery_retries={settings.delivery_retry_attempts}"
    )


@app.command()
def stages() -> None:
    """
    List base reports, stages and sort keys.
    """
    typer.echo("Base reports: " + ", ".join(available_bases()))
    typer.echo("Stages: " + ", ".join(available_stages()))
    typer.echo("Sort keys: " + ", ".join(k.value for k in SortKey))
    typer.echo("Delivery services: " + ", ".join(available_services()))


@app.command()
def report(
    base: str = typer.Option("sales", "--base", "-b", help="Base report (sales, user)."),
    stage: Optional[List[str]] = typer.Option(None, "--stage", "-s", help=STAGE_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for generated records."),
    table: bool = typer.Option(False, "--table", help="Also print the records as a table."),
) -> None:
    """
    Build a report chain and print its rendering.
    """
    specs = [parse_stage(text) for text in stage or []]
    try:
        head = build_pipeline(create_base(base, seed=seed), specs)
    except UnknownKindError as exc:
        raise typer.BadParameter(str(exc), param_hint="--base") from None

    typer.echo(head.generate(), nl=False)
    if table:
        print_records(head.get_records(), title=head.title, chain=describe_chain(head))


@app.command()
def deliver(
    service: str = typer.Option("internal", "--service", help="Delivery service name."),
    order_id: str = typer.Option("ORD123", "--order-id", help="Order identifier."),
    region: str = typer.Option("near", "--region", help="Delivery region (near, remote, ...)."),
    ship: bool = typer.Option(True, "--ship/--no-ship", help="Request delivery."),
    status: bool = typer.Option(True, "--status/--no-status", help="Query delivery status."),
) -> None:
    """
    Quote, deliver and track an order through a delivery service.
    """
    try:
        svc = create_delivery_service(service)
    except UnknownKindError as exc:
        raise typer.BadParameter(str(exc), param_hint="--service") from None

    results = [svc.cost(order_id, region)]
    if ship:
        results.append(svc.deliver(order_id))
    if status:
        results.append(svc.status(order_id))
    print_delivery_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
