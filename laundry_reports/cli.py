"""CLI for the ``laundry_reports`` package.

Typer-based console interface over :func:`laundry_reports.load_report`. A local
``.env`` is loaded with ``python-dotenv`` (without overriding the environment)
so ``LAUNDRY_REPORTS_*`` settings can live next to the exports.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ParserSettings
from .ingest.utils import ReportReadError, load_report
from .logging_setup import configure_logging
from .metrics import DAY_NAMES, ReportSummary, RevenueComparison, compare_revenue, summarize
from .models import ParseResult, ReportType

app = typer.Typer(
    name="laundry-reports",
    no_args_is_help=True,
    add_completion=False,
    help="Parse self-service and attendant point-of-sale CSV exports.",
)
console = Console()
err_console = Console(stderr=True)


class Slot(str, Enum):
    self_service = "self-service"
    attendant = "attendant"

    @property
    def report_type(self) -> ReportType:
        return ReportType.ATTENDANT if self is Slot.attendant else ReportType.SELF_SERVICE


def _money(value: float) -> str:
    # pt-BR: thousands ".", decimals ","
    return "R$ " + f"{value:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")


def _load_or_exit(path: Path, expected: ReportType | None, settings: ParserSettings) -> ParseResult:
    try:
        return load_report(path, expected_report_type=expected, settings=settings)
    except ReportReadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _print_advisories(result: ParseResult) -> None:
    for adv in result.advisories:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(adv.message)}")


def _print_metadata(result: ParseResult) -> None:
    md = result.metadata
    console.print(f"[bold]{escape(md.unit_name)}[/bold] ({md.report_type})")
    console.print(f"Period: {escape(md.period)}")
    console.print(f"Transactions: {len(result.transactions)}")


def _transactions_table(result: ParseResult) -> Table:
    table = Table(title="Transactions")
    for col in ("Date", "Time", "Machine", "Cycle", "Payment", "Amount"):
        table.add_column(col, justify="right" if col == "Amount" else "left")
    for tx in result.transactions:
        table.add_row(
            tx.raw_date,
            tx.raw_time,
            tx.machine,
            str(tx.cycle_type),
            tx.payment_method,
            _money(tx.amount),
        )
    return table


def _print_summary(title: str, summary: ReportSummary) -> None:
    table = Table(title=title, show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Revenue", _money(summary.total_revenue))
    table.add_row("Cycles", str(summary.total_cycles))
    table.add_row("Wash", str(summary.wash_count))
    table.add_row("Dry", str(summary.dry_count))
    table.add_row("Avg cycles/day", f"{summary.avg_cycles_per_day:.1f}")
    table.add_row("Peak hour", f"{summary.peak_hour:02d}h")
    table.add_row("Weekend share", f"{summary.weekend_share:.1f}%")
    table.add_row(
        "Top machine", f"{summary.top_machine.name} ({summary.top_machine.count})"
    )
    busiest = max(range(7), key=lambda d: (summary.day_of_week_counts[d], -d))
    table.add_row("Busiest weekday", DAY_NAMES[busiest])
    console.print(table)


def _print_comparison(cmp: RevenueComparison) -> None:
    table = Table(title="Revenue")
    for col in ("Channel", "Revenue", "Cycles", "Avg ticket"):
        table.add_column(col, justify="left" if col == "Channel" else "right")
    table.add_row(
        "Self-service",
        _money(cmp.self_service_total),
        str(cmp.self_service_count),
        _money(cmp.self_service_ticket),
    )
    table.add_row(
        "Attendant",
        _money(cmp.attendant_total),
        str(cmp.attendant_count),
        _money(cmp.attendant_ticket),
    )
    table.add_row(
        "Total",
        _money(cmp.grand_total),
        str(cmp.self_service_count + cmp.attendant_count),
        _money(cmp.average_ticket),
    )
    console.print(table)


@app.command("parse")
def parse_cmd(
    csv_path: Annotated[Path, typer.Option("--csv-path", help="Report CSV to parse", dir_okay=False)],
    expect: Annotated[
        Slot | None, typer.Option(help="Report type the file is expected to be")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Emit the JSON wire shape")] = False,
) -> None:
    """Parse one report and print its metadata and transactions."""

    settings = ParserSettings.from_env()
    result = _load_or_exit(csv_path, expect.report_type if expect else None, settings)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    _print_advisories(result)
    _print_metadata(result)
    if result.transactions:
        console.print(_transactions_table(result))


@app.command("summary")
def summary_cmd(
    self_service: Annotated[
        Path | None, typer.Option("--self-service", help="Self-service report CSV", dir_okay=False)
    ] = None,
    attendant: Annotated[
        Path | None, typer.Option("--attendant", help="Attendant report CSV", dir_okay=False)
    ] = None,
) -> None:
    """Summarize one or both reports; with both, also compare revenue."""

    if self_service is None and attendant is None:
        err_console.print("[red]Error:[/red] provide --self-service and/or --attendant")
        raise typer.Exit(1)

    settings = ParserSettings.from_env()
    results: dict[Slot, ParseResult] = {}
    for slot, path in ((Slot.self_service, self_service), (Slot.attendant, attendant)):
        if path is None:
            continue
        result = _load_or_exit(path, slot.report_type, settings)
        _print_advisories(result)
        # Reports without transactions are not shown.
        if result.transactions:
            results[slot] = result

    if not results:
        err_console.print("[red]Error:[/red] no transactions found in the given reports")
        raise typer.Exit(1)

    for slot, result in results.items():
        _print_metadata(result)
        _print_summary(f"{slot.value} summary", summarize(result.transactions))

    if len(results) == 2:
        _print_comparison(
            compare_revenue(
                results[Slot.self_service].transactions, results[Slot.attendant].transactions
            )
        )


@app.callback()
def _root(
    log_level: Annotated[
        str | None, typer.Option(help="Log level (falls back to LAUNDRY_REPORTS_LOG_LEVEL)")
    ] = None,
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    try:
        configure_logging(ParserSettings.from_env(), level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


if __name__ == "__main__":  # pragma: no cover
    app()
