# ruff: noqa: I001
"""CLI for the ``finance_insights`` package.

This module exposes callable command handlers (``cmd_analyze``,
``cmd_simulate`` ...) and a Typer-based console interface that renders their
results with Rich. Environment variables are loaded from a local ``.env``
using ``python-dotenv`` before any command runs. Business logic lives in
``finance_insights.api`` and the pipeline modules; this file only handles
I/O and presentation.
"""

from __future__ import annotations

import dataclasses
import json
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from typer.models import OptionInfo

from .aggregation import category_breakdown, cumulative_expenses, sorted_months
from .api import analyze_csv, analyze_transactions, merge_transactions
from .formatting import DEFAULT_FORMATTER, Formatter, format_percent
from .ingest import StatementFileError, load_statement_text
from .logging_setup import DEFAULT_LEVEL, LEVEL_ENV, configure_logging
from .models import FinanceReport, InvestmentPoint
from .normalizers import normalize_rows
from .parsing import parse_csv, preview_csv
from .sample_data import SAMPLE_CSV
from .simulation import (
    INVESTMENT_RATES,
    SimulationParams,
    compare_investments,
    projection_totals,
)
from .term_ui import prompt_manual_entries


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


# ---- Rendering helpers ------------------------------------------------------


def _report_payload(report: FinanceReport) -> dict[str, Any]:
    return {
        "transactions": [dataclasses.asdict(tx) for tx in report.transactions],
        "monthly": {k: dataclasses.asdict(v) for k, v in report.monthly.items()},
        "categories": dict(report.categories),
        "summary": dataclasses.asdict(report.summary),
    }


def render_report(
    report: FinanceReport,
    *,
    console: Console,
    fmt: Formatter = DEFAULT_FORMATTER,
    limit: int | None = None,
) -> None:
    """Print summary cards, monthly table, category breakdown and transactions."""

    summary = report.summary
    if summary.transaction_count == 0:
        console.print("Nenhuma transação encontrada no arquivo.")
        return

    cards = Table(title="Resumo", show_header=False)
    cards.add_column("Indicador")
    cards.add_column("Valor", justify="right")
    cards.add_row("Total Entradas", fmt.currency(summary.total_income))
    cards.add_row("Total Gastos", fmt.currency(abs(summary.total_expense)))
    cards.add_row("Saldo", fmt.currency(summary.balance))
    cards.add_row("Média Mensal", fmt.currency(summary.monthly_average))
    cards.add_row(
        "Maior Categoria",
        f"{summary.top_category} ({fmt.currency(summary.top_category_amount)})",
    )
    cards.add_row("Transações", str(summary.transaction_count))
    console.print(cards)

    months = Table(title="Resumo Mensal")
    months.add_column("Mês")
    months.add_column("Entradas", justify="right")
    months.add_column("Gastos", justify="right")
    months.add_column("Saldo", justify="right")
    for key, bucket in sorted_months(report.monthly):
        months.add_row(
            fmt.month(key),
            fmt.currency(bucket.income),
            fmt.currency(bucket.expense),
            fmt.currency(bucket.total),
        )
    console.print(months)

    breakdown = category_breakdown(report.categories)
    if breakdown:
        cats = Table(title="Gastos por Categoria")
        cats.add_column("Categoria")
        cats.add_column("Total", justify="right")
        cats.add_column("%", justify="right")
        for item in breakdown:
            cats.add_row(item.name, fmt.currency(item.amount), format_percent(item.share * 100))
        console.print(cats)

    series = cumulative_expenses(report.transactions)
    if series:
        last = series[-1]
        console.print(
            f"Gastos acumulados até {fmt.day_month(last.date)}: {fmt.currency(last.total)}"
        )

    txs = Table(title="Transações")
    txs.add_column("Data")
    txs.add_column("Descrição")
    txs.add_column("Categoria")
    txs.add_column("Valor", justify="right")
    shown = report.transactions if limit is None else report.transactions[:limit]
    for tx in shown:
        txs.add_row(fmt.date(tx.date), tx.description, tx.category, fmt.currency(tx.amount))
    console.print(txs)
    hidden = len(report.transactions) - len(shown)
    if hidden > 0:
        console.print(f"... e mais {hidden} transações")


def render_projection(
    points: list[InvestmentPoint],
    *,
    console: Console,
    title: str,
    step: int,
    fmt: Formatter = DEFAULT_FORMATTER,
) -> None:
    table = Table(title=title)
    table.add_column("Período")
    table.add_column("Investido", justify="right")
    table.add_column("Valor", justify="right")
    for point in points:
        if point.month % step == 0 or point is points[-1]:
            table.add_row(point.label, fmt.currency(point.invested), fmt.currency(point.value))
    console.print(table)

    totals = projection_totals(points)
    console.print(f"Valor final: {fmt.currency(totals.final_value)}")
    console.print(f"Total investido: {fmt.currency(totals.total_invested)}")
    console.print(
        f"Rendimento: {fmt.currency(totals.total_return)} "
        f"({format_percent(totals.return_percentage, 2)})"
    )


# ---- Command handlers -------------------------------------------------------


def _emit_report(report: FinanceReport, *, as_json: bool, limit: int | None) -> None:
    if as_json:
        typer.echo(json.dumps(_report_payload(report), ensure_ascii=False, indent=2, default=str))
    else:
        render_report(report, console=_console(), limit=limit)


def cmd_analyze(
    csv_path: str, *, manual: bool = False, as_json: bool = False, limit: int | None = None
) -> int:
    """Analyze a statement file and print the report.

    Errors reading the file, and content without a header plus at least one
    data line, are written to stderr and produce exit status 1. Data lines
    that all fail normalization still render (an empty report).
    """

    try:
        text = load_statement_text(csv_path)
    except FileNotFoundError:
        return _error(f"File not found: {csv_path}")
    except PermissionError:
        return _error(f"Permission denied: {csv_path}")
    except StatementFileError as e:
        return _error(str(e))

    rows = parse_csv(text)
    if not rows:
        return _error("O arquivo CSV precisa ter pelo menos um cabeçalho e uma linha de dados.")

    extra = prompt_manual_entries() if manual else []
    report = analyze_transactions(merge_transactions(normalize_rows(rows), extra))
    _emit_report(report, as_json=as_json, limit=limit)
    return 0


def cmd_sample(*, as_json: bool = False, limit: int | None = None) -> int:
    _emit_report(analyze_csv(SAMPLE_CSV), as_json=as_json, limit=limit)
    return 0


def cmd_preview(csv_path: str) -> int:
    """Print the header and first five rows of a statement file."""

    try:
        rows = preview_csv(load_statement_text(csv_path))
    except FileNotFoundError:
        return _error(f"File not found: {csv_path}")
    except PermissionError:
        return _error(f"Permission denied: {csv_path}")
    except (StatementFileError, ValueError) as e:
        return _error(str(e))

    header, *body = rows
    table = Table(title=Path(csv_path).name)
    for name in header:
        table.add_column(name)
    for row in body:
        cells = (row + [""] * len(header))[: len(header)]
        table.add_row(*cells)
    _console().print(table)
    return 0


class InvestmentChoice(str, Enum):
    selic = "selic"
    cdi = "cdi"
    ipca = "ipca"


def cmd_simulate(
    *,
    initial: float,
    contribution: float,
    months: int,
    investment: str,
    rate: float | None,
    compare: bool,
    step: int,
) -> int:
    """Project an investment, optionally against every investment type."""

    info = INVESTMENT_RATES[investment]
    try:
        params = SimulationParams(
            initial=initial,
            monthly_contribution=contribution,
            months=months,
            annual_rate=info.rate if rate is None else rate,
        )
    except ValueError as e:
        return _error(f"invalid simulation parameters: {e}")

    console = _console()
    step = max(step, 1)
    if compare:
        overrides = {investment: params.annual_rate}
        results = compare_investments(
            params.initial, params.monthly_contribution, params.months, rates=overrides
        )
        for kind, points in results.items():
            rate_used = overrides.get(kind, INVESTMENT_RATES[kind].rate)
            render_projection(
                points,
                console=console,
                title=f"{INVESTMENT_RATES[kind].name} ({format_percent(rate_used, 2)} a.a.)",
                step=step,
            )
        return 0

    render_projection(
        params.simulate(),
        console=console,
        title=f"{info.name} ({format_percent(params.annual_rate, 2)} a.a.)",
        step=step,
    )
    return 0


def cmd_rates() -> int:
    table = Table(title="Tipos de Investimento")
    table.add_column("Tipo")
    table.add_column("Nome")
    table.add_column("Taxa (a.a.)", justify="right")
    table.add_column("Descrição")
    for kind, info in INVESTMENT_RATES.items():
        table.add_row(kind, info.name, format_percent(info.rate, 2), info.description)
    _console().print(table)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Analyze bank statement CSV exports (income, spending by month and "
        "category) and simulate fixed-income investments."
    ),
)

# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--csv-path",
    help="Path to the bank statement CSV file",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("analyze")
def analyze_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    manual: bool = typer.Option(False, help="Add manual entries interactively before analysis."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    limit: int | None = typer.Option(None, min=0, help="Show at most N transactions."),
) -> None:
    """Analyze a statement CSV."""

    raise typer.Exit(cmd_analyze(str(csv_path), manual=manual, as_json=as_json, limit=limit))


@app.command("sample")
def sample_cmd(
    *,
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    limit: int | None = typer.Option(None, min=0, help="Show at most N transactions."),
) -> None:
    """Analyze the bundled sample statement."""

    raise typer.Exit(cmd_sample(as_json=as_json, limit=limit))


@app.command("preview")
def preview_cmd(csv_path: Annotated[Path, CSV_PATH_OPTION]) -> None:
    """Show the header and first rows of a statement CSV."""

    raise typer.Exit(cmd_preview(str(csv_path)))


@app.command("simulate")
def simulate_cmd(
    *,
    initial: float = typer.Option(10_000.0, help="Initial amount (R$)."),
    contribution: float = typer.Option(500.0, help="Monthly contribution (R$)."),
    months: int = typer.Option(24, help="Number of months (1-360)."),
    investment: InvestmentChoice = typer.Option(
        InvestmentChoice.selic, "--type", help="Investment type."
    ),
    rate: float | None = typer.Option(None, help="Override the annual rate (%)."),
    compare: bool = typer.Option(False, help="Compare all investment types."),
    step: int = typer.Option(12, help="Show one row every N months."),
) -> None:
    """Simulate compound growth of an investment."""

    raise typer.Exit(
        cmd_simulate(
            initial=initial,
            contribution=contribution,
            months=months,
            investment=investment.value,
            rate=rate,
            compare=compare,
            step=step,
        )
    )


@app.command("rates")
def rates_cmd() -> None:
    """List investment types and their default annual rates."""

    raise typer.Exit(cmd_rates())


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help=(
            "Log level for stderr diagnostics; falls back to "
            "FINANCE_INSIGHTS_LOG_LEVEL, then WARNING."
        ),
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    level = log_level or os.getenv(LEVEL_ENV) or DEFAULT_LEVEL
    try:
        configure_logging(level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


if __name__ == "__main__":  # pragma: no cover
    app()
