"""CLI for the ``budget_analysis`` package.

A Typer-based console interface over the statement analyzer and the planning
lists. Environment variables (``BA_DATA_DIR``, ``BA_CURRENCY``,
``BUDGET_ANALYSIS_LOG_LEVEL``) may come from a local ``.env`` loaded with
``python-dotenv`` before any command runs. Business logic lives in
``budget_analysis.api``, ``budget_analysis.planning`` and
``budget_analysis.storage``; this module only reads files, prints and maps
failures to exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging, get_logger
from .storage import EntryKind, PlanningStore

_logger = get_logger("budget_analysis.cli")


# Module-level option object keeps the call out of parameter defaults (ruff B008).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--csv-path",
    help="Path to a credit-card statement CSV with date,title,amount columns",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)

_CURRENCY_HELP = "Display currency (BRL, USD, EUR, GBP, JPY). Defaults to the stored choice."
_KIND_HELP = "Which planning list to act on."


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _resolve_currency(store: PlanningStore, currency: str | None) -> str:
    from .currency import normalize_currency

    if currency is None:
        return store.load_currency()
    try:
        return normalize_currency(currency)
    except ValueError as e:
        raise _fail(str(e)) from e


# ---- Typer app ----------------------------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Analyze credit-card statement CSVs and keep a monthly budget of predicted "
        "expenses and incomes. Loads a local .env before running."
    ),
)


@app.command("analyze-statement")
def analyze_statement_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    top: int = typer.Option(6, min=0, help="How many merchants to rank by charges."),
    currency: str | None = typer.Option(None, help=_CURRENCY_HELP),
) -> None:
    """Parse a statement CSV and print totals and the top merchants."""

    # Deferred imports keep CLI startup fast
    from .api import parse_statement, summarize_statement
    from .currency import format_currency

    display = _resolve_currency(PlanningStore(), currency)

    try:
        # utf-8-sig tolerates a byte-order mark written by spreadsheet exports
        text = csv_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise _fail(f"File not found: {csv_path}") from e
    except PermissionError as e:
        raise _fail(f"Permission denied: {csv_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise _fail(f"Unexpected failure reading '{csv_path}': {e}") from e

    result = parse_statement(text, csv_path.name)
    if result.error is not None:
        raise _fail(result.error.message)

    summary = summarize_statement(result.records, top)
    totals = summary.totals

    typer.echo(
        f"Statement: {csv_path.name} ({len(result.records)} transactions, "
        f"{result.skipped_rows} skipped rows)"
    )
    typer.echo(f"Total charges\t{format_currency(totals.charges, display)}")
    typer.echo(f"Total credits\t{format_currency(totals.credits, display)}")
    typer.echo(f"Net\t{format_currency(totals.net, display)}")
    typer.echo("")
    typer.echo("Top merchants:")
    if not summary.top_merchants:
        typer.echo("(no charges)")
    for merchant in summary.top_merchants:
        typer.echo(f"{merchant.title}\t{format_currency(merchant.total, display)}")


def _add_entry(kind: EntryKind, label: str, amount: str, notes: str) -> None:
    from pydantic import ValidationError

    from .planning import add_entry, new_entry

    try:
        entry = new_entry(label, amount, notes)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise _fail(f"invalid {kind.value}: check {fields or 'input'}") from e

    store = PlanningStore()
    store.save(kind, add_entry(store.load(kind), entry))
    _logger.info("Added %s id=%s", kind.value, entry.id)
    typer.echo(entry.id)


@app.command("add-prediction")
def add_prediction_cmd(
    area: str = typer.Option(..., help="Spending area, e.g. Housing or Food."),
    amount: str = typer.Option(..., help="Expected monthly amount (> 0)."),
    notes: str = typer.Option("", help="Optional free-form notes."),
) -> None:
    """Record a predicted monthly expense."""

    _add_entry(EntryKind.PREDICTION, area, amount, notes)


@app.command("add-income")
def add_income_cmd(
    source: str = typer.Option(..., help="Income source, e.g. Salary."),
    amount: str = typer.Option(..., help="Monthly amount (> 0)."),
    notes: str = typer.Option("", help="Optional free-form notes."),
) -> None:
    """Record a monthly income."""

    _add_entry(EntryKind.INCOME, source, amount, notes)


@app.command("list-entries")
def list_entries_cmd(
    kind: EntryKind = typer.Option(..., case_sensitive=False, help=_KIND_HELP),
    *,
    currency: str | None = typer.Option(None, help=_CURRENCY_HELP),
) -> None:
    """Print one entry per line: ``<id>\\t<label>\\t<amount>\\t<notes>``."""

    from .currency import format_currency

    store = PlanningStore()
    display = _resolve_currency(store, currency)
    for e in store.load(kind):
        typer.echo(f"{e.id}\t{e.label}\t{format_currency(e.amount, display)}\t{e.notes}")


@app.command("remove-entry")
def remove_entry_cmd(
    kind: EntryKind = typer.Option(..., case_sensitive=False, help=_KIND_HELP),
    *,
    entry_id: str = typer.Option(..., "--id", help="Id of the entry to remove."),
) -> None:
    from .planning import remove_entry

    store = PlanningStore()
    entries = store.load(kind)
    remaining = remove_entry(entries, entry_id)
    if len(remaining) == len(entries):
        raise _fail(f"no {kind.value} with id {entry_id!r}")
    store.save(kind, remaining)


@app.command("clear")
def clear_cmd(
    kind: EntryKind = typer.Option(..., case_sensitive=False, help=_KIND_HELP),
) -> None:
    """Remove every entry from one planning list."""

    PlanningStore().save(kind, [])


@app.command("plan-summary")
def plan_summary_cmd(
    currency: str | None = typer.Option(None, help=_CURRENCY_HELP),
) -> None:
    """Print monthly totals, the expense share of income and per-area totals."""

    from .currency import format_currency
    from .planning import summarize_plan

    store = PlanningStore()
    display = _resolve_currency(store, currency)
    summary = summarize_plan(store.load(EntryKind.PREDICTION), store.load(EntryKind.INCOME))

    typer.echo(f"Total expected spend\t{format_currency(summary.total_expenses, display)}")
    typer.echo(f"Total monthly income\t{format_currency(summary.total_income, display)}")
    typer.echo(f"Net monthly\t{format_currency(summary.net_monthly, display)}")
    typer.echo(f"Expense share\t{summary.expense_share:.1f}%")
    typer.echo("")
    typer.echo("By area:")
    if not summary.category_totals:
        typer.echo("(no predictions)")
    for area, amount in summary.category_totals.items():
        share = summary.category_shares.get(area, 0.0)
        typer.echo(f"{area}\t{format_currency(amount, display)}\t{share:.1f}%")


@app.command("set-currency")
def set_currency_cmd(code: str = typer.Argument(..., help="Currency code.")) -> None:
    """Store the display currency used by the other commands."""

    try:
        stored = PlanningStore().save_currency(code)
    except ValueError as e:
        raise _fail(f"unsupported currency: {code!r}") from e
    typer.echo(stored)


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Diagnostics on stderr (debug, info, warning, ...). Default: warning.",
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding
    already-set variables) before logging is configured, so
    ``BUDGET_ANALYSIS_LOG_LEVEL`` may come from there too.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise _fail(str(e)) from e


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    app()
