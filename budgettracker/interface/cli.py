"""Mini README: Typer console interface for Budget Tracker.

Structure:
    * BudgetSession - owns the ledger store for one run and renders screens.
    * cli - Typer application with the interactive menu plus one-shot
      ``add``, ``records`` and ``summary`` commands.

Running ``budget-tracker`` without a command opens the menu: add income,
add expense, show records, show the summary, or exit and save. The data file
is loaded once at start and written once on exit; a failed save keeps the
entries in memory so the operator can retry.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

import typer

from .. import persistence
from ..configuration import BudgetTrackerSettings, get_settings
from ..finance import EntryKind, InvalidArgumentError, LedgerEntry, LedgerStore, reporting
from ..logging_utils import configure_root_logger, get_logger
from ..persistence import LoadResult, PersistenceError
from .formatting import (
    RECORD_HEADER,
    RULE,
    display_date_format,
    format_money,
    format_record_row,
    format_signed_amount,
    parse_amount,
    parse_entry_date,
)

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Record income and expenses and review your balance.")

_KIND_COLOURS = {EntryKind.INCOME: typer.colors.GREEN, EntryKind.EXPENSE: typer.colors.RED}
_CLEAR_SCREEN = "\x1b[2J\x1b[H"


@dataclass(slots=True)
class SessionOptions:
    """Values resolved by the top-level callback for every command."""

    data_file: Path
    settings: BudgetTrackerSettings


class BudgetSession:
    """Drive one console session over an explicitly owned ``LedgerStore``."""

    def __init__(
        self,
        data_file: Path,
        settings: BudgetTrackerSettings,
        store: Optional[LedgerStore] = None,
    ) -> None:
        self.data_file = data_file
        self.settings = settings
        self.store = store if store is not None else LedgerStore()
        self.interactive = False

    @classmethod
    def open(cls, options: SessionOptions) -> tuple["BudgetSession", LoadResult]:
        """Load the data file into a new session."""

        result = persistence.load_or_warn(options.data_file)
        return cls(options.data_file, options.settings, result.store), result

    @property
    def symbol(self) -> str:
        return self.settings.currency_symbol

    def _clear(self) -> None:
        if self.interactive and sys.stdout.isatty():
            typer.echo(_CLEAR_SCREEN, nl=False)

    def _pause(self) -> None:
        """Wait for Enter between screens; skipped when input is piped."""

        if sys.stdin.isatty():
            typer.prompt("Press Enter to continue...", default="", show_default=False, prompt_suffix="")

    # Interactive screens -------------------------------------------------

    def run(self, load_result: Optional[LoadResult] = None) -> None:
        """Loop over the main menu until the operator exits."""

        self.interactive = True
        self.show_welcome(load_result)
        self._pause()
        while True:
            self.show_menu()
            choice = typer.prompt("Please choose an option (1-5)", default="", show_default=False).strip()
            if choice == "1":
                self.prompt_entry(EntryKind.INCOME)
            elif choice == "2":
                self.prompt_entry(EntryKind.EXPENSE)
            elif choice == "3":
                self.show_records()
            elif choice == "4":
                self.show_summary()
            elif choice == "5":
                if self.exit_and_save():
                    return
            else:
                typer.secho("Invalid choice. Please select 1-5.", fg=typer.colors.RED)
            typer.echo()
            self._pause()

    def show_welcome(self, load_result: Optional[LoadResult] = None) -> None:
        self._clear()
        typer.secho("=" * 41, fg=typer.colors.CYAN)
        typer.secho(f"{'BUDGET TRACKER':^41}", fg=typer.colors.CYAN, bold=True)
        typer.secho("=" * 41, fg=typer.colors.CYAN)
        typer.echo(f"Today's Date: {date.today():%A, %B %d, %Y}")
        if load_result is not None and load_result.warning is not None:
            typer.secho(f"Warning: {load_result.warning}", fg=typer.colors.YELLOW)
        typer.echo(f"Loaded {self.store.count()} existing records.")

    def show_menu(self) -> None:
        self._clear()
        typer.secho(f"{' MAIN MENU ':=^41}", fg=typer.colors.YELLOW)
        typer.echo("1. Add Income")
        typer.echo("2. Add Expense")
        typer.echo("3. Show All Records")
        typer.echo("4. Show Summary")
        typer.echo("5. Exit & Save")
        typer.echo("=" * 41)

    def prompt_entry(self, kind: EntryKind) -> Optional[LedgerEntry]:
        """Ask for description, amount and date, then add the entry."""

        colour = _KIND_COLOURS[kind]
        self._clear()
        typer.secho(f"ADD NEW {kind.value.upper()}", fg=colour, bold=True)
        typer.echo("=" * 20)

        description = typer.prompt("Description", default="", show_default=False).strip()
        if not description:
            typer.secho("Description cannot be empty.", fg=typer.colors.RED)
            return None

        raw_amount = typer.prompt(f"Amount ({self.symbol})", default="", show_default=False)
        try:
            amount = parse_amount(raw_amount, self.symbol)
        except InvalidArgumentError as error:
            typer.secho(str(error), fg=typer.colors.RED)
            return None

        date_format = self.settings.date_input_format
        raw_date = typer.prompt(
            f"Date ({display_date_format(date_format)}) [Press Enter for today]",
            default="",
            show_default=False,
        )
        try:
            occurred_on = parse_entry_date(raw_date, date_format)
        except ValueError:
            typer.secho("Invalid date format. Using today's date.", fg=typer.colors.YELLOW)
            occurred_on = None

        try:
            entry = self.store.add(LedgerEntry.create(kind, description, amount, occurred_on))
        except InvalidArgumentError as error:
            typer.secho(f"Error creating budget item: {error}", fg=typer.colors.RED)
            return None

        typer.echo()
        typer.secho(f"{kind.label} added successfully!", fg=colour)
        typer.secho(f"   {format_signed_amount(entry, self.symbol)} - {entry.description}", fg=colour)
        return entry

    def show_records(self) -> None:
        self._clear()
        typer.secho("ALL BUDGET RECORDS", fg=typer.colors.MAGENTA, bold=True)
        typer.echo("=" * len(RULE))
        if not self.store.count():
            typer.echo("No records found. Start by adding some income or expenses!")
            return
        typer.echo(RECORD_HEADER)
        typer.echo(RULE)
        for entry in self.store.sorted_by_date_desc():
            typer.secho(
                format_record_row(entry, date_format=self.settings.date_input_format, symbol=self.symbol),
                fg=_KIND_COLOURS[entry.kind],
            )
        typer.echo(RULE)
        typer.echo(f"Total Records: {self.store.count()}")

    def show_summary(self) -> None:
        summary = reporting.summarise(self.store)
        self._clear()
        typer.secho("FINANCIAL SUMMARY", fg=typer.colors.CYAN, bold=True)
        typer.echo("=" * 41)
        typer.secho(
            f"Total Income:   {format_money(summary.income_total, self.symbol):>16}",
            fg=typer.colors.GREEN,
        )
        typer.echo(f"   ({summary.income_count} transactions)")
        typer.secho(
            f"Total Expenses: {format_money(summary.expense_total, self.symbol):>16}",
            fg=typer.colors.RED,
        )
        typer.echo(f"   ({summary.expense_count} transactions)")
        typer.echo("-" * 41)
        balance_line = f"Net Balance:    {format_money(summary.balance, self.symbol):>16}"
        if summary.in_surplus:
            typer.secho(balance_line, fg=typer.colors.GREEN)
            typer.echo("You're in the positive!")
        else:
            typer.secho(balance_line, fg=typer.colors.RED)
            typer.echo("Consider reducing expenses")
        typer.echo("=" * 41)

        if summary.expense_ratio is not None:
            typer.echo()
            typer.echo("Breakdown:")
            typer.echo(f"   Expenses are {summary.expense_ratio:.1f}% of your income")

    def save(self) -> bool:
        """Persist the store, reporting failures instead of raising."""

        try:
            persistence.save(self.data_file, self.store)
        except PersistenceError as error:
            typer.secho(f"Error saving data: {error}", fg=typer.colors.RED, err=True)
            return False
        return True

    def exit_and_save(self) -> bool:
        """Save before leaving; return ``True`` when the loop should stop."""

        if self.save():
            typer.echo()
            typer.secho("Data saved successfully!", fg=typer.colors.GREEN)
            typer.echo("Thanks for using Budget Tracker. Goodbye!")
            return True
        if typer.confirm("Exit without saving?", default=False):
            LOGGER.warning("Exiting without saving %s entries", self.store.count())
            return True
        return False


def _options(ctx: typer.Context) -> SessionOptions:
    return ctx.obj


def _open_or_exit(options: SessionOptions) -> BudgetSession:
    """Open a session for one-shot commands, refusing to work on a corrupt file."""

    session, result = BudgetSession.open(options)
    if result.warning is not None:
        typer.secho(str(result.warning), fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    return session


@cli.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(None, "--data-file", help="Ledger JSON file to use."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debugging output to stderr."),
) -> None:
    """Open the interactive menu when no command is given."""

    settings = get_settings()
    configure_root_logger("DEBUG" if verbose else settings.log_level)
    ctx.obj = SessionOptions(data_file=data_file or settings.data_file, settings=settings)
    LOGGER.debug("Using ledger file %s", ctx.obj.data_file)
    if ctx.invoked_subcommand is None:
        run(ctx)


@cli.command()
def run(ctx: typer.Context) -> None:
    """Start the interactive menu."""

    session, result = BudgetSession.open(_options(ctx))
    session.run(result)


@cli.command()
def add(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="Either 'income' or 'expense'."),
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Positive amount, e.g. 250.00."),
    on: Optional[str] = typer.Option(None, "--date", help="Date of the entry; defaults to today."),
) -> None:
    """Add one entry and save the ledger."""

    options = _options(ctx)
    session = _open_or_exit(options)
    date_format = options.settings.date_input_format
    try:
        occurred_on = parse_entry_date(on or "", date_format)
    except ValueError:
        typer.secho(
            f"Invalid date '{on}'. Expected {display_date_format(date_format)}.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    try:
        entry = LedgerEntry.create(
            EntryKind.from_str(kind),
            description.strip(),
            parse_amount(amount, options.settings.currency_symbol),
            occurred_on,
        )
    except InvalidArgumentError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    session.store.add(entry)
    if not session.save():
        raise typer.Exit(code=1)
    typer.secho(
        f"{entry.kind.label} added: {format_money(entry.amount, session.symbol)} - {entry.description}",
        fg=_KIND_COLOURS[entry.kind],
    )


@cli.command()
def records(ctx: typer.Context) -> None:
    """Print every record, newest first."""

    _open_or_exit(_options(ctx)).show_records()


@cli.command()
def summary(ctx: typer.Context) -> None:
    """Print totals, balance and the expense breakdown."""

    _open_or_exit(_options(ctx)).show_summary()
