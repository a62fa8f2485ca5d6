"""Mini README: Text formatting and input parsing for the console interface.

Structure:
    * format_money / format_signed_amount - render amounts for display.
    * format_record_row / RECORD_HEADER - table lines for the records screen.
    * parse_amount / parse_entry_date - turn raw prompt input into values.
    * display_date_format - human readable form of a strptime pattern.

These helpers are presentation-only; the ledger core never formats text.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..finance import EntryKind, InvalidArgumentError, LedgerEntry, coerce_amount

RECORD_HEADER = f"{'Date':<12} {'Type':<8} {'Amount':>12}   Description"
RULE = "-" * 65

_DISPLAY_TOKENS = (("%Y", "yyyy"), ("%y", "yy"), ("%m", "MM"), ("%d", "dd"))


def format_money(amount: Decimal, symbol: str = "$") -> str:
    """Render ``amount`` with two decimals and thousands separators."""

    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_signed_amount(entry: LedgerEntry, symbol: str = "$") -> str:
    """Render ``+$x`` for income and ``-$x`` for expenses."""

    sign = "+" if entry.kind is EntryKind.INCOME else "-"
    return f"{sign}{symbol}{entry.amount:.2f}"


def format_record_row(entry: LedgerEntry, *, date_format: str = "%m/%d/%Y", symbol: str = "$") -> str:
    amount = f"{symbol}{entry.amount:,.2f}"
    return (
        f"{entry.occurred_on.strftime(date_format):<12} "
        f"{entry.kind.label:<8} {amount:>12}   {entry.description}"
    )


def display_date_format(date_format: str) -> str:
    """Translate ``%m/%d/%Y`` into ``MM/dd/yyyy`` for prompts."""

    rendered = date_format
    for directive, token in _DISPLAY_TOKENS:
        rendered = rendered.replace(directive, token)
    return rendered


def parse_amount(text: str, symbol: str = "$") -> Decimal:
    """Parse a typed amount, tolerating a currency symbol and separators."""

    cleaned = text.strip()
    if symbol and cleaned.startswith(symbol):
        cleaned = cleaned[len(symbol):]
    cleaned = cleaned.replace(",", "").replace(" ", "")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as error:
        raise InvalidArgumentError("Please enter a valid amount greater than 0.") from error
    if not amount.is_finite() or amount <= 0:
        raise InvalidArgumentError("Please enter a valid amount greater than 0.")
    return coerce_amount(amount)


def parse_entry_date(text: str, date_format: str = "%m/%d/%Y") -> Optional[date]:
    """Return the typed date, ``None`` for blank input.

    Raises ``ValueError`` when the text does not match ``date_format``.
    """

    cleaned = text.strip()
    if not cleaned:
        return None
    return datetime.strptime(cleaned, date_format).date()
