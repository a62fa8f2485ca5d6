"""Mini README: Tests for console formatting and input parsing helpers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from budgettracker.finance import EntryKind, InvalidArgumentError, LedgerEntry
from budgettracker.interface.formatting import (
    display_date_format,
    format_money,
    format_record_row,
    format_signed_amount,
    parse_amount,
    parse_entry_date,
)


def test_signed_amount_depends_on_kind() -> None:
    """Income renders with a plus sign and expenses with a minus sign."""

    income = LedgerEntry.create(EntryKind.INCOME, "Salary", Decimal("1000"), date(2024, 1, 1))
    expense = LedgerEntry.create(EntryKind.EXPENSE, "Rent", Decimal("250.5"), date(2024, 1, 1))

    assert format_signed_amount(income) == "+$1000.00"
    assert format_signed_amount(expense) == "-$250.50"


def test_format_money_handles_negative_balances() -> None:
    assert format_money(Decimal("1234.5")) == "$1,234.50"
    assert format_money(Decimal("-600")) == "-$600.00"
    assert format_money(Decimal("0"), "€") == "€0.00"


def test_record_row_contains_every_column() -> None:
    """Rows show the date, kind, amount and description."""

    entry = LedgerEntry.create(EntryKind.EXPENSE, "Groceries", Decimal("150"), date(2024, 1, 5))
    row = format_record_row(entry)

    assert row.startswith("01/05/2024")
    assert "Expense" in row
    assert "$150.00" in row
    assert row.endswith("Groceries")


@pytest.mark.parametrize(
    "text, expected",
    [("250", Decimal("250")), (" $1,250.75 ", Decimal("1250.75")), ("0.01", Decimal("0.01"))],
)
def test_parse_amount_accepts_currency_input(text: str, expected: Decimal) -> None:
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "0", "-3", "$", "nan", "1e1000000", "0.000000001"])
def test_parse_amount_rejects_invalid_input(text: str) -> None:
    """Anything that is not a positive number is refused."""

    with pytest.raises(InvalidArgumentError):
        parse_amount(text)


def test_parse_entry_date() -> None:
    """Blank input means "today"; malformed input raises."""

    assert parse_entry_date("01/05/2024") == date(2024, 1, 5)
    assert parse_entry_date("  ") is None
    with pytest.raises(ValueError):
        parse_entry_date("2024-01-05")


def test_display_date_format() -> None:
    assert display_date_format("%m/%d/%Y") == "MM/dd/yyyy"
    assert display_date_format("%d.%m.%y") == "dd.MM.yy"
