"""Mini README: Pure aggregation helpers over a snapshot of ledger entries.

Structure:
    * total / balance / expense_ratio / count_by_kind - single figures.
    * LedgerSummary - frozen bundle of every figure the summary screen shows.
    * summarise - build a ``LedgerSummary`` in one pass over the entries.

Every function accepts any iterable of ``LedgerEntry`` (a ``LedgerStore``
works directly) and never mutates its input. ``expense_ratio`` returns
``None`` when there is no income, meaning the figure cannot be computed;
callers should omit it rather than print zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from .entry import EntryKind, LedgerEntry

ZERO = Decimal(0)
HUNDRED = Decimal(100)


def total(entries: Iterable[LedgerEntry], kind: EntryKind) -> Decimal:
    """Sum the amounts of ``kind`` entries; zero when there are none."""

    return sum((entry.amount for entry in entries if entry.kind is kind), ZERO)


def balance(entries: Iterable[LedgerEntry]) -> Decimal:
    """Return total income minus total expense."""

    snapshot = tuple(entries)
    return total(snapshot, EntryKind.INCOME) - total(snapshot, EntryKind.EXPENSE)


def expense_ratio(entries: Iterable[LedgerEntry]) -> Optional[Decimal]:
    """Return expenses as a percentage of income, or ``None`` without income."""

    snapshot = tuple(entries)
    return _ratio(total(snapshot, EntryKind.EXPENSE), total(snapshot, EntryKind.INCOME))


def count_by_kind(entries: Iterable[LedgerEntry], kind: EntryKind) -> int:
    return sum(1 for entry in entries if entry.kind is kind)


def _ratio(expenses: Decimal, income: Decimal) -> Optional[Decimal]:
    if income == ZERO:
        return None
    return expenses / income * HUNDRED


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Aggregate figures for a snapshot of entries."""

    income_total: Decimal
    income_count: int
    expense_total: Decimal
    expense_count: int
    balance: Decimal
    expense_ratio: Optional[Decimal]

    @property
    def record_count(self) -> int:
        return self.income_count + self.expense_count

    @property
    def in_surplus(self) -> bool:
        """True when income covers expenses (a zero balance counts)."""

        return self.balance >= ZERO


def summarise(entries: Iterable[LedgerEntry]) -> LedgerSummary:
    """Compute totals, counts, balance and expense ratio in a single pass."""

    income_total = expense_total = ZERO
    income_count = expense_count = 0
    for entry in entries:
        if entry.kind is EntryKind.INCOME:
            income_total += entry.amount
            income_count += 1
        else:
            expense_total += entry.amount
            expense_count += 1
    return LedgerSummary(
        income_total=income_total,
        income_count=income_count,
        expense_total=expense_total,
        expense_count=expense_count,
        balance=income_total - expense_total,
        expense_ratio=_ratio(expense_total, income_total),
    )
