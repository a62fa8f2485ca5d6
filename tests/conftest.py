"""Mini README: Shared fixtures for the Budget Tracker test-suite.

Structure:
    * worked_example_store - the three-entry ledger used across modules.
    * clean_settings - isolates cached settings from the developer environment.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from budgettracker.configuration import get_settings
from budgettracker.finance import EntryKind, LedgerEntry, LedgerStore


@pytest.fixture
def worked_example_store() -> LedgerStore:
    """Income 1000 on Jan 1, then expenses 250 and 150 on Jan 5."""

    return LedgerStore(
        [
            LedgerEntry.create(EntryKind.INCOME, "Salary", Decimal("1000"), date(2024, 1, 1)),
            LedgerEntry.create(EntryKind.EXPENSE, "Rent share", Decimal("250"), date(2024, 1, 5)),
            LedgerEntry.create(EntryKind.EXPENSE, "Groceries", Decimal("150"), date(2024, 1, 5)),
        ]
    )


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run each test with default settings and no stray ``.env`` file."""

    for name in ("DATA_FILE", "LOG_LEVEL", "DATE_INPUT_FORMAT", "CURRENCY_SYMBOL"):
        monkeypatch.delenv(f"BUDGET_TRACKER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
