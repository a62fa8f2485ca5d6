"""Mini README: Ledger core for recording and aggregating income and expenses.

This package groups the entry model, the in-memory store that owns entries
for a session, and pure reporting helpers. Nothing here reads from a
terminal or touches the filesystem; persistence lives in
``budgettracker.persistence`` and presentation in ``budgettracker.interface``.
"""

from . import reporting
from .entry import MAX_AMOUNT, EntryKind, LedgerEntry, coerce_amount
from .errors import DuplicateEntryError, InvalidArgumentError
from .reporting import LedgerSummary
from .store import LedgerStore

__all__ = [
    "DuplicateEntryError",
    "EntryKind",
    "InvalidArgumentError",
    "LedgerEntry",
    "LedgerStore",
    "LedgerSummary",
    "MAX_AMOUNT",
    "coerce_amount",
    "reporting",
]
