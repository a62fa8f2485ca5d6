"""Mini README: Exceptions raised by the ledger core.

Structure:
    * InvalidArgumentError - rejected entry data (blank description, bad amount).
    * DuplicateEntryError - an entry id already present in a store.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when entry data violates the ledger invariants."""


class DuplicateEntryError(InvalidArgumentError):
    """Raised when a store already holds an entry with the same identifier."""
