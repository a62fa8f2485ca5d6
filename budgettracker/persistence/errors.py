"""Mini README: Warning and error types raised by the persistence adapter.

Structure:
    * LoadWarning - recoverable problem reading a ledger file.
    * PersistenceError - failure writing a ledger file.
"""

from __future__ import annotations


class LoadWarning(UserWarning):
    """Signalled when an existing ledger file could not be loaded."""


class PersistenceError(OSError):
    """Raised when the ledger cannot be written to disk."""
