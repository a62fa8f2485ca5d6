"""Mini README: Console interface for Budget Tracker.

Exports the Typer application and the session object that owns the ledger
store during an interactive run. Formatting helpers live in ``formatting``.
"""

from .cli import BudgetSession, cli

__all__ = ["BudgetSession", "cli"]
