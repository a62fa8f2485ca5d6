"""Mini README: Entry point for launching the Budget Tracker console.

Running this script without arguments opens the interactive menu. The Typer
application also exposes ``add``, ``records`` and ``summary`` commands, and
reads defaults such as the data file from ``BUDGET_TRACKER_*`` environment
variables when available.
"""

from __future__ import annotations

from budgettracker.interface import cli

if __name__ == "__main__":
    cli()
