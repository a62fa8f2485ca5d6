"""Mini README: Core package initializer for the Budget Tracker ledger.

This module exposes convenience imports that allow other parts of the
application to access high-level services without needing to know the
exact module structure. The file is intentionally lightweight so that
importing the ledger core never pulls in the console interface.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
