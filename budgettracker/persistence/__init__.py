"""Mini README: Durable storage for ledger stores.

The ``json_file`` module reads and writes a store as a human readable JSON
list. Loading degrades to an empty store on corrupt input and reports the
problem as a ``LoadWarning``; saving surfaces write failures as
``PersistenceError`` so callers can keep the data in memory and retry.
"""

from .errors import LoadWarning, PersistenceError
from .json_file import LoadResult, load, load_or_warn, save

__all__ = [
    "LoadResult",
    "LoadWarning",
    "PersistenceError",
    "load",
    "load_or_warn",
    "save",
]
