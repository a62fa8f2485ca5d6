"""Mini README: In-memory ledger store holding entries in insertion order.

Structure:
    * LedgerStore - append-only collection with query and count helpers.

The store is owned explicitly by whoever drives the session (the CLI or a
test) and handed to reporting and persistence helpers. It exposes no update
or delete operation; a whole store is replaced by loading another one.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from uuid import UUID

from ..logging_utils import get_logger
from .entry import EntryKind, LedgerEntry
from .errors import DuplicateEntryError

LOGGER = get_logger(__name__)


class LedgerStore:
    """Manage an ordered collection of ledger entries with unique ids."""

    def __init__(self, entries: Optional[Iterable[LedgerEntry]] = None) -> None:
        self._entries: List[LedgerEntry] = []
        self._index: Dict[UUID, LedgerEntry] = {}
        for entry in entries or ():
            self.add(entry)
        LOGGER.debug("Ledger store initialised with %s entries", len(self._entries))

    def add(self, entry: LedgerEntry) -> LedgerEntry:
        """Append an entry, refusing ids that are already stored."""

        if entry.entry_id in self._index:
            raise DuplicateEntryError(f"Entry {entry.entry_id} already exists.")
        self._entries.append(entry)
        self._index[entry.entry_id] = entry
        LOGGER.debug("Added %s entry %s (%s)", entry.kind.value, entry.entry_id, entry.amount)
        return entry

    def all(self) -> Tuple[LedgerEntry, ...]:
        """Return a snapshot of the entries in insertion order."""

        return tuple(self._entries)

    def sorted_by_date_desc(self) -> List[LedgerEntry]:
        """Return entries newest first; equal dates keep insertion order."""

        # sorted() stays stable with reverse=True
        return sorted(self._entries, key=lambda entry: entry.occurred_on, reverse=True)

    def count(self) -> int:
        return len(self._entries)

    def count_by_kind(self, kind: EntryKind) -> int:
        return sum(1 for entry in self._entries if entry.kind is kind)

    def find(self, entry_id: UUID) -> Optional[LedgerEntry]:
        """Look up an entry by id, returning ``None`` when it is absent."""

        return self._index.get(entry_id)

    def export_records(self) -> List[Dict[str, str]]:
        """Export every entry as a persisted record, in insertion order."""

        return [entry.as_dict() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(tuple(self._entries))

    def __contains__(self, entry: object) -> bool:
        return isinstance(entry, LedgerEntry) and entry.entry_id in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LedgerStore):
            return NotImplemented
        return self.export_records() == other.export_records()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LedgerStore(entries={len(self._entries)})"
