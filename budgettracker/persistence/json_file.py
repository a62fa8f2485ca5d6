"""Mini README: JSON file adapter for loading and saving a ledger store.

Structure:
    * LoadResult - store returned by a load plus the warning, if any.
    * load_or_warn - read a file, reporting problems in the result.
    * load - read a file, emitting problems through ``warnings.warn``.
    * save - write a store, replacing the previous file in one step.

A missing file is a normal first run and yields an empty store silently.
An existing file that is empty, unreadable, or holds anything other than a
list of valid entry records yields an empty store plus a ``LoadWarning``.
Files are opened and closed within each call.
"""

from __future__ import annotations

import contextlib
import json
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from ..finance import InvalidArgumentError, LedgerEntry, LedgerStore
from ..logging_utils import get_logger
from .errors import LoadWarning, PersistenceError

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(slots=True)
class LoadResult:
    """Outcome of reading a ledger file."""

    store: LedgerStore
    warning: Optional[LoadWarning] = None

    @property
    def ok(self) -> bool:
        return self.warning is None


def load_or_warn(path: PathLike) -> LoadResult:
    """Load a store from ``path`` and describe any problem in the result."""

    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        LOGGER.info("No ledger file at %s; starting with an empty store", path)
        return LoadResult(store=LedgerStore())
    except (OSError, UnicodeDecodeError) as error:
        return _degraded(path, f"could not read file ({error})")

    if not raw.strip():
        return _degraded(path, "file is empty")

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as error:
        return _degraded(path, f"invalid JSON ({error.msg} at line {error.lineno})")
    except RecursionError:
        return _degraded(path, "invalid JSON (nesting too deep)")

    try:
        store = LedgerStore(_parse_entries(payload))
    except InvalidArgumentError as error:
        return _degraded(path, str(error))

    LOGGER.info("Loaded %s entries from %s", store.count(), path)
    return LoadResult(store=store)


def load(path: PathLike) -> LedgerStore:
    """Load a store from ``path``, warning with ``LoadWarning`` on corrupt data."""

    result = load_or_warn(path)
    if result.warning is not None:
        warnings.warn(result.warning, stacklevel=2)
    return result.store


def save(path: PathLike, store: LedgerStore) -> Path:
    """Write every entry of ``store`` to ``path`` as indented JSON."""

    path = Path(path)
    staging = path.with_name(f"{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with staging.open("w", encoding="utf-8") as handle:
            json.dump(store.export_records(), handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        staging.replace(path)
    except OSError as error:
        LOGGER.error("Failed to save ledger to %s: %s", path, error)
        with contextlib.suppress(OSError):
            staging.unlink()
        raise PersistenceError(f"Could not save ledger to {path}: {error}") from error
    LOGGER.info("Saved %s entries to %s", store.count(), path)
    return path


def _parse_entries(payload: Any) -> List[LedgerEntry]:
    """Rebuild entries from decoded JSON, rejecting anything but a record list."""

    if not isinstance(payload, list):
        raise InvalidArgumentError("Ledger file must contain a list of records.")
    entries: List[LedgerEntry] = []
    for position, record in enumerate(payload):
        try:
            entries.append(LedgerEntry.from_dict(record))
        except InvalidArgumentError as error:
            raise InvalidArgumentError(f"record {position}: {error}") from error
    return entries


def _degraded(path: Path, reason: str) -> LoadResult:
    message = f"Could not load existing data from {path}: {reason}. Starting fresh."
    LOGGER.warning("%s", message)
    return LoadResult(store=LedgerStore(), warning=LoadWarning(message))
