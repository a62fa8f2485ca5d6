"""Mini README: Tests for the JSON persistence adapter.

Structure:
    * round-trips preserve every field, ids included.
    * missing files start empty silently; corrupt files warn.
    * write failures surface as ``PersistenceError``.
"""

from __future__ import annotations

import json
import warnings
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from budgettracker.finance import EntryKind, LedgerEntry, LedgerStore
from budgettracker.persistence import LoadWarning, PersistenceError, load, load_or_warn, save


def test_round_trip_preserves_entries(tmp_path: Path, worked_example_store: LedgerStore) -> None:
    """Saving then loading reproduces ids, kinds, amounts, descriptions and dates."""

    path = save(tmp_path / "budget.json", worked_example_store)
    loaded = load(path)

    assert loaded == worked_example_store
    by_id = {entry.entry_id: entry for entry in loaded}
    for original in worked_example_store:
        restored = by_id[original.entry_id]
        assert (restored.kind, restored.description, restored.amount, restored.occurred_on) == (
            original.kind,
            original.description,
            original.amount,
            original.occurred_on,
        )


def test_second_round_trip_is_identical(tmp_path: Path, worked_example_store: LedgerStore) -> None:
    """Saving a loaded store writes byte-identical content."""

    first = save(tmp_path / "first.json", worked_example_store)
    second = save(tmp_path / "second.json", load(first))

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_saved_file_is_readable_json(tmp_path: Path) -> None:
    """The file is an indented list of plain records."""

    entry = LedgerEntry.create(EntryKind.EXPENSE, "Café", Decimal("3.20"), date(2024, 1, 5))
    path = save(tmp_path / "nested" / "budget.json", LedgerStore([entry]))

    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload == [entry.as_dict()]
    assert "Café" in path.read_text(encoding="utf-8")
    assert not (tmp_path / "nested" / "budget.json.tmp").exists()


def test_missing_file_loads_empty_without_warning(tmp_path: Path) -> None:
    """A first run has no data file and is not an error."""

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        store = load(tmp_path / "absent.json")

    assert store.count() == 0
    assert load_or_warn(tmp_path / "absent.json").ok


@pytest.mark.parametrize(
    "content",
    [
        "",
        "   \n",
        "{not json",
        '{"id": "x"}',
        '[{"id": "5f0c1c1e-8b7a-4a53-9d61-1b2f1d1f4a10", "kind": "income"}]',
        '[{"id": "5f0c1c1e-8b7a-4a53-9d61-1b2f1d1f4a10", "kind": "income", '
        '"description": "x", "amount": "-1", "date": "2024-01-01"}]',
        '[{"id": "5f0c1c1e-8b7a-4a53-9d61-1b2f1d1f4a10", "kind": "income", '
        '"description": "x", "amount": "1e1000000", "date": "2024-01-01"}]',
        "[" * 100_000 + "]" * 100_000,
    ],
)
def test_corrupt_file_warns_and_loads_empty(tmp_path: Path, content: str) -> None:
    """Unparseable or invalid content degrades to an empty store with a warning."""

    path = tmp_path / "budget.json"
    path.write_text(content, encoding="utf-8")

    with pytest.warns(LoadWarning):
        store = load(path)

    assert store.count() == 0


def test_duplicate_ids_in_file_are_corrupt(tmp_path: Path) -> None:
    """Two records sharing an id make the whole file unusable."""

    record = LedgerEntry.create(EntryKind.INCOME, "Salary", Decimal("10"), date(2024, 1, 1)).as_dict()
    path = tmp_path / "budget.json"
    path.write_text(json.dumps([record, record]), encoding="utf-8")

    result = load_or_warn(path)

    assert not result.ok
    assert isinstance(result.warning, LoadWarning)
    assert result.store.count() == 0


def test_unreadable_path_warns(tmp_path: Path) -> None:
    """A directory where the file should be is reported, not raised."""

    path = tmp_path / "budget.json"
    path.mkdir()

    result = load_or_warn(path)

    assert result.warning is not None
    assert result.store.count() == 0


def test_non_utf8_file_warns(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 text degrade like any other corrupt file."""

    path = tmp_path / "budget.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.warns(LoadWarning):
        store = load(path)

    assert store.count() == 0


def test_unusable_paths_load_empty(tmp_path: Path) -> None:
    """Over-long names and paths under a regular file hold no ledger yet."""

    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    for path in (tmp_path / ("x" * 300), blocker / "budget.json"):
        result = load_or_warn(path)
        assert result.store.count() == 0
    assert load_or_warn(blocker / "budget.json").ok


def test_save_failure_raises_persistence_error(tmp_path: Path, worked_example_store: LedgerStore) -> None:
    """Write problems are wrapped so callers can report them and carry on."""

    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(PersistenceError) as excinfo:
        save(blocker / "budget.json", worked_example_store)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert worked_example_store.count() == 3


def test_failed_save_keeps_previous_file(tmp_path: Path, worked_example_store: LedgerStore) -> None:
    """The existing file is only replaced once the new content is written."""

    path = save(tmp_path / "budget.json", worked_example_store)
    before = path.read_text(encoding="utf-8")
    (tmp_path / "budget.json.tmp").mkdir()

    with pytest.raises(PersistenceError):
        save(path, LedgerStore())

    assert path.read_text(encoding="utf-8") == before
