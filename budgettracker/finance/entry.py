"""Mini README: Ledger entries recording a single income or expense event.

Structure:
    * EntryKind - enum representing income versus expense entries.
    * LedgerEntry - frozen dataclass with identity-based equality.

Entries validate themselves on construction so an invalid amount or blank
description never reaches a store. Equality and hashing use the entry id
only: two entries with identical fields but different ids are different
events. ``as_dict``/``from_dict`` define the persisted record layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union
from uuid import UUID, uuid4

from .errors import InvalidArgumentError

AmountLike = Union[Decimal, int, float, str]

# Keeps sums and percentages well inside the default decimal context.
MAX_AMOUNT = Decimal("1e15")
MAX_DECIMAL_PLACES = 8
_SMALLEST_STEP = Decimal(1).scaleb(-MAX_DECIMAL_PLACES)


class EntryKind(str, Enum):
    """Enumerate the supported entry categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "EntryKind":
        """Coerce arbitrary casing into a valid entry kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise InvalidArgumentError(f"Unsupported entry kind: {value}") from error

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True, eq=False)
class LedgerEntry:
    """Represent one financial event identified by ``entry_id``."""

    kind: EntryKind
    description: str
    amount: Decimal
    occurred_on: date = field(default_factory=date.today)
    entry_id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", _coerce_kind(self.kind))
        object.__setattr__(self, "description", _coerce_description(self.description))
        object.__setattr__(self, "amount", coerce_amount(self.amount))
        object.__setattr__(self, "occurred_on", _coerce_date(self.occurred_on))
        object.__setattr__(self, "entry_id", _coerce_id(self.entry_id))

    @classmethod
    def create(
        cls,
        kind: Union[EntryKind, str],
        description: str,
        amount: AmountLike,
        occurred_on: Optional[date] = None,
    ) -> "LedgerEntry":
        """Build a new entry with a fresh id, dated today when no date is given."""

        return cls(
            kind=kind,
            description=description,
            amount=amount,
            occurred_on=date.today() if occurred_on is None else occurred_on,
        )

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "LedgerEntry":
        """Rebuild an entry from its persisted record, keeping the stored id."""

        if not isinstance(record, Mapping):
            raise InvalidArgumentError("Ledger records must be JSON objects.")
        missing = [key for key in ("id", "kind", "description", "amount", "date") if key not in record]
        if missing:
            raise InvalidArgumentError(f"Ledger record is missing fields: {', '.join(missing)}")
        return cls(
            entry_id=record["id"],
            kind=record["kind"],
            description=record["description"],
            amount=record["amount"],
            occurred_on=record["date"],
        )

    def as_dict(self) -> Dict[str, str]:
        """Export the entry with JSON serialisable values."""

        return {
            "id": str(self.entry_id),
            "kind": self.kind.value,
            "description": self.description,
            "amount": str(self.amount),
            "date": self.occurred_on.isoformat(),
        }

    def is_valid(self) -> bool:
        """Re-check the invariants without raising."""

        return (
            isinstance(self.kind, EntryKind)
            and isinstance(self.description, str)
            and bool(self.description.strip())
            and isinstance(self.amount, Decimal)
            and self.amount.is_finite()
            and 0 < self.amount <= MAX_AMOUNT
            and isinstance(self.occurred_on, date)
            and isinstance(self.entry_id, UUID)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LedgerEntry):
            return NotImplemented
        return self.entry_id == other.entry_id

    def __hash__(self) -> int:
        return hash(self.entry_id)


def _coerce_kind(value: object) -> EntryKind:
    if isinstance(value, EntryKind):
        return value
    if isinstance(value, str):
        return EntryKind.from_str(value)
    raise InvalidArgumentError(f"Unsupported entry kind: {value!r}")


def _coerce_description(value: object) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError("Description must be text.")
    if not value.strip():
        raise InvalidArgumentError("Description cannot be empty.")
    return value


def coerce_amount(value: object) -> Decimal:
    """Convert supported numeric inputs to ``Decimal`` and enforce ``> 0``."""

    if isinstance(value, bool):
        raise InvalidArgumentError("Amount must be a number, not a boolean.")
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, int):
            amount = Decimal(value)
        elif isinstance(value, float):
            # str() keeps 0.1 as Decimal("0.1") rather than its binary expansion
            amount = Decimal(str(value))
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            raise InvalidArgumentError(f"Unsupported amount value: {value!r}")
    except InvalidOperation as error:
        raise InvalidArgumentError(f"Amount is not a number: {value!r}") from error
    if not amount.is_finite() or amount <= 0:
        raise InvalidArgumentError("Amount must be greater than zero.")
    if amount > MAX_AMOUNT:
        raise InvalidArgumentError(f"Amount must not exceed {MAX_AMOUNT:,f}.")
    if amount.quantize(_SMALLEST_STEP) != amount:
        raise InvalidArgumentError(f"Amount must have at most {MAX_DECIMAL_PLACES} decimal places.")
    return amount


def _coerce_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            if "T" in value:
                return datetime.fromisoformat(value).date()
            return date.fromisoformat(value)
        except ValueError as error:
            raise InvalidArgumentError(f"Invalid ISO date: {value!r}") from error
    raise InvalidArgumentError("Dates must be provided as ISO strings or date/datetime instances.")


def _coerce_id(value: object) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as error:
        raise InvalidArgumentError(f"Invalid entry id: {value!r}") from error
