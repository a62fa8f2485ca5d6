"""Mini README: Centralised configuration models and helpers for Budget Tracker.

Structure:
    * BudgetTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``BUDGET_TRACKER_``) or a local ``.env`` file. Only the console interface
    consults these settings; the ledger core receives explicit arguments.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path("budget.json")


class BudgetTrackerSettings(BaseSettings):
    """Runtime configuration for the Budget Tracker console."""

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    data_file: Path = Field(
        DEFAULT_DATA_FILE,
        description="JSON file holding the persisted ledger entries.",
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level applied to the root logger by the CLI.",
    )
    date_input_format: str = Field(
        "%m/%d/%Y",
        description="strptime format accepted by the interactive date prompt.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol printed in front of monetary amounts.",
    )

    @field_validator("data_file", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories without touching the filesystem."""

        return Path(value).expanduser()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown logging level: {value}")
        return normalised

    @field_validator("date_input_format")
    @classmethod
    def _check_date_format(cls, value: str) -> str:
        """Ensure the format can at least render a date."""

        if "%" not in value:
            raise ValueError("Date input format must contain strftime directives.")
        datetime(2024, 1, 31).strftime(value)
        return value


@lru_cache()
def get_settings() -> BudgetTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetTrackerSettings()
