"""
Configuration Management for MoneyMate

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Storage location, logging and input limits are validated once at startup
instead of being scattered through the ledger and the UI.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local file storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MONEYMATE_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".moneymate",
        description="Application-private directory holding the JSON files"
    )
    loans_file_name: str = Field(
        default="loans.json",
        min_length=1,
        description="Resource name of the persisted loan ledger"
    )
    expenses_file_name: str = Field(
        default="expenses.json",
        min_length=1,
        description="Resource name of the persisted expense book"
    )

    @field_validator('data_dir')
    @classmethod
    def expand_data_dir(cls, v: Path) -> Path:
        """Resolve ~ so the settings page shows the real location."""
        return v.expanduser()

    @field_validator('loans_file_name', 'expenses_file_name')
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """Resource names are plain file names inside data_dir."""
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"Resource name must be a plain file name: {v!r}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level for the audit log"
    )
    json_logs: bool = Field(
        default=True,
        description="Render logs as JSON (False = human-readable console output)"
    )

    # Presentation
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol shown next to amounts in the UI"
    )
    expense_categories: str = Field(
        default="Food,Transport,Entertainment,Shopping,Other",
        description="Comma-separated list of preset expense categories"
    )

    # Input limits. With cents, 1e12 keeps amounts within the 15 significant
    # digits a JSON number holds exactly.
    max_amount: Decimal = Field(
        default=Decimal("1000000000"),
        gt=0,
        le=Decimal("1000000000000"),
        description="Largest amount accepted for a loan, repayment or expense"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the stdlib logging module knows."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def expense_categories_list(self) -> list[str]:
        """Get expense categories as a list, preserving order."""
        categories = []
        for cat in self.expense_categories.split(","):
            cat = cat.strip()
            if cat and cat not in categories:
                categories.append(cat)
        return categories


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.storage
        results["storage"] = True
    except Exception as e:
        results["storage"] = False
        results["storage_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
