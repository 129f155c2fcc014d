"""Tests for configuration and component wiring."""

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from moneymate.config import (
    AppSettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)
from moneymate.ledger import LoanLedger
from moneymate.models.ledger import LedgerOutcome
from moneymate.orchestrator import AUDIT_EVENT_LIMIT, create_app_components
from moneymate.services.storage import (
    InMemoryAuditStorage,
    InMemoryByteStore,
    LocalFileByteStore,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep every test away from the real home directory and .env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONEYMATE_STORAGE_DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestStorageSettings:
    """Tests for StorageSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MONEYMATE_STORAGE_DATA_DIR")
        settings = StorageSettings()
        assert settings.data_dir == Path.home() / ".moneymate"
        assert settings.loans_file_name == "loans.json"
        assert settings.expenses_file_name == "expenses.json"

    def test_environment_override(self, tmp_path):
        assert StorageSettings().data_dir == tmp_path / "data"

    def test_tilde_is_expanded(self, monkeypatch):
        monkeypatch.setenv("MONEYMATE_STORAGE_DATA_DIR", "~/money")
        assert StorageSettings().data_dir == Path.home() / "money"

    def test_rejects_nested_file_name(self, monkeypatch):
        monkeypatch.setenv("MONEYMATE_STORAGE_LOANS_FILE_NAME", "../loans.json")
        with pytest.raises(ValidationError):
            StorageSettings()


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.currency_symbol == "$"
        assert settings.max_amount == Decimal("1000000000")
        assert settings.expense_categories_list == [
            "Food", "Transport", "Entertainment", "Shopping", "Other",
        ]

    def test_categories_are_trimmed_and_deduplicated(self, monkeypatch):
        monkeypatch.setenv("EXPENSE_CATEGORIES", " Food, Rent ,,Food,Other ")
        assert AppSettings().expense_categories_list == ["Food", "Rent", "Other"]

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert AppSettings().log_level == "DEBUG"

    def test_max_amount_is_capped(self, monkeypatch):
        """Amounts must stay small enough to be stored exactly."""
        monkeypatch.setenv("MAX_AMOUNT", "10000000000000")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("CURRENCY_SYMBOL=€\n", encoding="utf-8")
        assert AppSettings().currency_symbol == "€"


class TestSettingsHelpers:
    """Tests for get_settings and validate_all_settings."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_validate_all_settings_ok(self):
        results = validate_all_settings()
        assert results["storage"] is True
        assert results["app"] is True

    def test_validate_all_settings_reports_errors(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        results = validate_all_settings()
        assert results["app"] is False
        assert "app_error" in results


class TestCreateAppComponents:
    """Tests for the orchestrator factory."""

    def test_default_store_uses_data_dir(self, tmp_path):
        components = create_app_components(settings=Settings())
        assert isinstance(components.store, LocalFileByteStore)
        assert components.store.directory == tmp_path / "data"

    def test_components_share_store_and_logger(self):
        store = InMemoryByteStore()
        audit_storage = InMemoryAuditStorage()
        components = create_app_components(store=store, audit_storage=audit_storage)

        components.ledger.add_loan("10", "Sam", "lunch")
        components.expenses.add_expense("5", "Food")

        assert store.exists("loans.json")
        assert store.exists("expenses.json")
        assert len(audit_storage.events) == 2
        assert components.audit_logger.storage is audit_storage

    def test_default_audit_storage_is_capped(self):
        components = create_app_components(store=InMemoryByteStore())
        storage = components.audit_logger.storage
        assert isinstance(storage, InMemoryAuditStorage)
        assert storage.max_events == AUDIT_EVENT_LIMIT

    def test_components_are_not_loaded(self):
        """Loading is left to the view that shows the data."""
        store = InMemoryByteStore()
        LoanLedger(store).add_loan("10", "Sam", "lunch")

        components = create_app_components(store=store)
        assert len(components.ledger) == 0
        components.ledger.load()
        assert len(components.ledger) == 1

    def test_resource_names_from_settings(self, monkeypatch):
        monkeypatch.setenv("MONEYMATE_STORAGE_LOANS_FILE_NAME", "lent.json")
        store = InMemoryByteStore()
        components = create_app_components(settings=Settings(), store=store)
        components.ledger.add_loan("10", "Sam", "lunch")
        assert store.exists("lent.json")

    def test_max_amount_from_settings(self, monkeypatch):
        monkeypatch.setenv("MAX_AMOUNT", "50")
        components = create_app_components(store=InMemoryByteStore())
        result = components.ledger.add_loan("51", "Sam", "lunch")
        assert result.status == LedgerOutcome.REJECTED
        assert result.issues[0].issue_type == "too_large"

    def test_end_to_end_with_files(self, tmp_path):
        """Loans written by one app instance are read by the next."""
        first = create_app_components(settings=Settings())
        loan_id = first.ledger.add_loan("100", "Sam", "lunch").loan.id
        first.ledger.apply_repayment(loan_id, "25")

        second = create_app_components(settings=Settings())
        second.ledger.load()
        assert second.ledger.get_loan(loan_id).amount == Decimal("75")
        assert (tmp_path / "data" / "loans.json").is_file()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
