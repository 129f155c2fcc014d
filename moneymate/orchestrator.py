"""
Main Orchestrator for MoneyMate

Ties together configuration, logging, storage and the two record keepers
(loan ledger and expense book) so the UI gets ready-made components.

DESIGN DECISION: Components are built here but NOT loaded. Loading
happens when a view is first shown, so a broken data file can never
stop the app from starting.
"""

from dataclasses import dataclass
from typing import Optional

from moneymate.audit import AuditLogger, configure_logging
from moneymate.config import Settings, get_settings
from moneymate.expenses import ExpenseBook
from moneymate.ledger import LoanLedger
from moneymate.services.storage import (
    AuditStorageInterface,
    ByteStoreInterface,
    InMemoryAuditStorage,
    LocalFileByteStore,
)
from moneymate.validation import ExpenseInputValidator, LoanInputValidator


# Events kept for the settings page. Older ones remain in the log output.
AUDIT_EVENT_LIMIT = 500


@dataclass
class AppComponents:
    """Everything the UI needs, wired together."""

    ledger: LoanLedger
    expenses: ExpenseBook
    audit_logger: AuditLogger
    store: ByteStoreInterface


def create_app_components(
    settings: Optional[Settings] = None,
    store: Optional[ByteStoreInterface] = None,
    audit_storage: Optional[AuditStorageInterface] = None,
) -> AppComponents:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to use. Defaults to the cached application settings.
        store: Byte store to use. Defaults to local files in the
               configured data directory.
        audit_storage: Where audit events are kept besides the log.
                      Defaults to the last AUDIT_EVENT_LIMIT events in memory,
                      shown on the settings page.

    Returns:
        AppComponents with an unloaded ledger and expense book
    """
    settings = settings or get_settings()
    app_settings = settings.app
    storage_settings = settings.storage

    configure_logging(level=app_settings.log_level, json_logs=app_settings.json_logs)

    if store is None:
        store = LocalFileByteStore(storage_settings.data_dir)

    audit_logger = AuditLogger(
        audit_storage if audit_storage is not None
        else InMemoryAuditStorage(max_events=AUDIT_EVENT_LIMIT)
    )

    ledger = LoanLedger(
        store,
        audit_logger=audit_logger,
        resource_name=storage_settings.loans_file_name,
        validator=LoanInputValidator(max_amount=app_settings.max_amount),
    )
    expenses = ExpenseBook(
        store,
        audit_logger=audit_logger,
        resource_name=storage_settings.expenses_file_name,
        validator=ExpenseInputValidator(
            app_settings.expense_categories_list,
            max_amount=app_settings.max_amount,
        ),
    )

    return AppComponents(
        ledger=ledger,
        expenses=expenses,
        audit_logger=audit_logger,
        store=store,
    )
