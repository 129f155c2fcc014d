"""
Audit Logger

DESIGN DECISION: Every change to the user's money records is logged.
This provides:
1. Traceability of every balance change
2. Diagnostics when the data file cannot be read or written
3. A trail for loans that no longer exist in the ledger

The audit logger:
- Gracefully handles failures (doesn't crash the app if logging fails)
- Always writes a structured local log line
- Optionally appends to an audit storage backend
"""

import logging
import sys
from typing import Optional
from uuid import UUID

import structlog

from moneymate.models.audit import AuditEvent, AuditEventBuilder
from moneymate.services.storage import AuditStorageInterface


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    JSON output for anything that gets collected; the console renderer
    is easier to read while developing locally.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    logging.getLogger().setLevel(level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage, if one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("moneymate.audit")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity.value in ("error", "critical"):
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_loan_added(self, loan_id: UUID, recipient: str, amount) -> None:
        """Log a new loan."""
        self.log(AuditEventBuilder.loan_added(
            loan_id=loan_id,
            recipient=recipient,
            amount=amount,
        ))

    def log_repayment_applied(
        self,
        loan_id: UUID,
        repayment_id: UUID,
        amount,
        balance,
    ) -> None:
        """Log a repayment against an open loan."""
        self.log(AuditEventBuilder.repayment_applied(
            loan_id=loan_id,
            repayment_id=repayment_id,
            amount=amount,
            balance=balance,
        ))

    def log_loan_settled(
        self,
        loan_id: UUID,
        recipient: str,
        final_balance,
        repayment_count: int,
    ) -> None:
        """Log a loan removed because it was fully repaid."""
        self.log(AuditEventBuilder.loan_settled(
            loan_id=loan_id,
            recipient=recipient,
            final_balance=final_balance,
            repayment_count=repayment_count,
        ))

    def log_loan_deleted(self, loan_id: UUID, recipient: str, balance) -> None:
        self.log(AuditEventBuilder.loan_deleted(
            loan_id=loan_id,
            recipient=recipient,
            balance=balance,
        ))

    def log_expense_added(self, expense_id: UUID, category: str, amount) -> None:
        self.log(AuditEventBuilder.expense_added(
            expense_id=expense_id,
            category=category,
            amount=amount,
        ))

    def log_data_loaded(self, resource: str, count: int) -> None:
        self.log(AuditEventBuilder.data_loaded(resource=resource, count=count))

    def log_load_skipped(self, resource: str) -> None:
        self.log(AuditEventBuilder.load_skipped(resource=resource))

    def log_load_failed(self, resource: str, error_message: str) -> None:
        """Log an unreadable or malformed resource."""
        self.log(AuditEventBuilder.load_failed(
            resource=resource,
            error_message=error_message,
        ))

    def log_save_failed(self, resource: str, error_message: str) -> None:
        """Log a failed write. The in-memory state is kept regardless."""
        self.log(AuditEventBuilder.save_failed(
            resource=resource,
            error_message=error_message,
        ))

    def log_input_rejected(
        self,
        operation: str,
        issues: list[dict],
        entity_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.input_rejected(
            operation=operation,
            issues=issues,
            entity_id=entity_id,
        ))
