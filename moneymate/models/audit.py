"""
Audit Models for MoneyMate

Every change to the loan ledger or the expense book is logged for audit
purposes. This provides:
1. Traceability of every balance change
2. Debugging information when a save or load fails
3. A record of what happened to loans that were settled or deleted

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from moneymate.models.ledger import utc_now


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Loan ledger
    LOAN_ADDED = "loan_added"
    REPAYMENT_APPLIED = "repayment_applied"
    LOAN_SETTLED = "loan_settled"
    LOAN_DELETED = "loan_deleted"

    # Expenses
    EXPENSE_ADDED = "expense_added"

    # Persistence
    DATA_LOADED = "data_loaded"
    LOAD_SKIPPED = "load_skipped"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"

    # Input
    INPUT_REJECTED = "input_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'loan', 'expense', 'resource')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.loan_added(loan_id, recipient, amount)
        event = AuditEventBuilder.save_failed("loans.json", str(exc))
    """

    @staticmethod
    def loan_added(
        loan_id: UUID,
        recipient: str,
        amount: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_ADDED,
            entity_type="loan",
            entity_id=loan_id,
            description=f"Loan added: {recipient} - {amount}",
            details={
                "recipient": recipient,
                "amount": str(amount),
            },
            is_user_action=True,
        )

    @staticmethod
    def repayment_applied(
        loan_id: UUID,
        repayment_id: UUID,
        amount: Decimal,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPAYMENT_APPLIED,
            entity_type="loan",
            entity_id=loan_id,
            description=f"Repayment of {amount} recorded, balance now {balance}",
            details={
                "repayment_id": str(repayment_id),
                "amount": str(amount),
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def loan_settled(
        loan_id: UUID,
        recipient: str,
        final_balance: Decimal,
        repayment_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_SETTLED,
            entity_type="loan",
            entity_id=loan_id,
            description=f"Loan to {recipient} fully repaid and removed",
            details={
                "recipient": recipient,
                "final_balance": str(final_balance),
                "repayment_count": repayment_count,
            },
        )

    @staticmethod
    def loan_deleted(
        loan_id: UUID,
        recipient: str,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAN_DELETED,
            entity_type="loan",
            entity_id=loan_id,
            description=f"Loan to {recipient} deleted with balance {balance}",
            details={
                "recipient": recipient,
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def expense_added(
        expense_id: UUID,
        category: str,
        amount: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            entity_type="expense",
            entity_id=expense_id,
            description=f"Expense added: {category} - {amount}",
            details={
                "category": category,
                "amount": str(amount),
            },
            is_user_action=True,
        )

    @staticmethod
    def data_loaded(
        resource: str,
        count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_LOADED,
            entity_type="resource",
            description=f"Loaded {count} records from {resource}",
            details={
                "resource": resource,
                "count": count,
            },
        )

    @staticmethod
    def load_skipped(
        resource: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_SKIPPED,
            entity_type="resource",
            description=f"Nothing stored yet in {resource}, starting empty",
            details={
                "resource": resource,
            },
        )

    @staticmethod
    def load_failed(
        resource: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="resource",
            description=f"Failed to load {resource}, starting empty",
            error_message=error_message,
            details={
                "resource": resource,
            },
        )

    @staticmethod
    def save_failed(
        resource: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="resource",
            description=f"Failed to save {resource}",
            error_message=error_message,
            details={
                "resource": resource,
            },
        )

    @staticmethod
    def input_rejected(
        operation: str,
        issues: list[dict],
        entity_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="loan" if entity_id else None,
            entity_id=entity_id,
            description=f"{operation} rejected with {len(issues)} issues",
            details={
                "operation": operation,
                "issues": issues,
            },
            is_user_action=True,
        )
