"""
Data Models Package

This package contains all Pydantic models used in MoneyMate.
All data flowing through the system must conform to these schemas.
"""

from moneymate.models.ledger import (
    LedgerOutcome,
    LedgerResult,
    Loan,
    Money,
    Repayment,
    ValidationIssue,
)
from moneymate.models.expense import (
    Expense,
    ExpenseResult,
)
from moneymate.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LedgerOutcome",
    "LedgerResult",
    "Loan",
    "Money",
    "Repayment",
    "ValidationIssue",
    # Expense models
    "Expense",
    "ExpenseResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
