"""Shared fixtures. Everything runs against in-memory storage."""

from decimal import Decimal

import pytest

from moneymate.audit import AuditLogger
from moneymate.expenses import ExpenseBook
from moneymate.ledger import LoanLedger
from moneymate.services.storage import (
    InMemoryAuditStorage,
    InMemoryByteStore,
)
from moneymate.validation import ExpenseInputValidator, LoanInputValidator


@pytest.fixture
def store():
    return InMemoryByteStore()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def audit_logger(audit_storage):
    return AuditLogger(audit_storage)


@pytest.fixture
def loan_validator():
    return LoanInputValidator(max_amount=Decimal("1000000"))


@pytest.fixture
def ledger(store, audit_logger, loan_validator):
    return LoanLedger(store, audit_logger=audit_logger, validator=loan_validator)


@pytest.fixture
def expense_book(store, audit_logger):
    validator = ExpenseInputValidator(
        ["Food", "Transport", "Entertainment", "Shopping", "Other"],
        max_amount=Decimal("1000000"),
    )
    return ExpenseBook(store, audit_logger=audit_logger, validator=validator)
