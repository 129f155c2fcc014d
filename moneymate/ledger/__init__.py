"""Loan ledger package."""

from moneymate.ledger.loan_ledger import DEFAULT_RESOURCE_NAME, LoanLedger

__all__ = ["DEFAULT_RESOURCE_NAME", "LoanLedger"]
