"""
Loan Ledger

The single owner of the list of loans the user has given out.

DESIGN DECISION: The ledger is an explicit object handed to whatever
handles user actions, not state buried in a view. It enforces:
- Loans are created only by add_loan and changed only by apply_repayment
- A loan disappears immediately once its balance reaches zero or below
- The durable store is rewritten after every successful mutation

Persistence failures never undo an in-memory change. They are logged and
reported back through LedgerResult.persisted.
"""

from typing import Any, Optional, Union
from uuid import UUID

from moneymate.audit import AuditLogger
from moneymate.models.ledger import (
    LedgerOutcome,
    LedgerResult,
    Loan,
    Repayment,
    ValidationIssue,
)
from moneymate.services.storage import (
    ByteStoreInterface,
    NotFoundError,
    StorageError,
    decode_loans,
    encode_loans,
)
from moneymate.validation import LoanInputValidator


DEFAULT_RESOURCE_NAME = "loans.json"


class LoanLedger:
    """
    In-memory loan ledger backed by a byte store.

    Usage:
        ledger = LoanLedger(LocalFileByteStore(data_dir))
        ledger.load()
        result = ledger.add_loan("100", "Sam", "lunch")
        ledger.apply_repayment(result.loan.id, "30")
    """

    def __init__(
        self,
        store: ByteStoreInterface,
        audit_logger: Optional[AuditLogger] = None,
        resource_name: str = DEFAULT_RESOURCE_NAME,
        validator: Optional[LoanInputValidator] = None,
    ):
        self._store = store
        self._audit_logger = audit_logger or AuditLogger()  # Local-only logging
        self._resource_name = resource_name
        self._validator = validator or LoanInputValidator()
        self._loans: list[Loan] = []

    @property
    def resource_name(self) -> str:
        return self._resource_name

    @property
    def loans(self) -> tuple[Loan, ...]:
        """Copies of all open loans, in ledger order."""
        return tuple(loan.model_copy(deep=True) for loan in self._loans)

    def __len__(self) -> int:
        return len(self._loans)

    def __contains__(self, loan_id: object) -> bool:
        return self._index_of(loan_id) is not None

    def get_loan(self, loan_id: Union[UUID, str]) -> Optional[Loan]:
        """Return a copy of the loan, or None if it is not in the ledger."""
        index = self._index_of(loan_id)
        if index is None:
            return None
        return self._loans[index].model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_loan(self, amount: Any, recipient: Any, reason: Any) -> LedgerResult:
        """
        Record a new loan at the end of the ledger.

        Invalid input leaves the ledger untouched and returns REJECTED.
        """
        validation = self._validator.validate_new_loan(amount, recipient, reason)
        if not validation.is_valid:
            return self._rejected("add_loan", validation.issues)

        loan = Loan(
            amount=validation.amount,
            recipient=validation.text["recipient"],
            reason=validation.text["reason"],
        )
        self._loans.append(loan)

        self._audit_logger.log_loan_added(
            loan_id=loan.id,
            recipient=loan.recipient,
            amount=loan.amount,
        )

        persisted = self.persist()
        return LedgerResult(
            status=LedgerOutcome.APPLIED,
            loan=loan.model_copy(deep=True),
            persisted=persisted,
        )

    def apply_repayment(
        self,
        loan_id: Union[UUID, str],
        repay_amount: Any,
    ) -> LedgerResult:
        """
        Subtract a repayment from a loan's balance and record it.

        If the balance drops to zero or below, the loan is removed along
        with its history and the result is SETTLED. Overpayment is allowed.
        """
        index = self._index_of(loan_id)
        if index is None:
            return LedgerResult(status=LedgerOutcome.NOT_FOUND)

        validation = self._validator.validate_repayment(repay_amount)
        if not validation.is_valid:
            return self._rejected(
                "apply_repayment",
                validation.issues,
                entity_id=self._loans[index].id,
            )

        loan = self._loans[index]
        repayment = Repayment(amount=validation.amount)
        loan.amount = loan.amount - repayment.amount
        loan.repayment_history.append(repayment)

        if loan.amount <= 0:
            del self._loans[index]
            status = LedgerOutcome.SETTLED
        else:
            status = LedgerOutcome.APPLIED

        self._audit_logger.log_repayment_applied(
            loan_id=loan.id,
            repayment_id=repayment.id,
            amount=repayment.amount,
            balance=loan.amount,
        )
        if status == LedgerOutcome.SETTLED:
            self._audit_logger.log_loan_settled(
                loan_id=loan.id,
                recipient=loan.recipient,
                final_balance=loan.amount,
                repayment_count=len(loan.repayment_history),
            )

        persisted = self.persist()
        return LedgerResult(
            status=status,
            loan=loan.model_copy(deep=True),
            persisted=persisted,
        )

    def delete_loan(self, loan_id: Union[UUID, str]) -> LedgerResult:
        """Remove a loan and its history. Unknown IDs are a no-op."""
        index = self._index_of(loan_id)
        if index is None:
            return LedgerResult(status=LedgerOutcome.NOT_FOUND)

        loan = self._loans.pop(index)

        self._audit_logger.log_loan_deleted(
            loan_id=loan.id,
            recipient=loan.recipient,
            balance=loan.amount,
        )

        persisted = self.persist()
        return LedgerResult(
            status=LedgerOutcome.DELETED,
            loan=loan,
            persisted=persisted,
        )

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> list[Loan]:
        """
        Replace in-memory state with the stored ledger.

        A missing, unreadable or malformed resource leaves the ledger
        empty. Never raises.
        """
        try:
            data = self._store.read(self._resource_name)
            loans = decode_loans(data)
        except NotFoundError:
            self._loans = []
            self._audit_logger.log_load_skipped(self._resource_name)
            return []
        except (StorageError, OSError) as e:
            self._loans = []
            self._audit_logger.log_load_failed(self._resource_name, str(e))
            return []

        self._loans = loans
        self._audit_logger.log_data_loaded(self._resource_name, len(loans))
        return list(self.loans)

    def persist(self) -> bool:
        """
        Overwrite the stored ledger with the current in-memory state.

        Returns False (after logging) if the write failed.
        """
        try:
            self._store.write(self._resource_name, encode_loans(self._loans))
        except (StorageError, OSError) as e:
            self._audit_logger.log_save_failed(self._resource_name, str(e))
            return False
        return True

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _index_of(self, loan_id: Union[UUID, str]) -> Optional[int]:
        if not isinstance(loan_id, UUID):
            try:
                loan_id = UUID(str(loan_id))
            except ValueError:
                return None
        for i, loan in enumerate(self._loans):
            if loan.id == loan_id:
                return i
        return None

    def _rejected(
        self,
        operation: str,
        issues: list[ValidationIssue],
        entity_id: Optional[UUID] = None,
    ) -> LedgerResult:
        self._audit_logger.log_input_rejected(
            operation=operation,
            issues=[issue.model_dump() for issue in issues],
            entity_id=entity_id,
        )
        return LedgerResult(status=LedgerOutcome.REJECTED, issues=issues)
