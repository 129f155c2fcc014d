"""
Expense Book

Keeps the user's logged expenses in insertion order and mirrors them to
the byte store after every addition, following the same load/persist
rules as the loan ledger.
"""

from datetime import date
from typing import Any, Optional

from moneymate.audit import AuditLogger
from moneymate.models.expense import Expense, ExpenseResult
from moneymate.services.storage import (
    ByteStoreInterface,
    NotFoundError,
    StorageError,
    decode_expenses,
    encode_expenses,
)
from moneymate.validation import ExpenseInputValidator


DEFAULT_RESOURCE_NAME = "expenses.json"
DEFAULT_CATEGORIES = ["Food", "Transport", "Entertainment", "Shopping", "Other"]


class ExpenseBook:
    """In-memory list of expenses backed by a byte store."""

    def __init__(
        self,
        store: ByteStoreInterface,
        categories: Optional[list[str]] = None,
        audit_logger: Optional[AuditLogger] = None,
        resource_name: str = DEFAULT_RESOURCE_NAME,
        validator: Optional[ExpenseInputValidator] = None,
    ):
        self._store = store
        self._audit_logger = audit_logger or AuditLogger()  # Local-only logging
        self._resource_name = resource_name
        self._validator = validator or ExpenseInputValidator(
            categories or DEFAULT_CATEGORIES
        )
        self._expenses: list[Expense] = []

    @property
    def categories(self) -> list[str]:
        return self._validator.categories

    @property
    def other_category(self) -> str:
        return self._validator.other_category

    @property
    def expenses(self) -> tuple[Expense, ...]:
        # Expense is frozen, no copy needed
        return tuple(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def add_expense(
        self,
        amount: Any,
        category: Any,
        custom_category: Any = None,
    ) -> ExpenseResult:
        """
        Log an expense.

        When `category` is the catch-all "Other", `custom_category` becomes
        the stored category and must not be empty.
        """
        validation = self._validator.validate_expense(amount, category, custom_category)
        if not validation.is_valid:
            self._audit_logger.log_input_rejected(
                operation="add_expense",
                issues=validation.issues_as_dicts(),
            )
            return ExpenseResult(issues=validation.issues)

        expense = Expense(
            amount=validation.amount,
            category=validation.text["category"],
        )
        self._expenses.append(expense)
        self._audit_logger.log_expense_added(
            expense_id=expense.id,
            category=expense.category,
            amount=expense.amount,
        )

        return ExpenseResult(expense=expense, persisted=self.persist())

    def grouped_by_day(self) -> list[tuple[date, list[Expense]]]:
        """
        Group expenses by the local calendar day they were logged on.

        Days are returned oldest first; expenses within a day keep
        insertion order.
        """
        groups: dict[date, list[Expense]] = {}
        for expense in self._expenses:
            day = expense.date.astimezone().date()
            groups.setdefault(day, []).append(expense)
        return sorted(groups.items(), key=lambda item: item[0])

    def load(self) -> list[Expense]:
        """Replace in-memory state with stored expenses. Never raises."""
        try:
            expenses = decode_expenses(self._store.read(self._resource_name))
        except NotFoundError:
            self._expenses = []
            self._audit_logger.log_load_skipped(self._resource_name)
            return []
        except (StorageError, OSError) as e:
            self._expenses = []
            self._audit_logger.log_load_failed(self._resource_name, str(e))
            return []

        self._expenses = expenses
        self._audit_logger.log_data_loaded(self._resource_name, len(expenses))
        return list(expenses)

    def persist(self) -> bool:
        try:
            self._store.write(self._resource_name, encode_expenses(self._expenses))
        except (StorageError, OSError) as e:
            self._audit_logger.log_save_failed(self._resource_name, str(e))
            return False
        return True
