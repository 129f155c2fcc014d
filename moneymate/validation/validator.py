"""
User Input Validation

DESIGN DECISION: Raw input arrives from text fields, so amounts may be
strings like "12.50", "", "abc" or "nan". Everything is parsed here before
the ledger sees it.

Checks:
- Amounts parse as finite decimal numbers
- Amounts are not negative (repayments must be strictly positive)
- Amounts stay below a configured sanity limit
- Amounts have at most two decimal places (whole cents)
- Required text fields are non-empty after stripping whitespace, and
  no longer than the stored field allows

IMPORTANT: Validation NEVER silently fixes issues.
It reports them so the UI can show the user what to correct.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import BaseModel, Field

from moneymate.config import get_settings
from moneymate.models.expense import CATEGORY_MAX_LENGTH
from moneymate.models.ledger import ValidationIssue


# Smallest amount step. Stored amounts are JSON numbers, so anything finer
# would not survive a save and reload.
CENT = Decimal("0.01")


class InputValidation(BaseModel):
    """
    Result of validating one form submission.

    Holds the parsed values so callers never parse the same input twice.
    """

    amount: Optional[Decimal] = None
    text: dict[str, str] = Field(
        default_factory=dict,
        description="Stripped text fields by name"
    )
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Valid when there are no error-level issues."""
        return not any(issue.severity == "error" for issue in self.issues)

    def issues_as_dicts(self) -> list[dict]:
        return [issue.model_dump() for issue in self.issues]


class InputValidator:
    """Shared parsing rules for money amounts and required text."""

    def __init__(self, max_amount: Optional[Decimal] = None):
        """
        Initialize validator.

        Args:
            max_amount: Largest accepted amount.
                       If None, taken from application settings.
        """
        if max_amount is None:
            max_amount = get_settings().app.max_amount
        self._max_amount = Decimal(max_amount)

    @property
    def max_amount(self) -> Decimal:
        return self._max_amount

    def parse_amount(
        self,
        raw: Any,
        field: str = "amount",
        allow_zero: bool = True,
    ) -> tuple[Optional[Decimal], list[ValidationIssue]]:
        """
        Parse a user-supplied amount.

        Returns: (parsed_amount_or_None, list_of_issues)
        """
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None, [ValidationIssue(
                field=field,
                issue_type="missing",
                message="Please enter an amount",
            )]

        value = None
        # bool is an int subclass; True is not an amount
        if isinstance(raw, bool):
            value = None
        elif isinstance(raw, Decimal):
            value = raw
        elif isinstance(raw, int):
            value = Decimal(raw)
        elif isinstance(raw, float):
            value = Decimal(repr(raw))
        elif isinstance(raw, str):
            try:
                value = Decimal(raw.strip())
            except InvalidOperation:
                value = None

        if value is None:
            return None, [ValidationIssue(
                field=field,
                issue_type="not_a_number",
                message=f"'{raw}' is not a number",
                suggested_fix="Use digits and an optional decimal point, e.g. 12.50",
            )]

        if not value.is_finite():
            return None, [ValidationIssue(
                field=field,
                issue_type="not_finite",
                message="Amount must be a finite number",
            )]

        if value < 0:
            return None, [ValidationIssue(
                field=field,
                issue_type="negative",
                message="Amount cannot be negative",
            )]

        if value == 0 and not allow_zero:
            return None, [ValidationIssue(
                field=field,
                issue_type="not_positive",
                message="Amount must be greater than zero",
            )]

        if value > self._max_amount:
            return None, [ValidationIssue(
                field=field,
                issue_type="too_large",
                message=f"Amount exceeds the maximum of {self._max_amount}",
                suggested_fix="Check for extra digits",
            )]

        if value != value.quantize(CENT):
            return None, [ValidationIssue(
                field=field,
                issue_type="too_precise",
                message="Amount can have at most two decimal places",
                suggested_fix=f"Round to cents, e.g. {value.quantize(CENT)}",
            )]

        return value, []

    def require_text(
        self,
        raw: Any,
        field: str,
        label: str,
        max_length: Optional[int] = None,
    ) -> tuple[Optional[str], list[ValidationIssue]]:
        """Strip a required text field and report it if empty or too long."""
        text = raw.strip() if isinstance(raw, str) else ""
        if not text:
            return None, [ValidationIssue(
                field=field,
                issue_type="missing",
                message=f"{label} is required",
            )]
        if max_length is not None and len(text) > max_length:
            return None, [ValidationIssue(
                field=field,
                issue_type="too_long",
                message=f"{label} must be at most {max_length} characters",
            )]
        return text, []


class LoanInputValidator(InputValidator):
    """Validates the add-loan form and the repayment dialog."""

    def validate_new_loan(
        self,
        amount: Any,
        recipient: Any,
        reason: Any,
    ) -> InputValidation:
        result = InputValidation()

        result.amount, issues = self.parse_amount(amount, field="amount")
        result.issues.extend(issues)

        for field, label, raw in (
            ("recipient", "Friend's name", recipient),
            ("reason", "Reason for the loan", reason),
        ):
            text, issues = self.require_text(raw, field=field, label=label)
            if text is not None:
                result.text[field] = text
            result.issues.extend(issues)

        return result

    def validate_repayment(self, amount: Any) -> InputValidation:
        result = InputValidation()
        result.amount, issues = self.parse_amount(
            amount,
            field="repay_amount",
            allow_zero=False,
        )
        result.issues.extend(issues)
        return result


class ExpenseInputValidator(InputValidator):
    """
    Validates the add-expense form.

    Choosing the catch-all category means the user must type their own label.
    """

    def __init__(
        self,
        categories: list[str],
        other_category: str = "Other",
        max_amount: Optional[Decimal] = None,
    ):
        super().__init__(max_amount=max_amount)
        self._categories = list(categories)
        self._other_category = other_category

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    @property
    def other_category(self) -> str:
        return self._other_category

    def validate_expense(
        self,
        amount: Any,
        category: Any,
        custom_category: Any = None,
    ) -> InputValidation:
        result = InputValidation()

        result.amount, issues = self.parse_amount(amount, field="amount")
        result.issues.extend(issues)

        if category not in self._categories:
            result.issues.append(ValidationIssue(
                field="category",
                issue_type="unknown_category",
                message=f"Unknown category: {category}",
                suggested_fix=f"Pick one of: {', '.join(self._categories)}",
            ))
        elif category == self._other_category:
            text, issues = self.require_text(
                custom_category,
                field="custom_category",
                label="Expense type",
                max_length=CATEGORY_MAX_LENGTH,
            )
            if text is not None:
                result.text["category"] = text
            result.issues.extend(issues)
        else:
            result.text["category"] = category

        return result
