"""Input validation package."""

from moneymate.validation.validator import (
    ExpenseInputValidator,
    InputValidation,
    InputValidator,
    LoanInputValidator,
)

__all__ = [
    "ExpenseInputValidator",
    "InputValidation",
    "InputValidator",
    "LoanInputValidator",
]
