"""Tests for user input validation."""

from decimal import Decimal

import pytest

from moneymate.models.expense import CATEGORY_MAX_LENGTH
from moneymate.validation import (
    ExpenseInputValidator,
    InputValidator,
    LoanInputValidator,
)


@pytest.fixture
def validator():
    return InputValidator(max_amount=Decimal("1000"))


class TestParseAmount:
    """Tests for amount parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("100", Decimal("100")),
        (" 12.50 ", Decimal("12.50")),
        ("0", Decimal("0")),
        (30, Decimal("30")),
        (0.1, Decimal("0.1")),
        (Decimal("7.25"), Decimal("7.25")),
        ("1e2", Decimal("100")),
        ("12.500", Decimal("12.5")),
    ])
    def test_valid_amounts(self, validator, raw, expected):
        amount, issues = validator.parse_amount(raw)
        assert issues == []
        assert amount == expected

    @pytest.mark.parametrize("raw,issue_type", [
        (None, "missing"),
        ("", "missing"),
        ("   ", "missing"),
        ("abc", "not_a_number"),
        ("1,000", "not_a_number"),
        (True, "not_a_number"),
        ([1], "not_a_number"),
        ("nan", "not_finite"),
        ("Infinity", "not_finite"),
        (float("inf"), "not_finite"),
        ("-5", "negative"),
        ("1000.01", "too_large"),
        ("10.005", "too_precise"),
        ("100.12345678901234567", "too_precise"),
        (0.125, "too_precise"),
    ])
    def test_invalid_amounts(self, validator, raw, issue_type):
        amount, issues = validator.parse_amount(raw)
        assert amount is None
        assert len(issues) == 1
        assert issues[0].issue_type == issue_type
        assert issues[0].severity == "error"

    def test_zero_rejected_when_not_allowed(self, validator):
        amount, issues = validator.parse_amount("0", allow_zero=False)
        assert amount is None
        assert issues[0].issue_type == "not_positive"

    def test_issue_reports_field_name(self, validator):
        _, issues = validator.parse_amount("x", field="repay_amount")
        assert issues[0].field == "repay_amount"

    def test_text_longer_than_limit(self, validator):
        text, issues = validator.require_text("x" * 11, field="note", label="Note", max_length=10)
        assert text is None
        assert issues[0].issue_type == "too_long"
        assert validator.require_text("x" * 10, field="note", label="Note", max_length=10)[0] == "x" * 10

    def test_max_amount_defaults_from_settings(self):
        """Without an explicit limit the configured one applies."""
        assert InputValidator().max_amount == Decimal("1000000000")


class TestLoanInputValidator:
    """Tests for the add-loan and repayment forms."""

    def test_valid_new_loan(self):
        validator = LoanInputValidator(max_amount=Decimal("1000"))
        result = validator.validate_new_loan("100", " Sam ", "lunch")
        assert result.is_valid
        assert result.amount == Decimal("100")
        assert result.text == {"recipient": "Sam", "reason": "lunch"}

    def test_reports_every_problem(self):
        """All fields are checked, not just the first failing one."""
        validator = LoanInputValidator(max_amount=Decimal("1000"))
        result = validator.validate_new_loan("abc", "", "   ")
        assert not result.is_valid
        assert {issue.field for issue in result.issues} == {"amount", "recipient", "reason"}

    def test_non_string_text_is_missing(self):
        validator = LoanInputValidator(max_amount=Decimal("1000"))
        result = validator.validate_new_loan("1", None, 5)
        assert {issue.field for issue in result.issues} == {"recipient", "reason"}

    def test_repayment_must_be_positive(self):
        validator = LoanInputValidator(max_amount=Decimal("1000"))
        assert not validator.validate_repayment("0").is_valid
        assert not validator.validate_repayment("-3").is_valid
        assert validator.validate_repayment("0.01").amount == Decimal("0.01")


class TestExpenseInputValidator:
    """Tests for the add-expense form."""

    @pytest.fixture
    def validator(self):
        return ExpenseInputValidator(
            ["Food", "Transport", "Other"],
            max_amount=Decimal("1000"),
        )

    def test_preset_category(self, validator):
        result = validator.validate_expense("12", "Food")
        assert result.is_valid
        assert result.text["category"] == "Food"

    def test_other_uses_custom_category(self, validator):
        result = validator.validate_expense("12", "Other", "  Parking ")
        assert result.is_valid
        assert result.text["category"] == "Parking"

    def test_other_requires_custom_category(self, validator):
        result = validator.validate_expense("12", "Other", "")
        assert not result.is_valid
        assert result.issues[0].field == "custom_category"

    def test_custom_category_length_is_limited(self, validator):
        """A label too long to store is reported, not raised later."""
        result = validator.validate_expense("12", "Other", "x" * (CATEGORY_MAX_LENGTH + 1))
        assert not result.is_valid
        assert result.issues[0].field == "custom_category"
        assert result.issues[0].issue_type == "too_long"

    def test_unknown_category(self, validator):
        result = validator.validate_expense("12", "Rent")
        assert not result.is_valid
        assert result.issues[0].issue_type == "unknown_category"

    def test_issues_as_dicts(self, validator):
        result = validator.validate_expense("", "Food")
        assert result.issues_as_dicts()[0]["issue_type"] == "missing"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
