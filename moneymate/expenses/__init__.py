"""Expense tracking package."""

from moneymate.expenses.expense_book import DEFAULT_CATEGORIES, ExpenseBook

__all__ = ["DEFAULT_CATEGORIES", "ExpenseBook"]
