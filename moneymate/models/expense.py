"""Expense models."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from moneymate.models.ledger import Money, ValidationIssue, utc_now


CATEGORY_MAX_LENGTH = 100


class Expense(BaseModel):
    """A single logged expense. Immutable once recorded."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique expense ID"
    )
    amount: Money = Field(
        ...,
        ge=0,
        description="Amount spent"
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=CATEGORY_MAX_LENGTH,
        description="Preset category or the user's own label"
    )
    date: datetime = Field(
        default_factory=utc_now,
        description="When the expense was logged (UTC)"
    )


class ExpenseResult(BaseModel):
    """Result of logging an expense."""

    expense: Optional[Expense] = None
    issues: list[ValidationIssue] = Field(default_factory=list)
    persisted: Optional[bool] = None

    @property
    def ok(self) -> bool:
        return self.expense is not None
