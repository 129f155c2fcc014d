"""
Loan Ledger Data Models

These models define the strict schemas for loans given to friends and the
repayments received against them. They are designed to:
1. Keep identity fields immutable once assigned
2. Serialize to the exact JSON shape stored in loans.json
3. Carry explicit, tagged outcomes back to the UI

DESIGN DECISION: Amounts are Decimal in memory but JSON numbers on disk.
The persisted file stays readable by any JSON tool, while arithmetic on
balances never picks up binary floating point drift. Input validation
limits amounts to whole cents below 1e12, which a JSON number holds exactly.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
)


def utc_now() -> datetime:
    """Timezone-aware creation timestamp."""
    return datetime.now(timezone.utc)


# Decimal in Python, number in JSON
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


# =============================================================================
# VALIDATION ISSUES
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in user input."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'not_a_number', 'negative')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


# =============================================================================
# CORE LEDGER MODELS
# =============================================================================

class Repayment(BaseModel):
    """
    Money received back against a loan.

    Repayments are never edited or removed once recorded; they only
    disappear together with the loan they belong to.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique repayment ID"
    )
    amount: Money = Field(
        ...,
        gt=0,
        description="Amount applied to the loan balance"
    )
    date: datetime = Field(
        default_factory=utc_now,
        description="When the repayment was recorded (UTC)"
    )


class Loan(BaseModel):
    """
    Money lent to someone.

    `amount` is the outstanding balance: the principal minus every
    repayment in `repayment_history`. Only the ledger changes it.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    id: UUID = Field(
        default_factory=uuid4,
        frozen=True,
        description="Unique loan ID"
    )
    amount: Money = Field(
        ...,
        description="Outstanding balance"
    )
    recipient: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Who the money was lent to"
    )
    reason: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Free-text note about the loan"
    )
    repayment_history: list[Repayment] = Field(
        default_factory=list,
        alias="repaymentHistory",
        description="Repayments in the order they were recorded"
    )

    @property
    def total_repaid(self) -> Decimal:
        """Sum of all recorded repayments."""
        return sum((r.amount for r in self.repayment_history), Decimal("0"))

    @property
    def original_amount(self) -> Decimal:
        """Principal at creation time."""
        return self.amount + self.total_repaid


# =============================================================================
# OPERATION RESULTS
# =============================================================================

class LedgerOutcome(str, Enum):
    """What a ledger operation did."""
    APPLIED = "applied"      # Loan added or repayment recorded, loan still open
    SETTLED = "settled"      # Repayment brought balance to zero or below, loan removed
    DELETED = "deleted"      # Loan removed by explicit deletion
    REJECTED = "rejected"    # Input failed validation, nothing changed
    NOT_FOUND = "not_found"  # No loan with that ID, nothing changed


class LedgerResult(BaseModel):
    """
    Result of a ledger mutation.

    CRITICAL: `persisted` is None when no write was attempted (rejected or
    not found). When it is False the in-memory change still stands; the UI
    should tell the user their data was not saved.
    """

    status: LedgerOutcome
    loan: Optional[Loan] = Field(
        default=None,
        description="Loan state after the operation (last snapshot if removed)"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="Validation issues when status is REJECTED"
    )
    persisted: Optional[bool] = Field(
        default=None,
        description="Whether the ledger write succeeded"
    )

    @property
    def ok(self) -> bool:
        """Did the operation change the ledger?"""
        return self.status not in (LedgerOutcome.REJECTED, LedgerOutcome.NOT_FOUND)

    @property
    def loan_present(self) -> bool:
        """Is the loan still in the ledger after this operation?"""
        return self.status == LedgerOutcome.APPLIED
