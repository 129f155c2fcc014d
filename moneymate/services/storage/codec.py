"""
JSON codec for persisted resources.

loans.json is a JSON array of loan objects:

    [
      {
        "id": "<uuid>",
        "amount": 150.0,
        "recipient": "Alex",
        "reason": "rent",
        "repaymentHistory": [
          {"id": "<uuid>", "amount": 50.0, "date": "<ISO-8601 timestamp>"}
        ]
      }
    ]

expenses.json is a JSON array of {"id", "amount", "category", "date"}.
There is no version field; the schema is not migrated.
"""

from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from moneymate.models.expense import Expense
from moneymate.models.ledger import Loan
from moneymate.services.storage.interface import StorageError


class CodecError(StorageError):
    """Stored bytes could not be decoded into the expected records."""
    pass


_LOANS = TypeAdapter(list[Loan])
_EXPENSES = TypeAdapter(list[Expense])


def encode_loans(loans: Iterable[Loan]) -> bytes:
    """Serialize the full ledger, preserving order."""
    return _LOANS.dump_json(list(loans), by_alias=True, indent=2)


def decode_loans(data: bytes) -> list[Loan]:
    """
    Parse a persisted ledger.

    Raises:
        CodecError: If the payload is not valid JSON, does not match the
            loan schema, or reuses a loan or repayment ID.
    """
    try:
        loans = _LOANS.validate_json(data)
    except ValidationError as e:
        raise CodecError(f"Malformed loan ledger: {e.error_count()} errors: {e}") from e

    seen = set()
    for loan in loans:
        ids = [loan.id] + [r.id for r in loan.repayment_history]
        for record_id in ids:
            if record_id in seen:
                raise CodecError(f"Duplicate ID in loan ledger: {record_id}")
            seen.add(record_id)
    return loans


def encode_expenses(expenses: Iterable[Expense]) -> bytes:
    return _EXPENSES.dump_json(list(expenses), indent=2)


def decode_expenses(data: bytes) -> list[Expense]:
    try:
        expenses = _EXPENSES.validate_json(data)
    except ValidationError as e:
        raise CodecError(f"Malformed expense list: {e.error_count()} errors: {e}") from e

    if len({e.id for e in expenses}) != len(expenses):
        raise CodecError("Duplicate ID in expense list")
    return expenses
