"""
TransactionRecord model - persisted row for a ledger transaction.
"""

from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from models.transaction import Transaction, TransactionType


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TransactionRecord(SQLModel, table=True):
    """Database row mirroring an immutable Transaction."""
    id: str = Field(primary_key=True)  # UUID string assigned by the ledger
    user_id: str = Field(index=True)
    fund_code: str = Field(index=True)  # e.g., "FUND1"
    transaction_type: str  # "BUY" or "SELL"
    amount: float
    timestamp: datetime = Field(sa_type=DateTime(timezone=True), index=True)  # UTC

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionRecord":
        """Create a row from a ledger transaction."""
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            fund_code=transaction.fund_code,
            transaction_type=transaction.type.value,
            amount=transaction.amount,
            timestamp=_as_utc(transaction.timestamp)
        )

    def to_transaction(self) -> Transaction:
        """Convert this row back into an immutable Transaction."""
        return Transaction(
            id=self.id,
            user_id=self.user_id,
            fund_code=self.fund_code,
            type=TransactionType(self.transaction_type),
            amount=self.amount,
            timestamp=_as_utc(self.timestamp)
        )
