"""
Transaction model - an immutable buy/sell record against a fund.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class TransactionType(str, Enum):
    """Kind of operation a transaction represents."""
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Transaction:
    """Represents a single buy/sell transaction in a user's ledger."""
    id: str
    user_id: str
    fund_code: str
    type: TransactionType
    amount: float
    timestamp: datetime

    @classmethod
    def create(
        cls,
        user_id: str,
        fund_code: str,
        transaction_type: TransactionType,
        amount: float
    ) -> "Transaction":
        """
        Build a new transaction with a fresh id and the current time.

        Args:
            user_id: Owning user
            fund_code: Fund the transaction applies to
            transaction_type: BUY or SELL
            amount: Monetary amount (positive)

        Returns:
            New Transaction instance
        """
        return cls(
            id=str(uuid.uuid4()),
            user_id=user_id,
            fund_code=fund_code,
            type=TransactionType(transaction_type),
            amount=amount,
            timestamp=datetime.now(timezone.utc)
        )
