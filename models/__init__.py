"""
Models for FundLedger.
Ledger value objects and SQLModel table definitions are centralized here.
"""

from models.transaction import Transaction, TransactionType
from models.transaction_record import TransactionRecord
from models.user_preferences import UserPreferences

__all__ = [
    'Transaction',
    'TransactionType',
    'TransactionRecord',
    'UserPreferences',
]
