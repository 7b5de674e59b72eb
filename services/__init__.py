"""
Services package for FundLedger.
Provides core business logic separated from presentation and data layers.
"""

from services.errors import (
    LedgerError,
    ValidationError,
    EmptyFundCodeError,
    NonPositiveAmountError,
    UnknownFundError,
    InsufficientFundsError
)
from services.validation import validate_transaction_input, is_fund_valid
from services.persistence import TransactionStore, LoggingTransactionStore, DatabaseTransactionStore
from services.notification import (
    Notifier,
    LoggingNotifier,
    EmailNotifier,
    EmailService,
    build_notifier
)
from services.ledger import PortfolioLedger
from services.statement import transactions_frame, balances_frame, fund_summary

__all__ = [
    # Errors
    'LedgerError',
    'ValidationError',
    'EmptyFundCodeError',
    'NonPositiveAmountError',
    'UnknownFundError',
    'InsufficientFundsError',
    # Validation
    'validate_transaction_input',
    'is_fund_valid',
    # Collaborators
    'TransactionStore',
    'LoggingTransactionStore',
    'DatabaseTransactionStore',
    'Notifier',
    'LoggingNotifier',
    'EmailNotifier',
    'EmailService',
    'build_notifier',
    # Ledger
    'PortfolioLedger',
    'transactions_frame',
    'balances_frame',
    'fund_summary',
]
