"""
Persistence collaborators for the ledger.
The ledger calls save() once per recorded transaction and ignores the result.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from config import get_settings
from models import Transaction, TransactionRecord
from repositories import TransactionRepository

logger = logging.getLogger(__name__)


class TransactionStore(Protocol):
    """Anything that can persist a ledger transaction."""

    def save(self, transaction: Transaction) -> object:
        ...


class LoggingTransactionStore:
    """Store that only logs the transaction id. Used when no database is wired in."""

    def save(self, transaction: Transaction) -> bool:
        logger.info(f"Saving transaction to database: {transaction.id}")
        return True


class DatabaseTransactionStore:
    """
    Store that writes transactions through TransactionRepository.
    Best-effort by default: database errors are logged and reported as False.
    """

    def __init__(self, session: Optional[Session] = None, raise_on_error: Optional[bool] = None):
        self.session = session
        if raise_on_error is None:
            raise_on_error = get_settings().persistence_raise_on_error
        self.raise_on_error = raise_on_error

    def save(self, transaction: Transaction) -> bool:
        """
        Persist a transaction.

        Args:
            transaction: Ledger transaction to store

        Returns:
            True if stored, False if the database rejected it
        """
        try:
            TransactionRepository.add(TransactionRecord.from_transaction(transaction), session=self.session)
            logger.debug(f"Transaction {transaction.id} persisted")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Failed to persist transaction {transaction.id}: {e}")
            if self.raise_on_error:
                raise
            return False
