"""
Transaction Repository - data access layer for TransactionRecord model.
Optimized with optional session parameter for transaction reuse.
Rows are append-only: the repository never updates or deletes them.
"""

from typing import Optional, List
from sqlmodel import Session, select

from db_engine import get_session
from models import TransactionRecord


class TransactionRepository:
    """Repository for TransactionRecord persistence and lookups."""

    @staticmethod
    def add(record: TransactionRecord, session: Optional[Session] = None) -> TransactionRecord:
        """
        Add a new transaction row to the database.

        Args:
            record: TransactionRecord built from a ledger transaction
            session: Optional existing session for transaction reuse

        Returns:
            Stored TransactionRecord object
        """
        def _add(sess: Session) -> TransactionRecord:
            try:
                sess.add(record)
                sess.commit()
                sess.refresh(record)
                return record
            except Exception as e:
                sess.rollback()
                raise e

        if session is not None:
            return _add(session)
        else:
            with get_session() as session:
                return _add(session)

    @staticmethod
    def get_by_id(transaction_id: str, session: Optional[Session] = None) -> Optional[TransactionRecord]:
        """
        Retrieve a transaction by its ID.

        Args:
            transaction_id: Transaction ID to look up
            session: Optional existing session for transaction reuse

        Returns:
            TransactionRecord object or None if not found
        """
        def _get_by_id(sess: Session) -> Optional[TransactionRecord]:
            return sess.get(TransactionRecord, transaction_id)

        if session is not None:
            return _get_by_id(session)
        else:
            with get_session() as session:
                return _get_by_id(session)

    @staticmethod
    def get_by_user(user_id: str, session: Optional[Session] = None) -> List[TransactionRecord]:
        """
        Retrieve all transactions for a user, oldest first.

        Args:
            user_id: Owning user ID
            session: Optional existing session for transaction reuse

        Returns:
            List of TransactionRecord objects
        """
        def _get_by_user(sess: Session) -> List[TransactionRecord]:
            statement = (
                select(TransactionRecord)
                .where(TransactionRecord.user_id == user_id)
                .order_by(TransactionRecord.timestamp)
            )
            return list(sess.exec(statement).all())

        if session is not None:
            return _get_by_user(session)
        else:
            with get_session() as session:
                return _get_by_user(session)

    @staticmethod
    def get_by_fund(user_id: str, fund_code: str, session: Optional[Session] = None) -> List[TransactionRecord]:
        """
        Retrieve a user's transactions for a single fund, oldest first.

        Args:
            user_id: Owning user ID
            fund_code: Fund code to filter on
            session: Optional existing session for transaction reuse

        Returns:
            List of TransactionRecord objects
        """
        def _get_by_fund(sess: Session) -> List[TransactionRecord]:
            statement = (
                select(TransactionRecord)
                .where(TransactionRecord.user_id == user_id)
                .where(TransactionRecord.fund_code == fund_code)
                .order_by(TransactionRecord.timestamp)
            )
            return list(sess.exec(statement).all())

        if session is not None:
            return _get_by_fund(session)
        else:
            with get_session() as session:
                return _get_by_fund(session)

    @staticmethod
    def get_all(session: Optional[Session] = None) -> List[TransactionRecord]:
        """Retrieve all transactions from the database, oldest first."""
        def _get_all(sess: Session) -> List[TransactionRecord]:
            statement = select(TransactionRecord).order_by(TransactionRecord.timestamp)
            return list(sess.exec(statement).all())

        if session is not None:
            return _get_all(session)
        else:
            with get_session() as session:
                return _get_all(session)
