"""Tests for database persistence of ledger transactions."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from config import reload_settings
from models import Transaction, TransactionRecord, TransactionType
from repositories import TransactionRepository, UserPreferencesRepository
from services.errors import InsufficientFundsError
from services.ledger import PortfolioLedger
from services.persistence import DatabaseTransactionStore, LoggingTransactionStore


class TestTransactionRecord:
    """Test conversion between ledger transactions and rows."""

    def test_round_trip(self):
        tx = Transaction.create("user-1", "FUND1", TransactionType.SELL, 42.0)
        record = TransactionRecord.from_transaction(tx)

        assert record.transaction_type == "SELL"
        assert record.to_transaction() == tx


class TestTransactionRepository:
    """Test repository queries against a temporary database."""

    def test_add_and_get_by_id(self, temp_db):
        tx = Transaction.create("user-1", "FUND1", TransactionType.BUY, 10.0)
        TransactionRepository.add(TransactionRecord.from_transaction(tx))

        stored = TransactionRepository.get_by_id(tx.id)
        assert stored is not None
        assert stored.to_transaction() == tx

    def test_get_by_id_missing(self, temp_db):
        assert TransactionRepository.get_by_id("does-not-exist") is None

    def test_filters(self, temp_db):
        txs = [
            Transaction.create("user-1", "FUND1", TransactionType.BUY, 10.0),
            Transaction.create("user-1", "FUND2", TransactionType.BUY, 20.0),
            Transaction.create("user-2", "FUND1", TransactionType.BUY, 30.0),
        ]
        for tx in txs:
            TransactionRepository.add(TransactionRecord.from_transaction(tx))

        assert [r.id for r in TransactionRepository.get_by_user("user-1")] == [txs[0].id, txs[1].id]
        assert [r.id for r in TransactionRepository.get_by_fund("user-1", "FUND1")] == [txs[0].id]
        assert len(TransactionRepository.get_all()) == 3


class TestDatabaseTransactionStore:
    """Test the database-backed persistence collaborator."""

    def test_ledger_persists_every_recorded_transaction(self, temp_db, notifier):
        ledger = PortfolioLedger(
            "user-1",
            transaction_store=DatabaseTransactionStore(),
            notifier=notifier,
            fund_prefix="FUND"
        )

        ledger.process_buy("FUND1", 50.0)
        with pytest.raises(InsufficientFundsError):
            ledger.process_sell("FUND1", 100.0)

        stored = TransactionRepository.get_by_user("user-1")
        assert [r.id for r in stored] == [tx.id for tx in ledger.transactions]
        assert [r.transaction_type for r in stored] == ["BUY", "SELL"]

    def test_saved_transaction_reads_back_unchanged(self, temp_db):
        tx = Transaction.create("user-1", "FUND1", TransactionType.BUY, 12.5)

        assert DatabaseTransactionStore(raise_on_error=True).save(tx) is True

        stored = TransactionRepository.get_by_id(tx.id)
        assert stored is not None
        restored = stored.to_transaction()
        assert restored == tx
        assert restored.timestamp.tzinfo is not None

    def test_duplicate_id_is_best_effort(self, temp_db):
        store = DatabaseTransactionStore(raise_on_error=False)
        tx = Transaction.create("user-1", "FUND1", TransactionType.BUY, 10.0)

        assert store.save(tx) is True
        assert store.save(tx) is False

    def test_raise_on_error(self, temp_db):
        store = DatabaseTransactionStore(raise_on_error=True)
        tx = Transaction.create("user-1", "FUND1", TransactionType.BUY, 10.0)
        store.save(tx)

        with pytest.raises(SQLAlchemyError):
            store.save(tx)

    def test_raise_on_error_from_settings(self, temp_db, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_RAISE_ON_ERROR", "true")
        reload_settings()

        assert DatabaseTransactionStore().raise_on_error is True


class TestLoggingTransactionStore:
    """Test the log-only collaborator."""

    def test_logs_id(self, caplog):
        tx = Transaction.create("user-1", "FUND1", TransactionType.BUY, 1.0)
        with caplog.at_level("INFO"):
            assert LoggingTransactionStore().save(tx) is True
        assert tx.id in caplog.text


class TestUserPreferencesRepository:
    """Test per-user preferences."""

    def test_save_and_update_email(self, temp_db):
        assert UserPreferencesRepository.get_by_user("user-1") is None

        UserPreferencesRepository.save_email("user-1", "one@example.com")
        UserPreferencesRepository.save_email("user-1", "uno@example.com")
        UserPreferencesRepository.save_email("user-2", "two@example.com")

        assert UserPreferencesRepository.get_by_user("user-1").email_address == "uno@example.com"
        assert UserPreferencesRepository.get_by_user("user-2").email_address == "two@example.com"
