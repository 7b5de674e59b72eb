"""Pytest configuration and fixtures"""

import pytest

from config import reload_settings
from db_engine import init_db, reset_engine
from services.ledger import PortfolioLedger


class SpyTransactionStore:
    """Records every transaction handed to save()."""

    def __init__(self):
        self.saved = []

    def save(self, transaction):
        self.saved.append(transaction)
        return True


class SpyNotifier:
    """Records every (user_id, message) pair handed to notify()."""

    def __init__(self):
        self.messages = []

    def notify(self, user_id, message):
        self.messages.append((user_id, message))
        return True


@pytest.fixture
def store():
    return SpyTransactionStore()


@pytest.fixture
def notifier():
    return SpyNotifier()


@pytest.fixture
def ledger(store, notifier):
    """Empty ledger for user-1 wired to spy collaborators."""
    return PortfolioLedger("user-1", transaction_store=store, notifier=notifier, fund_prefix="FUND")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Give every test freshly loaded settings and no cached engine."""
    reload_settings()
    yield
    reset_engine()
    reload_settings()


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite database file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test_ledger.db'}")
    settings = reload_settings()
    reset_engine()
    init_db()
    return settings
