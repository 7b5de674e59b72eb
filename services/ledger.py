"""
Portfolio ledger service.
Records buy/sell transactions for one user and keeps running per-fund balances.

Processing order for every operation is validate -> record -> apply balance
delta -> notify. A sell rejected for insufficient funds is therefore already
in the transaction log (and already handed to the store) when the error is
raised; its id is tracked in rejected_transaction_ids so the log can still be
replayed into the current balances.
"""

import logging
import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from config import get_settings
from models import Transaction, TransactionType
from services.errors import InsufficientFundsError
from services.notification import LoggingNotifier, Notifier
from services.persistence import LoggingTransactionStore, TransactionStore
from services.validation import validate_transaction_input

logger = logging.getLogger(__name__)


NOTIFICATION_TEMPLATES = {
    TransactionType.BUY: "a purchase of {amount} was made in fund {fund_code}",
    TransactionType.SELL: "a redemption of {amount} was made from fund {fund_code}",
}

SUCCESS_LABELS = {
    TransactionType.BUY: "Buy",
    TransactionType.SELL: "Sell",
}


class PortfolioLedger:
    """
    Per-user ledger of fund transactions and balances.

    Calls against one instance are serialized by an internal lock; separate
    instances share no state.
    """

    def __init__(
        self,
        user_id: str,
        transaction_store: Optional[TransactionStore] = None,
        notifier: Optional[Notifier] = None,
        fund_prefix: Optional[str] = None
    ):
        self._user_id = user_id
        self.transaction_store = transaction_store or LoggingTransactionStore()
        self.notifier = notifier or LoggingNotifier()
        self.fund_prefix = fund_prefix if fund_prefix is not None else get_settings().fund_code_prefix

        self._transactions: list = []
        self._fund_balances: Dict[str, float] = {}
        self._rejected_ids: set = set()
        self._lock = threading.RLock()

    @property
    def user_id(self) -> str:
        return self._user_id

    # ==================== Operations ====================

    def process_buy(self, fund_code: str, amount: float) -> str:
        """
        Buy into a fund.

        Returns:
            Id of the recorded transaction

        Raises:
            ValidationError: invalid fund code or amount
        """
        return self._process(fund_code, amount, TransactionType.BUY)

    def process_sell(self, fund_code: str, amount: float) -> str:
        """
        Redeem from a fund.

        Returns:
            Id of the recorded transaction

        Raises:
            ValidationError: invalid fund code or amount
            InsufficientFundsError: amount exceeds the fund balance; the
                attempt stays in the transaction log
        """
        return self._process(fund_code, amount, TransactionType.SELL)

    def _process(self, fund_code: str, amount: float, transaction_type: TransactionType) -> str:
        with self._lock:
            validate_transaction_input(fund_code, amount, self.fund_prefix)

            transaction = self.record(fund_code, amount, transaction_type)

            try:
                self.apply_delta(fund_code, amount, transaction_type)
            except InsufficientFundsError as e:
                self._rejected_ids.add(transaction.id)
                logger.warning(
                    f"{transaction_type.value} {transaction.id} for user {self._user_id} "
                    f"rejected: {e}"
                )
                raise

            message = NOTIFICATION_TEMPLATES[transaction_type].format(amount=amount, fund_code=fund_code)
            self.notifier.notify(self._user_id, message)

            logger.info(
                f"{SUCCESS_LABELS[transaction_type]} transaction processed successfully. "
                f"ID: {transaction.id}"
            )
            return transaction.id

    def record(self, fund_code: str, amount: float, transaction_type: TransactionType) -> Transaction:
        """
        Create a transaction, append it to the log and hand it to the store.

        The store's result is not inspected. If the store raises, the entry
        stays in the log marked as rejected and the error propagates.
        """
        with self._lock:
            transaction = Transaction.create(self._user_id, fund_code, transaction_type, amount)
            self._transactions.append(transaction)
            try:
                self.transaction_store.save(transaction)
            except Exception as e:
                self._rejected_ids.add(transaction.id)
                logger.error(f"Store failed for transaction {transaction.id}: {e}")
                raise
            return transaction

    def apply_delta(self, fund_code: str, amount: float, transaction_type: TransactionType) -> float:
        """
        Apply a buy/sell amount to a fund balance.

        Returns:
            The new balance

        Raises:
            InsufficientFundsError: selling more than the current balance;
                the balance is left untouched
        """
        with self._lock:
            current_balance = self._fund_balances.get(fund_code, 0.0)

            if transaction_type is TransactionType.BUY:
                new_balance = current_balance + amount
            elif transaction_type is TransactionType.SELL:
                if current_balance < amount:
                    raise InsufficientFundsError(current_balance)
                new_balance = current_balance - amount
            else:
                raise ValueError(f"Unsupported transaction type: {transaction_type}")

            self._fund_balances[fund_code] = new_balance
            return new_balance

    # ==================== Read accessors ====================

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Snapshot of the transaction log in insertion order."""
        with self._lock:
            return tuple(self._transactions)

    @property
    def fund_balances(self) -> Mapping[str, float]:
        """Read-only snapshot of the current balances."""
        with self._lock:
            return MappingProxyType(dict(self._fund_balances))

    @property
    def rejected_transaction_ids(self) -> FrozenSet[str]:
        """Ids of transactions that were recorded but whose balance update failed."""
        with self._lock:
            return frozenset(self._rejected_ids)

    def get_transactions(self) -> Tuple[Transaction, ...]:
        return self.transactions

    def get_fund_balances(self) -> Mapping[str, float]:
        return self.fund_balances

    def balance_of(self, fund_code: str) -> float:
        with self._lock:
            return self._fund_balances.get(fund_code, 0.0)

    def is_rejected(self, transaction_id: str) -> bool:
        with self._lock:
            return transaction_id in self._rejected_ids

    def replay_balances(self) -> Dict[str, float]:
        """Recompute balances from the log, skipping rejected transactions."""
        with self._lock:
            balances: Dict[str, float] = {}
            for tx in self._transactions:
                if tx.id in self._rejected_ids:
                    continue
                current = balances.get(tx.fund_code, 0.0)
                if tx.type is TransactionType.BUY:
                    balances[tx.fund_code] = current + tx.amount
                else:
                    balances[tx.fund_code] = current - tx.amount
            return balances

    def __repr__(self) -> str:
        return (
            f"PortfolioLedger(user_id={self._user_id!r}, "
            f"transactions={len(self._transactions)}, funds={len(self._fund_balances)})"
        )
