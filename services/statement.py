"""
Statement views of a ledger as pandas DataFrames.
Used by the Streamlit front end for history and balance tables.
"""

import pandas as pd

from models import TransactionType
from services.ledger import PortfolioLedger

TRANSACTION_COLUMNS = ['id', 'user_id', 'fund_code', 'type', 'amount', 'timestamp', 'status']


def transactions_frame(ledger: PortfolioLedger) -> pd.DataFrame:
    """
    Build the transaction history of a ledger.

    Args:
        ledger: Ledger to read

    Returns:
        DataFrame in log order; status is "applied" or "rejected"
    """
    rejected = ledger.rejected_transaction_ids
    rows = [
        {
            'id': tx.id,
            'user_id': tx.user_id,
            'fund_code': tx.fund_code,
            'type': tx.type.value,
            'amount': tx.amount,
            'timestamp': tx.timestamp,
            'status': 'rejected' if tx.id in rejected else 'applied',
        }
        for tx in ledger.transactions
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def balances_frame(ledger: PortfolioLedger) -> pd.DataFrame:
    """Current balance per fund, sorted by fund code."""
    balances = ledger.fund_balances
    df = pd.DataFrame(
        [{'fund_code': code, 'balance': balance} for code, balance in balances.items()],
        columns=['fund_code', 'balance']
    )
    return df.sort_values('fund_code').reset_index(drop=True)


def fund_summary(ledger: PortfolioLedger) -> pd.DataFrame:
    """
    Per-fund totals over applied transactions.

    Returns:
        DataFrame indexed by fund_code with bought, sold, balance and
        transactions (count) columns
    """
    df = transactions_frame(ledger)
    df = df[df['status'] == 'applied']
    columns = ['bought', 'sold', 'balance', 'transactions']
    if df.empty:
        return pd.DataFrame(columns=columns, index=pd.Index([], name='fund_code'))

    bought = df[df['type'] == TransactionType.BUY.value].groupby('fund_code')['amount'].sum()
    sold = df[df['type'] == TransactionType.SELL.value].groupby('fund_code')['amount'].sum()
    counts = df.groupby('fund_code')['id'].count()

    summary = pd.DataFrame({'bought': bought, 'sold': sold}).reindex(counts.index).fillna(0.0)
    summary['balance'] = summary['bought'] - summary['sold']
    summary['transactions'] = counts
    summary.index.name = 'fund_code'
    return summary[columns].sort_index()
