"""
Input validation for ledger transactions.
Pure checks; the first failing rule wins.
"""

from typing import Optional

from services.errors import EmptyFundCodeError, NonPositiveAmountError, UnknownFundError

DEFAULT_FUND_PREFIX = "FUND"


def is_fund_valid(fund_code: str, fund_prefix: str = DEFAULT_FUND_PREFIX) -> bool:
    """
    Check whether a fund code refers to an existing fund.

    Existence is approximated by a naming-prefix check.

    Examples:
        >>> is_fund_valid("FUND1")
        True
        >>> is_fund_valid("XYZ")
        False
    """
    return fund_code.startswith(fund_prefix)


def validate_transaction_input(
    fund_code: Optional[str],
    amount: float,
    fund_prefix: str = DEFAULT_FUND_PREFIX
) -> None:
    """
    Validate a buy/sell request.

    Args:
        fund_code: Fund identifier
        amount: Requested amount
        fund_prefix: Prefix every known fund code starts with

    Raises:
        EmptyFundCodeError: fund_code is None or empty
        NonPositiveAmountError: amount is not strictly positive (including NaN)
        UnknownFundError: fund_code does not start with fund_prefix
    """
    if not fund_code:
        raise EmptyFundCodeError()

    if not amount > 0:
        raise NonPositiveAmountError(amount)

    if not is_fund_valid(fund_code, fund_prefix):
        raise UnknownFundError(fund_code)
