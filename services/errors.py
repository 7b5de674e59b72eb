"""
Error types raised by the ledger.
All are business errors reported synchronously to the caller; none are retried.
"""


class LedgerError(ValueError):
    """Base class for ledger operation failures."""


class ValidationError(LedgerError):
    """Raised when transaction input is rejected before anything is recorded."""


class EmptyFundCodeError(ValidationError):
    """Fund code missing or blank."""

    def __init__(self):
        super().__init__("Fund code cannot be empty")


class NonPositiveAmountError(ValidationError):
    """Amount is zero or negative."""

    def __init__(self, amount: float):
        self.amount = amount
        super().__init__("Amount must be greater than zero")


class UnknownFundError(ValidationError):
    """Fund code fails the fund-existence check."""

    def __init__(self, fund_code: str):
        self.fund_code = fund_code
        super().__init__(f"Fund does not exist: {fund_code}")


class InsufficientFundsError(LedgerError):
    """Sell amount exceeds the current balance of the fund."""

    def __init__(self, current_balance: float):
        self.current_balance = current_balance
        super().__init__(f"Insufficient balance. Current balance: {current_balance}")
