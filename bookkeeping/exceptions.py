from decimal import Decimal
from uuid import UUID


class BookkeepingError(Exception):
    """Base class for errors raised by the bookkeeping package."""


class InsufficientFundsError(BookkeepingError):
    """An expense exceeds the current balance of its account."""

    def __init__(self, account_id: UUID, balance: Decimal, amount: Decimal):
        self.account_id = account_id
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"Insufficient funds on account {account_id}: "
            f"balance {balance}, expense {amount}, short by {amount - balance}"
        )


class SeedError(BookkeepingError):
    """Seed scenario file is malformed."""
