from bookkeeping.analytics import FinanceAnalytics
from bookkeeping.domain import BankAccount, Category, CategoryType, Operation
from bookkeeping.exceptions import BookkeepingError, InsufficientFundsError, SeedError
from bookkeeping.factory import FinanceFactory

__all__ = [
    "BankAccount",
    "BookkeepingError",
    "Category",
    "CategoryType",
    "FinanceAnalytics",
    "FinanceFactory",
    "InsufficientFundsError",
    "Operation",
    "SeedError",
]
