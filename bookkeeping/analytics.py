from collections import defaultdict
from decimal import Decimal
from typing import Callable, Dict, Iterator, Tuple

from bookkeeping.domain import BankAccount, CategoryType, Operation


class FinanceAnalytics:
    """Read-only aggregates over an account's operation log."""

    @staticmethod
    def get_income_expense_difference(account: BankAccount) -> Decimal:
        income = Decimal("0")
        expense = Decimal("0")
        for op in account.operations:
            if op.type is CategoryType.INCOME:
                income += op.amount
            else:
                expense += op.amount
        return income - expense

    @staticmethod
    def get_grouped_expenses(account: BankAccount) -> Dict[str, Decimal]:
        # keyed by category name, so same-named categories merge
        totals: Dict[str, Decimal] = defaultdict(Decimal)
        for op in FinanceAnalytics.iter_operations(account, lambda o: o.type is CategoryType.EXPENSE):
            totals[op.category.name] += op.amount
        return dict(totals)

    @staticmethod
    def iter_operations(
        account: BankAccount, pred: Callable[[Operation], bool]
    ) -> Iterator[Operation]:
        for op in account.operations:
            if pred(op):
                yield op

    @staticmethod
    def get_top_expense_categories(account: BankAccount, k: int) -> Iterator[Tuple[str, Decimal]]:
        ordered = sorted(
            FinanceAnalytics.get_grouped_expenses(account).items(),
            key=lambda item: item[1],
            reverse=True,
        )
        for name, total in ordered[: max(0, k)]:
            yield name, total
