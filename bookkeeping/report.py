from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List

from bookkeeping.analytics import FinanceAnalytics
from bookkeeping.domain import BankAccount


@dataclass(frozen=True)
class AccountReport:
    account_name: str
    balance: Decimal
    income_expense_difference: Decimal
    grouped_expenses: Dict[str, Decimal]


def build_account_report(account: BankAccount) -> AccountReport:
    return AccountReport(
        account_name=account.name,
        balance=account.balance,
        income_expense_difference=FinanceAnalytics.get_income_expense_difference(account),
        grouped_expenses=FinanceAnalytics.get_grouped_expenses(account),
    )


def render_account_report(report: AccountReport, currency: str) -> List[str]:
    """Console lines for a report, one line per expense category at the end."""
    lines = [
        f"Account: {report.account_name}, balance: {report.balance} {currency}",
        f"Net income: {report.income_expense_difference} {currency}",
        "Expenses by category:",
    ]
    for name, total in report.grouped_expenses.items():
        lines.append(f"{name}: {total} {currency}")
    return lines
