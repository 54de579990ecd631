from decimal import Decimal

from bookkeeping.domain import CategoryType
from bookkeeping.factory import FinanceFactory
from bookkeeping.frames import OPERATION_COLUMNS, operations_frame, running_balance


def test_operations_frame_rows_in_log_order(salary, food):
    acc = FinanceFactory.create_bank_account("Main", 100)
    FinanceFactory.create_operation(CategoryType.INCOME, acc, 50, salary, "Bonus")
    FinanceFactory.create_operation(CategoryType.EXPENSE, acc, "12.30", food, "Lunch")

    df = operations_frame(acc)
    assert list(df.columns) == OPERATION_COLUMNS
    assert list(df["description"]) == ["Bonus", "Lunch"]
    assert list(df["category"]) == ["Salary", "Food"]
    assert list(df["signed_amount"]) == [Decimal("50"), Decimal("-12.30")]
    assert sum(df["signed_amount"], Decimal("0")) == acc.balance - acc.initial_balance


def test_operations_frame_empty_account_keeps_columns():
    acc = FinanceFactory.create_bank_account("Main", 0)
    df = operations_frame(acc)
    assert df.empty
    assert list(df.columns) == OPERATION_COLUMNS


def test_running_balance_ends_at_account_balance(salary, food):
    acc = FinanceFactory.create_bank_account("Main", 12000)
    FinanceFactory.create_operation(CategoryType.INCOME, acc, 30000, salary)
    FinanceFactory.create_operation(CategoryType.EXPENSE, acc, 20000, food)

    series = running_balance(acc)
    assert list(series) == [Decimal("12000"), Decimal("42000"), Decimal("22000")]
    assert series.iloc[-1] == acc.balance
