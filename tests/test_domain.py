import dataclasses
from datetime import datetime
from decimal import Decimal

import pytest

from bookkeeping.domain import BankAccount, Category, CategoryType, Operation


def make_account(balance="0"):
    return BankAccount("Main", Decimal(balance))


def test_new_account_has_opening_balance_and_empty_log():
    acc = make_account("12000")
    assert acc.balance == Decimal("12000")
    assert acc.initial_balance == Decimal("12000")
    assert acc.operations == []


def test_negative_opening_balance_is_accepted():
    acc = make_account("-50")
    assert acc.balance == Decimal("-50")


def test_accounts_get_distinct_ids():
    assert make_account().id != make_account().id


def test_update_balance_adds_signed_amount():
    acc = make_account("100")
    acc.update_balance(Decimal("25.50"))
    acc.update_balance(Decimal("-10"))
    assert acc.balance == Decimal("115.50")
    assert acc.operations == []


def test_add_operation_income_and_expense():
    acc = make_account("100")
    salary = Category("Salary", CategoryType.INCOME)
    food = Category("Food", CategoryType.EXPENSE)

    acc.add_operation(Operation(CategoryType.INCOME, acc, Decimal("40"), salary))
    acc.add_operation(Operation(CategoryType.EXPENSE, acc, Decimal("15"), food))

    assert acc.balance == Decimal("125")
    assert [op.amount for op in acc.operations] == [Decimal("40"), Decimal("15")]


def test_add_operation_does_not_check_funds():
    acc = make_account("10")
    food = Category("Food", CategoryType.EXPENSE)
    acc.add_operation(Operation(CategoryType.EXPENSE, acc, Decimal("30"), food))
    assert acc.balance == Decimal("-20")


def test_recalculate_balance_restores_tampered_balance():
    acc = make_account("12000")
    salary = Category("Salary", CategoryType.INCOME)
    food = Category("Food", CategoryType.EXPENSE)
    acc.add_operation(Operation(CategoryType.INCOME, acc, Decimal("300"), salary))
    acc.add_operation(Operation(CategoryType.EXPENSE, acc, Decimal("120.25"), food))
    expected = acc.balance

    acc.update_balance(Decimal("999"))
    assert acc.balance != expected

    assert acc.recalculate_balance() == expected
    assert acc.recalculate_balance() == expected
    assert acc.balance == Decimal("12179.75")


def test_recalculate_balance_on_empty_log_is_opening_balance():
    acc = make_account("7")
    acc.update_balance(Decimal("3"))
    assert acc.recalculate_balance() == Decimal("7")


def test_operation_constructor_does_not_touch_account():
    acc = make_account("5")
    food = Category("Food", CategoryType.EXPENSE)
    before = datetime.now()
    op = Operation(CategoryType.EXPENSE, acc, Decimal("50"), food)

    assert acc.balance == Decimal("5")
    assert acc.operations == []
    assert op.account is acc
    assert op.description == ""
    assert before <= op.date <= datetime.now()


def test_operation_type_is_not_checked_against_category():
    acc = make_account()
    food = Category("Food", CategoryType.EXPENSE)
    op = Operation(CategoryType.INCOME, acc, Decimal("5"), food)
    assert op.type is CategoryType.INCOME
    assert op.signed_amount == Decimal("5")


def test_category_and_operation_are_immutable():
    acc = make_account()
    cat = Category("Food", CategoryType.EXPENSE)
    op = Operation(CategoryType.EXPENSE, acc, Decimal("1"), cat)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cat.name = "Rent"
    with pytest.raises(dataclasses.FrozenInstanceError):
        op.amount = Decimal("2")


def test_operation_repr_skips_account_back_reference():
    acc = make_account()
    cat = Category("Food", CategoryType.EXPENSE)
    acc.add_operation(Operation(CategoryType.EXPENSE, acc, Decimal("1"), cat))
    assert "account" not in repr(acc.operations[0])
