from decimal import Decimal
from typing import Union

from bookkeeping.domain import BankAccount, Category, CategoryType, Operation
from bookkeeping.exceptions import InsufficientFundsError
from bookkeeping.logging_setup import get_logger

logger = get_logger("bookkeeping.factory")

Amount = Union[Decimal, int, str]


def to_decimal(value: Amount) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # via str so 0.1 becomes Decimal("0.1"), not its binary expansion
    return Decimal(str(value))


class FinanceFactory:
    """Creates accounts, categories and operations.

    ``create_operation`` is the only place the sufficient-funds rule is
    enforced; the domain constructors themselves never validate.
    """

    @staticmethod
    def create_bank_account(name: str, initial_balance: Amount) -> BankAccount:
        account = BankAccount(name, to_decimal(initial_balance))
        logger.debug("created account %s (%s) with balance %s", account.name, account.id, account.balance)
        return account

    @staticmethod
    def create_category(name: str, type: CategoryType) -> Category:
        category = Category(name, CategoryType(type))
        logger.debug("created %s category %s", category.type.value, category.name)
        return category

    @staticmethod
    def create_operation(
        type: CategoryType,
        account: BankAccount,
        amount: Amount,
        category: Category,
        description: str = "",
    ) -> Operation:
        type = CategoryType(type)
        amount = to_decimal(amount)
        if type is CategoryType.EXPENSE and account.balance < amount:
            logger.warning(
                "rejected expense of %s on account %s: balance is %s", amount, account.name, account.balance
            )
            raise InsufficientFundsError(account.id, account.balance, amount)

        operation = Operation(type, account, amount, category, description)
        account.add_operation(operation)
        logger.debug(
            "recorded %s of %s on %s (%s), balance now %s",
            type.value, amount, account.name, category.name, account.balance,
        )
        return operation
