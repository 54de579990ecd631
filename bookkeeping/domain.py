from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List
from uuid import UUID, uuid4


class CategoryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Category:
    name: str
    type: CategoryType
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class Operation:
    type: CategoryType
    account: "BankAccount" = field(repr=False, compare=False)
    amount: Decimal
    category: Category
    description: str = ""   # optional note
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=datetime.now)

    @property
    def signed_amount(self) -> Decimal:
        # + for income, - for expense
        return self.amount if self.type is CategoryType.INCOME else -self.amount


@dataclass(eq=False)
class BankAccount:
    """Named balance holder that owns its chronological operation log.

    ``balance`` is kept in sync incrementally by ``add_operation``;
    ``recalculate_balance`` rebuilds it from ``initial_balance`` and the log.
    """

    name: str
    initial_balance: Decimal
    balance: Decimal = field(init=False)
    operations: List[Operation] = field(default_factory=list, init=False, repr=False)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        self.balance = self.initial_balance

    def update_balance(self, amount: Decimal) -> None:
        self.balance += amount

    def add_operation(self, operation: Operation) -> None:
        self.operations.append(operation)
        if operation.type is CategoryType.INCOME:
            self.update_balance(operation.amount)
        else:
            self.update_balance(-operation.amount)

    def recalculate_balance(self) -> Decimal:
        self.balance = self.initial_balance + sum(
            (op.signed_amount for op in self.operations), Decimal("0")
        )
        return self.balance
