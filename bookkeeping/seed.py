import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

from bookkeeping.domain import BankAccount, Category, CategoryType
from bookkeeping.exceptions import SeedError
from bookkeeping.factory import FinanceFactory
from bookkeeping.logging_setup import get_logger

logger = get_logger("bookkeeping.seed")


@dataclass(frozen=True)
class Seed:
    account: BankAccount
    categories: Dict[str, Category]


def _category_type(raw: str) -> CategoryType:
    try:
        return CategoryType(str(raw).lower())
    except ValueError:
        raise SeedError(f"unknown operation type: {raw!r}") from None


def load_seed(path: Union[str, Path]) -> Seed:
    """Replay a JSON scenario through ``FinanceFactory``.

    Operations are created in file order, so every expense is checked against
    the balance left by the operations before it.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    try:
        acc = data["account"]
        account = FinanceFactory.create_bank_account(acc["name"], acc["initial_balance"])
        categories = {
            c["key"]: FinanceFactory.create_category(c["name"], _category_type(c["type"]))
            for c in data.get("categories", [])
        }
        for op in data.get("operations", []):
            key = op["category"]
            if key not in categories:
                raise SeedError(f"operation refers to unknown category {key!r}")
            FinanceFactory.create_operation(
                _category_type(op["type"]),
                account,
                op["amount"],
                categories[key],
                op.get("description", ""),
            )
    except KeyError as e:
        raise SeedError(f"missing field {e.args[0]!r} in {path}") from e

    logger.info("loaded %d operations for %s from %s", len(account.operations), account.name, path)
    return Seed(account=account, categories=categories)
