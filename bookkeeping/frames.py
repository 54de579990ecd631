import pandas as pd

from bookkeeping.domain import BankAccount

OPERATION_COLUMNS = ["id", "date", "type", "category", "amount", "signed_amount", "description"]


def operations_frame(account: BankAccount) -> pd.DataFrame:
    """One row per operation in log order; amounts stay ``Decimal`` (object dtype)."""
    rows = [
        {
            "id": str(op.id),
            "date": op.date,
            "type": op.type.value,
            "category": op.category.name,
            "amount": op.amount,
            "signed_amount": op.signed_amount,
            "description": op.description,
        }
        for op in account.operations
    ]
    df = pd.DataFrame(rows, columns=OPERATION_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df


def running_balance(account: BankAccount) -> pd.Series:
    # index 0 is the opening balance, index i the balance after the i-th operation
    values = [account.initial_balance]
    for op in account.operations:
        values.append(values[-1] + op.signed_amount)
    return pd.Series(values, name="balance", dtype=object)
