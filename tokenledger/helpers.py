"""This module provides input validation for ledger operations and a writer
for human-readable fixed-width CSV files.
"""

from typing import Any
import numpy as np
import pandas as pd

from .errors import InvalidAmountError


def standardize_amount(amount: Any, max_amount: int) -> int:
    """Validate a token amount and return it as a Python int.

    Args:
        amount (Any): The amount to validate. Python and numpy integers are
            accepted; booleans, floats and strings are not.
        max_amount (int): Largest admissible amount.

    Returns:
        int: The validated amount.

    Raises:
        InvalidAmountError: If `amount` is not an integer in [0, max_amount].

    Examples:
        >>> standardize_amount(5, 100)
        5
        >>> standardize_amount(np.uint64(5), 100)
        5
    """
    if isinstance(amount, (bool, np.bool_)) or not isinstance(amount, (int, np.integer)):
        raise InvalidAmountError(f"Amount must be an integer, got {amount!r}.")
    amount = int(amount)
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}.")
    if amount > max_amount:
        raise InvalidAmountError(f"Amount {amount} exceeds the maximum of {max_amount}.")
    return amount


def standardize_account_id(account_id: Any) -> str:
    """Ensure `account_id` is a non-empty string.

    Raises:
        ValueError: If `account_id` is not a string or is empty.
    """
    if not isinstance(account_id, str):
        raise ValueError(f"Account id must be a string, got {account_id!r}.")
    if account_id == "":
        raise ValueError("Account id must not be empty.")
    return account_id


def write_fixed_width_csv(
    df: pd.DataFrame,
    file: str = None,
    sep: str = ", ",
    na_rep: str = "",
) -> str:
    """Generate a human-readable CSV.

    All columns but the last are padded to the width of their longest entry
    and right-aligned, so that values line up when the file is read as plain
    text. The result remains readable by `pd.read_csv(..., skipinitialspace=True)`.

    Args:
        df (pandas.DataFrame): DataFrame to be written to CSV.
        file (str): Path of the CSV file to write. If None, returns the CSV
            output as a string.
        sep (str): Separator, default is ', '. Multi-char separators are supported.
        na_rep (str): String representation for NA values. Default is ''.

    Returns:
        str: CSV output as a string if `file` is None.
    """
    result = {}
    last = len(df.columns) - 1
    for i, colname in enumerate(df.columns):
        col = df[colname]
        col_str = pd.Series(np.where(col.isna(), na_rep, col.astype(str)), dtype="object")
        width = max(col_str.str.len().max() if len(col_str) else 0, len(colname))
        if i < last:
            col_str = col_str.str.rjust(width)
            colname = colname.rjust(width)
        else:
            col_str = col_str.str.rstrip()
        if i > 0:
            col_str = sep[1:] + col_str
            colname = sep[1:] + colname
        result[colname] = col_str

    return pd.DataFrame(result).to_csv(file, sep=sep[0], index=False, na_rep=na_rep)
