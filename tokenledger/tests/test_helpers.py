"""Test suite for helper functions."""

import numpy as np
import pandas as pd
import pytest
from io import StringIO
from tokenledger import InvalidAmountError, standardize_account_id, standardize_amount
from tokenledger import write_fixed_width_csv


@pytest.mark.parametrize("amount, expected", [
    (0, 0),
    (10, 10),
    (np.int64(7), 7),
    (np.uint64(2**64 - 1), 2**64 - 1),
    (2**64 - 1, 2**64 - 1),
])
def test_standardize_amount(amount, expected):
    result = standardize_amount(amount, 2**64 - 1)
    assert result == expected
    assert type(result) is int


@pytest.mark.parametrize("amount", [-1, 2**64, 1.0, "1", None, True, np.bool_(True), [1]])
def test_standardize_amount_rejects_invalid(amount):
    with pytest.raises(InvalidAmountError):
        standardize_amount(amount, 2**64 - 1)


def test_invalid_amount_is_value_error():
    with pytest.raises(ValueError):
        standardize_amount(-1, 10)


@pytest.mark.parametrize("account_id", ["alice", " ", "0", "name, with comma"])
def test_standardize_account_id(account_id):
    assert standardize_account_id(account_id) == account_id


@pytest.mark.parametrize("account_id", ["", None, 1, b"alice"])
def test_standardize_account_id_rejects_invalid(account_id):
    with pytest.raises(ValueError):
        standardize_account_id(account_id)


def test_write_fixed_width_csv():
    df = pd.DataFrame({
        "account": ["a", "longer_name", None],
        "balance": [1, 22222, 3],
    })
    result = write_fixed_width_csv(df)
    assert result.splitlines() == [
        "    account, balance",
        "          a, 1",
        "longer_name, 22222",
        "           , 3",
    ]
    parsed = pd.read_csv(StringIO(result), skipinitialspace=True)
    assert parsed["balance"].to_list() == [1, 22222, 3]
    assert parsed["account"].to_list()[:2] == ["a", "longer_name"]


def test_write_fixed_width_csv_empty():
    df = pd.DataFrame({"account": pd.Series([], dtype="string"), "balance": []})
    assert write_fixed_width_csv(df).splitlines() == ["account, balance"]


def test_write_fixed_width_csv_to_file(tmp_path):
    df = pd.DataFrame({"account": ["a"], "balance": [1]})
    assert write_fixed_width_csv(df, file=tmp_path / "out.csv") is None
    assert (tmp_path / "out.csv").read_text() == "account, balance\n      a, 1\n"
