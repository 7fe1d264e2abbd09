"""Constants used throughout the application."""

import pandas as pd
from io import StringIO

STATE_FORMAT_VERSION = 1

# Largest amount a single mint or transfer may move: the 64-bit unsigned width.
# Balances are Python ints and may grow beyond it.
MAX_AMOUNT = 2**64 - 1

DEFAULT_CONFIGURATION = {
    "symbol": "TOKEN",
    "max_amount": MAX_AMOUNT,
}

ACCOUNT_SCHEMA_CSV = """
    column,             dtype,                mandatory,       id
    account,            string[python],       True,          True
    balance,            object,               True,         False
"""
ACCOUNT_SCHEMA = pd.read_csv(StringIO(ACCOUNT_SCHEMA_CSV), skipinitialspace=True)
