# flake8: noqa: F401

"""TokenLedger package

**tokenledger** is a Python package implementing a minimal single-asset token
ledger: a persisted mapping of account identifiers to balances that supports
minting, transfers between accounts, and balance and total supply queries.

Every operation loads the full ledger snapshot from a storage backend,
applies its change under the invariants that no balance is negative and that
the total supply equals the sum of all balances, and writes the snapshot back.
Storage is pluggable: the package ships an in-memory backend for testing and
a YAML file backend whose files lend themselves to version control.
"""

from .ledger_engine import LedgerEngine
from .memory_ledger import MemoryLedger
from .text_ledger import TextLedger
from .ledger_state import Account, LedgerState
from .ledger_store import LedgerStore, MemoryStore, YAMLFileStore
from .errors import (
    LedgerError,
    AccountNotFoundError,
    InsufficientBalanceError,
    InvalidAmountError,
    PersistenceError,
    LedgerAlreadyInitializedError,
)
from .log_collector import LogCollector
from .helpers import standardize_amount, standardize_account_id, write_fixed_width_csv
from .decorators import timed_cache
from . import constants
from .tests import (
    BaseTest,
    BaseTestTokenLedger,
    BaseTestDumpRestoreClear,
)
