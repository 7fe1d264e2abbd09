"""This module defines the abstract base class for a token ledger."""

from abc import ABC, abstractmethod
import json
import logging
import threading
import zipfile
from contextlib import contextmanager
from typing import Iterator
import numpy as np
import pandas as pd
from consistent_df import enforce_schema
from .constants import ACCOUNT_SCHEMA, DEFAULT_CONFIGURATION
from .errors import (
    AccountNotFoundError,
    InsufficientBalanceError,
    LedgerAlreadyInitializedError,
)
from .helpers import standardize_account_id, standardize_amount, write_fixed_width_csv
from .ledger_state import Account, LedgerState
from .ledger_store import LedgerStore


class LedgerEngine(ABC):
    """
    Abstract base class defining the interface of a single-asset token ledger:
    minting, transfers between accounts, and balance and supply queries.

    The engine holds no ledger state between calls. Every operation loads a
    snapshot from the injected store, applies its change and saves the
    snapshot back before returning. A lock serializes these cycles, so
    concurrent calls on one engine cannot interleave. Child classes provide
    storage for the configuration.
    """

    _logger = None

    # ----------------------------------------------------------------------
    # Constructor

    def __init__(self, store: LedgerStore):
        self._logger = logging.getLogger("ledger")
        self._store = store
        self._lock = threading.RLock()

    @property
    def store(self) -> LedgerStore:
        return self._store

    @contextmanager
    def _transaction(self) -> Iterator[LedgerState]:
        """Load a snapshot, yield it for mutation and save it on success.

        The snapshot is discarded without saving if the block raises.
        """
        with self._lock:
            state = self._store.load()
            yield state
            state.verify()
            self._store.save(state)

    def _snapshot(self) -> LedgerState:
        with self._lock:
            return self._store.load()

    # ----------------------------------------------------------------------
    # Configuration

    @property
    @abstractmethod
    def configuration(self) -> dict:
        """Standardized system configuration."""

    @configuration.setter
    @abstractmethod
    def configuration(self, configuration: dict):
        pass

    @staticmethod
    def standardize_configuration(configuration: dict) -> dict:
        """Validate the 'configuration' dictionary and fill in default values.

        Example:
            configuration = {'symbol': 'ABC', 'max_amount': 1_000_000}
            LedgerEngine.standardize_configuration(configuration)

        Args:
            configuration (dict): The configuration dictionary to be standardized.

        Returns:
            dict: A new dictionary with items 'symbol' and 'max_amount'.

        Raises:
            ValueError: If 'configuration' is not a dictionary, 'symbol' is not a
                        non-empty string, or 'max_amount' is not a positive integer.
        """
        if not isinstance(configuration, dict):
            raise ValueError("'configuration' must be a dict.")
        result = DEFAULT_CONFIGURATION | configuration

        if not isinstance(result["symbol"], str) or not result["symbol"]:
            raise ValueError("Missing/invalid 'symbol' in configuration.")
        max_amount = result["max_amount"]
        if isinstance(max_amount, bool) or not isinstance(max_amount, int) or max_amount < 1:
            raise ValueError("Invalid 'max_amount' in configuration.")

        return result

    @property
    def symbol(self) -> str:
        return self.configuration["symbol"]

    @property
    def max_amount(self) -> int:
        return self.configuration["max_amount"]

    # ----------------------------------------------------------------------
    # Ledger operations

    def initialize(self, reset: bool = False) -> None:
        """Create an empty ledger with no accounts and zero supply.

        Args:
            reset (bool, optional): If True, an existing ledger is discarded.
                                    Defaults to False.

        Raises:
            LedgerAlreadyInitializedError: If the store already holds a ledger
                                           and `reset` is False.
        """
        with self._lock:
            if self._store.exists():
                if not reset:
                    raise LedgerAlreadyInitializedError(
                        f"{self._store} already holds a ledger; pass reset=True to discard it."
                    )
                self._logger.warning(f"Discarding existing ledger in {self._store}.")
            self._store.save(LedgerState())

    def mint(self, account_id: str, amount: int) -> None:
        """Issue new tokens to an account.

        Creates the account if it does not exist. Minting is unrestricted:
        any caller may mint, and the resulting balance or supply is not
        checked against the balance width.

        Args:
            account_id (str): Identifier of the receiving account.
            amount (int): Number of tokens to issue, between 0 and `max_amount`.

        Raises:
            InvalidAmountError: If `amount` is not an integer in [0, max_amount].
            ValueError: If `account_id` is not a non-empty string.
        """
        account_id = standardize_account_id(account_id)
        amount = standardize_amount(amount, self.max_amount)
        with self._transaction() as state:
            state.mint(account_id, amount)
        self._logger.debug(f"Minted {amount} {self.symbol} to '{account_id}'.")

    def transfer(self, from_id: str, to_id: str, amount: int) -> None:
        """Move tokens between accounts, leaving the total supply unchanged.

        The receiving account is created if it does not exist. A rejected
        transfer leaves the stored ledger untouched.

        Args:
            from_id (str): Identifier of the sending account.
            to_id (str): Identifier of the receiving account.
            amount (int): Number of tokens to move, between 0 and `max_amount`.

        Raises:
            AccountNotFoundError: If `from_id` has never been recorded.
            InsufficientBalanceError: If `from_id` holds less than `amount`.
            InvalidAmountError: If `amount` is not an integer in [0, max_amount].
            ValueError: If an account id is not a non-empty string.
        """
        from_id = standardize_account_id(from_id)
        to_id = standardize_account_id(to_id)
        amount = standardize_amount(amount, self.max_amount)
        try:
            with self._transaction() as state:
                state.transfer(from_id, to_id, amount)
        except (AccountNotFoundError, InsufficientBalanceError) as e:
            self._logger.info(f"Rejected transfer of {amount} {self.symbol}: {e}")
            raise
        self._logger.debug(f"Transferred {amount} {self.symbol} from '{from_id}' to '{to_id}'.")

    def balance_of(self, account_id: str) -> int:
        """Return the balance of an account, or 0 if it has never been recorded."""
        return self._snapshot().balance_of(account_id)

    def total_supply(self) -> int:
        return self._snapshot().total_supply

    # ----------------------------------------------------------------------
    # Accounts

    def list_accounts(self) -> pd.DataFrame:
        """List all recorded accounts, including those with zero balance.

        Returns:
            pd.DataFrame: DataFrame with columns 'account' and 'balance',
                          following ACCOUNT_SCHEMA, sorted by account.
                          Balances are Python ints, so balances beyond the
                          64-bit width are reported exactly.
        """
        state = self._snapshot()
        df = pd.DataFrame({
            "account": [a.id for a in state],
            "balance": [a.balance for a in state],
        })
        df = enforce_schema(df, ACCOUNT_SCHEMA)
        return df.sort_values("account", ignore_index=True)

    def export_accounts(self, file: str = None) -> str:
        """Write the account table as a fixed-width CSV file.

        Args:
            file (str, optional): Path of the CSV file. If None, the CSV is
                                  returned as a string.

        Returns:
            str: CSV text if `file` is None.
        """
        return write_fixed_width_csv(self.list_accounts(), file=file)

    # ----------------------------------------------------------------------
    # Dump, restore, clear

    def restore(
        self,
        configuration: dict | None = None,
        accounts: pd.DataFrame | None = None,
    ) -> None:
        """Replace configuration and/or the entire account table.

        This is a bulk administrative replacement outside the mint and transfer
        lifecycle: accounts missing from `accounts` are dropped from the ledger.
        The total supply is recomputed from the restored balances.

        Args:
            configuration (dict | None): System configuration.
                If `None`, configuration remains unchanged.
            accounts (pd.DataFrame | None): Accounts with columns 'account' and
                'balance'. If `None`, accounts remain unchanged.

        Raises:
            ValueError: If account ids are duplicated or missing, or balances
                        are missing, non-integer or negative.
        """
        state = None if accounts is None else self._state_from_accounts(accounts)
        if configuration is not None:
            self.configuration = configuration
        if state is not None:
            with self._lock:
                self._store.save(state)
            self._logger.info(
                f"Restored {len(state)} accounts with total supply "
                f"{state.total_supply} {self.symbol}."
            )

    def _state_from_accounts(self, accounts: pd.DataFrame) -> LedgerState:
        df = enforce_schema(pd.DataFrame(accounts), ACCOUNT_SCHEMA)
        if df["account"].isna().any() or (df["account"] == "").any():
            raise ValueError("Account ids must not be missing.")
        if df["balance"].isna().any():
            raise ValueError("Account balances must not be missing.")
        duplicated = df.loc[df["account"].duplicated(), "account"].unique()
        if len(duplicated):
            raise ValueError(f"Duplicate account ids: {', '.join(duplicated)}.")

        state = LedgerState()
        for account_id, balance in zip(df["account"], df["balance"]):
            if isinstance(balance, (bool, np.bool_)) or not isinstance(balance, (int, np.integer)):
                raise ValueError(f"Balance of '{account_id}' must be an integer, got {balance!r}.")
            if balance < 0:
                raise ValueError("Account balances must not be negative.")
            state.accounts[account_id] = Account(id=account_id, balance=int(balance))
        state.total_supply = sum(a.balance for a in state)
        return state

    def clear(self) -> None:
        """Replace the stored ledger by an empty one. Configuration is kept.

        Like `restore`, this is an administrative operation outside the mint
        and transfer lifecycle, which never removes an account.
        """
        with self._lock:
            self._store.save(LedgerState())

    def dump_to_zip(self, archive_path: str) -> None:
        """Dump configuration and accounts into a ZIP archive.

        Args:
            archive_path (str): The file path of the ZIP archive.
        """
        with zipfile.ZipFile(archive_path, 'w') as archive:
            archive.writestr('configuration.json', json.dumps(self.configuration))
            archive.writestr('accounts.csv', self.list_accounts().to_csv(index=False))

    def restore_from_zip(self, archive_path: str) -> None:
        """Restore configuration and accounts from a ZIP archive created by `dump_to_zip`.

        Args:
            archive_path (str): The file path of the ZIP archive to restore.

        Raises:
            FileNotFoundError: If the archive lacks a required file.
        """
        required_files = {'configuration.json', 'accounts.csv'}

        with zipfile.ZipFile(archive_path, 'r') as archive:
            missing_files = required_files - set(archive.namelist())
            if missing_files:
                raise FileNotFoundError(
                    f"Missing required files in the archive: {', '.join(sorted(missing_files))}"
                )
            configuration = json.loads(archive.open('configuration.json').read().decode('utf-8'))
            accounts = pd.read_csv(
                archive.open('accounts.csv'), dtype={"account": "string", "balance": "object"}
            )
            accounts["balance"] = accounts["balance"].map(int)

        self.restore(configuration=configuration, accounts=accounts)
