"""This module defines the in-memory snapshot of a token ledger: accounts with
balances and the total supply, together with the mutations that keep both
consistent.

A snapshot is short-lived. The engine loads one from its store at the start of
each operation, mutates it and hands it back to the store. Snapshots never
leave the engine; queries return plain integers or copies.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

from .constants import STATE_FORMAT_VERSION
from .errors import AccountNotFoundError, InsufficientBalanceError


@dataclass
class Account:
    id: str
    balance: int = 0


@dataclass
class LedgerState:
    """Snapshot of all accounts and the total token supply.

    Invariants after every completed mutation:
        - `total_supply` equals the sum of all account balances.
        - No account balance is negative.
        - An identifier without a recorded account has an implicit balance of 0.
    """

    accounts: Dict[str, Account] = field(default_factory=dict)
    total_supply: int = 0

    # ----------------------------------------------------------------------
    # Accounts

    def get_or_create(self, account_id: str) -> Account:
        """Return the account for `account_id`, recording a zero-balance account if absent."""
        if account_id not in self.accounts:
            self.accounts[account_id] = Account(id=account_id, balance=0)
        return self.accounts[account_id]

    def balance_of(self, account_id: str) -> int:
        account = self.accounts.get(account_id)
        return 0 if account is None else account.balance

    def __contains__(self, account_id: str) -> bool:
        return account_id in self.accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts.values())

    def __len__(self) -> int:
        return len(self.accounts)

    # ----------------------------------------------------------------------
    # Mutations

    def mint(self, account_id: str, amount: int) -> None:
        """Issue `amount` new tokens to `account_id`, creating the account if needed."""
        account = self.get_or_create(account_id)
        account.balance += amount
        self.total_supply += amount

    def transfer(self, from_id: str, to_id: str, amount: int) -> None:
        """Move `amount` tokens from `from_id` to `to_id`.

        The snapshot is left untouched when the transfer is rejected. Transfers
        to the sending account are not special-cased: the debit and the credit
        apply to the same record one after the other.

        Raises:
            AccountNotFoundError: If `from_id` has no recorded account, even
                                  when `amount` is zero.
            InsufficientBalanceError: If the balance of `from_id` is below `amount`.
        """
        sender = self.accounts.get(from_id)
        if sender is None:
            raise AccountNotFoundError(from_id)
        if sender.balance < amount:
            raise InsufficientBalanceError(from_id, sender.balance, amount)
        sender.balance -= amount
        receiver = self.get_or_create(to_id)
        receiver.balance += amount

    def verify(self) -> None:
        """Check the snapshot invariants.

        Raises:
            ValueError: If a balance is negative or the total supply differs
                        from the sum of balances.
        """
        negative = sorted(a.id for a in self if a.balance < 0)
        if negative:
            raise ValueError(f"Negative balance in accounts: {', '.join(negative)}.")
        total = sum(a.balance for a in self)
        if total != self.total_supply:
            raise ValueError(
                f"Total supply {self.total_supply} differs from sum of balances {total}."
            )

    # ----------------------------------------------------------------------
    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": STATE_FORMAT_VERSION,
            "total_supply": self.total_supply,
            "accounts": {a.id: a.balance for a in self},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LedgerState":
        """Rebuild a snapshot from its serialized form.

        Args:
            data (dict): Mapping with items 'version', 'total_supply' and 'accounts',
                         as produced by `to_dict()`.

        Returns:
            LedgerState: The decoded and verified snapshot.

        Raises:
            ValueError: If the format version is unsupported, entries have invalid
                        types, or the decoded snapshot violates the invariants.
        """
        if not isinstance(data, dict):
            raise ValueError("Serialized ledger must be a mapping.")
        version = data.get("version")
        if version != STATE_FORMAT_VERSION:
            raise ValueError(f"Unsupported ledger format version: {version!r}.")

        total_supply = data.get("total_supply")
        if not _is_int(total_supply):
            raise ValueError("Missing/invalid 'total_supply' in serialized ledger.")
        accounts = data.get("accounts") or {}
        if not isinstance(accounts, dict):
            raise ValueError("'accounts' must be a mapping of account ids to balances.")

        state = cls(total_supply=int(total_supply))
        for account_id, balance in accounts.items():
            if not isinstance(account_id, str):
                raise ValueError(f"Account id must be a string, got {account_id!r}.")
            if not _is_int(balance):
                raise ValueError(f"Invalid balance for account '{account_id}': {balance!r}.")
            state.accounts[account_id] = Account(id=account_id, balance=int(balance))
        state.verify()
        return state


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)
