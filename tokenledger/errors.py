"""Exceptions raised by the token ledger."""


class LedgerError(Exception):
    """Base class for all errors raised by the token ledger."""


class AccountNotFoundError(LedgerError, KeyError):
    """The source account of a transfer has never been recorded."""

    def __init__(self, account_id: str):
        super().__init__(account_id)
        self.account_id = account_id

    def __str__(self):
        return f"Account '{self.account_id}' not found."


class InsufficientBalanceError(LedgerError, ValueError):
    """The source account of a transfer holds less than the requested amount."""

    def __init__(self, account_id: str, balance: int, amount: int):
        super().__init__(
            f"Insufficient balance in account '{account_id}': "
            f"{balance} available, {amount} requested."
        )
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


class InvalidAmountError(LedgerError, ValueError):
    """An amount is not an integer within the ledger's balance width."""


class PersistenceError(LedgerError):
    """The ledger snapshot could not be read from or written to its store."""


class LedgerAlreadyInitializedError(LedgerError):
    """initialize() was called on a store that already holds a ledger."""
