"""This module implements the MemoryLedger class."""

from .constants import DEFAULT_CONFIGURATION
from .ledger_engine import LedgerEngine
from .ledger_store import LedgerStore, MemoryStore


class MemoryLedger(LedgerEngine):
    """
    MemoryLedger is a full-featured but non-persistent token ledger. The ledger
    snapshot and the configuration live in memory, which makes it particularly
    useful for demonstration and testing purposes.
    """

    def __init__(self, store: LedgerStore | None = None, configuration: dict | None = None):
        """Initialize the MemoryLedger.

        Args:
            store (LedgerStore, optional): Snapshot storage. Defaults to a new MemoryStore.
            configuration (dict, optional): System configuration.
                Defaults to DEFAULT_CONFIGURATION.
        """
        super().__init__(store=MemoryStore() if store is None else store)
        self._configuration = self.standardize_configuration(
            DEFAULT_CONFIGURATION if configuration is None else configuration
        )

    # ----------------------------------------------------------------------
    # Configuration

    @property
    def configuration(self) -> dict:
        return self._configuration.copy()

    @configuration.setter
    def configuration(self, configuration: dict):
        self._configuration = self.standardize_configuration(configuration)
