"""Provides storage backends that persist complete ledger snapshots."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict
import yaml
from .errors import PersistenceError
from .ledger_state import LedgerState


class LedgerStore(ABC):
    """
    Abstract base class for ledger snapshot storage. A store reads and writes
    the full ledger wholesale; it knows nothing about the operations applied
    between a load and the following save.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._logger = logging.getLogger("ledger")

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the store holds a ledger snapshot."""

    @abstractmethod
    def _read(self) -> Dict[str, Any]:
        """Return the serialized snapshot. Only called if `exists()` is True."""

    @abstractmethod
    def _write(self, data: Dict[str, Any]) -> None:
        """Replace the stored snapshot with its serialized form `data`."""

    def load(self) -> LedgerState:
        """
        Load the stored ledger snapshot.

        Returns:
            LedgerState: The stored snapshot, or an empty ledger if the store
                         holds none.

        Raises:
            PersistenceError: If the snapshot cannot be read or decoded.
        """
        if not self.exists():
            return LedgerState()
        try:
            return LedgerState.from_dict(self._read())
        except PersistenceError:
            raise
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise PersistenceError(f"Cannot load ledger from {self}: {e}") from e

    def save(self, state: LedgerState) -> None:
        """
        Persist the complete ledger snapshot.

        Raises:
            PersistenceError: If the snapshot cannot be written.
        """
        try:
            self._write(state.to_dict())
        except PersistenceError:
            raise
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(f"Cannot save ledger to {self}: {e}") from e


class MemoryStore(LedgerStore):
    """
    Keeps the serialized snapshot in memory. Each load decodes a fresh
    snapshot, so no state is shared between successive operations.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._data = None

    def exists(self) -> bool:
        return self._data is not None

    def _read(self) -> Dict[str, Any]:
        return {**self._data, "accounts": dict(self._data["accounts"])}

    def _write(self, data: Dict[str, Any]) -> None:
        self._data = {**data, "accounts": dict(data["accounts"])}

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class YAMLFileStore(LedgerStore):
    """Stores the ledger snapshot as a single YAML document.

    The file is rewritten atomically: the snapshot goes to a temporary file in
    the same directory, which then replaces the target. Readers therefore see
    either the previous or the new snapshot, never a partial one.
    """

    def __init__(self, path: Path, *args, **kwargs):
        """Initialize the YAMLFileStore.

        Args:
            path (Path): Path to the YAML file holding the snapshot.
        """
        super().__init__(*args, **kwargs)
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def _read(self) -> Dict[str, Any]:
        with open(self._path, "r") as f:
            data = yaml.safe_load(f)
        if data is None:
            raise PersistenceError(f"Ledger file is empty: {self._path}")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def __repr__(self):
        return f"{self.__class__.__name__}('{self._path}')"
