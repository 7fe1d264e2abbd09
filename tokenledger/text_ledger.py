"""This module defines TextLedger, a token ledger storing its data in text files."""

from pathlib import Path
import yaml
from .constants import DEFAULT_CONFIGURATION
from .decorators import timed_cache
from .ledger_engine import LedgerEngine
from .ledger_store import YAMLFileStore


class TextLedger(LedgerEngine):
    """
    Token ledger storing data in YAML text files.

    Files are laid out below a root directory:
        - `ledger.yml`: the ledger snapshot with all account balances and the
          total supply, rewritten atomically by every mutating operation.
        - `settings/configuration.yml`: the system configuration.

    Both files are human-readable and lend themselves to version control.
    """

    def __init__(self, root: Path = Path.cwd()):
        """Initializes the TextLedger with a root path for file storage.
        If no root path is provided, defaults to the current working directory.
        """
        self.root = Path(root).expanduser()
        super().__init__(store=YAMLFileStore(self.root / "ledger.yml"))
        settings_dir = self.root / "settings"
        settings_dir.mkdir(parents=True, exist_ok=True)

    # ----------------------------------------------------------------------
    # Configuration

    @property
    def configuration_file(self) -> Path:
        return self.root / "settings/configuration.yml"

    @property
    @timed_cache(120)
    def configuration(self) -> dict:
        """Configuration read from `<root>/settings/configuration.yml`.

        Results are cached for two minutes in a cache shared by all TextLedger
        instances and keyed on the instance, so the cache holds a reference to
        every instance that read its configuration. Setting the configuration
        on any instance clears the cache for all of them.
        """
        return self.read_configuration_file(self.configuration_file).copy()

    @configuration.setter
    def configuration(self, configuration: dict):
        """Save configuration to a YAML file.

        Stores the system configuration, such as the token symbol, to
        `<root>/settings/configuration.yml`.

        Args:
            configuration (dict): A dictionary containing the system configuration to be saved.
        """
        configuration = self.standardize_configuration(configuration)
        with open(self.configuration_file, "w") as f:
            yaml.safe_dump(configuration, f, default_flow_style=False)
        self.__class__.configuration.fget.cache_clear()

    def read_configuration_file(self, file: Path) -> dict:
        """Read configuration from the specified file.

        If the configuration file does not exist, DEFAULT_CONFIGURATION is
        returned. The system thus continues running even if the <root>
        directory is empty, which is useful for testing and demonstration
        purposes.

        Args:
            file (Path): The path to the configuration file.

        Returns:
            dict: Standardized system configuration.
        """
        if file.exists():
            with open(file, "r") as f:
                result = yaml.safe_load(f) or {}
        else:
            self._logger.warning("configuration file missing, reverting to default configuration.")
            result = DEFAULT_CONFIGURATION

        return self.standardize_configuration(result)
