"""Module defining a class for capturing log messages."""

import logging
from typing import List


class LogCollector:
    """
    Collects formatted log messages emitted on a log channel at or above a
    given level, e.g. to report warnings raised while restoring a ledger.
    """

    def __init__(self, channel: str = "ledger", level: int = logging.WARNING,
                 keep_console_output: bool = False):
        """
        Initializes the LogCollector.

        Args:
            channel (str): The name of the logger to collect messages from.
                Defaults to the ledger channel.
            level (int): The logging level threshold (e.g., logging.WARNING).
            keep_console_output (bool): If True and the logger has no handler
                yet, a console handler is attached so messages are still printed.
        """
        self._collected_logs: List[str] = []
        self._logger = logging.getLogger(channel)

        collected = self._collected_logs

        class CollectLogsHandler(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                collected.append(self.format(record))

        if keep_console_output and not self._logger.hasHandlers():
            console = logging.StreamHandler()
            console.setLevel(level)
            self._logger.addHandler(console)

        self._handler = CollectLogsHandler()
        self._handler.setLevel(level)
        self._handler.setFormatter(logging.Formatter())
        self._logger.addHandler(self._handler)

    @property
    def logs(self) -> List[str]:
        """
        Retrieves the collected log messages.

        Returns:
            List[str]: The collected log messages.
        """
        return self._collected_logs

    def clear(self) -> None:
        self._collected_logs.clear()

    def close(self) -> None:
        """Detach from the log channel; already collected messages are kept."""
        self._logger.removeHandler(self._handler)
