"""Logger adapter backed by the standard ``logging`` module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SimpleLogger(LoggerPort):
    """LoggerPort writing to a named stdlib logger.

    The logger's level belongs to the application. It is only changed when a
    level is passed explicitly, so building stubs never hides records an
    application asked for. A console handler is attached only when no handler
    would otherwise receive the records.
    """

    def __init__(self, name: str = "joynr_sdk", level: int | None = None):
        """Initialize the logger.

        Args:
            name: Logger name (default: "joynr_sdk")
            level: Level to set on the logger; None keeps the configured one
        """
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)

        if not self._logger.hasHandlers():
            console = logging.StreamHandler()
            console.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(console)

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        # Context keys become attributes of the LogRecord.
        self._logger.log(level, message, extra=context)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)
