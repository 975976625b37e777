"""Logger port used by messaging adapters."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Abstract logging interface.

    Keyword arguments carry structured context (see ``LogContext``) and are
    passed through to the backend untouched.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a routine event, such as a forwarded message."""
        ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log a failure, such as a transport error about to be re-raised."""
        ...
