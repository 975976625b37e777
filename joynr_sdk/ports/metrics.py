"""Metrics port - Abstract interface for metrics collection.

Lets adapters count and time their work without depending on a specific
metrics backend.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any


class MetricsPort(ABC):
    """Abstract interface for metrics collection."""

    @abstractmethod
    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter metric.

        Args:
            name: The metric name (e.g., "messaging.browser.transmit")
            value: The increment value (default: 1)
        """
        ...

    @abstractmethod
    def timer(self, name: str) -> AbstractContextManager[Any]:
        """Create a context manager recording the duration of the enclosed block in ms.

        The duration is recorded whether or not the block raises.
        """
        ...

    @abstractmethod
    def get_all(self) -> dict[str, Any]:
        """Get all metrics as a dictionary."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset all metrics."""
        ...
