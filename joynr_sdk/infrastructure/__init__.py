"""Infrastructure layer - Concrete implementations of ports."""

from .browser_messaging_stub import BrowserMessagingStub
from .config import BrowserMessagingStubConfig, LogContext
from .in_memory_metrics import InMemoryMetrics
from .in_process_messaging_stub import InProcessMessagingStub
from .messaging_stub_factory import (
    BrowserMessagingStubFactory,
    InProcessMessagingStubFactory,
    MessagingStubFactory,
)
from .simple_logger import SimpleLogger

__all__ = [
    "BrowserMessagingStub",
    "BrowserMessagingStubConfig",
    "BrowserMessagingStubFactory",
    "InMemoryMetrics",
    "InProcessMessagingStub",
    "InProcessMessagingStubFactory",
    "LogContext",
    "MessagingStubFactory",
    "SimpleLogger",
]
