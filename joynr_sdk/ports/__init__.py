"""Ports layer - Interfaces for external communication."""

from .logger import LoggerPort
from .messaging import (
    MessagingSkeleton,
    MessagingStub,
    MessagingStubFactoryPort,
    WebMessagingParams,
    WebMessagingTransport,
)
from .metrics import MetricsPort

__all__ = [
    "LoggerPort",
    "MessagingSkeleton",
    "MessagingStub",
    "MessagingStubFactoryPort",
    "MetricsPort",
    "WebMessagingParams",
    "WebMessagingTransport",
]
