"""Factories building messaging stubs for destination addresses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..domain.addresses import BrowserAddress, InProcessAddress
from ..domain.exceptions import InvalidArgumentError, UnsupportedAddressError
from ..ports.logger import LoggerPort
from ..ports.messaging import MessagingStub, MessagingStubFactoryPort, WebMessagingTransport
from ..ports.metrics import MetricsPort
from .browser_messaging_stub import BrowserMessagingStub
from .in_process_messaging_stub import InProcessMessagingStub


class BrowserMessagingStubFactory(MessagingStubFactoryPort):
    """Builds browser stubs that all share one web messaging transport."""

    def __init__(
        self,
        web_messaging_stub: WebMessagingTransport,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
    ):
        self._web_messaging_stub = web_messaging_stub
        self._logger = logger
        self._metrics = metrics

    def build(self, address: BrowserAddress) -> BrowserMessagingStub:
        """Create a stub delivering to ``address.window_id``."""
        if not isinstance(address, BrowserAddress):
            raise InvalidArgumentError(
                f"Expected BrowserAddress, got {type(address).__name__}", argument="address"
            )
        return BrowserMessagingStub(
            self._web_messaging_stub,
            address.window_id,
            logger=self._logger,
            metrics=self._metrics,
        )


class InProcessMessagingStubFactory(MessagingStubFactoryPort):
    """Builds stubs delivering to skeletons in the current process."""

    def build(self, address: InProcessAddress) -> InProcessMessagingStub:
        if not isinstance(address, InProcessAddress):
            raise InvalidArgumentError(
                f"Expected InProcessAddress, got {type(address).__name__}", argument="address"
            )
        return InProcessMessagingStub(address.skeleton)


class MessagingStubFactory(MessagingStubFactoryPort):
    """Selects the stub factory registered for an address's type.

    Lookup follows the address class MRO, so a factory registered for a base
    address class also serves its subclasses.
    """

    def __init__(self, factories: Mapping[type, MessagingStubFactoryPort]):
        self._factories = dict(factories)

    def build(self, address: Any) -> MessagingStub:
        for address_type in type(address).__mro__:
            factory = self._factories.get(address_type)
            if factory is not None:
                return factory.build(address)
        raise UnsupportedAddressError(address)
