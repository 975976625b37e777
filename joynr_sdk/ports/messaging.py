"""Messaging interfaces - Port definitions for outgoing message delivery."""

from abc import ABC, abstractmethod
from typing import Any, Protocol, TypedDict


class WebMessagingParams(TypedDict):
    """Call shape handed to a web messaging transport.

    Both keys are always present; an unspecified destination window is
    sent as ``"windowId": None``.
    """

    windowId: str | None
    message: Any


class WebMessagingTransport(Protocol):
    """Transport handle delivering messages to browser windows.

    The handle is shared and owned by the caller; stubs only borrow it.
    """

    def transmit(self, params: WebMessagingParams) -> Any:
        """Deliver ``params["message"]`` to ``params["windowId"]``."""
        ...


class MessagingSkeleton(Protocol):
    """Receiving end of an in-process messaging connection."""

    def receive_message(self, message: Any) -> Any:
        """Accept a message addressed to this participant."""
        ...


class MessagingStub(ABC):
    """Per-destination adapter forwarding outgoing messages to a transport."""

    @abstractmethod
    def transmit(self, message: Any) -> Any:
        """Forward a message to the destination this stub was built for.

        Returns whatever the underlying transport returns. Transport
        failures propagate unchanged.
        """
        ...


class MessagingStubFactoryPort(ABC):
    """Abstract factory creating messaging stubs for destination addresses."""

    @abstractmethod
    def build(self, address: Any) -> MessagingStub:
        """Create a messaging stub delivering to ``address``."""
        ...
