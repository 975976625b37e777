"""joynr SDK - Multicast subscription requests and messaging stubs."""

from .domain.subscription import MulticastSubscriptionRequest
from .infrastructure.browser_messaging_stub import BrowserMessagingStub

__all__ = ["BrowserMessagingStub", "MulticastSubscriptionRequest"]
__version__ = "0.1.0"
