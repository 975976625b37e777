"""Domain layer - Value objects, QoS descriptors and exceptions."""

from .addresses import BrowserAddress, InProcessAddress
from .exceptions import (
    InvalidArgumentError,
    JoynrError,
    MessagingError,
    UnsupportedAddressError,
)
from .qos import (
    MulticastSubscriptionQos,
    OnChangeSubscriptionQos,
    OnChangeWithKeepAliveSubscriptionQos,
    SubscriptionQos,
    SubscriptionQosCapability,
    UnicastSubscriptionQos,
)
from .subscription import MulticastSubscriptionRequest

__all__ = [
    "BrowserAddress",
    "InProcessAddress",
    # Exceptions
    "InvalidArgumentError",
    "JoynrError",
    "MessagingError",
    # QoS
    "MulticastSubscriptionQos",
    # Requests
    "MulticastSubscriptionRequest",
    "OnChangeSubscriptionQos",
    "OnChangeWithKeepAliveSubscriptionQos",
    "SubscriptionQos",
    "SubscriptionQosCapability",
    "UnicastSubscriptionQos",
    "UnsupportedAddressError",
]
