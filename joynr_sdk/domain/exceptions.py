"""Domain-specific exceptions following DDD principles."""

from typing import Any


class JoynrError(Exception):
    """Base exception for all joynr SDK errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(JoynrError):
    """Raised when a value object or adapter is constructed with invalid settings."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.argument = argument
        if argument:
            self.details["argument"] = argument


class MessagingError(JoynrError):
    """Messaging layer errors raised by this library."""


class UnsupportedAddressError(MessagingError):
    """Raised when no messaging stub can be built for an address type."""

    def __init__(self, address: Any):
        address_type = type(address).__name__
        super().__init__(
            f"No messaging stub factory registered for address type '{address_type}'",
            details={"address_type": address_type},
        )
        self.address = address
