"""Subscription request value objects."""

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidArgumentError
from .qos import SubscriptionQosCapability


def _to_invalid_argument(model: str, error: PydanticValidationError) -> InvalidArgumentError:
    """Convert a pydantic validation failure into an InvalidArgumentError."""
    errors = error.errors(include_url=False)
    argument = None
    if errors and errors[0].get("loc"):
        argument = str(errors[0]["loc"][0])
    return InvalidArgumentError(
        f"Invalid settings for {model}: {error.error_count()} validation error(s)",
        argument=argument,
        details={"errors": errors},
    )


class MulticastSubscriptionRequest(BaseModel):
    """Request to receive events published under a multicast id.

    Instances are immutable and always valid: every construction path
    (keyword arguments or ``from_settings``) raises ``InvalidArgumentError``
    instead of producing a partially initialised request.

    The QoS is optional and polymorphic. Any value implementing
    ``SubscriptionQosCapability`` is accepted, which keeps older on-change
    QoS objects working for multicast subscriptions. When omitted it stays
    ``None``; defaulting is left to the subscription layer.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "multicastId": "providerParticipantId/weakSignal",
                "subscribedToName": "weakSignal",
                "subscriptionId": "123e4567-e89b-12d3-a456-426614174000",
            }
        },
    )

    TYPE_NAME: ClassVar[str] = "joynr.MulticastSubscriptionRequest"

    multicast_id: str = Field(..., alias="multicastId", min_length=1)
    subscribed_to_name: str = Field(..., alias="subscribedToName")
    subscription_id: str = Field(..., alias="subscriptionId", min_length=1)
    qos: Any = Field(default=None, description="Subscription QoS, None if not given")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise _to_invalid_argument(type(self).__name__, e) from e

    @field_validator("qos")
    @classmethod
    def validate_qos(cls, v: Any) -> Any:
        """Accept only values providing the subscription QoS capability set."""
        if v is not None and not isinstance(v, SubscriptionQosCapability):
            raise ValueError(
                f"qos must provide expiry_date_ms and is_expired(), got {type(v).__name__}"
            )
        return v

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None) -> "MulticastSubscriptionRequest":
        """Build a request from a settings record.

        Args:
            settings: Mapping with ``multicastId``, ``subscribedToName``,
                ``subscriptionId`` and optionally ``qos``. Snake case keys
                are accepted as well.

        Raises:
            InvalidArgumentError: If settings is not a mapping, a required
                field is missing or not a non-empty string, or qos is not a
                subscription QoS.
        """
        if not isinstance(settings, Mapping):
            raise InvalidArgumentError(
                f"{cls.__name__} settings must be a mapping, got {type(settings).__name__}",
                argument="settings",
            )
        try:
            return cls.model_validate(dict(settings))
        except PydanticValidationError as e:
            raise _to_invalid_argument(cls.__name__, e) from e

    def is_expired(self, now_ms: int | None = None) -> bool:
        """Check whether the request's QoS has expired. Requests without QoS never expire."""
        return self.qos is not None and self.qos.is_expired(now_ms)
