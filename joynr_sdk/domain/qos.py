"""Subscription quality-of-service descriptors.

QoS values form a small compatibility hierarchy. Consumers should not depend
on a concrete class: anything that exposes an expiry date and an expiry check
satisfies ``SubscriptionQosCapability`` and is accepted wherever a QoS is
expected.
"""

from datetime import UTC, datetime
from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, model_validator

NO_EXPIRY_DATE = 0
NO_EXPIRY_DATE_TTL = 2_592_000_000  # 30 days
MAX_INTERVAL_MS = 2_592_000_000
DEFAULT_PUBLICATION_TTL_MS = 10_000
MIN_PUBLICATION_TTL_MS = 100
MAX_PUBLICATION_TTL_MS = 2_592_000_000
DEFAULT_MIN_INTERVAL_MS = 1_000
MIN_MIN_INTERVAL_MS = 0
NO_ALERT_AFTER_INTERVAL = 0


def current_time_ms() -> int:
    """Milliseconds since the epoch, UTC."""
    return int(datetime.now(UTC).timestamp() * 1000)


@runtime_checkable
class SubscriptionQosCapability(Protocol):
    """Capability set every subscription QoS must provide."""

    expiry_date_ms: int

    def is_expired(self, now_ms: int | None = None) -> bool:
        """Check whether the subscription governed by this QoS has expired."""
        ...


class SubscriptionQos(BaseModel):
    """Base subscription QoS with an absolute expiry date.

    An ``expiry_date_ms`` of ``NO_EXPIRY_DATE`` means the subscription never
    expires.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    TYPE_NAME: ClassVar[str] = "joynr.SubscriptionQos"

    expiry_date_ms: int = Field(
        default=NO_EXPIRY_DATE,
        ge=0,
        description="Absolute expiry date in ms since epoch, 0 for none",
    )

    @classmethod
    def from_validity(cls, validity_ms: int, now_ms: int | None = None, **kwargs: Any) -> Self:
        """Create a QoS expiring ``validity_ms`` from now.

        A negative validity produces a QoS without expiry date.
        """
        if validity_ms < 0:
            return cls(expiry_date_ms=NO_EXPIRY_DATE, **kwargs)
        now = current_time_ms() if now_ms is None else now_ms
        return cls(expiry_date_ms=now + validity_ms, **kwargs)

    def has_expiry_date(self) -> bool:
        """Check whether an expiry date is set."""
        return self.expiry_date_ms != NO_EXPIRY_DATE

    def is_expired(self, now_ms: int | None = None) -> bool:
        """Check whether the expiry date has passed."""
        if not self.has_expiry_date():
            return False
        now = current_time_ms() if now_ms is None else now_ms
        return now >= self.expiry_date_ms

    def validity_ms(self, now_ms: int | None = None) -> int:
        """Remaining validity in milliseconds, -1 if unbounded."""
        if not self.has_expiry_date():
            return -1
        now = current_time_ms() if now_ms is None else now_ms
        return max(self.expiry_date_ms - now, 0)


class MulticastSubscriptionQos(SubscriptionQos):
    """QoS for multicast (broadcast-style) subscriptions."""

    TYPE_NAME: ClassVar[str] = "joynr.MulticastSubscriptionQos"


class UnicastSubscriptionQos(SubscriptionQos):
    """QoS for point-to-point subscriptions, adds a publication TTL."""

    TYPE_NAME: ClassVar[str] = "joynr.UnicastSubscriptionQos"

    publication_ttl_ms: int = Field(
        default=DEFAULT_PUBLICATION_TTL_MS,
        ge=MIN_PUBLICATION_TTL_MS,
        le=MAX_PUBLICATION_TTL_MS,
        description="Time to live of each publication in ms",
    )


class OnChangeSubscriptionQos(UnicastSubscriptionQos):
    """QoS for on-change subscriptions, adds a minimum publication interval."""

    TYPE_NAME: ClassVar[str] = "joynr.OnChangeSubscriptionQos"

    min_interval_ms: int = Field(
        default=DEFAULT_MIN_INTERVAL_MS,
        ge=MIN_MIN_INTERVAL_MS,
        le=MAX_INTERVAL_MS,
        description="Minimum time between two publications in ms",
    )


class OnChangeWithKeepAliveSubscriptionQos(OnChangeSubscriptionQos):
    """On-change QoS that also publishes at least every ``max_interval_ms``.

    Out of range intervals are clamped rather than rejected: the maximum
    interval is never below the minimum interval, and a non-zero alert
    interval is never below the maximum interval.
    """

    TYPE_NAME: ClassVar[str] = "joynr.OnChangeWithKeepAliveSubscriptionQos"

    max_interval_ms: int = Field(default=DEFAULT_MIN_INTERVAL_MS, ge=0)
    alert_after_interval_ms: int = Field(default=NO_ALERT_AFTER_INTERVAL, ge=0)

    @model_validator(mode="before")
    @classmethod
    def clamp_intervals(cls, data: Any) -> Any:
        """Clamp max and alert-after intervals into their valid ranges."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        min_interval = data.get("min_interval_ms", DEFAULT_MIN_INTERVAL_MS)
        max_interval = data.get("max_interval_ms", min_interval)
        alert_after = data.get("alert_after_interval_ms", NO_ALERT_AFTER_INTERVAL)

        if not all(isinstance(v, int) for v in (min_interval, max_interval, alert_after)):
            return data  # leave type errors to field validation

        max_interval = min(max(max_interval, min_interval), MAX_INTERVAL_MS)
        alert_after = min(alert_after, MAX_INTERVAL_MS)
        if alert_after != NO_ALERT_AFTER_INTERVAL and alert_after < max_interval:
            alert_after = max_interval

        data["max_interval_ms"] = max_interval
        data["alert_after_interval_ms"] = alert_after
        return data
