"""Tests for subscription QoS descriptors."""

import pytest
from pydantic import ValidationError

from joynr_sdk.domain.qos import (
    DEFAULT_MIN_INTERVAL_MS,
    DEFAULT_PUBLICATION_TTL_MS,
    MAX_INTERVAL_MS,
    NO_ALERT_AFTER_INTERVAL,
    NO_EXPIRY_DATE,
    MulticastSubscriptionQos,
    OnChangeSubscriptionQos,
    OnChangeWithKeepAliveSubscriptionQos,
    SubscriptionQos,
    SubscriptionQosCapability,
    UnicastSubscriptionQos,
)


class TestSubscriptionQos:
    """Test cases for the base QoS and its expiry logic."""

    def test_defaults_to_no_expiry(self):
        """Test that a default QoS never expires."""
        qos = SubscriptionQos()
        assert qos.expiry_date_ms == NO_EXPIRY_DATE
        assert qos.has_expiry_date() is False
        assert qos.is_expired(now_ms=10**15) is False
        assert qos.validity_ms(now_ms=0) == -1

    def test_is_expired(self):
        """Test expiry at and after the expiry date."""
        qos = SubscriptionQos(expiry_date_ms=5000)
        assert qos.is_expired(now_ms=4999) is False
        assert qos.is_expired(now_ms=5000) is True
        assert qos.is_expired(now_ms=6000) is True

    def test_is_expired_uses_current_time(self):
        """Test that an expiry date in the past is detected without now_ms."""
        assert SubscriptionQos(expiry_date_ms=1).is_expired() is True

    def test_from_validity(self):
        """Test creation from a relative validity."""
        qos = MulticastSubscriptionQos.from_validity(1000, now_ms=5000)
        assert isinstance(qos, MulticastSubscriptionQos)
        assert qos.expiry_date_ms == 6000
        assert qos.validity_ms(now_ms=5500) == 500
        assert qos.validity_ms(now_ms=7000) == 0

    def test_from_negative_validity(self):
        """Test that a negative validity means no expiry."""
        qos = SubscriptionQos.from_validity(-1, now_ms=5000)
        assert qos.expiry_date_ms == NO_EXPIRY_DATE

    def test_from_validity_passes_extra_fields(self):
        """Test that subclass fields can be set through from_validity."""
        qos = OnChangeSubscriptionQos.from_validity(100, now_ms=0, min_interval_ms=50)
        assert qos.expiry_date_ms == 100
        assert qos.min_interval_ms == 50

    def test_negative_expiry_rejected(self):
        """Test that the expiry date cannot be negative."""
        with pytest.raises(ValidationError):
            SubscriptionQos(expiry_date_ms=-1)

    def test_strict_types(self):
        """Test that numeric strings are not coerced."""
        with pytest.raises(ValidationError):
            SubscriptionQos(expiry_date_ms="1000")

    def test_frozen(self):
        """Test that QoS values are immutable."""
        qos = SubscriptionQos(expiry_date_ms=1)
        with pytest.raises(ValidationError):
            qos.expiry_date_ms = 2

    def test_equality_by_value(self):
        """Test value equality."""
        assert MulticastSubscriptionQos(expiry_date_ms=1) == MulticastSubscriptionQos(
            expiry_date_ms=1
        )
        assert MulticastSubscriptionQos(expiry_date_ms=1) != MulticastSubscriptionQos(
            expiry_date_ms=2
        )


class TestQosCapability:
    """Test cases for the capability protocol."""

    @pytest.mark.parametrize(
        "qos_class",
        [
            SubscriptionQos,
            MulticastSubscriptionQos,
            UnicastSubscriptionQos,
            OnChangeSubscriptionQos,
            OnChangeWithKeepAliveSubscriptionQos,
        ],
    )
    def test_hierarchy_implements_capability(self, qos_class):
        """Test that every QoS class satisfies the capability protocol."""
        assert isinstance(qos_class(), SubscriptionQosCapability)

    @pytest.mark.parametrize("value", [1000, "qos", {"expiry_date_ms": 1}, None])
    def test_non_qos_values_do_not_implement_capability(self, value):
        """Test that plain values are not QoS."""
        assert not isinstance(value, SubscriptionQosCapability)

    def test_on_change_is_not_multicast(self):
        """Test that the legacy on-change QoS is a sibling, not a multicast QoS."""
        assert not isinstance(OnChangeSubscriptionQos(), MulticastSubscriptionQos)

    def test_type_names(self):
        """Test wire type names."""
        assert MulticastSubscriptionQos.TYPE_NAME == "joynr.MulticastSubscriptionQos"
        assert OnChangeSubscriptionQos.TYPE_NAME == "joynr.OnChangeSubscriptionQos"


class TestUnicastAndOnChangeQos:
    """Test cases for publication TTL and minimum interval bounds."""

    def test_defaults(self):
        """Test default values."""
        qos = OnChangeSubscriptionQos()
        assert qos.publication_ttl_ms == DEFAULT_PUBLICATION_TTL_MS
        assert qos.min_interval_ms == DEFAULT_MIN_INTERVAL_MS

    @pytest.mark.parametrize("ttl", [99, MAX_INTERVAL_MS + 1])
    def test_publication_ttl_bounds(self, ttl):
        """Test publication TTL range."""
        with pytest.raises(ValidationError):
            UnicastSubscriptionQos(publication_ttl_ms=ttl)

    @pytest.mark.parametrize("interval", [-1, MAX_INTERVAL_MS + 1])
    def test_min_interval_bounds(self, interval):
        """Test minimum interval range."""
        with pytest.raises(ValidationError):
            OnChangeSubscriptionQos(min_interval_ms=interval)


class TestOnChangeWithKeepAliveSubscriptionQos:
    """Test cases for keep-alive interval clamping."""

    def test_defaults(self):
        """Test that max interval defaults to min interval and no alert is set."""
        qos = OnChangeWithKeepAliveSubscriptionQos(min_interval_ms=200)
        assert qos.max_interval_ms == 200
        assert qos.alert_after_interval_ms == NO_ALERT_AFTER_INTERVAL

    def test_max_interval_raised_to_min_interval(self):
        """Test that max interval is never below min interval."""
        qos = OnChangeWithKeepAliveSubscriptionQos(min_interval_ms=500, max_interval_ms=100)
        assert qos.max_interval_ms == 500

    def test_max_interval_capped(self):
        """Test the upper bound of the max interval."""
        qos = OnChangeWithKeepAliveSubscriptionQos(max_interval_ms=MAX_INTERVAL_MS + 10)
        assert qos.max_interval_ms == MAX_INTERVAL_MS

    def test_alert_after_raised_to_max_interval(self):
        """Test that a non-zero alert interval is never below max interval."""
        qos = OnChangeWithKeepAliveSubscriptionQos(
            max_interval_ms=2000, alert_after_interval_ms=1000
        )
        assert qos.alert_after_interval_ms == 2000

    def test_alert_after_capped(self):
        """Test the upper bound of the alert interval."""
        qos = OnChangeWithKeepAliveSubscriptionQos(alert_after_interval_ms=MAX_INTERVAL_MS * 2)
        assert qos.alert_after_interval_ms == MAX_INTERVAL_MS

    def test_zero_alert_after_kept(self):
        """Test that zero disables the alert and is not clamped."""
        qos = OnChangeWithKeepAliveSubscriptionQos(max_interval_ms=2000, alert_after_interval_ms=0)
        assert qos.alert_after_interval_ms == 0

    def test_wrong_type_rejected(self):
        """Test that type errors are still reported."""
        with pytest.raises(ValidationError):
            OnChangeWithKeepAliveSubscriptionQos(max_interval_ms="2000")
