"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from joynr_sdk.domain.qos import MulticastSubscriptionQos, OnChangeSubscriptionQos


@pytest.fixture
def mock_web_messaging_stub():
    """Create a mock web messaging transport."""
    mock = MagicMock()
    mock.transmit = MagicMock()
    return mock


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock()
    mock.debug = MagicMock()
    mock.error = MagicMock()
    return mock


@pytest.fixture
def multicast_qos():
    """Multicast QoS expiring shortly after the epoch."""
    return MulticastSubscriptionQos(expiry_date_ms=1)


@pytest.fixture
def on_change_qos():
    """Legacy on-change QoS with the same expiry."""
    return OnChangeSubscriptionQos(expiry_date_ms=1)


@pytest.fixture
def request_settings(multicast_qos):
    """Valid multicast subscription request settings."""
    return {
        "multicastId": "multicastId",
        "subscribedToName": "multicastName",
        "subscriptionId": "testSubscriptionId",
        "qos": multicast_qos,
    }
