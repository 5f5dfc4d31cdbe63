"""
Shared fixtures for the gateway reporting tests.

- A clock pinned to a known date so the transaction searches' default end
  date is reproducible
- Configurations with and without a resolved data account
"""
from datetime import date

import pytest

from gateway_reporting import (
    AccessTokenInfo,
    FixedClock,
    GatewayConfig,
    ReportRequestBuilder,
)

FIXED_TODAY = date(2024, 6, 1)


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-06-01."""
    return FixedClock(FIXED_TODAY)


@pytest.fixture
def request_builder(fixed_clock):
    """Report request builder using the fixed clock."""
    return ReportRequestBuilder(clock=fixed_clock)


@pytest.fixture
def config():
    """Sandbox configuration whose token resolved to data account 'acct-1'."""
    return GatewayConfig(
        app_id="test-app-id",
        app_key="test-app-key",
        access_token_info=AccessTokenInfo(token="tok", data_account_name="acct-1"),
    )


@pytest.fixture
def config_without_token():
    """Configuration with no resolved access token."""
    return GatewayConfig(app_id="test-app-id", app_key="test-app-key")
