"""
Client configuration for the gateway reporting API.

Configuration is plain data: credentials, the target environment and the
account scope resolved from the caller's access token. Token acquisition
itself happens outside this package; callers hand the result in as an
``AccessTokenInfo``.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .runtime.errors import ConfigError

PACKAGE_LOGGER = "gateway_reporting"


class Environment(str, Enum):
    """Gateway environment enumeration"""
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def service_url(self) -> str:
        """Base URL of the reporting API for this environment."""
        return SERVICE_URLS[self]

    @classmethod
    def from_name(cls, name: Union[str, Environment]) -> Environment:
        """Resolve an environment from its name (case-insensitive)."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            raise ConfigError(
                f"Unknown environment: {name}",
                details={"allowed": [env.value for env in cls]},
                cause=e,
            )


SERVICE_URLS = {
    Environment.SANDBOX: "https://apis.sandbox.globalpay.com/ucp",
    Environment.PRODUCTION: "https://apis.globalpay.com/ucp",
}


@dataclass
class AccessTokenInfo:
    """Account scope resolved from an access token."""

    token: Optional[str] = None
    data_account_name: Optional[str] = None
    dispute_management_account_name: Optional[str] = None
    transaction_processing_account_name: Optional[str] = None
    merchant_id: Optional[str] = None


@dataclass
class GatewayConfig:
    """Configuration for the gateway reporting client."""

    app_id: Optional[str] = None
    app_key: Optional[str] = None
    environment: Environment = Environment.SANDBOX
    channel: Optional[str] = None
    country: str = "US"
    access_token_info: Optional[AccessTokenInfo] = None
    debug: bool = False
    user_agent: str = "gateway-reporting-python/1.0.0"
    api_version: str = "2021-03-22"
    extra_headers: dict = field(default_factory=dict)

    def __post_init__(self):
        self.environment = Environment.from_name(self.environment)
        if self.debug:
            logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    @property
    def service_url(self) -> str:
        return self.environment.service_url

    @property
    def data_account_name(self) -> Optional[str]:
        """Data account name from the access token, if one has been resolved."""
        if self.access_token_info is None:
            return None
        return self.access_token_info.data_account_name

    def default_headers(self) -> dict:
        """Headers every reporting request carries, before authentication."""
        headers = {
            "User-Agent": self.user_agent,
            "X-GP-Version": self.api_version,
            "Accept": "application/json",
        }
        headers.update(self.extra_headers)
        return headers


def sandbox_config(app_id: Optional[str] = None, app_key: Optional[str] = None,
                   data_account_name: Optional[str] = None, **kwargs) -> GatewayConfig:
    """Create a sandbox configuration."""
    token_info = AccessTokenInfo(data_account_name=data_account_name) if data_account_name else None
    return GatewayConfig(app_id=app_id, app_key=app_key, environment=Environment.SANDBOX,
                         access_token_info=token_info, **kwargs)


def production_config(app_id: Optional[str] = None, app_key: Optional[str] = None,
                      data_account_name: Optional[str] = None, **kwargs) -> GatewayConfig:
    """Create a production configuration."""
    token_info = AccessTokenInfo(data_account_name=data_account_name) if data_account_name else None
    return GatewayConfig(app_id=app_id, app_key=app_key, environment=Environment.PRODUCTION,
                         access_token_info=token_info, **kwargs)


__all__ = [
    "Environment",
    "SERVICE_URLS",
    "AccessTokenInfo",
    "GatewayConfig",
    "sandbox_config",
    "production_config",
]
