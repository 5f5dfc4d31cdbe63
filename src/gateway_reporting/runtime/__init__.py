"""Runtime helpers for the gateway reporting SDK"""

from .errors import (
    ErrorCode,
    GatewayError,
    BuilderError,
    UnsupportedQueryError,
    ConfigError,
)

__all__ = [
    "ErrorCode",
    "GatewayError",
    "BuilderError",
    "UnsupportedQueryError",
    "ConfigError",
]
