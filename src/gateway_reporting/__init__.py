"""
Gateway Reporting Python SDK

Builds request descriptors for the payment gateway's reporting API:
transaction, deposit and dispute detail lookups and paged searches.
Transport, authentication and response parsing live outside this package.
"""

import logging

from .enums import (
    ReportType,
    SortDirection,
    TransactionSortProperty,
    DepositSortProperty,
    DisputeSortProperty,
    TransactionStatus,
    DepositStatus,
    DisputeStatus,
    DisputeStage,
    PaymentType,
    Channel,
    PaymentEntryMode,
    AdjustmentFunding,
    HttpVerb,
)
from .clock import Clock, SystemClock, FixedClock
from .config import (
    Environment,
    AccessTokenInfo,
    GatewayConfig,
    sandbox_config,
    production_config,
)
from .request import GatewayRequest
from .search import SearchCriteria, SearchCriteriaField
from .builders import BaseBuilder, TransactionReportBuilder
from .dispatch import (
    RequestBuilder,
    ReportRequestBuilder,
    RequestBuilderRegistry,
    default_registry,
)
from .reporting import ReportingService
from .runtime.errors import (
    ErrorCode,
    GatewayError,
    BuilderError,
    UnsupportedQueryError,
    ConfigError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    # Enums
    "ReportType",
    "SortDirection",
    "TransactionSortProperty",
    "DepositSortProperty",
    "DisputeSortProperty",
    "TransactionStatus",
    "DepositStatus",
    "DisputeStatus",
    "DisputeStage",
    "PaymentType",
    "Channel",
    "PaymentEntryMode",
    "AdjustmentFunding",
    "HttpVerb",

    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",

    # Configuration
    "Environment",
    "AccessTokenInfo",
    "GatewayConfig",
    "sandbox_config",
    "production_config",

    # Queries and requests
    "GatewayRequest",
    "SearchCriteria",
    "SearchCriteriaField",
    "BaseBuilder",
    "TransactionReportBuilder",
    "ReportingService",

    # Request builders
    "RequestBuilder",
    "ReportRequestBuilder",
    "RequestBuilderRegistry",
    "default_registry",

    # Errors
    "ErrorCode",
    "GatewayError",
    "BuilderError",
    "UnsupportedQueryError",
    "ConfigError",
]
