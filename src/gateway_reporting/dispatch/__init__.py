"""Request builders that turn report queries into request descriptors"""

from .base import RequestBuilder
from .report_request_builder import ReportRequestBuilder
from .registry import RequestBuilderRegistry, default_registry

__all__ = [
    "RequestBuilder",
    "ReportRequestBuilder",
    "RequestBuilderRegistry",
    "default_registry",
]
