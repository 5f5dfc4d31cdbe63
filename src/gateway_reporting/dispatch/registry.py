"""
Request builder registry.

Holds the request builders in priority order and picks the first one that
accepts a query and returns a descriptor for it.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, List, Optional

from ..config import GatewayConfig
from ..request import GatewayRequest
from ..runtime.errors import UnsupportedQueryError
from .base import RequestBuilder
from .report_request_builder import ReportRequestBuilder

logger = logging.getLogger(__name__)


class RequestBuilderRegistry:
    """Ordered collection of request builders."""

    def __init__(self, builders: Optional[Iterable[RequestBuilder]] = None):
        """
        Args:
            builders: Request builders in priority order
                (defaults to a single ``ReportRequestBuilder``)
        """
        self._builders: List[RequestBuilder] = (
            list(builders) if builders is not None else [ReportRequestBuilder()]
        )

    @property
    def builders(self) -> List[RequestBuilder]:
        return list(self._builders)

    def register(self, builder: RequestBuilder) -> None:
        """
        Register a request builder after the existing ones.

        Args:
            builder: Request builder instance
        """
        self._builders.append(builder)

    def build_request(self, query: Any, config: GatewayConfig) -> GatewayRequest:
        """
        Build a request descriptor with the first request builder that handles the query.

        Args:
            query: Query builder
            config: Client configuration

        Returns:
            Request descriptor

        Raises:
            UnsupportedQueryError: If no registered request builder handles the query
        """
        for builder in self._builders:
            if not builder.can_process(query):
                continue
            request = builder.build_request(query, config)
            if request is not None:
                logger.debug(f"{type(builder).__name__} built {request.verb.value} {request.endpoint}")
                return request

        details = {"query_type": type(query).__name__}
        report_type = getattr(query, "report_type", None)
        if report_type is not None:
            details["report_type"] = getattr(report_type, "value", report_type)
        logger.warning(f"No request builder for {details}")
        raise UnsupportedQueryError(details=details)


_default_registry: Optional[RequestBuilderRegistry] = None


def default_registry() -> RequestBuilderRegistry:
    """Process-wide registry used when a query is built without an explicit one."""
    global _default_registry
    if _default_registry is None:
        _default_registry = RequestBuilderRegistry()
    return _default_registry


__all__ = [
    "RequestBuilderRegistry",
    "default_registry",
]
