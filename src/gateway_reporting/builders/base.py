"""
Base query builder.

Query builders collect what the caller wants; request builders (see
``gateway_reporting.dispatch``) turn a query builder into a
``GatewayRequest``. The split lets several request builders compete for
the same query through ``can_process``.
"""

from __future__ import annotations
from abc import ABC
from typing import Any, Optional, TYPE_CHECKING

from ..runtime.errors import BuilderError

if TYPE_CHECKING:
    from ..config import GatewayConfig
    from ..dispatch.registry import RequestBuilderRegistry
    from ..request import GatewayRequest


class BaseBuilder(ABC):
    """Base class for all query builders."""

    def with_field(self, name: str, value: Any) -> BaseBuilder:
        """
        Set an arbitrary attribute that has no dedicated setter (chainable).

        Args:
            name: Attribute name, must already exist on the builder
            value: Attribute value

        Returns:
            Self for chaining

        Raises:
            BuilderError: If the builder has no such attribute
        """
        if name.startswith("_") or not hasattr(self, name):
            raise BuilderError(f"{type(self).__name__} has no field '{name}'",
                               details={"field": name})
        setattr(self, name, value)
        return self

    def build_request(self, config: GatewayConfig,
                      registry: Optional[RequestBuilderRegistry] = None) -> GatewayRequest:
        """
        Turn this query into a request descriptor.

        Args:
            config: Client configuration
            registry: Request builder registry (default registry when omitted)

        Returns:
            The request descriptor

        Raises:
            UnsupportedQueryError: If no registered request builder handles the query
        """
        if registry is None:
            from ..dispatch.registry import default_registry
            registry = default_registry()
        return registry.build_request(self, config)


__all__ = [
    "BaseBuilder",
    "BuilderError",
]
