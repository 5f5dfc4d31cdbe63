"""Request builder interface."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..config import GatewayConfig
from ..request import GatewayRequest


class RequestBuilder(ABC):
    """
    Turns a query builder into a ``GatewayRequest``.

    ``build_request`` returns None for queries the request builder does not
    handle, which lets a registry fall through to the next one.
    """

    @classmethod
    @abstractmethod
    def can_process(cls, builder: Any) -> bool:
        """Whether this request builder accepts the given query builder."""
        pass

    @abstractmethod
    def build_request(self, builder: Any, config: GatewayConfig) -> Optional[GatewayRequest]:
        """Build the request descriptor, or None if the query is not handled."""
        pass


__all__ = [
    "RequestBuilder",
]
