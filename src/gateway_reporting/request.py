"""
Request descriptor produced by the request builders.

A ``GatewayRequest`` says what to call (endpoint, verb, body, query
parameters) without calling it. Query parameters use ``None`` to mark an
absent filter; the transport must drop those keys before encoding, which
``compact_query_params`` and ``to_requests`` do.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from .enums import HttpVerb


@dataclass(frozen=True)
class GatewayRequest:
    """Endpoint, verb, body and query parameters for one reporting call."""

    TRANSACTION_ENDPOINT = "transactions"
    DEPOSITS_ENDPOINT = "deposits"
    SETTLEMENT_TRANSACTIONS_ENDPOINT = "settlementTransactions"
    DISPUTES_ENDPOINT = "disputes"
    SETTLEMENT_DISPUTES_ENDPOINT = "settlementDisputes"

    endpoint: str
    verb: HttpVerb = HttpVerb.GET
    body: Optional[Any] = None
    query_params: Dict[str, Any] = field(default_factory=dict)

    def compact_query_params(self) -> Dict[str, Any]:
        """Query parameters with absent (None) values removed, order preserved."""
        return {key: value for key, value in self.query_params.items() if value is not None}

    def query_string(self) -> str:
        """URL-encoded query string built from the compacted parameters."""
        return urlencode(self.compact_query_params())

    def path(self) -> str:
        """Endpoint with its query string appended, if there is one."""
        qs = self.query_string()
        return f"{self.endpoint}?{qs}" if qs else self.endpoint

    def to_requests(self, base_url: str, headers: Optional[Mapping[str, str]] = None) -> requests.Request:
        """
        Build an unprepared ``requests.Request`` for this descriptor.

        Nothing is sent; the caller's transport prepares the request,
        attaches authentication and issues it.

        Args:
            base_url: Service URL the endpoint is relative to
            headers: Optional headers to attach

        Returns:
            requests.Request with None-valued parameters dropped
        """
        url = f"{base_url.rstrip('/')}/{self.endpoint.lstrip('/')}"
        return requests.Request(
            method=self.verb.value,
            url=url,
            headers=dict(headers or {}),
            params=self.compact_query_params(),
            json=self.body,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (absent parameters included)."""
        return {
            "endpoint": self.endpoint,
            "verb": self.verb.value,
            "body": self.body,
            "query_params": dict(self.query_params),
        }


__all__ = [
    "GatewayRequest",
]
