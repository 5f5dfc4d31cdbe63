"""
Tests for the GatewayRequest descriptor and its transport helpers.
"""

import dataclasses

import pytest
import requests

from gateway_reporting import GatewayRequest, HttpVerb


@pytest.fixture
def paged_request():
    return GatewayRequest(
        GatewayRequest.DEPOSITS_ENDPOINT,
        HttpVerb.GET,
        None,
        {"page": 1, "page_size": 10, "account_name": None, "system.mid": "MID 1", "amount": None},
    )


class TestGatewayRequest:
    """Tests for GatewayRequest."""

    def test_endpoint_constants(self):
        assert GatewayRequest.TRANSACTION_ENDPOINT == "transactions"
        assert GatewayRequest.DEPOSITS_ENDPOINT == "deposits"
        assert GatewayRequest.SETTLEMENT_TRANSACTIONS_ENDPOINT == "settlementTransactions"
        assert GatewayRequest.DISPUTES_ENDPOINT == "disputes"
        assert GatewayRequest.SETTLEMENT_DISPUTES_ENDPOINT == "settlementDisputes"

    def test_defaults(self):
        req = GatewayRequest("transactions/TRN_1")
        assert req.verb == HttpVerb.GET
        assert req.body is None
        assert req.query_params == {}

    def test_frozen(self, paged_request):
        with pytest.raises(dataclasses.FrozenInstanceError):
            paged_request.endpoint = "other"

    def test_compact_drops_none(self, paged_request):
        compact = paged_request.compact_query_params()
        assert compact == {"page": 1, "page_size": 10, "system.mid": "MID 1"}
        assert list(compact) == ["page", "page_size", "system.mid"]

    def test_compact_does_not_mutate(self, paged_request):
        paged_request.compact_query_params()
        assert "account_name" in paged_request.query_params

    def test_query_string_has_no_null_literals(self, paged_request):
        qs = paged_request.query_string()
        assert qs == "page=1&page_size=10&system.mid=MID+1"
        assert "None" not in qs
        assert "null" not in qs

    def test_path(self, paged_request):
        assert paged_request.path() == "deposits?page=1&page_size=10&system.mid=MID+1"
        assert GatewayRequest("disputes/DIS_1").path() == "disputes/DIS_1"

    def test_to_requests(self, paged_request):
        req = paged_request.to_requests("https://apis.sandbox.globalpay.com/ucp/",
                                        headers={"X-GP-Version": "2021-03-22"})
        assert isinstance(req, requests.Request)
        assert req.method == "GET"
        assert req.url == "https://apis.sandbox.globalpay.com/ucp/deposits"
        assert req.params == {"page": 1, "page_size": 10, "system.mid": "MID 1"}
        assert req.headers["X-GP-Version"] == "2021-03-22"

    def test_to_requests_prepares_clean_url(self, paged_request):
        prepared = paged_request.to_requests("https://example.test/ucp").prepare()
        assert prepared.url == "https://example.test/ucp/deposits?page=1&page_size=10&system.mid=MID+1"

    def test_to_dict_keeps_absent_params(self, paged_request):
        d = paged_request.to_dict()
        assert d["endpoint"] == "deposits"
        assert d["verb"] == "GET"
        assert d["query_params"]["account_name"] is None

    def test_equality(self):
        a = GatewayRequest("deposits", HttpVerb.GET, None, {"page": 1})
        b = GatewayRequest("deposits", HttpVerb.GET, None, {"page": 1})
        assert a == b
        assert a != GatewayRequest("deposits", HttpVerb.GET, None, {"page": 2})
