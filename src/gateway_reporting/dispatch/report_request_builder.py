"""
Request builder for the reporting endpoints.

Maps each ``ReportType`` to an endpoint, a verb and a flat query parameter
map. Detail lookups embed the identifier in the path and carry no query
parameters; paged searches start from the basic paging parameters and merge
the report family's parameters over them.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional

from ..builders.report import TransactionReportBuilder
from ..clock import Clock, SystemClock
from ..config import GatewayConfig
from ..enums import HttpVerb, ReportType
from ..request import GatewayRequest
from ..utils.strings import format_date, to_numeric, to_param_value
from .base import RequestBuilder

logger = logging.getLogger(__name__)

QueryParams = Dict[str, Any]


class ReportRequestBuilder(RequestBuilder):
    """Request builder for transaction, deposit and dispute reports."""

    def __init__(self, clock: Optional[Clock] = None):
        """
        Args:
            clock: Date source for the transaction searches' default end date
        """
        self.clock = clock or SystemClock()
        self._handlers: Dict[ReportType, Callable[[TransactionReportBuilder, GatewayConfig], GatewayRequest]] = {
            ReportType.TRANSACTION_DETAIL: self._transaction_detail,
            ReportType.DEPOSIT_DETAIL: self._deposit_detail,
            ReportType.FIND_DEPOSITS_PAGED: self._find_deposits_paged,
            ReportType.FIND_TRANSACTIONS_PAGED: self._find_transactions_paged,
            ReportType.FIND_SETTLEMENT_TRANSACTIONS_PAGED: self._find_settlement_transactions_paged,
            ReportType.DISPUTE_DETAIL: self._dispute_detail,
            ReportType.FIND_DISPUTES_PAGED: self._find_disputes_paged,
            ReportType.SETTLEMENT_DISPUTE_DETAIL: self._settlement_dispute_detail,
            ReportType.FIND_SETTLEMENT_DISPUTES_PAGED: self._find_settlement_disputes_paged,
        }

    @classmethod
    def can_process(cls, builder: Any) -> bool:
        return isinstance(builder, TransactionReportBuilder)

    @property
    def report_types(self) -> list:
        """Report types this request builder handles."""
        return list(self._handlers)

    def build_request(self, builder: TransactionReportBuilder,
                      config: GatewayConfig) -> Optional[GatewayRequest]:
        """
        Build the request descriptor for a report query.

        Args:
            builder: Report query
            config: Client configuration (source of the data account name)

        Returns:
            Request descriptor, or None if the report type is not handled here
        """
        report_type = _resolve_report_type(builder.report_type)
        handler = self._handlers.get(report_type) if report_type is not None else None
        if handler is None:
            logger.debug(f"Report type {builder.report_type!r} not handled by {type(self).__name__}")
            return None

        request = handler(builder, config)
        logger.debug(f"{report_type.value} -> {request.verb.value} {request.endpoint}")
        return request

    # =========================================================================
    # Detail lookups
    # =========================================================================

    def _transaction_detail(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        return _detail(GatewayRequest.TRANSACTION_ENDPOINT, builder.transaction_id)

    def _deposit_detail(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        return _detail(GatewayRequest.DEPOSITS_ENDPOINT, builder.search_criteria.deposit_id)

    def _dispute_detail(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        return _detail(GatewayRequest.DISPUTES_ENDPOINT, builder.search_criteria.dispute_id)

    def _settlement_dispute_detail(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        return _detail(GatewayRequest.SETTLEMENT_DISPUTES_ENDPOINT, builder.search_criteria.settlement_dispute_id)

    # =========================================================================
    # Paged searches
    # =========================================================================

    def _find_deposits_paged(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        criteria = builder.search_criteria
        params = self.basic_params(builder)
        params.update({
            "account_name": config.data_account_name,
            "order_by": to_param_value(builder.deposit_order_by),
            "order": to_param_value(builder.deposit_order),
            "amount": to_numeric(criteria.amount),
            "from_time_created": format_date(builder.start_date),
            "to_time_created": format_date(builder.end_date),
            "id": criteria.deposit_id,
            "status": to_param_value(criteria.deposit_status),
            "masked_account_number_last4": criteria.account_number_last_four,
            "system.mid": criteria.merchant_id,
            "system.hierarchy": criteria.system_hierarchy,
        })
        return GatewayRequest(GatewayRequest.DEPOSITS_ENDPOINT, HttpVerb.GET, None, params)

    def _find_transactions_paged(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        criteria = builder.search_criteria
        params = self.basic_params(builder)
        params.update({
            "id": builder.transaction_id,
            "type": to_param_value(criteria.payment_type),
            "channel": to_param_value(criteria.channel),
            "amount": to_numeric(criteria.amount),
            "currency": criteria.currency,
            "token_first6": criteria.token_first_six,
            "token_last4": criteria.token_last_four,
            # Caller-supplied here; deposit and settlement searches use the token's account
            "account_name": criteria.account_name,
            "country": criteria.country,
            "batch_id": criteria.batch_id,
            "entry_mode": to_param_value(criteria.payment_entry_mode),
            "name": criteria.name,
        })
        params.update(self.transaction_params(builder))
        return GatewayRequest(GatewayRequest.TRANSACTION_ENDPOINT, HttpVerb.GET, None, params)

    def _find_settlement_transactions_paged(self, builder: TransactionReportBuilder,
                                            config: GatewayConfig) -> GatewayRequest:
        criteria = builder.search_criteria
        params = self.basic_params(builder)
        params.update({
            "account_name": config.data_account_name,
            "deposit_status": to_param_value(criteria.deposit_status),
            "arn": criteria.acquirer_reference_number,
            "deposit_id": criteria.deposit_id,
            "from_deposit_time_created": format_date(criteria.start_deposit_date),
            "to_deposit_time_created": format_date(criteria.end_deposit_date),
            "from_batch_time_created": format_date(criteria.start_batch_date),
            "to_batch_time_created": format_date(criteria.end_batch_date),
            "system.mid": criteria.merchant_id,
            "system.hierarchy": criteria.system_hierarchy,
        })
        params.update(self.transaction_params(builder))
        return GatewayRequest(GatewayRequest.SETTLEMENT_TRANSACTIONS_ENDPOINT, HttpVerb.GET, None, params)

    def _find_disputes_paged(self, builder: TransactionReportBuilder, config: GatewayConfig) -> GatewayRequest:
        params = self.basic_params(builder)
        params.update(self.dispute_params(builder))
        return GatewayRequest(GatewayRequest.DISPUTES_ENDPOINT, HttpVerb.GET, None, params)

    def _find_settlement_disputes_paged(self, builder: TransactionReportBuilder,
                                        config: GatewayConfig) -> GatewayRequest:
        params = self.basic_params(builder)
        params["account_name"] = config.data_account_name
        params.update(self.dispute_params(builder))
        return GatewayRequest(GatewayRequest.SETTLEMENT_DISPUTES_ENDPOINT, HttpVerb.GET, None, params)

    # =========================================================================
    # Parameter groups
    # =========================================================================

    @staticmethod
    def basic_params(builder: TransactionReportBuilder) -> QueryParams:
        """Paging parameters shared by every paged search, copied verbatim."""
        return {
            "page": builder.page,
            "page_size": builder.page_size,
        }

    def transaction_params(self, builder: TransactionReportBuilder) -> QueryParams:
        """Ordering, card and date filters shared by the transaction searches."""
        criteria = builder.search_criteria
        end_date = criteria.end_date if criteria.end_date is not None else self.clock.today()
        return {
            "order_by": to_param_value(builder.transaction_order_by),
            "order": to_param_value(builder.transaction_order),
            "number_first6": criteria.card_number_first_six,
            "number_last4": criteria.card_number_last_four,
            "brand": criteria.card_brand,
            "brand_reference": criteria.brand_reference,
            "authcode": criteria.auth_code,
            "reference": criteria.reference_number,
            "status": to_param_value(criteria.transaction_status),
            "from_time_created": format_date(criteria.start_date),
            "to_time_created": format_date(end_date),
        }

    @staticmethod
    def dispute_params(builder: TransactionReportBuilder) -> QueryParams:
        """Ordering, stage and adjustment filters shared by the dispute searches."""
        criteria = builder.search_criteria
        return {
            "order_by": to_param_value(builder.dispute_order_by),
            "order": to_param_value(builder.dispute_order),
            "arn": criteria.acquirer_reference_number,
            "brand": criteria.card_brand,
            "status": to_param_value(criteria.dispute_status),
            "stage": to_param_value(criteria.dispute_stage),
            "from_stage_time_created": format_date(criteria.start_stage_date),
            "to_stage_time_created": format_date(criteria.end_stage_date),
            "adjustment_funding": to_param_value(criteria.adjustment_funding),
            "from_adjustment_time_created": format_date(criteria.start_adjustment_date),
            "to_adjustment_time_created": format_date(criteria.end_adjustment_date),
            "system.mid": criteria.merchant_id,
            "system.hierarchy": criteria.system_hierarchy,
        }


def _resolve_report_type(value: Any) -> Optional[ReportType]:
    # Plain strings hash differently from enum members, so look them up by value
    try:
        return ReportType(value)
    except ValueError:
        return None


def _detail(resource: str, identifier: Any) -> GatewayRequest:
    # Missing identifiers are not validated here; the API answers 404
    if identifier is None:
        identifier = ""
    return GatewayRequest(f"{resource}/{identifier}", HttpVerb.GET, None, {})


__all__ = [
    "ReportRequestBuilder",
]
