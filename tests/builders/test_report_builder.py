"""
Unit tests for TransactionReportBuilder and ReportingService.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from gateway_reporting import (
    BuilderError,
    DepositSortProperty,
    DisputeSortProperty,
    ErrorCode,
    ReportingService,
    ReportType,
    SearchCriteriaField,
    SortDirection,
    TransactionReportBuilder,
    TransactionSortProperty,
    TransactionStatus,
)


# =============================================================================
# ReportingService factories
# =============================================================================

class TestReportingService:
    """Each factory presets the report type and identifier or paging."""

    @pytest.mark.parametrize("factory, report_type", [
        (ReportingService.find_transactions_paged, ReportType.FIND_TRANSACTIONS_PAGED),
        (ReportingService.find_settlement_transactions_paged, ReportType.FIND_SETTLEMENT_TRANSACTIONS_PAGED),
        (ReportingService.find_deposits_paged, ReportType.FIND_DEPOSITS_PAGED),
        (ReportingService.find_disputes_paged, ReportType.FIND_DISPUTES_PAGED),
        (ReportingService.find_settlement_disputes_paged, ReportType.FIND_SETTLEMENT_DISPUTES_PAGED),
    ])
    def test_paged_factories(self, factory, report_type):
        query = factory(4, 30)
        assert query.report_type == report_type
        assert query.page == 4
        assert query.page_size == 30

    def test_transaction_detail(self):
        query = ReportingService.transaction_detail("TRN_1")
        assert query.report_type == ReportType.TRANSACTION_DETAIL
        assert query.transaction_id == "TRN_1"

    def test_deposit_detail(self):
        query = ReportingService.deposit_detail("DEP_1")
        assert query.report_type == ReportType.DEPOSIT_DETAIL
        assert query.search_criteria.deposit_id == "DEP_1"

    def test_dispute_detail(self):
        query = ReportingService.dispute_detail("DIS_1")
        assert query.report_type == ReportType.DISPUTE_DETAIL
        assert query.search_criteria.dispute_id == "DIS_1"

    def test_settlement_dispute_detail(self):
        query = ReportingService.settlement_dispute_detail("SD_1")
        assert query.report_type == ReportType.SETTLEMENT_DISPUTE_DETAIL
        assert query.search_criteria.settlement_dispute_id == "SD_1"


# =============================================================================
# Fluent setters
# =============================================================================

class TestTransactionReportBuilder:
    """Tests for the fluent query API."""

    def test_defaults(self):
        query = TransactionReportBuilder(ReportType.FIND_DEPOSITS_PAGED)
        assert query.page is None
        assert query.page_size is None
        assert query.transaction_order_by is None
        assert query.start_date is None
        assert query.search_criteria.model_dump(exclude_none=True) == {}

    def test_accepts_report_type_value(self):
        query = TransactionReportBuilder("FindDisputesPaged")
        assert query.report_type is ReportType.FIND_DISPUTES_PAGED

    def test_unknown_report_type(self):
        with pytest.raises(BuilderError) as exc_info:
            TransactionReportBuilder("NotAReport")
        assert exc_info.value.code == ErrorCode.INVALID_REPORT_TYPE

    def test_with_field_report_type_coerces_value(self):
        query = ReportingService.transaction_detail("TRN_1").with_field("report_type", "FindDisputesPaged")
        assert query.report_type is ReportType.FIND_DISPUTES_PAGED

    def test_with_field_report_type_rejects_unknown(self):
        query = ReportingService.transaction_detail("TRN_1")
        with pytest.raises(BuilderError) as exc_info:
            query.with_field("report_type", "Nope")
        assert exc_info.value.code == ErrorCode.INVALID_REPORT_TYPE
        assert query.report_type is ReportType.TRANSACTION_DETAIL

    def test_query_dates_coerced_from_strings(self):
        query = (ReportingService.find_deposits_paged(1, 10)
                 .with_start_date("2024-03-05")
                 .with_end_date(datetime(2024, 3, 10, 8, 0)))
        assert query.start_date.year == 2024
        assert (query.start_date.month, query.start_date.day) == (3, 5)
        assert query.end_date == datetime(2024, 3, 10, 8, 0)

    @pytest.mark.parametrize("bad", ["not-a-date", ["2024-01-01"], object()])
    def test_query_dates_reject_invalid(self, bad):
        with pytest.raises(BuilderError) as exc_info:
            ReportingService.find_deposits_paged(1, 10).with_start_date(bad)
        assert exc_info.value.code == ErrorCode.INVALID_CRITERIA
        assert exc_info.value.details == {"field": "start_date"}

    def test_with_field_end_date_is_coerced(self):
        with pytest.raises(BuilderError):
            ReportingService.find_deposits_paged(1, 10).with_field("end_date", "garbage")

    def test_query_dates_clear_with_none(self):
        query = ReportingService.find_deposits_paged(1, 10).with_start_date(date(2024, 1, 1))
        assert query.with_start_date(None).start_date is None

    def test_setters_chain(self):
        query = TransactionReportBuilder(ReportType.FIND_DEPOSITS_PAGED)
        result = (query.with_page(1).with_page_size(5)
                  .with_start_date(date(2024, 1, 1)).with_end_date(date(2024, 1, 2)))
        assert result is query
        assert (query.page, query.page_size) == (1, 5)
        assert query.end_date == date(2024, 1, 2)

    @pytest.mark.parametrize("sort_property, by_attr, order_attr", [
        (TransactionSortProperty.TIME_CREATED, "transaction_order_by", "transaction_order"),
        (DepositSortProperty.STATUS, "deposit_order_by", "deposit_order"),
        (DisputeSortProperty.BRAND, "dispute_order_by", "dispute_order"),
    ])
    def test_order_by_routes_by_property_type(self, sort_property, by_attr, order_attr):
        query = ReportingService.find_transactions_paged(1, 10).order_by(sort_property, SortDirection.ASC)
        assert getattr(query, by_attr) is sort_property
        assert getattr(query, order_attr) is SortDirection.ASC

    def test_order_by_defaults_to_desc(self):
        query = ReportingService.find_deposits_paged(1, 10).order_by(DepositSortProperty.TYPE)
        assert query.deposit_order is SortDirection.DESC
        assert query.transaction_order is None

    def test_order_by_rejects_strings(self):
        with pytest.raises(BuilderError) as exc_info:
            ReportingService.find_deposits_paged(1, 10).order_by("TIME_CREATED")
        assert exc_info.value.code == ErrorCode.INVALID_SORT_PROPERTY

    def test_where_sets_criteria(self):
        query = (ReportingService.find_transactions_paged(1, 10)
                 .where(SearchCriteriaField.AMOUNT, "12.5")
                 .and_where("transaction_status", "CAPTURED"))
        assert query.search_criteria.amount == Decimal("12.5")
        assert query.search_criteria.transaction_status is TransactionStatus.CAPTURED

    def test_where_none_clears(self):
        query = ReportingService.find_transactions_paged(1, 10).where(SearchCriteriaField.CURRENCY, "EUR")
        query.where(SearchCriteriaField.CURRENCY, None)
        assert query.search_criteria.currency is None

    def test_where_unknown_criteria(self):
        with pytest.raises(BuilderError) as exc_info:
            ReportingService.find_transactions_paged(1, 10).where("colour", "red")
        assert exc_info.value.code == ErrorCode.INVALID_CRITERIA

    def test_where_bad_value(self):
        with pytest.raises(BuilderError) as exc_info:
            ReportingService.find_transactions_paged(1, 10).where(SearchCriteriaField.TRANSACTION_STATUS, "NOPE")
        assert exc_info.value.code == ErrorCode.INVALID_CRITERIA
        assert exc_info.value.cause is not None

    def test_with_field(self):
        query = ReportingService.find_transactions_paged(1, 10).with_field("page_size", 99)
        assert query.page_size == 99

    def test_with_field_unknown(self):
        with pytest.raises(BuilderError):
            ReportingService.find_transactions_paged(1, 10).with_field("nonexistent", 1)

    def test_with_field_private(self):
        with pytest.raises(BuilderError):
            ReportingService.find_transactions_paged(1, 10).with_field("_secret", 1)

    def test_repr(self):
        assert "FindDepositsPaged" in repr(ReportingService.find_deposits_paged(1, 10))
