"""
Report query builder.

``TransactionReportBuilder`` is the query object for every reporting call:
which report, paging, ordering and the search criteria. Use the factories
on ``ReportingService`` to start one with the report type already set.

Example:
    ```python
    query = (
        ReportingService.find_transactions_paged(1, 10)
        .order_by(TransactionSortProperty.TIME_CREATED, SortDirection.DESC)
        .where(SearchCriteriaField.START_DATE, date(2024, 1, 1))
        .and_where(SearchCriteriaField.TRANSACTION_STATUS, TransactionStatus.CAPTURED)
    )
    request = query.build_request(config)
    ```
"""

from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..enums import (
    DepositSortProperty,
    DisputeSortProperty,
    ReportType,
    SortDirection,
    TransactionSortProperty,
)
from ..runtime.errors import BuilderError, ErrorCode
from ..search import SearchCriteria, SearchCriteriaField
from .base import BaseBuilder

SortProperty = Union[TransactionSortProperty, DepositSortProperty, DisputeSortProperty]
DateLike = Optional[Union[datetime, date]]

_DATE_ADAPTER = TypeAdapter(DateLike)


class TransactionReportBuilder(BaseBuilder):
    """Query for a single reporting call."""

    def __init__(self, report_type: ReportType):
        super().__init__()
        self.report_type = report_type
        self.transaction_id: Optional[str] = None
        self.page: Optional[int] = None
        self.page_size: Optional[int] = None
        self.transaction_order_by: Optional[TransactionSortProperty] = None
        self.transaction_order: Optional[SortDirection] = None
        self.deposit_order_by: Optional[DepositSortProperty] = None
        self.deposit_order: Optional[SortDirection] = None
        self.dispute_order_by: Optional[DisputeSortProperty] = None
        self.dispute_order: Optional[SortDirection] = None
        self.start_date = None
        self.end_date = None
        self.search_criteria = SearchCriteria()

    @property
    def report_type(self) -> ReportType:
        return self._report_type

    @report_type.setter
    def report_type(self, value: Union[ReportType, str]) -> None:
        try:
            self._report_type = ReportType(value)
        except ValueError as e:
            raise BuilderError(
                f"Unknown report type: {value!r}",
                code=ErrorCode.INVALID_REPORT_TYPE,
                details={"report_type": str(value)},
                cause=e,
            )

    @property
    def start_date(self) -> DateLike:
        return self._start_date

    @start_date.setter
    def start_date(self, value: DateLike) -> None:
        self._start_date = _coerce_date("start_date", value)

    @property
    def end_date(self) -> DateLike:
        return self._end_date

    @end_date.setter
    def end_date(self, value: DateLike) -> None:
        self._end_date = _coerce_date("end_date", value)

    # Identifiers

    def with_transaction_id(self, transaction_id: Optional[str]) -> TransactionReportBuilder:
        self.transaction_id = transaction_id
        return self

    def with_deposit_id(self, deposit_id: Optional[str]) -> TransactionReportBuilder:
        self.search_criteria.deposit_id = deposit_id
        return self

    def with_dispute_id(self, dispute_id: Optional[str]) -> TransactionReportBuilder:
        self.search_criteria.dispute_id = dispute_id
        return self

    def with_settlement_dispute_id(self, settlement_dispute_id: Optional[str]) -> TransactionReportBuilder:
        self.search_criteria.settlement_dispute_id = settlement_dispute_id
        return self

    # Paging

    def with_page(self, page: Optional[int]) -> TransactionReportBuilder:
        self.page = page
        return self

    def with_page_size(self, page_size: Optional[int]) -> TransactionReportBuilder:
        self.page_size = page_size
        return self

    def with_paging(self, page: Optional[int], page_size: Optional[int]) -> TransactionReportBuilder:
        """Set page and page size together."""
        self.page = page
        self.page_size = page_size
        return self

    # Query-level date range (read by deposit searches)

    def with_start_date(self, start_date: DateLike) -> TransactionReportBuilder:
        self.start_date = start_date
        return self

    def with_end_date(self, end_date: DateLike) -> TransactionReportBuilder:
        self.end_date = end_date
        return self

    # Ordering

    def order_by(self, sort_property: SortProperty,
                 direction: SortDirection = SortDirection.DESC) -> TransactionReportBuilder:
        """
        Set the ordering for the report family the sort property belongs to.

        Args:
            sort_property: Transaction, deposit or dispute sort property
            direction: Sort direction

        Returns:
            Self for chaining

        Raises:
            BuilderError: If the sort property is of an unsupported type
        """
        direction = SortDirection(direction)
        if isinstance(sort_property, TransactionSortProperty):
            self.transaction_order_by = sort_property
            self.transaction_order = direction
        elif isinstance(sort_property, DepositSortProperty):
            self.deposit_order_by = sort_property
            self.deposit_order = direction
        elif isinstance(sort_property, DisputeSortProperty):
            self.dispute_order_by = sort_property
            self.dispute_order = direction
        else:
            raise BuilderError(
                f"Unsupported sort property: {sort_property!r}",
                code=ErrorCode.INVALID_SORT_PROPERTY,
                details={"type": type(sort_property).__name__},
            )
        return self

    # Search criteria

    def where(self, criteria: Union[SearchCriteriaField, str], value: Any) -> TransactionReportBuilder:
        """
        Set a search criterion.

        Args:
            criteria: Criterion to set
            value: Filter value; None clears the criterion

        Returns:
            Self for chaining

        Raises:
            BuilderError: If the criterion is unknown or the value has the wrong type
        """
        try:
            self.search_criteria.set(criteria, value)
        except ValidationError as e:
            raise BuilderError(
                f"Invalid value for {criteria}: {value!r}",
                code=ErrorCode.INVALID_CRITERIA,
                details={"criteria": str(criteria)},
                cause=e,
            )
        except ValueError as e:
            raise BuilderError(
                f"Unknown search criteria: {criteria}",
                code=ErrorCode.INVALID_CRITERIA,
                details={"criteria": str(criteria)},
                cause=e,
            )
        return self

    and_where = where

    def __repr__(self) -> str:
        return (f"TransactionReportBuilder(report_type={self.report_type.value}, "
                f"page={self.page}, page_size={self.page_size})")


def _coerce_date(name: str, value: Any) -> DateLike:
    """Coerce a query-level date the same way SearchCriteria coerces its dates."""
    try:
        return _DATE_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise BuilderError(
            f"Invalid value for {name}: {value!r}",
            code=ErrorCode.INVALID_CRITERIA,
            details={"field": name},
            cause=e,
        )


__all__ = [
    "TransactionReportBuilder",
]
