"""
Entry points for report queries.

Each factory returns a ``TransactionReportBuilder`` with the report type
(and identifier or paging, where the report needs one) already set.
"""

from __future__ import annotations
from typing import Optional

from .builders.report import TransactionReportBuilder
from .enums import ReportType


class ReportingService:
    """Factories for every report the reporting request builder handles."""

    @staticmethod
    def transaction_detail(transaction_id: str) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.TRANSACTION_DETAIL).with_transaction_id(transaction_id)

    @staticmethod
    def find_transactions_paged(page: Optional[int], page_size: Optional[int]) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.FIND_TRANSACTIONS_PAGED).with_paging(page, page_size)

    @staticmethod
    def find_settlement_transactions_paged(page: Optional[int],
                                           page_size: Optional[int]) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.FIND_SETTLEMENT_TRANSACTIONS_PAGED).with_paging(page, page_size)

    @staticmethod
    def deposit_detail(deposit_id: str) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.DEPOSIT_DETAIL).with_deposit_id(deposit_id)

    @staticmethod
    def find_deposits_paged(page: Optional[int], page_size: Optional[int]) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.FIND_DEPOSITS_PAGED).with_paging(page, page_size)

    @staticmethod
    def dispute_detail(dispute_id: str) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.DISPUTE_DETAIL).with_dispute_id(dispute_id)

    @staticmethod
    def find_disputes_paged(page: Optional[int], page_size: Optional[int]) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.FIND_DISPUTES_PAGED).with_paging(page, page_size)

    @staticmethod
    def settlement_dispute_detail(settlement_dispute_id: str) -> TransactionReportBuilder:
        return (TransactionReportBuilder(ReportType.SETTLEMENT_DISPUTE_DETAIL)
                .with_settlement_dispute_id(settlement_dispute_id))

    @staticmethod
    def find_settlement_disputes_paged(page: Optional[int],
                                       page_size: Optional[int]) -> TransactionReportBuilder:
        return TransactionReportBuilder(ReportType.FIND_SETTLEMENT_DISPUTES_PAGED).with_paging(page, page_size)


__all__ = [
    "ReportingService",
]
