#!/usr/bin/env python3
"""
Example: Build reporting requests

This example demonstrates:
- Starting report queries from ReportingService
- Filtering and ordering a paged search
- Turning the request descriptor into a requests.Request without sending it

Nothing here touches the network; the printed URLs are what a transport
would call.
"""

from datetime import date

from gateway_reporting import (
    AccessTokenInfo,
    DisputeStage,
    GatewayConfig,
    ReportingService,
    SearchCriteriaField,
    SortDirection,
    TransactionSortProperty,
    TransactionStatus,
)


def main():
    print("=== Example: Reporting Requests ===\n")

    config = GatewayConfig(
        app_id="your-app-id",
        app_key="your-app-key",
        access_token_info=AccessTokenInfo(data_account_name="transaction_processing"),
    )

    queries = [
        ReportingService.transaction_detail("TRN_Vdlrm1zYxRbITcRd47sE4iEpNBNt1A"),
        (ReportingService.find_transactions_paged(1, 10)
         .order_by(TransactionSortProperty.TIME_CREATED, SortDirection.DESC)
         .where(SearchCriteriaField.START_DATE, date(2024, 1, 1))
         .and_where(SearchCriteriaField.TRANSACTION_STATUS, TransactionStatus.CAPTURED)),
        ReportingService.find_deposits_paged(1, 10).with_start_date(date(2024, 1, 1)),
        (ReportingService.find_disputes_paged(1, 25)
         .where(SearchCriteriaField.DISPUTE_STAGE, DisputeStage.CHARGEBACK)),
    ]

    for query in queries:
        request = query.build_request(config)
        prepared = request.to_requests(config.service_url, config.default_headers()).prepare()
        print(f"{query.report_type.value}:")
        print(f"  {prepared.method} {prepared.url}\n")


if __name__ == "__main__":
    main()
