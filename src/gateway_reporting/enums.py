"""
Enumerations for the gateway reporting API.

Enum values are the literal strings the reporting API expects on the wire,
so a member can be dropped into a query parameter via ``.value``.
"""

from enum import Enum


class ReportType(str, Enum):
    """Report type enumeration"""
    TRANSACTION_DETAIL = "TransactionDetail"
    DEPOSIT_DETAIL = "DepositDetail"
    FIND_TRANSACTIONS_PAGED = "FindTransactionsPaged"
    FIND_DEPOSITS_PAGED = "FindDepositsPaged"
    FIND_SETTLEMENT_TRANSACTIONS_PAGED = "FindSettlementTransactionsPaged"
    DISPUTE_DETAIL = "DisputeDetail"
    FIND_DISPUTES_PAGED = "FindDisputesPaged"
    SETTLEMENT_DISPUTE_DETAIL = "SettlementDisputeDetail"
    FIND_SETTLEMENT_DISPUTES_PAGED = "FindSettlementDisputesPaged"
    # Served by other gateways; the reporting request builder returns None
    FIND_TRANSACTIONS = "FindTransactions"
    ACTIVITY = "Activity"
    BATCH_DETAIL = "BatchDetail"


class SortDirection(str, Enum):
    """Sort direction enumeration"""
    ASC = "ASC"
    DESC = "DESC"


class TransactionSortProperty(str, Enum):
    """Ordering for transaction and settlement transaction searches"""
    TIME_CREATED = "TIME_CREATED"
    STATUS = "STATUS"
    TYPE = "TYPE"
    DEPOSIT_ID = "DEPOSIT_ID"


class DepositSortProperty(str, Enum):
    """Ordering for deposit searches"""
    TIME_CREATED = "TIME_CREATED"
    STATUS = "STATUS"
    TYPE = "TYPE"
    DEPOSIT_ID = "DEPOSIT_ID"


class DisputeSortProperty(str, Enum):
    """Ordering for dispute and settlement dispute searches"""
    ID = "ID"
    ARN = "ARN"
    BRAND = "BRAND"
    STATUS = "STATUS"
    STAGE = "STAGE"
    FROM_STAGE_TIME_CREATED = "FROM_STAGE_TIME_CREATED"
    TO_STAGE_TIME_CREATED = "TO_STAGE_TIME_CREATED"
    ADJUSTMENT_FUNDING = "ADJUSTMENT_FUNDING"
    FROM_ADJUSTMENT_TIME_CREATED = "FROM_ADJUSTMENT_TIME_CREATED"
    TO_ADJUSTMENT_TIME_CREATED = "TO_ADJUSTMENT_TIME_CREATED"


class TransactionStatus(str, Enum):
    """Transaction status enumeration"""
    INITIATED = "INITIATED"
    AUTHENTICATED = "AUTHENTICATED"
    PENDING = "PENDING"
    DECLINED = "DECLINED"
    PREAUTHORIZED = "PREAUTHORIZED"
    CAPTURED = "CAPTURED"
    BATCH_CLOSED = "BATCH_CLOSED"
    REVERSED = "REVERSED"
    FUNDED = "FUNDED"
    REJECTED = "REJECTED"


class DepositStatus(str, Enum):
    """Deposit status enumeration"""
    FUNDED = "FUNDED"
    SPLIT_FUNDING = "SPLIT_FUNDING"
    DELAYED = "DELAYED"
    RESERVED = "RESERVED"
    IRREGULAR = "IRREGULAR"
    RELEASED = "RELEASED"


class DisputeStatus(str, Enum):
    """Dispute status enumeration"""
    UNDER_REVIEW = "UNDER_REVIEW"
    WITH_MERCHANT = "WITH_MERCHANT"
    CLOSED = "CLOSED"
    SETTLEMENT_DISPUTE_STATUS_PENDING = "PENDING"
    SETTLEMENT_DISPUTE_STATUS_COMPLETE = "COMPLETE"


class DisputeStage(str, Enum):
    """Dispute stage enumeration"""
    RETRIEVAL = "RETRIEVAL"
    CHARGEBACK = "CHARGEBACK"
    REVERSAL = "REVERSAL"
    SECOND_CHARGEBACK = "SECOND_CHARGEBACK"
    PRE_ARBITRATION = "PRE_ARBITRATION"
    ARBITRATION = "ARBITRATION"
    PRE_COMPLIANCE = "PRE_COMPLIANCE"
    COMPLIANCE = "COMPLIANCE"
    GOODFAITH = "GOODFAITH"


class PaymentType(str, Enum):
    """Payment type enumeration"""
    SALE = "SALE"
    REFUND = "REFUND"


class Channel(str, Enum):
    """Payment channel enumeration"""
    CARD_PRESENT = "CP"
    CARD_NOT_PRESENT = "CNP"


class PaymentEntryMode(str, Enum):
    """Card entry mode enumeration"""
    MOTO = "MOTO"
    ECOM = "ECOM"
    IN_APP = "IN_APP"
    CHIP = "CHIP"
    SWIPE = "SWIPE"
    MANUAL = "MANUAL"
    CONTACTLESS_CHIP = "CONTACTLESS_CHIP"
    CONTACTLESS_SWIPE = "CONTACTLESS_SWIPE"


class AdjustmentFunding(str, Enum):
    """Dispute adjustment funding enumeration"""
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class HttpVerb(str, Enum):
    """HTTP verb enumeration"""
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


__all__ = [
    "ReportType",
    "SortDirection",
    "TransactionSortProperty",
    "DepositSortProperty",
    "DisputeSortProperty",
    "TransactionStatus",
    "DepositStatus",
    "DisputeStatus",
    "DisputeStage",
    "PaymentType",
    "Channel",
    "PaymentEntryMode",
    "AdjustmentFunding",
    "HttpVerb",
]
