"""
Search criteria for paged report queries.

Every filter is optional; an unset field means "no filter" and ends up as a
None-valued query parameter. Field types are coerced by pydantic but values
are otherwise not validated here.
"""

from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from .enums import (
    AdjustmentFunding,
    Channel,
    DepositStatus,
    DisputeStage,
    DisputeStatus,
    PaymentEntryMode,
    PaymentType,
    TransactionStatus,
)

DateLike = Optional[Union[datetime, date]]


class SearchCriteriaField(str, Enum):
    """Names accepted by ``TransactionReportBuilder.where``"""
    ACCOUNT_NAME = "account_name"
    ACCOUNT_NUMBER_LAST_FOUR = "account_number_last_four"
    ACQUIRER_REFERENCE_NUMBER = "acquirer_reference_number"
    ADJUSTMENT_FUNDING = "adjustment_funding"
    AMOUNT = "amount"
    AUTH_CODE = "auth_code"
    BATCH_ID = "batch_id"
    BRAND_REFERENCE = "brand_reference"
    CARD_BRAND = "card_brand"
    CARD_NUMBER_FIRST_SIX = "card_number_first_six"
    CARD_NUMBER_LAST_FOUR = "card_number_last_four"
    CHANNEL = "channel"
    COUNTRY = "country"
    CURRENCY = "currency"
    DEPOSIT_ID = "deposit_id"
    DEPOSIT_STATUS = "deposit_status"
    DISPUTE_ID = "dispute_id"
    DISPUTE_STAGE = "dispute_stage"
    DISPUTE_STATUS = "dispute_status"
    END_ADJUSTMENT_DATE = "end_adjustment_date"
    END_BATCH_DATE = "end_batch_date"
    END_DATE = "end_date"
    END_DEPOSIT_DATE = "end_deposit_date"
    END_STAGE_DATE = "end_stage_date"
    MERCHANT_ID = "merchant_id"
    NAME = "name"
    PAYMENT_ENTRY_MODE = "payment_entry_mode"
    PAYMENT_TYPE = "payment_type"
    REFERENCE_NUMBER = "reference_number"
    SETTLEMENT_DISPUTE_ID = "settlement_dispute_id"
    START_ADJUSTMENT_DATE = "start_adjustment_date"
    START_BATCH_DATE = "start_batch_date"
    START_DATE = "start_date"
    START_DEPOSIT_DATE = "start_deposit_date"
    START_STAGE_DATE = "start_stage_date"
    SYSTEM_HIERARCHY = "system_hierarchy"
    TOKEN_FIRST_SIX = "token_first_six"
    TOKEN_LAST_FOUR = "token_last_four"
    TRANSACTION_STATUS = "transaction_status"


class SearchCriteria(BaseModel):
    """
    Optional filters attached to a report query.

    Grouped by the report family that reads them; merchant scope fields
    are shared by deposit, settlement and dispute searches.
    """

    # Transaction search
    payment_type: Optional[PaymentType] = Field(default=None, description="SALE or REFUND")
    channel: Optional[Channel] = Field(default=None, description="Card present / not present")
    amount: Optional[Decimal] = Field(default=None, description="Amount in major units")
    currency: Optional[str] = Field(default=None, description="ISO 4217 currency code")
    token_first_six: Optional[str] = None
    token_last_four: Optional[str] = None
    account_name: Optional[str] = Field(default=None, description="Caller-supplied account name")
    country: Optional[str] = None
    batch_id: Optional[str] = None
    payment_entry_mode: Optional[PaymentEntryMode] = None
    name: Optional[str] = None
    card_number_first_six: Optional[str] = None
    card_number_last_four: Optional[str] = None
    card_brand: Optional[str] = None
    brand_reference: Optional[str] = None
    auth_code: Optional[str] = None
    reference_number: Optional[str] = None
    transaction_status: Optional[TransactionStatus] = None
    start_date: DateLike = None
    end_date: DateLike = None

    # Deposit search
    deposit_id: Optional[str] = None
    deposit_status: Optional[DepositStatus] = None
    account_number_last_four: Optional[str] = None
    start_deposit_date: DateLike = None
    end_deposit_date: DateLike = None

    # Settlement search
    acquirer_reference_number: Optional[str] = None
    start_batch_date: DateLike = None
    end_batch_date: DateLike = None

    # Dispute search
    dispute_id: Optional[str] = None
    settlement_dispute_id: Optional[str] = None
    dispute_status: Optional[DisputeStatus] = None
    dispute_stage: Optional[DisputeStage] = None
    start_stage_date: DateLike = None
    end_stage_date: DateLike = None
    adjustment_funding: Optional[AdjustmentFunding] = None
    start_adjustment_date: DateLike = None
    end_adjustment_date: DateLike = None

    # Merchant scope
    merchant_id: Optional[str] = None
    system_hierarchy: Optional[str] = None

    model_config = {"validate_assignment": True}

    @field_validator('amount', mode='before')
    @classmethod
    def reject_bool_amount(cls, v):
        """Reject booleans, which would otherwise coerce to 0 or 1."""
        if isinstance(v, bool):
            raise ValueError("amount must be numeric, got bool")
        return v

    def set(self, criteria: Union[SearchCriteriaField, str], value) -> SearchCriteria:
        """Set one criterion by name."""
        name = SearchCriteriaField(criteria).value
        setattr(self, name, value)
        return self


__all__ = [
    "SearchCriteriaField",
    "SearchCriteria",
]
