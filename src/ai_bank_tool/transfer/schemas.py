"""
Schemas for the transfer tools
"""

from typing import List

from pydantic import Field

from ai_bank_tool.common.schemas import WireModel


class Payee(WireModel):
    id: str
    nickname: str
    bank: str
    branch: str
    account_type: str
    account_last4: str
    name_kana: str


class SourceAccount(WireModel):
    id: str
    type: str
    last4: str
    currency: str
    balance: int


class LimitsAndFees(WireModel):
    per_transaction_limit: int
    daily_remaining_limit: int
    estimated_fee_jpy: int = Field(alias="estimatedFeeJPY")


class TransferOutcome(WireModel):
    transaction_id: str
    status: str
    booked_at: str
    new_balance: int


class OtpDeviceCheck(WireModel):
    allowed: bool


class TransferPrep(WireModel):
    generated_at: str
    payees: List[Payee]
    source_accounts: List[SourceAccount]
    limit_and_fees: LimitsAndFees


class TransferReview(WireModel):
    checked_at: str
    from_account_id: str
    to_payee_id: str
    amount_jpy: int = Field(alias="amountJPY")
    sufficient_balance: bool
    within_limit: bool
    fee_jpy: int = Field(alias="feeJPY")
    advisory: str


class TransferExecution(WireModel):
    executed_at: str
    from_account_id: str
    to_payee_id: str
    amount_jpy: int = Field(alias="amountJPY")
    transaction_id: str
    status: str
    booked_at: str
    new_balance: int
