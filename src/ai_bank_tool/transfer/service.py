"""
Transfer Service Business Logic
"""

from typing import Optional

from ai_bank_tool import fixtures
from ai_bank_tool.transfer.schemas import (
    LimitsAndFees,
    OtpDeviceCheck,
    TransferExecution,
    TransferPrep,
    TransferReview,
)

PAPER_CARD_MARKER = "paper"
PAPER_CARD_DEVICE = "paper_card"


class TransferService:
    """
    Mock logic for the transfer flow: device check, prep, review, execute.
    """

    def __init__(self, limits: LimitsAndFees = fixtures.MOCK_LIMITS_FEES):
        self.limits = limits

    async def check_otp_device(self, user_id: str, device_type: Optional[str] = None) -> OtpDeviceCheck:
        """
        Transfers are not available to customers on a paper OTP card.
        """
        uses_paper_card = PAPER_CARD_MARKER in user_id.lower() or device_type == PAPER_CARD_DEVICE
        return OtpDeviceCheck(allowed=not uses_paper_card)

    async def prepare(self, user_id: str) -> TransferPrep:  # noqa: ARG002
        return TransferPrep(
            generated_at=fixtures.MOCK_NOW_ISO,
            payees=list(fixtures.MOCK_PAYEES),
            source_accounts=list(fixtures.MOCK_ACCOUNTS),
            limit_and_fees=self.limits,
        )

    async def review(
        self,
        user_id: str,  # noqa: ARG002
        from_account_id: str,
        to_payee_id: str,
        amount_jpy: Optional[int] = None,
    ) -> TransferReview:
        """
        Final balance/limit/fee check. Only the per-transaction limit is
        actually compared; balance is always reported sufficient.
        """
        amount = amount_jpy if amount_jpy is not None else fixtures.DEFAULT_REVIEW_AMOUNT_JPY
        return TransferReview(
            checked_at=fixtures.MOCK_NOW_ISO,
            from_account_id=from_account_id,
            to_payee_id=to_payee_id,
            amount_jpy=amount,
            sufficient_balance=True,
            within_limit=amount <= self.limits.per_transaction_limit,
            fee_jpy=self.limits.estimated_fee_jpy,
            advisory=fixtures.REVIEW_ADVISORY,
        )

    async def execute(
        self,
        user_id: str,  # noqa: ARG002
        from_account_id: str,
        to_payee_id: str,
        amount_jpy: int,
    ) -> TransferExecution:
        """
        Execute fund transfer. No balance is deducted and every call yields
        the same booked transaction.
        """
        return TransferExecution(
            executed_at=fixtures.MOCK_NOW_ISO,
            from_account_id=from_account_id,
            to_payee_id=to_payee_id,
            amount_jpy=amount_jpy,
            **fixtures.MOCK_TRANSFER_OK.model_dump(),
        )
