"""
Term Deposit Service Business Logic
"""

from typing import Optional

from ai_bank_tool import fixtures
from ai_bank_tool.term_deposit.schemas import (
    RequestedTerms,
    TermDepositApplication,
    TermDepositPrep,
)


class TermDepositService:
    """
    Pre-check and application for term deposits funded from a source account.
    """

    async def prepare(
        self,
        user_id: str,  # noqa: ARG002
        from_account_id: str,
        amount_jpy: int,
        term_months: Optional[int] = None,
        product_code: Optional[str] = None,
    ) -> TermDepositPrep:
        """
        The pre-check is always eligible; min_amount is reported, not enforced.
        """
        return TermDepositPrep(
            checked_at=fixtures.MOCK_NOW_ISO,
            from_account_id=from_account_id,
            amount_jpy=amount_jpy,
            requested=RequestedTerms(term_months=term_months, product_code=product_code),
            **fixtures.MOCK_TD_PRECHECK.model_dump(),
        )

    async def apply(
        self,
        user_id: str,  # noqa: ARG002
        from_account_id: str,
        amount_jpy: int,
        term_months: int,
        product_code: Optional[str] = None,
        handling: Optional[str] = None,
    ) -> TermDepositApplication:
        """
        Merge order: request echo, then the accepted record, then the
        caller's maturity handling when one was given.
        """
        accepted = fixtures.MOCK_TD_ACCEPTED.model_dump()
        if handling is not None:
            accepted["handling"] = handling
        return TermDepositApplication(
            applied_at=fixtures.MOCK_NOW_ISO,
            from_account_id=from_account_id,
            amount_jpy=amount_jpy,
            term_months=term_months,
            product_code=product_code,
            **accepted,
        )
