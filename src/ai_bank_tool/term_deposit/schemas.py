"""
Schemas for the term deposit tools
"""

from typing import Optional

from pydantic import Field

from ai_bank_tool.common.schemas import WireModel


class TermDepositPrecheck(WireModel):
    eligible: bool
    min_amount: int
    product_code: str
    term_months: int
    rate_annual_pct: float
    kyc_risk: str


class TermDepositAcceptance(WireModel):
    term_deposit_id: str
    status: str
    start_date: str
    maturity_date: str
    rate_annual_pct: float
    handling: str


class RequestedTerms(WireModel):
    term_months: Optional[int] = None
    product_code: Optional[str] = None


class TermDepositPrep(WireModel):
    checked_at: str
    from_account_id: str
    amount_jpy: int = Field(alias="amountJPY")
    requested: RequestedTerms
    eligible: bool
    min_amount: int
    product_code: str
    term_months: int
    rate_annual_pct: float
    kyc_risk: str


class TermDepositApplication(WireModel):
    applied_at: str
    from_account_id: str
    amount_jpy: int = Field(alias="amountJPY")
    term_months: int
    product_code: Optional[str] = None
    term_deposit_id: str
    status: str
    start_date: str
    maturity_date: str
    rate_annual_pct: float
    handling: str
