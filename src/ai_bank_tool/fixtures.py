"""
Fixed mock data served by every tool.

Nothing here is ever mutated; responses echo caller ids on top of these.
"""

from ai_bank_tool.auth.schemas import SecondPasswordApproval
from ai_bank_tool.risk.schemas import RiskAssessment, RiskTier
from ai_bank_tool.term_deposit.schemas import TermDepositAcceptance, TermDepositPrecheck
from ai_bank_tool.transfer.schemas import LimitsAndFees, Payee, SourceAccount, TransferOutcome

MOCK_NOW_ISO = "2025-09-24T09:00:00Z"

MOCK_PAYEES = (
    Payee(
        id="P-0001",
        nickname="A社",
        bank="○○銀行",
        branch="本店",
        account_type="普通",
        account_last4="1234",
        name_kana="エーシャ",
    ),
    Payee(
        id="P-0002",
        nickname="B社",
        bank="△△銀行",
        branch="渋谷",
        account_type="普通",
        account_last4="9876",
        name_kana="ビーシャ",
    ),
)

MOCK_ACCOUNTS = (
    SourceAccount(id="ACC-001", type="普通", last4="3456", currency="JPY", balance=2345678),
    SourceAccount(id="ACC-002", type="当座", last4="1122", currency="JPY", balance=520000),
)

MOCK_LIMITS_FEES = LimitsAndFees(
    per_transaction_limit=1_000_000,  # ¥1,000,000
    daily_remaining_limit=900_000,  # ¥900,000
    estimated_fee_jpy=330,
)

MOCK_RISK_MEDIUM = RiskAssessment(
    risk=RiskTier.MEDIUM,
    reason_codes=["DEVICE_TRUST_MODERATE", "VELOCITY_NORMAL"],
)

MOCK_SECOND_PASSWORD = SecondPasswordApproval(
    approved=True,
    method="app",
    token="2FA-TOKEN-MOCK",
    expires_at="2025-12-31T00:00:00Z",
)

MOCK_TRANSFER_OK = TransferOutcome(
    transaction_id="TX-000123",
    status="success",
    booked_at=MOCK_NOW_ISO,
    new_balance=1234567,
)

MOCK_TD_PRECHECK = TermDepositPrecheck(
    eligible=True,
    min_amount=100_000,
    product_code="TD-STD-12M",
    term_months=12,
    rate_annual_pct=0.25,
    kyc_risk="低",
)

MOCK_TD_ACCEPTED = TermDepositAcceptance(
    term_deposit_id="TD-000789",
    status="accepted",
    start_date="2025-09-24",
    maturity_date="2026-09-24",
    rate_annual_pct=0.25,
    handling="利息を普通へ入金",
)

DEFAULT_REVIEW_AMOUNT_JPY = 50_000
REVIEW_ADVISORY = "問題ありません（モック）"
HIGH_RISK_STATUS_UPDATED = "updated"
