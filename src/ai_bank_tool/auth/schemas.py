"""
Schemas for the second-password and high-risk case tools
"""

from ai_bank_tool.common.schemas import WireModel


class SecondPasswordApproval(WireModel):
    approved: bool
    method: str
    token: str
    expires_at: str


class HighRiskAuthStatus(WireModel):
    updated_at: str
    case_id: str
    otp_verified: bool
    status: str
