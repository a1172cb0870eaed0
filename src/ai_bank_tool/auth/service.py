"""
Second-password and high-risk case service
"""

from ai_bank_tool import fixtures
from ai_bank_tool.auth.schemas import HighRiskAuthStatus, SecondPasswordApproval


class AuthService:
    async def obtain_second_password(self, user_id: str) -> SecondPasswordApproval:  # noqa: ARG002
        """
        The app-side approval always succeeds with the same token.
        """
        return fixtures.MOCK_SECOND_PASSWORD

    async def update_high_risk_status(self, user_id: str, case_id: str, otp_verified: bool) -> HighRiskAuthStatus:  # noqa: ARG002
        return HighRiskAuthStatus(
            updated_at=fixtures.MOCK_NOW_ISO,
            case_id=case_id,
            otp_verified=otp_verified,
            status=fixtures.HIGH_RISK_STATUS_UPDATED,
        )
