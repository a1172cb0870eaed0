"""
Risk scoring service (ThreatMetrix stand-in)
"""

from typing import Optional

from ai_bank_tool import fixtures
from ai_bank_tool.risk.schemas import RiskAssessment, RiskEvaluation


class RiskService:
    def __init__(self, assessment: RiskAssessment = fixtures.MOCK_RISK_MEDIUM):
        self.assessment = assessment

    async def evaluate(self, user_id: str, session_id: Optional[str] = None) -> RiskEvaluation:  # noqa: ARG002
        return RiskEvaluation(evaluated_at=fixtures.MOCK_NOW_ISO, **self.assessment.model_dump())
