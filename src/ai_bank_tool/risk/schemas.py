"""
Schemas for the risk scoring tool
"""

from enum import Enum
from typing import List

from ai_bank_tool.common.schemas import WireModel


class RiskTier(str, Enum):
    LOW = "低"
    MEDIUM = "中"
    HIGH = "高"


class RiskAssessment(WireModel):
    risk: RiskTier
    reason_codes: List[str]


class RiskEvaluation(WireModel):
    evaluated_at: str
    risk: RiskTier
    reason_codes: List[str]
