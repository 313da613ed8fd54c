"""ScoreBreakdown / ProjectScores - Output model of the score calculator."""

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, Field

ScoreType = Literal["grantFit", "capitalReadiness", "ecosystemAlignment", "engagementEase"]


class ScoreFactor(BaseModel):
    """One itemized contribution to a sub-score."""

    name: str = Field(..., description="Factor name")
    contribution: int = Field(..., description="Points contributed (rounded)")
    explanation: str = Field(..., description="One-line explanation citing the raw number")

    model_config = {"frozen": True}


class ScoreBreakdown(BaseModel):
    """Named 0-100 sub-score with its auditable factor list.

    The factor contributions sum to ``score`` within rounding (+/-1 per factor).
    """

    type: ScoreType = Field(..., description="Sub-score type")
    score: int = Field(..., ge=0, le=100, description="Sub-score 0-100")
    label: str = Field(..., description="Display label")
    description: str = Field(..., description="What the sub-score measures")
    factors: List[ScoreFactor] = Field(default_factory=list, description="Ordered contributing factors")

    model_config = {"frozen": True}


class ProjectScores(BaseModel):
    """The four sub-scores plus the weighted overall score."""

    grant_fit: ScoreBreakdown
    capital_readiness: ScoreBreakdown
    ecosystem_alignment: ScoreBreakdown
    engagement_ease: ScoreBreakdown
    overall: int = Field(..., ge=0, le=100, description="Weighted blend of the four sub-scores")
    calculated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    def breakdowns(self) -> List[ScoreBreakdown]:
        """Sub-scores in display order."""
        return [
            self.grant_fit,
            self.capital_readiness,
            self.ecosystem_alignment,
            self.engagement_ease,
        ]
