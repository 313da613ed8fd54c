"""OpportunityCard - Terminal report aggregate for one repository analysis."""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .scores import ProjectScores
from .signal import Signal


class RiskFlag(BaseModel):
    """A threshold breach detected in telemetry."""

    type: Literal["warning", "critical"]
    message: str
    category: str

    model_config = {"frozen": True}


class NextAction(BaseModel):
    """A concrete remediation suggestion.

    ``completed`` is always False here; completion is tracked by the caller
    in an ActionProgress side table keyed by ``id``.
    """

    id: str
    action: str
    priority: Literal["high", "medium", "low"]
    impact: str
    completed: bool = False

    model_config = {"frozen": True}


class GrantRecommendation(BaseModel):
    """A funding program recommended for the repository."""

    grant_id: str
    program_name: str
    ecosystem: str
    confidence: int = Field(..., ge=0, le=100)
    why_fits: List[str] = Field(default_factory=list)
    apply_url: Optional[str] = None

    model_config = {"frozen": True}


class StrongSignal(BaseModel):
    """Display entry for one of the strongest signals."""

    label: str
    value: str
    strength: Literal["strong", "moderate", "weak"]

    model_config = {"frozen": True}


class OpportunityCard(BaseModel):
    """Consolidated report: scores, risks, next actions and grant matches."""

    id: str = Field(..., description="Card identifier")
    project_id: str = Field(..., description="Repository identifier")
    project_name: str = Field(..., description="Repository name")
    project_url: str = Field(..., description="Repository URL")
    summary: str = Field(..., description="Generated natural-language summary")
    momentum: str = Field(default="Cold", description="Hot / Warm / Cold commit momentum")
    strongest_signals: List[StrongSignal] = Field(default_factory=list, max_length=4)
    risk_flags: List[RiskFlag] = Field(default_factory=list)
    scores: ProjectScores
    grant_recommendations: List[GrantRecommendation] = Field(default_factory=list)
    next_actions: List[NextAction] = Field(default_factory=list, max_length=5)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}


class AnalysisResult(BaseModel):
    """Everything produced by one pass of the pipeline."""

    signals: List[Signal] = Field(default_factory=list)
    scores: ProjectScores
    opportunity_card: OpportunityCard

    model_config = {"frozen": True}
