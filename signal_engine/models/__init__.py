"""Shared Pydantic models for the signal engine - contract between pipeline stages."""

from .telemetry import (
    ActivityBlock,
    CodeQualityBlock,
    GrantFitBlock,
    GrantMatch,
    IssueCounts,
    NO_COMMIT_DAYS,
    RepoTelemetry,
    with_defaults,
)
from .signal import Signal, SignalCategory
from .scores import ProjectScores, ScoreBreakdown, ScoreFactor, ScoreType
from .opportunity_card import (
    AnalysisResult,
    GrantRecommendation,
    NextAction,
    OpportunityCard,
    RiskFlag,
    StrongSignal,
)
from .grant import BuilderNiche, Grant, GrantFilters, GrantStatus

__all__ = [
    "ActivityBlock",
    "CodeQualityBlock",
    "GrantFitBlock",
    "GrantMatch",
    "IssueCounts",
    "NO_COMMIT_DAYS",
    "RepoTelemetry",
    "with_defaults",
    "Signal",
    "SignalCategory",
    "ProjectScores",
    "ScoreBreakdown",
    "ScoreFactor",
    "ScoreType",
    "AnalysisResult",
    "GrantRecommendation",
    "NextAction",
    "OpportunityCard",
    "RiskFlag",
    "StrongSignal",
    "BuilderNiche",
    "Grant",
    "GrantFilters",
    "GrantStatus",
]
