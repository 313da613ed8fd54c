"""Deterministic repository signal scoring and grant matching."""

from .actions import generate_next_actions
from .matching import derive_niche, match_grants_for_niche
from .models import AnalysisResult, OpportunityCard, ProjectScores, RepoTelemetry, Signal, with_defaults
from .opportunity import analyze_repository, generate_opportunity_card
from .risk import detect_risk_flags
from .scorer import DEFAULT_CONFIG, EngineConfig, calculate_scores
from .signals import extract_signals

__version__ = "0.1.0"

__all__ = [
    "generate_next_actions",
    "derive_niche",
    "match_grants_for_niche",
    "AnalysisResult",
    "OpportunityCard",
    "ProjectScores",
    "RepoTelemetry",
    "Signal",
    "with_defaults",
    "analyze_repository",
    "generate_opportunity_card",
    "detect_risk_flags",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "calculate_scores",
    "extract_signals",
]
