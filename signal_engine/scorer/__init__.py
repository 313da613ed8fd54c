"""Weighted scoring engine for repository signals."""

from .engine import calculate_scores, round_half_up
from .weights import (
    ACTIVITY_FOCUSED,
    DEFAULT_CONFIG,
    EngineConfig,
    ScoreTypeWeights,
    SignalDefinition,
    ThresholdTiers,
    load_engine_config,
    save_engine_config,
)

__all__ = [
    "calculate_scores",
    "round_half_up",
    "ACTIVITY_FOCUSED",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "ScoreTypeWeights",
    "SignalDefinition",
    "ThresholdTiers",
    "load_engine_config",
    "save_engine_config",
]
