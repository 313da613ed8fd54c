"""Scoring weight and threshold configuration.

Every table the pipeline reads (signal weights, normalization tiers, blend
weights, risk thresholds) lives in one frozen EngineConfig that is passed
explicitly to each stage, so alternate weight sets can be loaded from file
and tested side by side.
"""

import json
from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.signal import SignalCategory

NormalizationRule = Literal["tiered", "ratio", "percent", "recency", "presence"]


class ThresholdTiers(BaseModel):
    """Four-tier thresholds for piecewise-linear normalization.

    When ``exceptional`` is omitted the top bound is ``high * 2``.
    """

    low: float
    medium: float
    high: float
    exceptional: Optional[float] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def tiers_increasing(self) -> "ThresholdTiers":
        """Ensure 0 < low < medium < high < exceptional."""
        bounds = [self.low, self.medium, self.high]
        if self.exceptional is not None:
            bounds.append(self.exceptional)
        if bounds[0] <= 0 or any(b <= a for a, b in zip(bounds, bounds[1:])):
            raise ValueError(f"Tiers must be positive and strictly increasing, got {bounds}")
        return self

    @property
    def top(self) -> float:
        return self.exceptional if self.exceptional is not None else self.high * 2


class SignalDefinition(BaseModel):
    """One row of the signal table."""

    key: str
    category: SignalCategory
    label: str
    weight: float
    rule: NormalizationRule

    model_config = {"frozen": True}

    @field_validator("weight")
    @classmethod
    def weight_range(cls, v: float) -> float:
        """Ensure weights are between 0 and 1."""
        if not 0 <= v <= 1:
            raise ValueError(f"Weight must be between 0 and 1, got {v}")
        return v


class ScoreTypeWeights(BaseModel):
    """Blend weights for the overall score. Must sum to 1.0."""

    grant_fit: float = 0.35
    capital_readiness: float = 0.25
    ecosystem_alignment: float = 0.25
    engagement_ease: float = 0.15

    model_config = {"frozen": True}

    @field_validator("grant_fit", "capital_readiness", "ecosystem_alignment", "engagement_ease")
    @classmethod
    def weight_range(cls, v: float) -> float:
        """Ensure weights are between 0 and 1."""
        if not 0 <= v <= 1:
            raise ValueError(f"Weight must be between 0 and 1, got {v}")
        return v

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "ScoreTypeWeights":
        """Validate that weights sum to 1.0."""
        total = self.grant_fit + self.capital_readiness + self.ecosystem_alignment + self.engagement_ease
        if abs(total - 1.0) > 0.001:
            raise ValueError(
                f"Weights must sum to 1.0, got {total:.3f}. "
                f"(GF:{self.grant_fit}, CR:{self.capital_readiness}, "
                f"EA:{self.ecosystem_alignment}, EE:{self.engagement_ease})"
            )
        return self


class RiskThresholds(BaseModel):
    """Risk flag triggers."""

    inactivity_days: int = 60
    critical_inactivity_days: int = 180
    low_stars: int = 5
    min_issues_for_ratio: int = 10
    high_open_issue_ratio: float = 0.8

    model_config = {"frozen": True}


class ActionRules(BaseModel):
    """Cutoffs used by the next-action generator."""

    max_actions: int = Field(default=5, ge=0, le=5)
    promote_below_stars: int = 50
    readme_below_notes: int = 3

    model_config = {"frozen": True}


class SummaryThresholds(BaseModel):
    """Cutoffs for the summary adjectives and the momentum label."""

    highly_active_commits: int = 20
    moderately_active_commits: int = 5
    capital_ready_score: int = 70
    developing_score: int = 50
    hot_commits: int = 30
    warm_commits: int = 10
    strong_signal: float = 0.7
    moderate_signal: float = 0.4

    model_config = {"frozen": True}


DEFAULT_SIGNALS: Tuple[SignalDefinition, ...] = (
    SignalDefinition(key="commits30d", category="activity", label="Recent Commits (30d)", weight=0.15, rule="tiered"),
    SignalDefinition(key="lastCommitRecency", category="activity", label="Last Commit Recency", weight=0.12, rule="recency"),
    SignalDefinition(key="stars", category="community", label="GitHub Stars", weight=0.10, rule="tiered"),
    SignalDefinition(key="forks", category="community", label="Forks", weight=0.08, rule="tiered"),
    SignalDefinition(key="issueActivity", category="community", label="Issue Resolution Rate", weight=0.05, rule="ratio"),
    SignalDefinition(key="codeQuality", category="code_quality", label="Code Quality Score", weight=0.06, rule="percent"),
    SignalDefinition(key="hasTests", category="code_quality", label="Test Coverage", weight=0.08, rule="presence"),
    SignalDefinition(key="hasContracts", category="deployment", label="Smart Contracts", weight=0.10, rule="presence"),
)

DEFAULT_THRESHOLDS: Dict[str, ThresholdTiers] = {
    "stars": ThresholdTiers(low=10, medium=100, high=1000, exceptional=10000),
    "forks": ThresholdTiers(low=5, medium=25, high=100, exceptional=500),
    "commits30d": ThresholdTiers(low=5, medium=20, high=50, exceptional=100),
}

# Points per language toward ecosystem alignment; TypeScript and JavaScript share one bonus
DEFAULT_LANGUAGE_POINTS: Dict[str, int] = {
    "Solidity": 25,
    "Rust": 15,
    "TypeScript/JavaScript": 10,
}


class EngineConfig(BaseModel):
    """Complete, immutable configuration for one scoring run."""

    signals: Tuple[SignalDefinition, ...] = DEFAULT_SIGNALS
    thresholds: Dict[str, ThresholdTiers] = Field(default_factory=lambda: dict(DEFAULT_THRESHOLDS))
    score_weights: ScoreTypeWeights = Field(default_factory=ScoreTypeWeights)
    language_points: Dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_LANGUAGE_POINTS))
    recency_window_days: int = 90
    risk: RiskThresholds = Field(default_factory=RiskThresholds)
    actions: ActionRules = Field(default_factory=ActionRules)
    summary: SummaryThresholds = Field(default_factory=SummaryThresholds)
    version: str = "1.0"

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def tiered_signals_have_thresholds(self) -> "EngineConfig":
        """Every tiered signal needs a tier set."""
        missing = [s.key for s in self.signals if s.rule == "tiered" and s.key not in self.thresholds]
        if missing:
            raise ValueError(f"Missing thresholds for tiered signals: {', '.join(missing)}")
        return self

    def signal_definition(self, key: str) -> Optional[SignalDefinition]:
        for definition in self.signals:
            if definition.key == key:
                return definition
        return None

    def signal_keys(self) -> List[str]:
        return [definition.key for definition in self.signals]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(mode="json")


# Default configuration as published with the scoring model
DEFAULT_CONFIG = EngineConfig()


def load_engine_config(filepath: Optional[str] = None) -> EngineConfig:
    """Load engine configuration from file or return defaults.

    Supports JSON and YAML formats. Keys omitted from the file keep their
    default values.

    Args:
        filepath: Optional path to a configuration file

    Returns:
        EngineConfig instance

    Raises:
        FileNotFoundError: If filepath provided but doesn't exist
        ValueError: If the format is unsupported or the values are invalid
    """

    if not filepath:
        return DEFAULT_CONFIG

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Engine config file not found: {filepath}")

    # Load based on extension
    if path.suffix == '.json':
        with open(path, 'r') as f:
            data = json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")

    return EngineConfig(**(data or {}))


def save_engine_config(config: EngineConfig, filepath: str) -> None:
    """Save engine configuration to file.

    Args:
        config: EngineConfig instance to save
        filepath: Path to save to (extension determines format)
    """

    path = Path(filepath)
    data = config.to_dict()

    if path.suffix == '.json':
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'w') as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")


# Alternative configuration for experimentation

ACTIVITY_FOCUSED = EngineConfig(
    score_weights=ScoreTypeWeights(
        grant_fit=0.30,
        capital_readiness=0.20,
        ecosystem_alignment=0.20,
        engagement_ease=0.30,  # Prioritize responsiveness and recency
    ),
    version="activity_focused_1.0",
)
