"""Opportunity synthesizer - assembles signals, scores, risks, actions and
grant matches into one OpportunityCard with a generated summary.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, List, Optional

from ..actions import generate_next_actions
from ..models.opportunity_card import (
    AnalysisResult,
    GrantRecommendation,
    OpportunityCard,
    StrongSignal,
)
from ..models.scores import ProjectScores
from ..models.signal import Signal
from ..models.telemetry import GrantMatch, RepoTelemetry, with_defaults
from ..risk import detect_risk_flags
from ..scorer.engine import calculate_scores, round_half_up
from ..scorer.weights import DEFAULT_CONFIG, EngineConfig, SummaryThresholds
from ..signals import extract_signals

logger = logging.getLogger(__name__)

MAX_STRONGEST_SIGNALS = 4


def generate_opportunity_card(
    telemetry: Any,
    signals: List[Signal],
    scores: ProjectScores,
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> OpportunityCard:
    """Build the opportunity card for one analysis.

    Risk flags and next actions are derived here; signals and scores are
    passed in so callers can reuse them.

    Args:
        telemetry: RepoTelemetry, raw API payload dict, or None
        signals: Signals from extract_signals
        scores: Scores from calculate_scores
        config: Engine configuration
        now: Generation time (defaults to current UTC time)

    Returns:
        OpportunityCard; an empty, zero-scored card when telemetry is absent
    """
    generated_at = now or datetime.now(timezone.utc)
    card_id = f"opp-{int(generated_at.timestamp() * 1000)}"
    telemetry = with_defaults(telemetry)

    if telemetry is None:
        return OpportunityCard(
            id=card_id,
            project_id="unknown",
            project_name="Unknown Project",
            project_url="",
            summary="No analysis data available",
            momentum=momentum_label(0, config.summary),
            strongest_signals=[],
            risk_flags=[],
            scores=scores,
            grant_recommendations=[],
            next_actions=[],
            generated_at=generated_at,
        )

    risk_flags = detect_risk_flags(signals, telemetry, config, now)
    next_actions = generate_next_actions(signals, telemetry, risk_flags, config)

    repo = telemetry.repo
    project_name = repo.rstrip("/").split("/")[-1] or "Unknown"

    card = OpportunityCard(
        id=card_id,
        project_id=repo,
        project_name=project_name,
        project_url=f"https://github.com/{repo}" if repo else "",
        summary=_build_summary(telemetry, scores, config.summary),
        momentum=momentum_label(telemetry.activity.commits_30d, config.summary),
        strongest_signals=_strongest_signals(signals, config.summary),
        risk_flags=risk_flags,
        scores=scores,
        grant_recommendations=[_to_recommendation(match) for match in telemetry.grant_fit.matches],
        next_actions=next_actions,
        generated_at=generated_at,
    )

    logger.info(
        f"Opportunity card generated for {repo or 'unknown repo'}: overall={scores.overall} "
        f"risks={len(risk_flags)} actions={len(next_actions)}"
    )
    return card


def analyze_repository(
    raw: Any,
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> AnalysisResult:
    """Run the full pipeline: signals -> scores -> opportunity card."""
    now = now or datetime.now(timezone.utc)
    telemetry = with_defaults(raw)

    signals = extract_signals(telemetry, config, now)
    scores = calculate_scores(signals, telemetry, config, now)
    card = generate_opportunity_card(telemetry, signals, scores, config, now)

    return AnalysisResult(signals=signals, scores=scores, opportunity_card=card)


def momentum_label(commits_30d: int, thresholds: SummaryThresholds = DEFAULT_CONFIG.summary) -> str:
    """Hot / Warm / Cold label from 30-day commit count."""
    if commits_30d >= thresholds.hot_commits:
        return "Hot"
    if commits_30d >= thresholds.warm_commits:
        return "Warm"
    return "Cold"


def _build_summary(telemetry: RepoTelemetry, scores: ProjectScores, thresholds: SummaryThresholds) -> str:
    commits = telemetry.activity.commits_30d
    if commits >= thresholds.highly_active_commits:
        activity_level = "highly active"
    elif commits >= thresholds.moderately_active_commits:
        activity_level = "moderately active"
    else:
        activity_level = "low activity"

    readiness_score = scores.capital_readiness.score
    if readiness_score >= thresholds.capital_ready_score:
        readiness = "capital-ready"
    elif readiness_score >= thresholds.developing_score:
        readiness = "developing"
    else:
        readiness = "early-stage"

    return (
        f"A {activity_level} {telemetry.primary_language} project showing {readiness} "
        f"characteristics with an overall score of {scores.overall}/100."
    )


def _format_raw(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return str(value)


def _strongest_signals(signals: List[Signal], thresholds: SummaryThresholds) -> List[StrongSignal]:
    """Top signals by normalized value; ties keep extraction order."""
    ranked = sorted(signals, key=lambda s: s.normalized_value, reverse=True)
    strongest = []
    for signal in ranked[:MAX_STRONGEST_SIGNALS]:
        if signal.normalized_value > thresholds.strong_signal:
            strength = "strong"
        elif signal.normalized_value > thresholds.moderate_signal:
            strength = "moderate"
        else:
            strength = "weak"
        strongest.append(StrongSignal(label=signal.label, value=_format_raw(signal.raw_value), strength=strength))
    return strongest


def _to_recommendation(match: GrantMatch) -> GrantRecommendation:
    program = match.program or "Unknown Program"
    grant_id = re.sub(r"\s+", "-", (match.program or "unknown").strip().lower()) or "unknown"
    return GrantRecommendation(
        grant_id=grant_id,
        program_name=program,
        ecosystem=match.ecosystem or "Unknown",
        confidence=min(100, max(0, round_half_up(match.fit_score))),
        why_fits=list(match.why),
        apply_url=match.url,
    )
