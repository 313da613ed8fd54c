"""Deterministic scoring engine for repository signals.

Implements four fixed-weight sub-scores with itemized, auditable factors and
a weighted overall blend.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, List, Optional

from ..models.scores import ProjectScores, ScoreBreakdown, ScoreFactor, ScoreType
from ..models.signal import Signal
from ..models.telemetry import NO_COMMIT_DAYS, RepoTelemetry, with_defaults
from .weights import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)

SCORE_LABELS = {
    "grantFit": ("Grant Fit Score", "How well the project matches available grant programs"),
    "capitalReadiness": ("Capital Readiness Score", "How prepared the project is for funding"),
    "ecosystemAlignment": ("Ecosystem Alignment Score", "Which ecosystems fit best for this project"),
    "engagementEase": ("Engagement Ease Score", "How easy it is for partners to engage this team"),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def calculate_scores(
    signals: List[Signal],
    telemetry: Any,
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> ProjectScores:
    """Score a repository across four weighted dimensions.

    Dimensions:
    1. Grant Fit (default 35%): technical maturity, activity, community traction
    2. Capital Readiness (default 25%): documentation, quality, velocity, issues
    3. Ecosystem Alignment (default 25%): web3 languages and grant-fit signals
    4. Engagement Ease (default 15%): recency, responsiveness, clarity

    Args:
        signals: Signals from extract_signals
        telemetry: RepoTelemetry, raw API payload dict, or None
        config: Engine configuration (blend weights)
        now: Reference time for recency (defaults to current UTC time)

    Returns:
        ProjectScores; all-zero breakdowns when telemetry is absent
    """
    calculated_at = now or datetime.now(timezone.utc)
    telemetry = with_defaults(telemetry)

    if telemetry is None:
        return ProjectScores(
            grant_fit=_empty_breakdown("grantFit"),
            capital_readiness=_empty_breakdown("capitalReadiness"),
            ecosystem_alignment=_empty_breakdown("ecosystemAlignment"),
            engagement_ease=_empty_breakdown("engagementEase"),
            overall=0,
            calculated_at=calculated_at,
        )

    # Score each dimension
    grant_fit = _score_grant_fit(signals, telemetry)
    capital_readiness = _score_capital_readiness(telemetry)
    ecosystem_alignment = _score_ecosystem_alignment(telemetry, config)
    engagement_ease = _score_engagement_ease(telemetry, now)

    # Calculate weighted overall score
    weights = config.score_weights
    overall = round_half_up(
        grant_fit.score * weights.grant_fit +
        capital_readiness.score * weights.capital_readiness +
        ecosystem_alignment.score * weights.ecosystem_alignment +
        engagement_ease.score * weights.engagement_ease
    )

    logger.debug(
        f"Scored {telemetry.repo or 'unknown repo'}: GF={grant_fit.score} CR={capital_readiness.score} "
        f"EA={ecosystem_alignment.score} EE={engagement_ease.score} overall={overall}"
    )

    return ProjectScores(
        grant_fit=grant_fit,
        capital_readiness=capital_readiness,
        ecosystem_alignment=ecosystem_alignment,
        engagement_ease=engagement_ease,
        overall=min(100, max(0, overall)),
        calculated_at=calculated_at,
    )


def _empty_breakdown(score_type: ScoreType) -> ScoreBreakdown:
    label, _ = SCORE_LABELS[score_type]
    return ScoreBreakdown(type=score_type, score=0, label=label, description="No data available", factors=[])


def _build_breakdown(score_type: ScoreType, total: float, factors: List[ScoreFactor]) -> ScoreBreakdown:
    label, description = SCORE_LABELS[score_type]
    return ScoreBreakdown(
        type=score_type,
        score=min(100, max(0, round_half_up(total))),
        label=label,
        description=description,
        factors=factors,
    )


def _category_mean(signals: List[Signal], category: str) -> float:
    values = [s.normalized_value for s in signals if s.category == category]
    return sum(values) / len(values) if values else 0.0


def _signal_value(signals: List[Signal], key: str) -> float:
    for signal in signals:
        if signal.key == key:
            return signal.normalized_value
    return 0.0


def _resolution_ratio(telemetry: RepoTelemetry) -> float:
    """Closed / total issues, with the denominator floored at 1."""
    return telemetry.issues.closed / max(1, telemetry.issues.total)


def _score_grant_fit(signals: List[Signal], telemetry: RepoTelemetry) -> ScoreBreakdown:
    """Score technical maturity (40%), project activity (30%) and community traction (30%)."""

    factors = []

    code_score = _signal_value(signals, "codeQuality") * 40
    factors.append(ScoreFactor(
        name="Technical Maturity",
        contribution=round_half_up(code_score),
        explanation=f"Code quality score of {telemetry.code_quality.score:g}/100",
    ))

    activity_score = _category_mean(signals, "activity") * 30
    factors.append(ScoreFactor(
        name="Project Activity",
        contribution=round_half_up(activity_score),
        explanation=f"{telemetry.activity.commits_30d} commits in 30 days",
    ))

    community_score = _category_mean(signals, "community") * 30
    factors.append(ScoreFactor(
        name="Community Traction",
        contribution=round_half_up(community_score),
        explanation=f"{telemetry.stars} stars, {telemetry.forks} forks",
    ))

    return _build_breakdown("grantFit", code_score + activity_score + community_score, factors)


def _score_capital_readiness(telemetry: RepoTelemetry) -> ScoreBreakdown:
    """Score documentation (35%), code quality (30%), velocity (20%) and issue management (15%)."""

    factors = []
    notes = telemetry.code_quality.notes

    doc_score = min(len(notes) * 7, 35)
    factors.append(ScoreFactor(
        name="Documentation Quality",
        contribution=doc_score,
        explanation=f"{len(notes)} quality indicators found",
    ))

    quality = telemetry.code_quality.score
    code_score = quality / 100 * 30
    factors.append(ScoreFactor(
        name="Code Quality",
        contribution=round_half_up(code_score),
        explanation=f"Quality score: {quality:g}",
    ))

    commits = telemetry.activity.commits_30d
    velocity_score = min(commits * 0.5, 20)
    factors.append(ScoreFactor(
        name="Development Velocity",
        contribution=round_half_up(velocity_score),
        explanation=f"{commits} recent commits",
    ))

    ratio = _resolution_ratio(telemetry)
    issue_score = ratio * 15
    factors.append(ScoreFactor(
        name="Issue Management",
        contribution=round_half_up(issue_score),
        explanation=f"{round_half_up(ratio * 100)}% issues resolved",
    ))

    total = doc_score + code_score + velocity_score + issue_score
    return _build_breakdown("capitalReadiness", total, factors)


def _language_points(telemetry: RepoTelemetry, config: EngineConfig) -> int:
    """Sum language bonuses; a 'A/B' key scores once if either language is present."""
    points = 0
    for key, bonus in config.language_points.items():
        if any(name in telemetry.languages for name in key.split("/")):
            points += bonus
    return points


def _score_ecosystem_alignment(telemetry: RepoTelemetry, config: EngineConfig) -> ScoreBreakdown:
    """Score language-ecosystem fit (50%) and grant signal alignment (50%)."""

    factors = []

    lang_score = min(_language_points(telemetry, config), 50)
    primary = ", ".join(telemetry.language_names[:3]) or "Unknown"
    factors.append(ScoreFactor(
        name="Language Ecosystem Fit",
        contribution=lang_score,
        explanation=f"Primary: {primary}",
    ))

    signal_count = len(telemetry.grant_fit.signals)
    signal_score = min(signal_count * 10, 50)
    factors.append(ScoreFactor(
        name="Grant Signal Alignment",
        contribution=signal_score,
        explanation=f"{signal_count} grant-relevant signals detected",
    ))

    return _build_breakdown("ecosystemAlignment", lang_score + signal_score, factors)


def _score_engagement_ease(telemetry: RepoTelemetry, now: Optional[datetime]) -> ScoreBreakdown:
    """Score activity recency (40%), team responsiveness (30%) and project clarity (30%)."""

    factors = []

    days = telemetry.days_since_last_commit(now)
    recency_score = max(0.0, 40 - (NO_COMMIT_DAYS if days is None else days) * 0.5)
    factors.append(ScoreFactor(
        name="Activity Recency",
        contribution=round_half_up(recency_score),
        explanation=f"Last commit {days} days ago" if days is not None else "No commit data",
    ))

    responsiveness_score = _resolution_ratio(telemetry) * 30
    factors.append(ScoreFactor(
        name="Team Responsiveness",
        contribution=round_half_up(responsiveness_score),
        explanation=f"{telemetry.issues.closed} issues closed",
    ))

    notes = telemetry.code_quality.notes
    clarity_score = min(len(notes) * 6, 30)
    factors.append(ScoreFactor(
        name="Project Clarity",
        contribution=clarity_score,
        explanation=f"{len(notes)} code quality notes",
    ))

    total = recency_score + responsiveness_score + clarity_score
    return _build_breakdown("engagementEase", total, factors)
