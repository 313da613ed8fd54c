"""Threshold-based risk detector.

Implements four independent, stateless checks. Each check returns at most
one flag; the detector concatenates them in a fixed order.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from ..models.opportunity_card import RiskFlag
from ..models.signal import Signal
from ..models.telemetry import RepoTelemetry, with_defaults
from ..scorer.weights import DEFAULT_CONFIG, EngineConfig, RiskThresholds

logger = logging.getLogger(__name__)


def detect_risk_flags(
    signals: List[Signal],
    telemetry: Any,
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RiskFlag]:
    """Detect risk flags for a repository.

    Checks:
    1. Inactivity (warning after 60 days, critical after 180)
    2. Low community visibility (fewer than 5 stars)
    3. Missing tests
    4. Unhealthy open-issue ratio (more than 80% of over 10 issues open)

    Args:
        signals: Signals from extract_signals
        telemetry: RepoTelemetry, raw API payload dict, or None
        config: Engine configuration (risk thresholds)
        now: Reference time for inactivity (defaults to current UTC time)

    Returns:
        Risk flags; empty list when telemetry is absent
    """
    telemetry = with_defaults(telemetry)
    if telemetry is None:
        return []

    thresholds = config.risk
    checks = [
        _check_inactivity(telemetry, thresholds, now),
        _check_visibility(telemetry, thresholds),
        _check_tests(signals),
        _check_issue_ratio(telemetry, thresholds),
    ]
    flags = [flag for flag in checks if flag is not None]

    logger.debug(f"Detected {len(flags)} risk flags for {telemetry.repo or 'unknown repo'}")
    return flags


def _check_inactivity(
    telemetry: RepoTelemetry, thresholds: RiskThresholds, now: Optional[datetime]
) -> Optional[RiskFlag]:
    """Critical takes precedence over warning; no commit data means no flag."""
    days = telemetry.days_since_last_commit(now)
    if days is None:
        return None

    if days > thresholds.critical_inactivity_days:
        return RiskFlag(type="critical", message=f"No commits in {days} days", category="activity")
    if days > thresholds.inactivity_days:
        return RiskFlag(
            type="warning",
            message=f"Limited recent activity ({days} days since last commit)",
            category="activity",
        )
    return None


def _check_visibility(telemetry: RepoTelemetry, thresholds: RiskThresholds) -> Optional[RiskFlag]:
    if telemetry.stars < thresholds.low_stars:
        return RiskFlag(type="warning", message="Low community visibility (few stars)", category="community")
    return None


def _check_tests(signals: List[Signal]) -> Optional[RiskFlag]:
    if not has_tests(signals):
        return RiskFlag(type="warning", message="No test coverage detected", category="code_quality")
    return None


def _check_issue_ratio(telemetry: RepoTelemetry, thresholds: RiskThresholds) -> Optional[RiskFlag]:
    total = telemetry.issues.total
    if total > thresholds.min_issues_for_ratio and telemetry.issues.open / total > thresholds.high_open_issue_ratio:
        return RiskFlag(type="warning", message="High ratio of unresolved issues", category="community")
    return None


def has_tests(signals: List[Signal]) -> bool:
    """True only when a hasTests signal is present and set."""
    return any(s.key == "hasTests" and s.normalized_value == 1 for s in signals)
