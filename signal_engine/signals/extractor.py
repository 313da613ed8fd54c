"""Signal extractor.

Turns one RepoTelemetry into a flat list of normalized signals, one per row
of the configured signal table. Each row names a normalization rule; the
metric readers below only supply the raw value and its description.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..models.signal import Signal
from ..models.telemetry import NO_COMMIT_DAYS, RepoTelemetry, with_defaults
from ..scorer.weights import DEFAULT_CONFIG, EngineConfig, SignalDefinition, ThresholdTiers

logger = logging.getLogger(__name__)

RawValue = Union[bool, int, float, str]
MetricReader = Callable[[RepoTelemetry, Optional[datetime]], Tuple[RawValue, str]]

TEST_NOTE_KEYWORDS = ("test", "spec")
CONTRACT_LANGUAGE = "Solidity"


def normalize_value(value: float, tiers: ThresholdTiers) -> float:
    """Map a raw count onto [0, 1] through four piecewise-linear tiers.

    0..low -> 0..0.25, low..medium -> 0.25..0.5, medium..high -> 0.5..0.75,
    high..top -> 0.75..1.0, and exactly 1.0 at or above the top bound.
    """
    if value <= 0:
        return 0.0
    if value <= tiers.low:
        return value / tiers.low * 0.25
    if value <= tiers.medium:
        return 0.25 + (value - tiers.low) / (tiers.medium - tiers.low) * 0.25
    if value <= tiers.high:
        return 0.5 + (value - tiers.medium) / (tiers.high - tiers.medium) * 0.25
    if value < tiers.top:
        return 0.75 + (value - tiers.high) / (tiers.top - tiers.high) * 0.25
    return 1.0


def detect_tests(notes: List[str]) -> bool:
    """True if any quality note mentions tests or specs."""
    return any(keyword in note.lower() for note in notes for keyword in TEST_NOTE_KEYWORDS)


def detect_contracts(languages: Dict[str, float]) -> bool:
    """True if the language map lists Solidity."""
    return CONTRACT_LANGUAGE in languages


def _number(value: float) -> Union[int, float]:
    return int(value) if float(value).is_integer() else value


# ---------------------------------------------------------------------------
# Metric readers
# ---------------------------------------------------------------------------

def _read_commits_30d(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    commits = telemetry.activity.commits_30d
    return commits, f"{commits} commits in the last 30 days"


def _read_last_commit_recency(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    days = telemetry.days_since_last_commit(now)
    if days is None:
        return NO_COMMIT_DAYS, "No commit data"
    return days, f"Last commit {days} days ago"


def _read_stars(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    return telemetry.stars, f"{telemetry.stars:,} stars"


def _read_forks(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    return telemetry.forks, f"{telemetry.forks:,} forks"


def _read_issue_activity(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    issues = telemetry.issues
    rate = issues.closed / issues.total if issues.total > 0 else 0.0
    return rate, f"{round(rate * 100)}% of issues resolved"


def _read_code_quality(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    score = _number(telemetry.code_quality.score)
    return score, f"Quality score: {score}/100"


def _read_has_tests(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    has_tests = detect_tests(telemetry.code_quality.notes)
    return has_tests, "Has test files" if has_tests else "No tests detected"


def _read_has_contracts(telemetry: RepoTelemetry, now: Optional[datetime]) -> Tuple[RawValue, str]:
    has_contracts = detect_contracts(telemetry.languages)
    return has_contracts, "Contains Solidity contracts" if has_contracts else "No smart contracts detected"


METRIC_READERS: Dict[str, MetricReader] = {
    "commits30d": _read_commits_30d,
    "lastCommitRecency": _read_last_commit_recency,
    "stars": _read_stars,
    "forks": _read_forks,
    "issueActivity": _read_issue_activity,
    "codeQuality": _read_code_quality,
    "hasTests": _read_has_tests,
    "hasContracts": _read_has_contracts,
}


def _normalize(definition: SignalDefinition, raw: RawValue, config: EngineConfig) -> float:
    """Apply the definition's normalization rule, clamped to [0, 1]."""
    if definition.rule == "presence":
        return 1.0 if raw else 0.0

    value = float(raw)
    if definition.rule == "tiered":
        normalized = normalize_value(value, config.thresholds[definition.key])
    elif definition.rule == "percent":
        normalized = value / 100
    elif definition.rule == "recency":
        normalized = 1 - value / config.recency_window_days
    else:  # ratio
        normalized = value

    return min(1.0, max(0.0, normalized))


def extract_signals(
    telemetry: Any,
    config: EngineConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[Signal]:
    """Extract one normalized signal per configured metric.

    Args:
        telemetry: RepoTelemetry, raw API payload dict, or None
        config: Engine configuration (signal table and thresholds)
        now: Reference time for recency (defaults to current UTC time)

    Returns:
        Signals in signal-table order; empty list for absent telemetry
    """
    telemetry = with_defaults(telemetry)
    if telemetry is None:
        return []

    signals = []
    for definition in config.signals:
        reader = METRIC_READERS.get(definition.key)
        if reader is None:
            logger.debug(f"No metric reader for signal '{definition.key}', skipping")
            continue

        raw, description = reader(telemetry, now)
        signals.append(Signal(
            key=definition.key,
            category=definition.category,
            raw_value=raw,
            normalized_value=_normalize(definition, raw, config),
            label=definition.label,
            description=description,
            weight=definition.weight,
        ))

    logger.debug(f"Extracted {len(signals)} signals for {telemetry.repo or 'unknown repo'}")
    return signals
