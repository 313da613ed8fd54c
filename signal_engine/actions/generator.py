"""Next-action generator.

Rules run in a fixed order that sets display priority; each rule appends at
most one action and the list is capped after all rules have run.
"""

import logging
from typing import Any, List

from ..models.opportunity_card import NextAction, RiskFlag
from ..models.signal import Signal
from ..models.telemetry import with_defaults
from ..risk.detector import has_tests
from ..scorer.weights import DEFAULT_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


def generate_next_actions(
    signals: List[Signal],
    telemetry: Any,
    risk_flags: List[RiskFlag],
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[NextAction]:
    """Map detected risks and signal gaps to prioritized remediation steps.

    Args:
        signals: Signals from extract_signals
        telemetry: RepoTelemetry, raw API payload dict, or None
        risk_flags: Flags from detect_risk_flags
        config: Engine configuration (action rules)

    Returns:
        At most ``config.actions.max_actions`` actions, all with completed=False
    """
    telemetry = with_defaults(telemetry)
    if telemetry is None:
        return []

    rules = config.actions
    suggestions = []

    if any(flag.category == "activity" for flag in risk_flags):
        suggestions.append((
            "Increase commit frequency to show active development",
            "high",
            "Improves Grant Fit and Engagement scores by 15-20 points",
        ))

    if not has_tests(signals):
        suggestions.append((
            "Add unit tests and integration tests",
            "high",
            "Improves Capital Readiness score by 10-15 points",
        ))

    if telemetry.stars < rules.promote_below_stars:
        suggestions.append((
            "Promote project to increase GitHub stars",
            "medium",
            "Improves Ecosystem Alignment and visibility",
        ))

    if len(telemetry.code_quality.notes) < rules.readme_below_notes:
        suggestions.append((
            "Improve README with installation, usage examples, and API docs",
            "high",
            "Improves Capital Readiness by 10-20 points",
        ))

    matches = telemetry.grant_fit.matches
    if matches:
        program = matches[0].program or "Unknown Program"
        suggestions.append((
            f"Apply to top matching grant: {program}",
            "high",
            "Direct funding opportunity",
        ))

    actions = [
        NextAction(id=f"action-{index}", action=action, priority=priority, impact=impact, completed=False)
        for index, (action, priority, impact) in enumerate(suggestions, start=1)
    ]

    logger.debug(f"Generated {len(actions)} next actions (cap {rules.max_actions})")
    return actions[:rules.max_actions]
