"""Plain-text / Markdown export of an opportunity card for the clipboard."""

from typing import Optional

from ..models.opportunity_card import OpportunityCard
from .progress import ActionProgress


def card_to_markdown(card: OpportunityCard, progress: Optional[ActionProgress] = None) -> str:
    """Render the card with the fixed export template.

    Sections: title, summary, the four sub-scores plus overall, top grant
    matches and prioritized next actions. Actions marked done in
    ``progress`` are suffixed with "(completed)".
    """
    scores = card.scores
    lines = [
        f"# {card.project_name} - Opportunity Card",
        "",
        "## Summary",
        card.summary,
        "",
        "## Scores",
        f"- Grant Fit: {scores.grant_fit.score}/100",
        f"- Capital Readiness: {scores.capital_readiness.score}/100",
        f"- Ecosystem Alignment: {scores.ecosystem_alignment.score}/100",
        f"- Engagement Ease: {scores.engagement_ease.score}/100",
        f"- Overall: {scores.overall}/100",
        "",
        "## Top Grant Matches",
    ]
    lines.extend(
        f"- {grant.program_name} ({grant.confidence}% confidence)"
        for grant in card.grant_recommendations
    )
    lines.extend(["", "## Next Actions"])
    for action in card.next_actions:
        line = f"- [{action.priority.upper()}] {action.action}"
        if progress is not None and progress.is_completed(action.id):
            line += " (completed)"
        lines.append(line)

    return "\n".join(lines).strip()
