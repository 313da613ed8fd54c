"""Tests for opportunity card synthesis, Markdown export and action progress."""

import pytest
from pydantic import ValidationError

from signal_engine.opportunity import (
    ActionProgress,
    analyze_repository,
    card_to_markdown,
    generate_opportunity_card,
    momentum_label,
)
from signal_engine.scorer import calculate_scores
from signal_engine.signals import extract_signals


class TestOpportunityCard:
    """Card assembly from one analysis."""

    def test_absent_telemetry_yields_empty_card(self, now):
        scores = calculate_scores([], None, now=now)
        card = generate_opportunity_card(None, [], scores, now=now)

        assert card.scores.overall == 0
        assert card.risk_flags == []
        assert card.next_actions == []
        assert card.grant_recommendations == []
        assert card.strongest_signals == []
        assert card.project_name == "Unknown Project"
        assert card.summary == "No analysis data available"
        assert card.momentum == "Cold"

    def test_rich_project_card(self, rich_telemetry, grant_matches, now):
        rich_telemetry["grantFit"]["matches"] = grant_matches
        card = analyze_repository(rich_telemetry, now=now).opportunity_card

        assert card.id == f"opp-{int(now.timestamp() * 1000)}"
        assert card.project_id == "acme/lending-protocol"
        assert card.project_name == "lending-protocol"
        assert card.project_url == "https://github.com/acme/lending-protocol"
        assert card.summary == (
            "A highly active Solidity project showing capital-ready characteristics "
            "with an overall score of 65/100."
        )
        assert card.momentum == "Warm"
        assert not [f for f in card.risk_flags if f.type == "critical"]
        assert card.generated_at == now

    def test_strongest_signals(self, rich_telemetry, now):
        card = analyze_repository(rich_telemetry, now=now).opportunity_card

        assert [(s.label, s.value, s.strength) for s in card.strongest_signals] == [
            ("Test Coverage", "true", "strong"),
            ("Smart Contracts", "true", "strong"),
            ("Issue Resolution Rate", "0.9", "strong"),
            ("Code Quality Score", "85", "strong"),
        ]

    def test_signal_strength_bands(self, now):
        card = analyze_repository({"stars": 100, "forks": 5, "activity": {"commits30d": 1}}, now=now).opportunity_card
        strengths = {s.label: s.strength for s in card.strongest_signals}

        assert strengths["GitHub Stars"] == "moderate"
        assert strengths["Forks"] == "weak"

    def test_grant_recommendations(self, rich_telemetry, grant_matches, now):
        rich_telemetry["grantFit"]["matches"] = grant_matches
        recommendations = analyze_repository(rich_telemetry, now=now).opportunity_card.grant_recommendations

        assert len(recommendations) == 2
        first, second = recommendations
        assert first.grant_id == "avalanche-foundation-grant"
        assert first.confidence == 88
        assert first.why_fits == ["Solidity contracts", "DeFi focus"]
        assert first.apply_url == "https://www.avax.network/grants"
        assert second.confidence == 100
        assert second.apply_url is None

    @pytest.mark.parametrize("commits,readiness,expected", [
        (20, "capital-ready", "highly active"),
        (5, "developing", "moderately active"),
        (4, "early-stage", "low activity"),
    ])
    def test_summary_bands(self, now, commits, readiness, expected):
        notes = {"capital-ready": 5, "developing": 2, "early-stage": 0}[readiness]
        payload = {
            "languages": {"Rust": 100},
            "issues": {"open": 0, "closed": 10},
            "activity": {"commits30d": commits},
            "codeQuality": {"score": 90, "notes": ["n"] * notes},
        }
        summary = analyze_repository(payload, now=now).opportunity_card.summary

        assert summary.startswith(f"A {expected} Rust project showing {readiness} characteristics")

    def test_card_is_immutable(self, rich_telemetry, now):
        card = analyze_repository(rich_telemetry, now=now).opportunity_card
        with pytest.raises(ValidationError):
            card.summary = "edited"

    def test_analysis_bundle_matches_individual_stages(self, rich_telemetry, now):
        result = analyze_repository(rich_telemetry, now=now)

        assert result.signals == extract_signals(rich_telemetry, now=now)
        assert result.scores == calculate_scores(result.signals, rich_telemetry, now=now)
        assert result.opportunity_card.scores == result.scores

    @pytest.mark.parametrize("raw", [None, {}, {"repo": None, "stars": "x"}, [1, 2, 3]])
    def test_pipeline_never_raises(self, raw, now):
        result = analyze_repository(raw, now=now)
        assert 0 <= result.scores.overall <= 100
        assert len(result.opportunity_card.next_actions) <= 5


@pytest.mark.parametrize("commits,expected", [(30, "Hot"), (29, "Warm"), (10, "Warm"), (9, "Cold"), (0, "Cold")])
def test_momentum_label(commits, expected):
    assert momentum_label(commits) == expected


class TestExport:
    """Markdown export and completion tracking."""

    def test_markdown_template(self, rich_telemetry, grant_matches, now):
        rich_telemetry["grantFit"]["matches"] = grant_matches
        card = analyze_repository(rich_telemetry, now=now).opportunity_card
        text = card_to_markdown(card)

        assert text.startswith("# lending-protocol - Opportunity Card\n\n## Summary\n")
        assert "- Grant Fit: 76/100" in text
        assert "- Capital Readiness: 73/100" in text
        assert "- Overall: 65/100" in text
        assert "- Avalanche Foundation Grant (88% confidence)" in text
        assert text.endswith("## Next Actions\n- [HIGH] Apply to top matching grant: Avalanche Foundation Grant")

    def test_markdown_marks_completed_actions(self, neglected_telemetry, now):
        card = analyze_repository(neglected_telemetry, now=now).opportunity_card
        progress = ActionProgress(["action-2"])
        lines = card_to_markdown(card, progress).splitlines()

        assert "- [HIGH] Add unit tests and integration tests (completed)" in lines
        assert "- [MEDIUM] Promote project to increase GitHub stars" in lines
        # the card itself is untouched
        assert all(a.completed is False for a in card.next_actions)

    def test_action_progress(self):
        progress = ActionProgress()

        assert progress.toggle("action-1") is True
        assert progress.is_completed("action-1")
        progress.set_completed("action-3")
        assert progress.completed_ids() == ["action-1", "action-3"]
        assert progress.toggle("action-1") is False
        assert len(progress) == 1
        assert not progress.is_completed("action-9")
