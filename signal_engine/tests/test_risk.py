"""Tests for threshold-based risk detection."""

from datetime import timedelta

import pytest

from signal_engine.risk import detect_risk_flags
from signal_engine.signals import extract_signals


def _flags(telemetry, now):
    return detect_risk_flags(extract_signals(telemetry, now=now), telemetry, now=now)


def _healthy(now, days_since_commit=5, **overrides):
    payload = {
        "stars": 100,
        "issues": {"open": 2, "closed": 20},
        "activity": {"lastCommit": (now - timedelta(days=days_since_commit)).isoformat(), "commits30d": 12},
        "codeQuality": {"score": 70, "notes": ["has tests"]},
    }
    payload.update(overrides)
    return payload


def test_healthy_project_has_no_flags(rich_telemetry, now):
    assert _flags(rich_telemetry, now) == []


def test_absent_telemetry_has_no_flags(now):
    assert detect_risk_flags([], None, now=now) == []


@pytest.mark.parametrize("days,expected", [
    (60, None),
    (61, ("warning", "Limited recent activity (61 days since last commit)")),
    (180, ("warning", "Limited recent activity (180 days since last commit)")),
    (181, ("critical", "No commits in 181 days")),
])
def test_inactivity_thresholds(now, days, expected):
    flags = [f for f in _flags(_healthy(now, days), now) if f.category == "activity"]

    if expected is None:
        assert flags == []
    else:
        assert len(flags) == 1
        assert (flags[0].type, flags[0].message) == expected


def test_missing_commit_data_skips_inactivity_check(now):
    payload = _healthy(now)
    payload["activity"] = {"commits30d": 3}
    assert [f for f in _flags(payload, now) if f.category == "activity"] == []


def test_low_visibility(now):
    flags = _flags(_healthy(now, stars=4), now)
    assert [f.message for f in flags] == ["Low community visibility (few stars)"]
    assert _flags(_healthy(now, stars=5), now) == []


def test_missing_tests(now):
    payload = _healthy(now)
    payload["codeQuality"] = {"score": 70, "notes": ["has README"]}
    flags = _flags(payload, now)

    assert len(flags) == 1
    assert flags[0].message == "No test coverage detected"
    assert flags[0].category == "code_quality"


def test_missing_test_signal_counts_as_no_tests(now):
    telemetry = _healthy(now)
    assert [f.message for f in detect_risk_flags([], telemetry, now=now)] == ["No test coverage detected"]


@pytest.mark.parametrize("open_issues,closed_issues,flagged", [
    (9, 2, True),
    (8, 2, False),    # total must exceed 10
    (8, 4, False),    # 66% open
    (81, 19, True),
    (80, 20, False),  # exactly 80% is not over the limit
])
def test_open_issue_ratio(now, open_issues, closed_issues, flagged):
    flags = _flags(_healthy(now, issues={"open": open_issues, "closed": closed_issues}), now)
    assert ("High ratio of unresolved issues" in [f.message for f in flags]) is flagged


def test_flag_order_is_fixed(neglected_telemetry, now):
    flags = _flags(neglected_telemetry, now)

    assert [(f.type, f.category) for f in flags] == [
        ("critical", "activity"),
        ("warning", "community"),
        ("warning", "code_quality"),
        ("warning", "community"),
    ]
    assert flags[0].message == "No commits in 250 days"
