"""Tests for engine configuration (weights, tiers, thresholds) and file loading."""

import json

import pytest
import yaml

from signal_engine.scorer import (
    ACTIVITY_FOCUSED,
    DEFAULT_CONFIG,
    EngineConfig,
    ScoreTypeWeights,
    SignalDefinition,
    load_engine_config,
    save_engine_config,
)


class TestDefaults:
    """Published default weights."""

    def test_blend_weights(self):
        weights = DEFAULT_CONFIG.score_weights
        assert (weights.grant_fit, weights.capital_readiness, weights.ecosystem_alignment, weights.engagement_ease) == (
            0.35, 0.25, 0.25, 0.15,
        )

    def test_signal_table(self):
        assert DEFAULT_CONFIG.signal_keys() == [
            "commits30d", "lastCommitRecency", "stars", "forks",
            "issueActivity", "codeQuality", "hasTests", "hasContracts",
        ]
        assert DEFAULT_CONFIG.signal_definition("hasContracts").weight == 0.10
        assert DEFAULT_CONFIG.signal_definition("unknown") is None

    def test_risk_thresholds(self):
        risk = DEFAULT_CONFIG.risk
        assert (risk.inactivity_days, risk.critical_inactivity_days, risk.low_stars) == (60, 180, 5)

    def test_preset_is_valid(self):
        assert ACTIVITY_FOCUSED.score_weights.engagement_ease == 0.30

    def test_config_is_immutable(self):
        with pytest.raises(Exception):
            DEFAULT_CONFIG.recency_window_days = 30


class TestValidation:
    """Invalid configurations are rejected at construction."""

    def test_blend_weights_must_sum_to_one(self):
        with pytest.raises(ValueError, match="sum to 1.0"):
            ScoreTypeWeights(grant_fit=0.5, capital_readiness=0.5, ecosystem_alignment=0.5, engagement_ease=0.5)

    def test_blend_weight_range(self):
        with pytest.raises(ValueError):
            ScoreTypeWeights(grant_fit=1.2, capital_readiness=-0.2, ecosystem_alignment=0.0, engagement_ease=0.0)

    def test_signal_weight_range(self):
        with pytest.raises(ValueError):
            SignalDefinition(key="stars", category="community", label="Stars", weight=1.5, rule="tiered")

    def test_tiered_signal_requires_thresholds(self):
        with pytest.raises(ValueError, match="watchers"):
            EngineConfig(signals=(
                SignalDefinition(key="watchers", category="community", label="Watchers", weight=0.1, rule="tiered"),
            ))

    def test_action_cap_cannot_exceed_five(self):
        with pytest.raises(ValueError):
            EngineConfig(actions={"max_actions": 8})


class TestLoadSave:
    """JSON/YAML configuration files."""

    def test_no_path_returns_defaults(self):
        assert load_engine_config(None) is DEFAULT_CONFIG
        assert load_engine_config("") is DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_engine_config(str(tmp_path / "nope.yaml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "weights.toml"
        path.write_text("x = 1")
        with pytest.raises(ValueError, match="Unsupported"):
            load_engine_config(str(path))

    def test_partial_yaml_keeps_defaults(self, tmp_path):
        path = tmp_path / "weights.yaml"
        path.write_text(yaml.safe_dump({
            "score_weights": {
                "grant_fit": 0.4,
                "capital_readiness": 0.2,
                "ecosystem_alignment": 0.2,
                "engagement_ease": 0.2,
            },
            "thresholds": {
                "stars": {"low": 5, "medium": 50, "high": 500},
                "forks": {"low": 5, "medium": 25, "high": 100, "exceptional": 500},
                "commits30d": {"low": 5, "medium": 20, "high": 50, "exceptional": 100},
            },
            "version": "test_1",
        }))
        config = load_engine_config(str(path))

        assert config.score_weights.grant_fit == 0.4
        assert config.thresholds["stars"].top == 1000
        assert config.version == "test_1"
        assert config.risk == DEFAULT_CONFIG.risk

    def test_partial_thresholds_must_cover_tiered_signals(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"thresholds": {"stars": {"low": 5, "medium": 50, "high": 500}}}))
        with pytest.raises(ValueError, match="forks"):
            load_engine_config(str(path))

    def test_invalid_weights_in_file(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"score_weights": {"grant_fit": 0.9}}))
        with pytest.raises(ValueError):
            load_engine_config(str(path))

    @pytest.mark.parametrize("suffix", [".json", ".yml"])
    def test_saved_config_loads_back(self, tmp_path, suffix):
        path = tmp_path / f"weights{suffix}"
        save_engine_config(ACTIVITY_FOCUSED, str(path))

        assert load_engine_config(str(path)) == ACTIVITY_FOCUSED
