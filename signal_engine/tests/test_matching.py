"""Tests for grant-niche matching and niche derivation."""

import pytest

from signal_engine.catalog import GRANTS_SEED
from signal_engine.matching import (
    NICHES,
    derive_niche,
    explain_grant_match,
    get_niche_by_id,
    grant_matches_niche,
    match_grants_for_niche,
    niche_id_for_label,
    rank_grants_for_niche,
    score_grant_match,
)
from signal_engine.models import BuilderNiche, Grant


class TestMatchScore:
    """Tag, category and chain scoring."""

    def test_defi_grant_on_ethereum(self, lending_niche):
        grant = Grant(id="x", name="DEX Fund", tags=["DEX", "DeFi"], ecosystem="ethereum", category="defi")

        assert grant_matches_niche(lending_niche, grant)
        assert score_grant_match(lending_niche, grant) >= 5

    def test_score_reasons(self, lending_niche):
        grant = Grant(id="x", name="DEX Fund", tags=["DEX", "DeFi"], ecosystem="ethereum", category="defi")
        score, reasons = explain_grant_match(lending_niche, grant)

        assert score == 5
        assert reasons == [
            "Tag overlap: 'defi' ~ 'defi'",
            "Category 'defi' matches niche tags",
            "Chain 'ethereum' covers ecosystem 'ethereum'",
        ]

    def test_every_overlapping_tag_pair_scores(self, lending_niche):
        grant = Grant(id="x", name="Lending", tags=["Lending", "DeFi Lending"], ecosystem="solana", category="other")
        # lending~lending, lending~defi lending, defi~defi lending; no chain hit
        assert score_grant_match(lending_niche, grant) == 6

    def test_substring_overlap_is_case_insensitive(self):
        niche = BuilderNiche(id="n", name="N", tags=["infra"], recommended_chains=["ethereum"])
        grant = Grant(id="x", name="Infra", tags=["INFRASTRUCTURE"], ecosystem="ethereum")
        assert grant_matches_niche(niche, grant)

    def test_empty_tags_never_overlap(self):
        niche = BuilderNiche(id="n", name="N", tags=["", "  "], recommended_chains=["ethereum"])
        grant = Grant(id="x", name="Any", tags=[""], ecosystem="ethereum", category="")
        assert not grant_matches_niche(niche, grant)

    def test_layer_two_chain_aliases_to_ethereum(self):
        niche = BuilderNiche(id="n", name="N", tags=["DeFi"], recommended_chains=["arbitrum"])
        grant = Grant(id="x", name="Eth DeFi", tags=["DeFi"], ecosystem="ethereum")
        assert grant_matches_niche(niche, grant)

    def test_multi_chain_grant_passes_chain_gate(self):
        niche = BuilderNiche(id="n", name="N", tags=["DeFi"], recommended_chains=["solana"])
        grant = Grant(id="x", name="Everywhere", tags=["DeFi"], ecosystem="multi-chain")
        assert grant_matches_niche(niche, grant)

    def test_unrelated_ecosystem_fails_chain_gate(self, lending_niche):
        grant = Grant(id="x", name="Solana DeFi", tags=["DeFi"], ecosystem="solana", category="defi")
        assert not grant_matches_niche(lending_niche, grant)


class TestMatchGrantsForNiche:
    """Filtering and ranking over a catalog."""

    def test_sample_catalog_ranking(self, lending_niche, sample_grants):
        ranked = rank_grants_for_niche(lending_niche, sample_grants)

        assert [(m.grant.id, m.score) for m in ranked] == [("g1", 5), ("g5", 5), ("g3", 3)]

    def test_removing_overlapping_tags_removes_grant(self, lending_niche):
        grant = Grant(id="x", name="Lending", tags=["Lending"], ecosystem="ethereum", category="other")
        stripped = grant.model_copy(update={"tags": ["Gaming"]})
        niches = [lending_niche]

        assert match_grants_for_niche("test-defi", [grant], niches) == [grant]
        assert match_grants_for_niche("test-defi", [stripped], niches) == []

    def test_unknown_niche_matches_nothing(self):
        assert match_grants_for_niche("no-such-niche", GRANTS_SEED) == []

    def test_seed_defi_matches(self):
        ids = [grant.id for grant in match_grants_for_niche("defi", GRANTS_SEED)]

        assert "1" in ids       # Avalanche DeFi
        assert "16" in ids      # Arbitrum
        assert "19" not in ids  # Solana is not a recommended DeFi chain
        assert "10" not in ids  # Cosmos interoperability

    @pytest.mark.parametrize("niche", NICHES, ids=lambda n: n.id)
    def test_seed_matches_are_sound_and_sorted(self, niche):
        ranked = rank_grants_for_niche(niche, GRANTS_SEED)
        scores = [m.score for m in ranked]

        assert scores == sorted(scores, reverse=True)
        assert all(grant_matches_niche(niche, m.grant) for m in ranked)
        unmatched = [g for g in GRANTS_SEED if g not in [m.grant for m in ranked]]
        assert not any(grant_matches_niche(niche, g) for g in unmatched)


class TestNiches:
    """Niche catalog lookups and derivation."""

    def test_get_niche_by_id(self):
        assert get_niche_by_id("ai-crypto").name == "AI x Crypto"
        assert get_niche_by_id("missing") is None

    def test_niche_catalog(self):
        assert len(NICHES) == 10
        assert len({n.id for n in NICHES}) == 10

    @pytest.mark.parametrize("payload,expected", [
        ({"repo": "acme/lending-protocol", "languages": {"Solidity": 100}}, "DeFi"),
        ({"repo": "studio/unity-racer"}, "Gaming"),
        ({"repo": "x/y", "grantFit": {"signals": ["Governance"]}}, "Social"),
        ({"repo": "foo/bar", "languages": {"Rust": 100}}, "Infrastructure"),
        ({"repo": "x/y", "languages": {"Python": 100}}, "AI"),
        ({"repo": "x/y", "languages": {"Go": 100}}, "General"),
        (None, "General"),
    ])
    def test_derive_niche(self, payload, expected):
        assert derive_niche(payload) == expected

    def test_niche_labels_map_to_catalog(self):
        assert niche_id_for_label("NFT") == "gaming"
        assert niche_id_for_label("AI") == "ai-crypto"
        assert niche_id_for_label("General") is None
        for label in ("Gaming", "DeFi", "Infrastructure", "AI", "Social", "NFT", "Public Goods", "RWA"):
            assert get_niche_by_id(niche_id_for_label(label)) is not None
