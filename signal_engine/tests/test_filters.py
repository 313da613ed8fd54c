"""Tests for catalog browse helpers."""

import pytest

from signal_engine.catalog import GRANTS_SEED
from signal_engine.matching import (
    apply_filters,
    available_ecosystems,
    count_open_grants_for_niche,
    filter_grants_by_niche_tags,
    format_grant_amount,
    search_grants,
)
from signal_engine.models import GrantFilters


def test_search_by_tag_and_description():
    assert [g.id for g in search_grants(GRANTS_SEED, "oracle")] == ["21"]


def test_search_by_organization_is_case_insensitive():
    assert [g.name for g in search_grants(GRANTS_SEED, "STARKWARE")] == ["Starknet Grants"]


def test_blank_search_returns_everything():
    assert len(search_grants(GRANTS_SEED, "   ")) == len(GRANTS_SEED)


def test_filter_by_niche_tags():
    ids = [g.id for g in filter_grants_by_niche_tags(GRANTS_SEED, ["DeFi"])]
    assert ids == ["1", "4", "9", "16", "19"]


def test_count_open_grants_excludes_closed():
    # Avalanche (id 1) is closed
    assert count_open_grants_for_niche(GRANTS_SEED, ["DeFi"]) == 4


def test_status_and_min_amount_filters():
    filters = GrantFilters(status=["rolling"], min_amount=100_000)
    ids = [g.id for g in apply_filters(GRANTS_SEED, filters)]

    assert ids == ["2", "4", "9", "16", "17", "19", "20", "21"]
    assert filters.active_count == 2


def test_max_amount_filter_drops_grants_without_minimum():
    grants = GRANTS_SEED[:3]
    ids = [g.id for g in apply_filters(grants, GrantFilters(max_amount=20_000))]
    # Ethereum Foundation has no minimum
    assert ids == ["3"]


def test_ecosystem_and_tag_filters():
    filters = GrantFilters(ecosystems=["ethereum"], tags=["L2"])
    ids = [g.id for g in apply_filters(GRANTS_SEED, filters)]
    assert ids == ["7", "16", "17", "18"]


def test_no_filters_keeps_catalog():
    assert apply_filters(GRANTS_SEED, GrantFilters()) == list(GRANTS_SEED)
    assert GrantFilters().active_count == 0


def test_available_ecosystems(sample_grants):
    assert available_ecosystems(sample_grants) == ["ethereum", "multi-chain", "solana"]


@pytest.mark.parametrize("low,high,expected", [
    (50_000, 200_000, "$50K - $200K"),
    (5_000, None, "From $5K"),
    (None, 1_500_000, "Up to $1.5M"),
    (None, None, "Variable"),
    (0, 0, "Variable"),
])
def test_format_grant_amount(low, high, expected):
    assert format_grant_amount(low, high) == expected
