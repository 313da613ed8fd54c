"""Grant matching against builder niches, plus catalog browse helpers."""

from .matcher import (
    CHAIN_ECOSYSTEM_ALIASES,
    NicheMatch,
    explain_grant_match,
    grant_matches_niche,
    match_grants_for_niche,
    rank_grants_for_niche,
    score_grant_match,
)
from .niches import NICHES, derive_niche, get_niche_by_id, niche_id_for_label
from .filters import (
    apply_filters,
    available_ecosystems,
    count_open_grants_for_niche,
    filter_grants_by_niche_tags,
    format_grant_amount,
    search_grants,
)

__all__ = [
    "CHAIN_ECOSYSTEM_ALIASES",
    "NicheMatch",
    "explain_grant_match",
    "grant_matches_niche",
    "match_grants_for_niche",
    "rank_grants_for_niche",
    "score_grant_match",
    "NICHES",
    "derive_niche",
    "get_niche_by_id",
    "niche_id_for_label",
    "apply_filters",
    "available_ecosystems",
    "count_open_grants_for_niche",
    "filter_grants_by_niche_tags",
    "format_grant_amount",
    "search_grants",
]
