"""Grant-niche matching.

A deliberately simple bag-of-tags matcher: case-insensitive substring overlap
between niche tags and grant tags/category, gated by a chain -> ecosystem
alias table. Every point of the ranking score maps to a readable reason.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..models.grant import BuilderNiche, Grant
from .niches import NICHES, get_niche_by_id

logger = logging.getLogger(__name__)

MULTI_CHAIN = "multi-chain"

# Chain identifiers -> ecosystems they count as during matching; L2s map to ethereum
CHAIN_ECOSYSTEM_ALIASES: Dict[str, Tuple[str, ...]] = {
    "ethereum": ("ethereum", MULTI_CHAIN),
    "avalanche": ("avalanche", MULTI_CHAIN),
    "polygon": ("polygon", MULTI_CHAIN),
    "solana": ("solana", MULTI_CHAIN),
    "cosmos": ("cosmos", MULTI_CHAIN),
    "arbitrum": ("ethereum", MULTI_CHAIN),
    "base": ("ethereum", MULTI_CHAIN),
    "optimism": ("ethereum", MULTI_CHAIN),
    "immutable": ("ethereum", MULTI_CHAIN),
    MULTI_CHAIN: (MULTI_CHAIN, "ethereum", "avalanche", "polygon", "solana", "cosmos"),
}

TAG_POINTS = 2
CATEGORY_POINTS = 2
CHAIN_POINTS = 1


@dataclass(frozen=True)
class NicheMatch:
    """A matched grant with its ranking score and the reasons behind it."""

    grant: Grant
    score: int
    reasons: List[str] = field(default_factory=list)


def _lower_all(values: List[str]) -> List[str]:
    return [v.strip().lower() for v in values if v and v.strip()]


def _overlaps(a: str, b: str) -> bool:
    """Substring overlap in either direction; empty strings never overlap."""
    return bool(a) and bool(b) and (a in b or b in a)


def _ecosystems_for_chain(chain: str, aliases: Dict[str, Tuple[str, ...]]) -> Tuple[str, ...]:
    chain = chain.strip().lower()
    return aliases.get(chain, (chain,))


def _matched_chain(
    niche: BuilderNiche, grant: Grant, aliases: Dict[str, Tuple[str, ...]]
) -> Optional[str]:
    """First recommended chain whose aliases include the grant ecosystem."""
    ecosystem = grant.ecosystem.strip().lower()
    for chain in niche.recommended_chains:
        if ecosystem in _ecosystems_for_chain(chain, aliases):
            return chain
    return None


def has_tag_match(niche: BuilderNiche, grant: Grant) -> bool:
    """Any niche tag overlaps a grant tag or the grant category."""
    niche_tags = _lower_all(niche.tags)
    grant_tags = _lower_all(grant.tags)
    category = grant.category.strip().lower()
    return any(
        _overlaps(niche_tag, category) or any(_overlaps(niche_tag, grant_tag) for grant_tag in grant_tags)
        for niche_tag in niche_tags
    )


def has_chain_match(
    niche: BuilderNiche, grant: Grant, aliases: Dict[str, Tuple[str, ...]] = CHAIN_ECOSYSTEM_ALIASES
) -> bool:
    """Grant is multi-chain or its ecosystem is aliased by a recommended chain."""
    if grant.ecosystem.strip().lower() == MULTI_CHAIN:
        return True
    return _matched_chain(niche, grant, aliases) is not None


def grant_matches_niche(
    niche: BuilderNiche, grant: Grant, aliases: Dict[str, Tuple[str, ...]] = CHAIN_ECOSYSTEM_ALIASES
) -> bool:
    return has_tag_match(niche, grant) and has_chain_match(niche, grant, aliases)


def explain_grant_match(
    niche: BuilderNiche, grant: Grant, aliases: Dict[str, Tuple[str, ...]] = CHAIN_ECOSYSTEM_ALIASES
) -> Tuple[int, List[str]]:
    """Compute the ranking score and one reason per scoring event.

    Scoring:
    - +2 per overlapping (niche tag, grant tag) pair
    - +2 if a niche tag contains the grant category
    - +1 if a recommended chain aliases to the grant ecosystem (first hit only)
    """
    score = 0
    reasons = []

    niche_tags = _lower_all(niche.tags)
    grant_tags = _lower_all(grant.tags)
    for niche_tag in niche_tags:
        for grant_tag in grant_tags:
            if _overlaps(niche_tag, grant_tag):
                score += TAG_POINTS
                reasons.append(f"Tag overlap: '{niche_tag}' ~ '{grant_tag}'")

    category = grant.category.strip().lower()
    if category and any(category in niche_tag for niche_tag in niche_tags):
        score += CATEGORY_POINTS
        reasons.append(f"Category '{category}' matches niche tags")

    chain = _matched_chain(niche, grant, aliases)
    if chain is not None:
        score += CHAIN_POINTS
        reasons.append(f"Chain '{chain}' covers ecosystem '{grant.ecosystem}'")

    return score, reasons


def score_grant_match(
    niche: BuilderNiche, grant: Grant, aliases: Dict[str, Tuple[str, ...]] = CHAIN_ECOSYSTEM_ALIASES
) -> int:
    """Ranking score of ``grant`` for ``niche``."""
    score, _ = explain_grant_match(niche, grant, aliases)
    return score


def rank_grants_for_niche(
    niche: BuilderNiche,
    grants: List[Grant],
    aliases: Dict[str, Tuple[str, ...]] = CHAIN_ECOSYSTEM_ALIASES,
) -> List[NicheMatch]:
    """Matching grants with scores and reasons, best first.

    Ties keep catalog order.
    """
    matches = []
    for grant in grants:
        if not grant_matches_niche(niche, grant, aliases):
            continue
        score, reasons = explain_grant_match(niche, grant, aliases)
        matches.append(NicheMatch(grant=grant, score=score, reasons=reasons))

    matches.sort(key=lambda m: m.score, reverse=True)
    logger.debug(f"Niche '{niche.id}': {len(matches)} of {len(grants)} grants matched")
    return matches


def match_grants_for_niche(
    niche_id: str,
    grants: List[Grant],
    niches: Optional[List[BuilderNiche]] = None,
    aliases: Dict[str, Tuple[str, ...]] = CHAIN_ECOSYSTEM_ALIASES,
) -> List[Grant]:
    """Grants matching the niche with id ``niche_id``, ranked by match score.

    Args:
        niche_id: Niche identifier, resolved against ``niches``
        grants: Grant catalog
        niches: Niche catalog (defaults to the static seed)
        aliases: Chain -> ecosystem alias table

    Returns:
        Ranked matching grants; empty list for an unknown niche
    """
    niche = get_niche_by_id(niche_id, niches if niches is not None else NICHES)
    if niche is None:
        logger.warning(f"Unknown niche id: {niche_id}")
        return []
    return [match.grant for match in rank_grants_for_niche(niche, grants, aliases)]
