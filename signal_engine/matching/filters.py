"""Catalog browse helpers: search, niche-tag filtering, facet filters and
amount formatting. Applied downstream of the matcher.
"""

from typing import List, Optional

from ..models.grant import Grant, GrantFilters


def _tag_overlap(niche_tags: List[str], grant: Grant) -> bool:
    wanted = [t.lower() for t in niche_tags if t]
    have = [t.lower() for t in grant.tags if t]
    return any(nt in gt or gt in nt for nt in wanted for gt in have)


def search_grants(grants: List[Grant], query: str) -> List[Grant]:
    """Case-insensitive search over name, organization, ecosystem, description and tags."""
    if not query or not query.strip():
        return list(grants)

    q = query.strip().lower()
    return [
        grant for grant in grants
        if q in grant.name.lower()
        or q in grant.organization.lower()
        or q in grant.ecosystem.lower()
        or q in grant.description.lower()
        or any(q in tag.lower() for tag in grant.tags)
    ]


def filter_grants_by_niche_tags(grants: List[Grant], niche_tags: List[str]) -> List[Grant]:
    """Grants sharing at least one (substring) tag with the niche."""
    return [grant for grant in grants if _tag_overlap(niche_tags, grant)]


def count_open_grants_for_niche(grants: List[Grant], niche_tags: List[str]) -> int:
    """Number of non-closed grants sharing a tag with the niche."""
    return sum(1 for grant in grants if grant.status != "closed" and _tag_overlap(niche_tags, grant))


def apply_filters(grants: List[Grant], filters: GrantFilters) -> List[Grant]:
    """Apply status, ecosystem, tag and amount-range filters.

    The minimum-amount filter keeps grants whose maximum reaches it; the
    maximum-amount filter keeps grants whose minimum stays under it. Grants
    without the relevant amount are dropped while that filter is active.
    """
    result = list(grants)

    if filters.status:
        result = [g for g in result if g.status in filters.status]

    if filters.ecosystems:
        result = [g for g in result if g.ecosystem in filters.ecosystems]

    if filters.tags:
        result = [g for g in result if any(tag in filters.tags for tag in g.tags)]

    if filters.min_amount is not None:
        result = [g for g in result if g.max_amount_usd is not None and g.max_amount_usd >= filters.min_amount]

    if filters.max_amount is not None:
        result = [g for g in result if g.min_amount_usd is not None and g.min_amount_usd <= filters.max_amount]

    return result


def available_ecosystems(grants: List[Grant]) -> List[str]:
    """Sorted distinct ecosystems, for building filter options."""
    return sorted({grant.ecosystem for grant in grants})


def _format_usd(amount: float) -> str:
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"${round(amount / 1_000)}K"
    return f"${amount:g}"


def format_grant_amount(min_amount: Optional[float] = None, max_amount: Optional[float] = None) -> str:
    """Human-readable award range, e.g. '$50K - $200K', 'Up to $1.5M'."""
    if min_amount and max_amount:
        return f"{_format_usd(min_amount)} - {_format_usd(max_amount)}"
    if min_amount:
        return f"From {_format_usd(min_amount)}"
    if max_amount:
        return f"Up to {_format_usd(max_amount)}"
    return "Variable"
