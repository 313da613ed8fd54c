"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from signal_engine.models import BuilderNiche, Grant

FIXED_NOW = datetime(2026, 10, 1, 12, 0, 0, tzinfo=timezone.utc)


def iso_days_ago(days: float, now: datetime = FIXED_NOW) -> str:
    return (now - timedelta(days=days)).isoformat().replace("+00:00", "Z")


@pytest.fixture
def now():
    """Fixed reference clock for recency calculations."""
    return FIXED_NOW


@pytest.fixture
def rich_telemetry():
    """Healthy Solidity project as returned by the analysis API (camelCase)."""
    return {
        "repo": "acme/lending-protocol",
        "stars": 1000,
        "forks": 50,
        "issues": {"open": 5, "closed": 45},
        "languages": {"Solidity": 60, "TypeScript": 40},
        "activity": {"lastCommit": iso_days_ago(20), "commits30d": 25},
        "codeQuality": {"score": 85, "notes": ["has tests", "has CI", "has README"]},
        "grantFit": {"signals": [], "recommendations": [], "matches": []},
    }


@pytest.fixture
def grant_matches():
    """Pre-computed matches as attached by the analysis API."""
    return [
        {
            "program": "Avalanche Foundation Grant",
            "ecosystem": "avalanche",
            "fitScore": 87.5,
            "why": ["Solidity contracts", "DeFi focus"],
            "url": "https://www.avax.network/grants",
        },
        {
            "program": "Aave Grants DAO",
            "ecosystem": "multi-chain",
            "fitScore": 140,
            "why": ["Lending protocol"],
        },
    ]


@pytest.fixture
def neglected_telemetry():
    """Stale, untested, unknown project with a backlog of open issues."""
    return {
        "repo": "someone/old-experiment",
        "stars": 2,
        "forks": 0,
        "issues": {"open": 18, "closed": 2},
        "languages": {"JavaScript": 100},
        "activity": {"lastCommit": iso_days_ago(250), "commits30d": 0},
        "codeQuality": {"score": 20, "notes": []},
        "grantFit": {"signals": [], "recommendations": [], "matches": [{"program": "Gitcoin Grants", "fitScore": 30}]},
    }


@pytest.fixture
def lending_niche():
    return BuilderNiche(
        id="test-defi",
        name="Test DeFi",
        tags=["DeFi", "Lending"],
        recommended_chains=["ethereum"],
    )


@pytest.fixture
def sample_grants():
    """Small catalog covering the tag, category and chain gates."""
    return [
        Grant(id="g1", name="Ethereum DEX Fund", ecosystem="ethereum", category="defi", tags=["DEX", "DeFi"], status="open"),
        Grant(id="g2", name="Solana DeFi Fund", ecosystem="solana", category="defi", tags=["DeFi"], status="rolling"),
        Grant(id="g3", name="Cross-chain Lending", ecosystem="multi-chain", category="other", tags=["Lending"], status="rolling"),
        Grant(id="g4", name="Gaming Guild", ecosystem="ethereum", category="gaming", tags=["Gaming", "NFT"], status="open"),
        Grant(id="g5", name="Lending Research", ecosystem="ethereum", category="research", tags=["Lending", "DeFi", "Research"], status="closed"),
    ]
