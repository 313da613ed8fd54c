"""Builder niche catalog and niche derivation from repository telemetry.

Static seed data; replace with an API-backed source when one exists.
"""

from typing import Any, Dict, List, Optional

from ..models.grant import BuilderNiche
from ..models.telemetry import with_defaults

NICHES: List[BuilderNiche] = [
    BuilderNiche(
        id="defi",
        name="DeFi",
        description="Decentralized finance protocols, DEXs, lending, and yield optimization.",
        icon="coins",
        tags=["DeFi", "AMM", "DEX", "Lending", "Yield"],
        recommended_languages=["Solidity", "Rust", "Move"],
        recommended_chains=["ethereum", "avalanche", "polygon", "arbitrum", "base"],
    ),
    BuilderNiche(
        id="gaming",
        name="Gaming",
        description="Web3 games, GameFi, and on-chain gaming experiences.",
        icon="gamepad-2",
        tags=["Gaming", "GameFi", "NFT", "Metaverse"],
        recommended_languages=["Solidity", "Unity", "C++", "Rust"],
        recommended_chains=["ethereum", "polygon", "avalanche", "immutable"],
    ),
    BuilderNiche(
        id="infra",
        name="Infra & Tooling",
        description="Developer tools, indexing, SDKs, and blockchain infrastructure.",
        icon="wrench",
        tags=["Infrastructure", "Tooling", "Indexing", "SDK", "Data"],
        recommended_languages=["Rust", "Go", "TypeScript", "Python"],
        recommended_chains=["multi-chain", "ethereum", "cosmos"],
    ),
    BuilderNiche(
        id="ai-crypto",
        name="AI x Crypto",
        description="AI agents, ML models on-chain, and decentralized AI infrastructure.",
        icon="brain",
        tags=["AI", "ML", "Agents", "Data", "Compute"],
        recommended_languages=["Python", "Rust", "TypeScript"],
        recommended_chains=["multi-chain", "ethereum", "solana"],
    ),
    BuilderNiche(
        id="public-goods",
        name="Public Goods",
        description="Open source projects, public infrastructure, and community-owned protocols.",
        icon="heart",
        tags=["Public Goods", "Open Source", "Community", "QF", "Retroactive"],
        recommended_languages=["TypeScript", "Solidity", "Rust"],
        recommended_chains=["ethereum", "optimism", "multi-chain"],
    ),
    BuilderNiche(
        id="rwa",
        name="RWAs",
        description="Real-world asset tokenization, securities, and on-chain commodities.",
        icon="building-2",
        tags=["RWA", "Tokenization", "DeFi", "Enterprise"],
        recommended_languages=["Solidity", "Rust"],
        recommended_chains=["ethereum", "avalanche", "polygon"],
    ),
    BuilderNiche(
        id="consumer",
        name="Consumer Apps",
        description="Social apps, creator tools, and user-facing Web3 experiences.",
        icon="users",
        tags=["Social", "Consumer", "Creator", "Lens", "Web3 Social"],
        recommended_languages=["TypeScript", "React", "Swift"],
        recommended_chains=["polygon", "base", "optimism", "ethereum"],
    ),
    BuilderNiche(
        id="wallets",
        name="Wallets & AA",
        description="Smart wallets, account abstraction, and key management solutions.",
        icon="wallet",
        tags=["Wallet", "AA", "Account Abstraction", "Security"],
        recommended_languages=["TypeScript", "Solidity", "Rust"],
        recommended_chains=["ethereum", "polygon", "base", "multi-chain"],
    ),
    BuilderNiche(
        id="payments",
        name="Payments",
        description="Stablecoin payments, remittances, and on-chain commerce.",
        icon="credit-card",
        tags=["Payments", "Stablecoin", "Commerce", "DeFi"],
        recommended_languages=["Solidity", "TypeScript", "Go"],
        recommended_chains=["ethereum", "avalanche", "polygon", "solana"],
    ),
    BuilderNiche(
        id="education",
        name="Education",
        description="Learn-to-earn, developer education, and onboarding resources.",
        icon="graduation-cap",
        tags=["Education", "Learn", "Developer", "Onboarding", "Community"],
        recommended_languages=["TypeScript", "Python", "Solidity"],
        recommended_chains=["multi-chain", "ethereum", "polygon"],
    ),
]

# Keyword scan order matters: the first niche with a hit wins
NICHE_KEYWORDS: Dict[str, List[str]] = {
    "Gaming": ["game", "gaming", "unity", "unreal", "godot", "nft", "metaverse", "web3game"],
    "DeFi": ["defi", "dex", "swap", "lending", "yield", "amm", "liquidity", "staking", "vault"],
    "Infrastructure": ["infra", "infrastructure", "sdk", "tooling", "devtools", "indexer", "rpc", "node", "wallet"],
    "AI": ["ai", "ml", "machine-learning", "agent", "llm", "gpt", "model", "neural", "data"],
    "Social": ["social", "dao", "community", "governance", "identity", "reputation", "messaging"],
    "NFT": ["nft", "collectible", "marketplace", "art", "creator", "mint"],
    "Public Goods": ["public-goods", "opensource", "grants", "funding", "commons", "retroactive"],
    "RWA": ["rwa", "real-world", "tokenization", "asset", "enterprise", "compliance"],
}

NICHE_LABEL_TO_ID: Dict[str, str] = {
    "Gaming": "gaming",
    "DeFi": "defi",
    "Infrastructure": "infra",
    "AI": "ai-crypto",
    "Social": "consumer",
    "NFT": "gaming",
    "Public Goods": "public-goods",
    "RWA": "rwa",
}


def get_niche_by_id(niche_id: str, niches: Optional[List[BuilderNiche]] = None) -> Optional[BuilderNiche]:
    """Look up a niche by id."""
    for niche in niches if niches is not None else NICHES:
        if niche.id == niche_id:
            return niche
    return None


def derive_niche(telemetry: Any) -> str:
    """Guess the builder niche label for a repository.

    Scans the repo name, language names and grant-fit signal labels for niche
    keywords, then falls back on the dominant language.
    """
    telemetry = with_defaults(telemetry)
    if telemetry is None:
        return "General"

    search_text = " ".join(
        [telemetry.repo.lower()]
        + [name.lower() for name in telemetry.language_names]
        + [label.lower() for label in telemetry.grant_fit.signals]
    )

    for niche, keywords in NICHE_KEYWORDS.items():
        if any(keyword in search_text for keyword in keywords):
            return niche

    primary = telemetry.primary_language if telemetry.languages else ""
    if primary in ("Solidity", "Vyper", "Move", "Rust"):
        return "Infrastructure"
    if primary in ("Python", "Jupyter Notebook"):
        return "AI"

    return "General"


def niche_id_for_label(label: str) -> Optional[str]:
    """Catalog niche id for a derived niche label, if one exists."""
    return NICHE_LABEL_TO_ID.get(label)
