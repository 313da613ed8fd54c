"""Seed grant catalog - curated funding programs used when the remote
catalog is unavailable.
"""

from typing import List

from ..models.grant import Grant

GRANTS_SEED: List[Grant] = [
    Grant(
        id="1",
        name="Avalanche Foundation Grant",
        organization="Avalanche Foundation",
        description="Building innovative DeFi applications on Avalanche C-Chain with focus on capital efficiency and user experience.",
        ecosystem="avalanche",
        category="defi",
        chains=["avalanche"],
        tags=["DeFi", "Avalanche", "Smart Contracts"],
        status="closed",
        deadline="2024-03-31",
        min_amount_usd=50_000,
        max_amount_usd=200_000,
        apply_url="https://www.avax.network/grants",
        featured=True,
    ),
    Grant(
        id="2",
        name="Ethereum Foundation Ecosystem Support",
        organization="Ethereum Foundation",
        description="Supporting projects that strengthen the Ethereum ecosystem through research, development, and community building.",
        ecosystem="ethereum",
        category="infrastructure",
        chains=["ethereum"],
        tags=["Ethereum", "Infrastructure", "Research"],
        status="rolling",
        deadline="Rolling",
        max_amount_usd=500_000,
        apply_url="https://ethereum.org/en/community/grants/",
        featured=True,
    ),
    Grant(
        id="3",
        name="Polygon Village Grants",
        organization="Polygon",
        description="Funding for developers building on Polygon zkEVM, Polygon PoS, and other Polygon solutions.",
        ecosystem="polygon",
        category="tooling",
        chains=["polygon"],
        tags=["Polygon", "L2", "zkEVM"],
        status="closed",
        deadline="2024-04-15",
        min_amount_usd=10_000,
        max_amount_usd=100_000,
        apply_url="https://polygon.technology/village",
    ),
    Grant(
        id="4",
        name="Uniswap Foundation Grants",
        organization="Uniswap Foundation",
        description="Supporting projects that grow the Uniswap ecosystem, including DEX tooling, analytics, and integrations.",
        ecosystem="multi-chain",
        category="defi",
        chains=["ethereum", "arbitrum", "optimism", "polygon", "base"],
        tags=["DEX", "AMM", "DeFi"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=25_000,
        max_amount_usd=150_000,
        apply_url="https://www.uniswapfoundation.org/grants",
    ),
    Grant(
        id="5",
        name="Filecoin Dev Grants",
        organization="Filecoin Foundation",
        description="Building decentralized storage solutions and tools for the Filecoin and IPFS ecosystem.",
        ecosystem="other",
        category="infrastructure",
        chains=["filecoin"],
        tags=["Storage", "IPFS", "Filecoin"],
        status="closed",
        deadline="2024-02-28",
        min_amount_usd=5_000,
        max_amount_usd=50_000,
        apply_url="https://grants.filecoin.io/",
    ),
    Grant(
        id="6",
        name="The Graph Grants",
        organization="The Graph Foundation",
        description="Funding for subgraph development, indexing tools, and Graph ecosystem improvements.",
        ecosystem="multi-chain",
        category="tooling",
        chains=["ethereum", "arbitrum", "polygon"],
        tags=["Indexing", "Subgraphs", "Data"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=10_000,
        max_amount_usd=75_000,
        apply_url="https://thegraph.com/ecosystem/grants/",
    ),
    Grant(
        id="7",
        name="Optimism RetroPGF",
        organization="Optimism Foundation",
        description="Retroactive public goods funding for projects that have contributed to the Optimism ecosystem.",
        ecosystem="ethereum",
        category="infrastructure",
        chains=["optimism"],
        tags=["L2", "Public Goods", "Retroactive"],
        status="closed",
        deadline="2024-05-01",
        apply_url="https://app.optimism.io/retropgf",
        grant_type="retroactive",
        featured=True,
    ),
    Grant(
        id="8",
        name="Gitcoin Grants",
        organization="Gitcoin",
        description="Quadratic funding rounds for open source projects across multiple ecosystems.",
        ecosystem="multi-chain",
        category="other",
        chains=["ethereum", "optimism", "arbitrum", "polygon"],
        tags=["Open Source", "QF", "Community"],
        status="rolling",
        deadline="Quarterly rounds",
        apply_url="https://grants.gitcoin.co/",
    ),
    Grant(
        id="9",
        name="Aave Grants DAO",
        organization="Aave Grants DAO",
        description="Supporting development of tools, integrations, and research for the Aave protocol.",
        ecosystem="multi-chain",
        category="defi",
        chains=["ethereum", "avalanche", "polygon", "arbitrum"],
        tags=["Lending", "DeFi", "Aave"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=5_000,
        max_amount_usd=100_000,
        apply_url="https://aavegrants.org/",
    ),
    Grant(
        id="10",
        name="Cosmos Ecosystem Grants",
        organization="Interchain Foundation",
        description="Building interoperability solutions and IBC-enabled applications in the Cosmos ecosystem.",
        ecosystem="cosmos",
        category="infrastructure",
        chains=["cosmos"],
        tags=["IBC", "Cosmos", "Interoperability"],
        status="closed",
        deadline="2024-03-15",
        min_amount_usd=20_000,
        max_amount_usd=250_000,
        apply_url="https://interchain.io/",
    ),
    Grant(
        id="11",
        name="NFT Developer Bounties",
        organization="OpenSea",
        description="Bug bounties and feature bounties for NFT marketplace integrations and tooling.",
        ecosystem="multi-chain",
        category="nft",
        chains=["ethereum", "polygon", "base"],
        tags=["NFT", "Marketplace", "Bounty"],
        status="rolling",
        deadline="Ongoing",
        min_amount_usd=1_000,
        max_amount_usd=25_000,
        apply_url="https://opensea.io/blog",
        grant_type="bounty",
    ),
    Grant(
        id="12",
        name="GameFi Accelerator",
        organization="Immutable X",
        description="Accelerator program for Web3 gaming studios building on Immutable.",
        ecosystem="ethereum",
        category="gaming",
        chains=["immutable"],
        tags=["Gaming", "NFT", "Accelerator"],
        status="closed",
        deadline="2024-04-30",
        min_amount_usd=100_000,
        max_amount_usd=100_000,
        apply_url="https://www.immutable.com/",
        grant_type="accelerator",
    ),
    Grant(
        id="13",
        name="Social Protocol Grant",
        organization="Lens Protocol",
        description="Building social applications and integrations on Lens Protocol.",
        ecosystem="polygon",
        category="social",
        chains=["polygon"],
        tags=["Social", "Lens", "Web3 Social"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=15_000,
        max_amount_usd=80_000,
        apply_url="https://lens.xyz/",
    ),
    Grant(
        id="14",
        name="DAO Tooling Grants",
        organization="Aragon",
        description="Funding for DAO infrastructure, governance tools, and organizational primitives.",
        ecosystem="ethereum",
        category="dao",
        chains=["ethereum"],
        tags=["DAO", "Governance", "Tooling"],
        status="closed",
        deadline="2024-03-01",
        min_amount_usd=10_000,
        max_amount_usd=50_000,
        apply_url="https://aragon.org/grants",
    ),
    Grant(
        id="15",
        name="European Blockchain Grant",
        organization="EU Blockchain Observatory",
        description="Funding for blockchain research and development projects based in Europe.",
        ecosystem="multi-chain",
        category="infrastructure",
        tags=["Research", "Europe", "Enterprise"],
        status="closed",
        deadline="2024-06-30",
        min_amount_usd=55_000,
        max_amount_usd=550_000,
        apply_url="https://www.eublockchainforum.eu/",
        region="europe",
    ),
    Grant(
        id="16",
        name="Arbitrum Foundation Grants",
        organization="Arbitrum Foundation",
        description="Building scalable DeFi and infrastructure on Arbitrum One and Nova.",
        ecosystem="ethereum",
        category="defi",
        chains=["arbitrum"],
        tags=["L2", "DeFi", "Arbitrum", "Scaling"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=25_000,
        max_amount_usd=150_000,
        apply_url="https://arbitrum.foundation/grants",
    ),
    Grant(
        id="17",
        name="Base Ecosystem Fund",
        organization="Base",
        description="Supporting builders creating consumer-friendly apps on Base.",
        ecosystem="ethereum",
        category="social",
        chains=["base"],
        tags=["Consumer", "Social", "Base", "L2"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=10_000,
        max_amount_usd=100_000,
        apply_url="https://base.org/ecosystem",
        featured=True,
    ),
    Grant(
        id="18",
        name="Starknet Grants",
        organization="StarkWare",
        description="Funding for ZK-powered applications and Cairo development on Starknet.",
        ecosystem="ethereum",
        category="infrastructure",
        chains=["starknet"],
        tags=["ZK", "Cairo", "Starknet", "L2"],
        status="closed",
        deadline="2024-05-31",
        min_amount_usd=20_000,
        max_amount_usd=200_000,
        apply_url="https://starkware.co/grants/",
    ),
    Grant(
        id="19",
        name="Solana Foundation Grants",
        organization="Solana Foundation",
        description="Building high-performance dApps and infrastructure on Solana.",
        ecosystem="solana",
        category="infrastructure",
        chains=["solana"],
        tags=["Solana", "High-Performance", "DeFi", "NFT"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=50_000,
        max_amount_usd=500_000,
        apply_url="https://solana.org/grants",
        featured=True,
    ),
    Grant(
        id="20",
        name="NEAR Grants Program",
        organization="NEAR Foundation",
        description="Supporting user-friendly Web3 applications built on NEAR Protocol.",
        ecosystem="other",
        category="tooling",
        chains=["near"],
        tags=["NEAR", "Sharding", "Consumer", "AI"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=10_000,
        max_amount_usd=250_000,
        apply_url="https://near.org/grants",
    ),
    Grant(
        id="21",
        name="Chainlink Community Grants",
        organization="Chainlink",
        description="Oracle integrations, data feeds, and cross-chain infrastructure.",
        ecosystem="multi-chain",
        category="infrastructure",
        chains=["ethereum", "avalanche", "polygon", "arbitrum", "base"],
        tags=["Oracle", "Data", "Chainlink", "CCIP"],
        status="rolling",
        deadline="Rolling",
        min_amount_usd=5_000,
        max_amount_usd=100_000,
        apply_url="https://chain.link/community/grants",
    ),
]
