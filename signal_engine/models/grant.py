"""Grant catalog models - read-only reference data for the grant matcher."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

GrantStatus = Literal["open", "rolling", "closed"]


class Grant(BaseModel):
    """A funding program from the static seed or the remote catalog."""

    id: str = Field(..., description="Catalog identifier")
    name: str = Field(..., description="Program name")
    organization: str = Field(default="", description="Funding organization")
    description: str = Field(default="", description="Short description")
    ecosystem: str = Field(default="other", description="Ecosystem identifier, e.g. 'ethereum', 'multi-chain'")
    category: str = Field(default="other", description="Program category, e.g. 'defi', 'infrastructure'")
    chains: List[str] = Field(default_factory=list, description="Chain identifiers the program covers")
    tags: List[str] = Field(default_factory=list, description="Topic tags")
    status: GrantStatus = Field(default="open", description="open, rolling or closed")
    deadline: Optional[str] = Field(None, description="Deadline string as published")
    min_amount_usd: Optional[float] = Field(None, description="Minimum award in USD")
    max_amount_usd: Optional[float] = Field(None, description="Maximum award in USD")
    apply_url: str = Field(default="", description="Application URL")
    region: str = Field(default="global", description="Eligible region")
    grant_type: str = Field(default="grant", description="grant, bounty, retroactive, accelerator, ...")
    featured: bool = Field(default=False, description="Highlighted in the catalog")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": "4",
                "name": "Uniswap Foundation Grants",
                "organization": "Uniswap Foundation",
                "ecosystem": "multi-chain",
                "category": "defi",
                "tags": ["DEX", "AMM", "DeFi"],
                "status": "rolling",
                "min_amount_usd": 25000,
                "max_amount_usd": 150000,
                "apply_url": "https://www.uniswapfoundation.org/grants",
            }
        },
    }


class BuilderNiche(BaseModel):
    """A builder profile used to filter and rank the grant catalog."""

    id: str
    name: str
    description: str = ""
    icon: str = ""
    tags: List[str] = Field(default_factory=list)
    recommended_languages: List[str] = Field(default_factory=list)
    recommended_chains: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class GrantFilters(BaseModel):
    """Downstream browse filters applied after matching."""

    status: List[GrantStatus] = Field(default_factory=list)
    ecosystems: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None

    @property
    def active_count(self) -> int:
        return (
            len(self.status)
            + len(self.ecosystems)
            + len(self.tags)
            + (1 if self.min_amount else 0)
            + (1 if self.max_amount else 0)
        )
