"""RepoTelemetry - Input model for the raw repository analysis payload.

The remote analysis API returns camelCase JSON with any field possibly
missing or mistyped. ``with_defaults`` is the single normalization step run at
pipeline entry: everything downstream can rely on a fully populated model.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Days reported when a repository carries no usable commit timestamp
NO_COMMIT_DAYS = 999


class IssueCounts(BaseModel):
    """Open/closed issue totals."""

    open: int = Field(default=0, description="Open issue count")
    closed: int = Field(default=0, description="Closed issue count")

    model_config = {"frozen": True}

    @field_validator("open", "closed")
    @classmethod
    def non_negative(cls, v: int) -> int:
        return max(0, v)

    @property
    def total(self) -> int:
        return self.open + self.closed


class ActivityBlock(BaseModel):
    """Commit activity."""

    last_commit: Optional[datetime] = Field(None, description="Timestamp of the most recent commit")
    commits_30d: int = Field(default=0, description="Commits in the last 30 days")

    model_config = {"frozen": True}

    @field_validator("last_commit")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive timestamps are UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator("commits_30d")
    @classmethod
    def non_negative(cls, v: int) -> int:
        return max(0, v)


class CodeQualityBlock(BaseModel):
    """Crawler-assigned quality score and free-text notes."""

    score: float = Field(default=0.0, description="Quality score 0-100")
    notes: List[str] = Field(default_factory=list, description="Quality observations, e.g. 'has tests'")

    model_config = {"frozen": True}

    @field_validator("score")
    @classmethod
    def clamp_score(cls, v: float) -> float:
        if math.isnan(v):
            return 0.0
        return min(100.0, max(0.0, v))


class GrantMatch(BaseModel):
    """A grant match pre-computed by the remote analysis API."""

    program: str = Field(default="", description="Program name")
    ecosystem: str = Field(default="", description="Ecosystem identifier")
    fit_score: float = Field(default=0.0, description="Remote fit score 0-100")
    why: List[str] = Field(default_factory=list, description="Reasons the program fits")
    url: Optional[str] = Field(None, description="Application URL")

    model_config = {"frozen": True}


class GrantFitBlock(BaseModel):
    """Grant-fit hints from the remote analysis API."""

    signals: List[str] = Field(default_factory=list, description="Grant-relevant signal labels")
    recommendations: List[str] = Field(default_factory=list, description="Free-text recommendations")
    matches: List[GrantMatch] = Field(default_factory=list, description="Pre-computed grant matches")

    model_config = {"frozen": True}


class RepoTelemetry(BaseModel):
    """Immutable snapshot of one repository.

    All numbers default to zero and all collections to empty, so a telemetry
    object built from a partial payload is always safe to score.
    """

    repo: str = Field(default="", description="Repository identifier, e.g. 'owner/name'")
    stars: int = Field(default=0, description="Stargazer count")
    forks: int = Field(default=0, description="Fork count")
    issues: IssueCounts = Field(default_factory=IssueCounts)
    languages: Dict[str, float] = Field(default_factory=dict, description="Language name -> percentage share")
    activity: ActivityBlock = Field(default_factory=ActivityBlock)
    code_quality: CodeQualityBlock = Field(default_factory=CodeQualityBlock)
    grant_fit: GrantFitBlock = Field(default_factory=GrantFitBlock)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "repo": "acme/lending-protocol",
                "stars": 1000,
                "forks": 50,
                "issues": {"open": 5, "closed": 45},
                "languages": {"Solidity": 60, "TypeScript": 40},
                "activity": {"last_commit": "2026-09-27T12:00:00Z", "commits_30d": 25},
                "code_quality": {"score": 85, "notes": ["has tests", "has CI", "has README"]},
                "grant_fit": {"signals": ["defi", "evm"], "recommendations": [], "matches": []},
            }
        },
    }

    @field_validator("stars", "forks")
    @classmethod
    def non_negative(cls, v: int) -> int:
        return max(0, v)

    def days_since_last_commit(self, now: Optional[datetime] = None) -> Optional[int]:
        """Whole days since the last commit, or None without commit data.

        Future-dated commits count as zero days old.
        """
        last_commit = self.activity.last_commit
        if last_commit is None:
            return None
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        elapsed = (now - last_commit).total_seconds()
        return max(0, int(elapsed // 86400))

    @property
    def language_names(self) -> List[str]:
        return list(self.languages.keys())

    @property
    def primary_language(self) -> str:
        """Language with the largest share; first listed wins ties."""
        if not self.languages:
            return "Unknown"
        return max(self.languages, key=lambda name: self.languages[name])


# ---------------------------------------------------------------------------
# Safe accessors
# ---------------------------------------------------------------------------

def _safe_number(value: Any, fallback: float = 0.0) -> float:
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)) and not math.isnan(value) and not math.isinf(value):
        return float(value)
    return fallback


def _safe_int(value: Any) -> int:
    return max(0, int(_safe_number(value)))


def _safe_string(value: Any, fallback: str = "") -> str:
    return value if isinstance(value, str) else fallback


def _safe_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _safe_strings(value: Any) -> List[str]:
    return [item for item in _safe_list(value) if isinstance(item, str)]


def _safe_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _pick(data: dict, *keys: str) -> Any:
    """Return the first present key, accepting camelCase and snake_case."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 commit timestamp; None if absent or unparseable."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Could not parse commit timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _grant_match(data: Any) -> Optional[GrantMatch]:
    data = _safe_dict(data)
    if not data:
        return None
    url = _pick(data, "url", "applyUrl", "apply_url")
    return GrantMatch(
        program=_safe_string(data.get("program")),
        ecosystem=_safe_string(data.get("ecosystem")),
        fit_score=_safe_number(_pick(data, "fitScore", "fit_score")),
        why=_safe_strings(data.get("why")),
        url=url if isinstance(url, str) and url else None,
    )


def with_defaults(raw: Any) -> Optional[RepoTelemetry]:
    """Normalize a raw analysis payload into a fully populated RepoTelemetry.

    Accepts None, an existing RepoTelemetry, or a dict using the remote API's
    camelCase keys (snake_case keys are accepted too). Mistyped fields fall
    back to their zero value.

    Args:
        raw: Raw telemetry payload

    Returns:
        RepoTelemetry, or None when the payload is absent or not an object
    """
    if raw is None:
        return None
    if isinstance(raw, RepoTelemetry):
        return raw
    if not isinstance(raw, dict):
        logger.warning(f"Ignoring telemetry payload of type {type(raw).__name__}")
        return None

    issues = _safe_dict(raw.get("issues"))
    activity = _safe_dict(raw.get("activity"))
    code_quality = _safe_dict(_pick(raw, "codeQuality", "code_quality"))
    grant_fit = _safe_dict(_pick(raw, "grantFit", "grant_fit"))

    languages = {
        name: _safe_number(share)
        for name, share in _safe_dict(raw.get("languages")).items()
        if isinstance(name, str)
    }

    matches = [
        match for match in (_grant_match(item) for item in _safe_list(grant_fit.get("matches")))
        if match is not None
    ]

    return RepoTelemetry(
        repo=_safe_string(raw.get("repo")),
        stars=_safe_int(raw.get("stars")),
        forks=_safe_int(raw.get("forks")),
        issues=IssueCounts(
            open=_safe_int(issues.get("open")),
            closed=_safe_int(issues.get("closed")),
        ),
        languages=languages,
        activity=ActivityBlock(
            last_commit=parse_timestamp(_pick(activity, "lastCommit", "last_commit")),
            commits_30d=_safe_int(_pick(activity, "commits30d", "commits_30d")),
        ),
        code_quality=CodeQualityBlock(
            score=min(100.0, max(0.0, _safe_number(code_quality.get("score")))),
            notes=_safe_strings(code_quality.get("notes")),
        ),
        grant_fit=GrantFitBlock(
            signals=_safe_strings(grant_fit.get("signals")),
            recommendations=_safe_strings(grant_fit.get("recommendations")),
            matches=matches,
        ),
    )
