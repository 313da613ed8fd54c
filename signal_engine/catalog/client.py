"""Remote grant catalog client - GET {api_base_url}/v1/grants."""

import logging
import time
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..models.grant import Grant
from .seed import GRANTS_SEED

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://grantee.onrender.com"

# Published status strings that all mean "accepting applications continuously"
ROLLING_STATUSES = {"rolling", "ongoing", "quarterly", "quarterly rounds"}


class CatalogFetchError(Exception):
    """Raised when the catalog endpoint answers with an unusable payload."""


def catalog_retry(attempts: int = 3, wait_multiplier: float = 1.0):
    """Retry decorator for catalog HTTP calls: exponential backoff on transport errors."""
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=wait_multiplier, max=10),
        retry=retry_if_exception_type((httpx.HTTPError, httpx.TimeoutException)),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


class GrantsClient:
    """Client for the hosted grant catalog.

    ``fetch_grants`` never raises: any transport failure, bad status or
    malformed payload falls back to the bundled seed catalog.
    """

    source_name = "grant_catalog"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        retry_attempts: int = 3,
        retry_wait: float = 1.0,
        fallback: Optional[List[Grant]] = None,
    ):
        """Initialize client.

        Args:
            base_url: Catalog API root, without the /v1/grants path
            timeout_seconds: Per-request timeout
            retry_attempts: Total attempts for transport errors
            retry_wait: Backoff multiplier in seconds (0 disables waiting)
            fallback: Catalog returned on failure (defaults to GRANTS_SEED)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout_seconds)
        self.retry_attempts = max(1, retry_attempts)
        self.retry_wait = retry_wait
        self.fallback = list(GRANTS_SEED if fallback is None else fallback)

    @classmethod
    def from_settings(cls, settings) -> "GrantsClient":
        return cls(
            base_url=settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            retry_attempts=settings.catalog_retry_attempts,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}/v1/grants"

    async def fetch_grants(self) -> List[Grant]:
        """Fetch the live catalog, or the fallback catalog on any failure."""
        start = time.monotonic()
        try:
            fetch = catalog_retry(self.retry_attempts, self.retry_wait)(self._fetch_with_retry)
            grants = await fetch()
        except Exception as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.warning(
                "fetch_complete source=%s result=fallback error=%s duration_ms=%.0f",
                self.source_name,
                exc,
                duration_ms,
            )
            return list(self.fallback)

        if not grants:
            logger.warning(f"[{self.source_name}] Catalog returned no usable grants, using seed catalog")
            return list(self.fallback)

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "fetch_complete source=%s result=success count=%d duration_ms=%.0f",
            self.source_name,
            len(grants),
            duration_ms,
        )
        return grants

    async def _fetch_with_retry(self) -> List[Grant]:
        """GET the catalog endpoint once; fetch_grants wraps it in the retry policy."""
        url = self.url
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, headers={"Accept": "application/json"})
            logger.debug(f"[{self.source_name}] url={url} status={response.status_code}")
            response.raise_for_status()
            try:
                data = response.json()
            except ValueError as exc:
                raise CatalogFetchError(f"Catalog response is not JSON: {exc}") from exc

        entries = self._unwrap(data)
        grants = []
        for entry in entries:
            grant = self._normalize_grant(entry)
            if grant:
                grants.append(grant)

        skipped = len(entries) - len(grants)
        if skipped:
            logger.warning(f"[{self.source_name}] Skipped {skipped} invalid catalog entries")
        return grants

    def _unwrap(self, data: Any) -> list:
        """Accept a bare list or a {"grants": [...]} envelope."""
        if isinstance(data, list):
            return data
        if isinstance(data, dict) and isinstance(data.get("grants"), list):
            return data["grants"]
        raise CatalogFetchError(f"Unexpected catalog payload of type {type(data).__name__}")

    def _normalize_grant(self, data: Any) -> Optional[Grant]:
        """Normalize one camelCase catalog entry to a Grant.

        Args:
            data: Raw grant entry from the catalog API

        Returns:
            Grant, or None if the entry is unusable
        """
        if not isinstance(data, dict):
            return None

        grant_id = data.get("id")
        name = data.get("name") or data.get("title")
        if grant_id in (None, "") or not name:
            logger.debug(f"Catalog entry missing id or name, skipping: {data!r}")
            return None

        try:
            return Grant(
                id=str(grant_id),
                name=name,
                organization=data.get("organization") or "",
                description=data.get("shortDescription") or data.get("description") or "",
                ecosystem=(data.get("ecosystem") or "other").lower(),
                category=(data.get("category") or "other").lower(),
                chains=[chain.lower() for chain in _strings(data.get("chains"))],
                tags=_strings(data.get("tags")),
                status=self._parse_status(data.get("status"), data.get("deadline")),
                deadline=data.get("deadline"),
                min_amount_usd=self._parse_amount(_first(data, "minAmountUsd", "min_amount_usd")),
                max_amount_usd=self._parse_amount(_first(data, "maxAmountUsd", "max_amount_usd")),
                apply_url=_first(data, "applyUrl", "apply_url", "link") or "",
                region=(data.get("region") or "global").lower(),
                grant_type=(_first(data, "type", "grantType", "grant_type") or "grant").lower(),
                featured=bool(data.get("featured", False)),
            )
        except (ValidationError, TypeError, AttributeError) as e:
            logger.warning(f"Error normalizing catalog grant {grant_id}: {e}")
            return None

    def _parse_status(self, status: Any, deadline: Any) -> str:
        """Map published status strings onto open/rolling/closed.

        An explicit closed status wins over a rolling deadline.
        """
        if isinstance(status, str) and status.strip().lower() == "closed":
            return "closed"
        for value in (status, deadline):
            if isinstance(value, str) and value.strip().lower() in ROLLING_STATUSES:
                return "rolling"
        return "open"

    def _parse_amount(self, amount: Any) -> Optional[float]:
        """Parse amount to float."""
        if amount is None or isinstance(amount, bool):
            return None
        try:
            return float(amount)
        except (ValueError, TypeError):
            return None


def _first(data: dict, *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _strings(value: Any) -> List[str]:
    """String items of a list or tuple; anything else is empty."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]
