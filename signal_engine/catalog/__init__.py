"""Grant catalog: bundled seed data and the remote catalog client."""

from .client import CatalogFetchError, GrantsClient, catalog_retry
from .seed import GRANTS_SEED

__all__ = ["CatalogFetchError", "GrantsClient", "catalog_retry", "GRANTS_SEED"]
