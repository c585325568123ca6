"""Catalog local cache."""

from apps.skyparty.infrastructure.cache.catalog_cache import (
    CatalogLocalCache,
    get_catalog_cache,
)
from apps.skyparty.infrastructure.cache.local_cached_catalog_reader import (
    LocalCachedCatalogReader,
)

__all__ = ["CatalogLocalCache", "LocalCachedCatalogReader", "get_catalog_cache"]
