"""Catalog DTOs."""

from apps.skyparty.application.catalog.dto.catalog import CatalogItem, CatalogResult

__all__ = ["CatalogItem", "CatalogResult"]
