"""Catalog Services."""

from apps.skyparty.application.catalog.services.catalog_service import CatalogService

__all__ = ["CatalogService"]
