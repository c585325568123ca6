"""Catalog Ports."""

from apps.skyparty.application.catalog.ports.catalog_reader import CatalogReader
from apps.skyparty.application.catalog.ports.catalog_writer import CatalogWriter

__all__ = ["CatalogReader", "CatalogWriter"]
