"""Catalog Queries."""

from apps.skyparty.application.catalog.queries.get_catalog import GetCatalogQuery
from apps.skyparty.application.catalog.queries.get_character import GetCharacterQuery

__all__ = ["GetCatalogQuery", "GetCharacterQuery"]
