"""Catalog Commands."""

from apps.skyparty.application.catalog.commands.seed_catalog import SeedCatalogCommand

__all__ = ["SeedCatalogCommand"]
