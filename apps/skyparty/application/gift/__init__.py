"""Gift Protocol."""
