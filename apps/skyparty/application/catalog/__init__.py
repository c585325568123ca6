"""Character Catalog."""
