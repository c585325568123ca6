"""Service statistics."""
