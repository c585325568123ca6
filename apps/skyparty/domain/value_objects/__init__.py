"""Domain Value Objects."""

from apps.skyparty.domain.value_objects.item_snapshot import ItemSnapshot

__all__ = ["ItemSnapshot"]
