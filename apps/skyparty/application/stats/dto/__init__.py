"""Stats DTOs."""

from apps.skyparty.application.stats.dto.stats import ServiceStats

__all__ = ["ServiceStats"]
