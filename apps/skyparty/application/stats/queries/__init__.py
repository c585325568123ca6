"""Stats Queries."""

from apps.skyparty.application.stats.queries.get_stats import GetStatsQuery

__all__ = ["GetStatsQuery"]
