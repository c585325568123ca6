"""Stats Ports."""

from apps.skyparty.application.stats.ports.stats_reader import StatsReader

__all__ = ["StatsReader"]
