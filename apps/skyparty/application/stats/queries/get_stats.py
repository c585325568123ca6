"""GetStatsQuery."""

from datetime import datetime, timedelta, timezone

from apps.skyparty.application.stats.dto import ServiceStats
from apps.skyparty.application.stats.ports import StatsReader

DEFAULT_ACTIVE_WINDOW_DAYS = 7


class GetStatsQuery:
    """운영 통계 조회 Query."""

    def __init__(
        self,
        reader: StatsReader,
        active_window_days: int = DEFAULT_ACTIVE_WINDOW_DAYS,
    ) -> None:
        self._reader = reader
        self._active_window = timedelta(days=active_window_days)

    async def execute(self) -> ServiceStats:
        return await self._reader.collect(
            active_since=datetime.now(timezone.utc) - self._active_window
        )
