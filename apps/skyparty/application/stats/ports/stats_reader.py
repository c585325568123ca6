"""Stats Reader Port."""

from abc import ABC, abstractmethod
from datetime import datetime

from apps.skyparty.application.stats.dto import ServiceStats


class StatsReader(ABC):
    """운영 통계 조회 포트."""

    @abstractmethod
    async def collect(self, active_since: datetime) -> ServiceStats:
        """집계 쿼리로 통계를 수집합니다.

        Args:
            active_since: 이 시각 이후 로그인한 사용자를 active_users로 셉니다.
        """
        ...
