"""Game Session Gateway Port."""

from abc import ABC, abstractmethod

from apps.skyparty.domain.entities import GameSession


class GameSessionGateway(ABC):
    """플레이 기록 저장소 포트."""

    @abstractmethod
    async def record(self, session: GameSession) -> None:
        """플레이 기록 1건을 추가합니다."""
        ...
