"""User Gateway Ports."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence
from uuid import UUID

from apps.skyparty.domain.entities import User


class UserQueryGateway(ABC):
    """사용자 조회 포트."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> User | None:
        """ID로 사용자를 조회합니다 (보유 캐릭터 포함)."""
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """username으로 사용자를 조회합니다."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """email로 사용자를 조회합니다."""
        ...

    @abstractmethod
    async def exists(self, user_id: UUID) -> bool:
        """사용자 존재 여부를 확인합니다."""
        ...

    @abstractmethod
    async def get_usernames(self, user_ids: Sequence[UUID]) -> dict[UUID, str]:
        """여러 사용자의 username을 한 번에 조회합니다. 없는 ID는 결과에서 빠집니다."""
        ...

    @abstractmethod
    async def search_by_username(
        self,
        query: str,
        limit: int = 20,
        exclude_user_id: UUID | None = None,
    ) -> Sequence[User]:
        """username 부분 일치 검색 (대소문자 무시, username 오름차순).

        exclude_user_id는 limit 적용 전에 제외되므로 결과 수가 줄어들지 않습니다.
        """
        ...


class UserCommandGateway(ABC):
    """사용자 변경 포트."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """사용자를 생성합니다. 보유 캐릭터도 함께 저장합니다."""
        ...

    @abstractmethod
    async def add_owned_character(self, user_id: UUID, character_id: str) -> bool:
        """보유 캐릭터 집합에 추가합니다.

        이미 보유 중이면 아무것도 하지 않습니다 (멱등 합집합).

        Returns:
            새로 추가되었는지 여부
        """
        ...

    @abstractmethod
    async def set_current_character(self, user_id: UUID, character_id: str) -> bool:
        """현재 캐릭터를 변경합니다.

        Returns:
            사용자 행이 갱신되었는지 여부
        """
        ...

    @abstractmethod
    async def record_login(self, user_id: UUID, at: datetime) -> bool:
        """마지막 로그인 시각을 기록합니다."""
        ...

    @abstractmethod
    async def activate(self, user_id: UUID, activation_code: str, at: datetime) -> bool:
        """계정을 활성화합니다.

        이미 활성화된 계정은 갱신하지 않습니다 (최초 활성화 코드와 시각 유지).

        Returns:
            이번 호출로 활성화되었는지 여부
        """
        ...
