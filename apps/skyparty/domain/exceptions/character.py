"""Character 도메인 예외."""

from apps.skyparty.domain.exceptions.base import DomainError


class CharacterNotOwnedError(DomainError):
    """보유하지 않은 캐릭터를 선택하려는 경우."""

    def __init__(self, character_id: str | None = None) -> None:
        self.character_id = character_id
        super().__init__("Character not owned")
