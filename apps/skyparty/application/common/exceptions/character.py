"""Character application exceptions."""

from __future__ import annotations

from apps.skyparty.application.common.exceptions.base import ApplicationError


class CharacterNotFoundError(ApplicationError):
    """카탈로그에 없는 캐릭터."""

    def __init__(self, character_id: str | None = None) -> None:
        self.character_id = character_id
        super().__init__("Character not found")
