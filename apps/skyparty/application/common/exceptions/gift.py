"""Gift application exceptions."""

from __future__ import annotations

from apps.skyparty.application.common.exceptions.base import ApplicationError


class InvalidPartyError(ApplicationError):
    """발신자 또는 수신자가 존재하지 않음."""

    def __init__(self) -> None:
        super().__init__("Sender or recipient not found")


class GiftNotFoundError(ApplicationError):
    """선물이 없거나 호출자에게 온 선물이 아님.

    두 경우를 구분하지 않아 다른 사용자의 선물 존재 여부가 노출되지 않습니다.
    """

    def __init__(self) -> None:
        super().__init__("Gift not found")
