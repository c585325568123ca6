"""Game DTOs."""

from apps.skyparty.application.game.dto.game import PlayGameRequest, PlayGameResult

__all__ = ["PlayGameRequest", "PlayGameResult"]
