"""Game Ports."""

from apps.skyparty.application.game.ports.game_session_gateway import GameSessionGateway

__all__ = ["GameSessionGateway"]
