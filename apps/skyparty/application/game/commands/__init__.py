"""Game Commands."""

from apps.skyparty.application.game.commands.play_game import PlayGameCommand

__all__ = ["PlayGameCommand"]
