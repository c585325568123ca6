"""Ledger Commands."""

from apps.skyparty.application.ledger.commands.adjust_credits import AdjustCreditsCommand

__all__ = ["AdjustCreditsCommand"]
