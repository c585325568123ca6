"""Gift Commands."""

from apps.skyparty.application.gift.commands.send_gift import SendGiftCommand
from apps.skyparty.application.gift.commands.settle_gift import (
    ClaimGiftCommand,
    RejectGiftCommand,
)

__all__ = ["ClaimGiftCommand", "RejectGiftCommand", "SendGiftCommand"]
