"""HTTP controllers (routers)."""

from apps.skyparty.presentation.http.controllers.admin import router as admin_router
from apps.skyparty.presentation.http.controllers.characters import (
    router as characters_router,
)
from apps.skyparty.presentation.http.controllers.credits import router as credits_router
from apps.skyparty.presentation.http.controllers.games import router as games_router
from apps.skyparty.presentation.http.controllers.gifts import router as gifts_router
from apps.skyparty.presentation.http.controllers.health import router as health_router
from apps.skyparty.presentation.http.controllers.inventory import router as inventory_router
from apps.skyparty.presentation.http.controllers.messages import router as messages_router
from apps.skyparty.presentation.http.controllers.users import router as users_router

__all__ = [
    "admin_router",
    "characters_router",
    "credits_router",
    "games_router",
    "gifts_router",
    "health_router",
    "inventory_router",
    "messages_router",
    "users_router",
]
