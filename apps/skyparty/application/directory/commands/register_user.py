"""RegisterUserCommand - 회원 가입 UseCase."""

from __future__ import annotations

import logging
from uuid import uuid4

from apps.skyparty.application.catalog.ports import CatalogReader
from apps.skyparty.application.common.exceptions import DuplicateUserError, ValidationError
from apps.skyparty.application.common.ports import TransactionManager
from apps.skyparty.application.directory.dto import RegisterUserRequest, UserView
from apps.skyparty.application.directory.ports import (
    PasswordHasher,
    UserCommandGateway,
    UserQueryGateway,
)
from apps.skyparty.application.inventory.ports import InventoryGateway
from apps.skyparty.domain.entities import InventoryItem, User
from apps.skyparty.domain.enums import ItemSource, ItemType

logger = logging.getLogger(__name__)

DEFAULT_STARTING_CREDITS = 150
DEFAULT_STARTER_CHARACTER = "kitty"


class RegisterUserCommand:
    """회원 가입 UseCase.

    기본 잔액과 스타터 캐릭터를 가진 사용자를 생성하고,
    스타터 캐릭터를 source=default 인벤토리 행으로 지급합니다.
    """

    def __init__(
        self,
        query_gateway: UserQueryGateway,
        command_gateway: UserCommandGateway,
        inventory_gateway: InventoryGateway,
        catalog_reader: CatalogReader,
        password_hasher: PasswordHasher,
        transaction_manager: TransactionManager,
        starting_credits: int = DEFAULT_STARTING_CREDITS,
        starter_character_id: str = DEFAULT_STARTER_CHARACTER,
    ) -> None:
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway
        self._inventory_gateway = inventory_gateway
        self._catalog_reader = catalog_reader
        self._password_hasher = password_hasher
        self._transaction_manager = transaction_manager
        self._starting_credits = starting_credits
        self._starter_character_id = starter_character_id

    async def execute(self, request: RegisterUserRequest) -> UserView:
        """사용자를 등록합니다.

        Raises:
            ValidationError: 필수 값 누락
            DuplicateUserError: email 또는 username 중복
        """
        username = request.username.strip()
        email = request.email.strip().lower()
        if not username or not email or not request.password:
            raise ValidationError("Username, email, and password are required")
        if "@" not in email:
            raise ValidationError("Invalid email format")

        async with self._transaction_manager.begin():
            if await self._query_gateway.get_by_email(email) is not None:
                raise DuplicateUserError("email")
            if await self._query_gateway.get_by_username(username) is not None:
                raise DuplicateUserError("username")

            user = await self._command_gateway.create(
                User(
                    id=uuid4(),
                    username=username,
                    email=email,
                    password_hash=self._password_hasher.hash(request.password),
                    game_credits=self._starting_credits,
                    current_character=self._starter_character_id,
                    owned_characters={self._starter_character_id},
                )
            )

            starter = await self._catalog_reader.get_by_id(self._starter_character_id)
            await self._inventory_gateway.append(
                InventoryItem(
                    owner_id=user.id,
                    type=ItemType.CHARACTER.value,
                    character_id=self._starter_character_id,
                    name=starter.name if starter else self._starter_character_id,
                    icon=starter.icon if starter else "",
                    description=starter.description if starter else "",
                    price=starter.price if starter else 0,
                    source=ItemSource.DEFAULT,
                )
            )

        logger.info("User registered", extra={"user_id": str(user.id)})
        return UserView.from_entity(user)
