"""메시지 전송 / 대화 목록 테스트 (인메모리 게이트웨이)."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from apps.skyparty.application.common.exceptions import (
    InvalidPartyError,
    UserNotFoundError,
    ValidationError,
)
from apps.skyparty.application.messaging.commands import SendMessageCommand
from apps.skyparty.application.messaging.dto import SendMessageRequest
from apps.skyparty.application.messaging.queries import ListConversationsQuery
from apps.skyparty.domain.entities import Conversation, Message, User


@pytest.fixture
def send(user_query, messaging_gateway, tx) -> SendMessageCommand:
    return SendMessageCommand(user_query, messaging_gateway, tx)


@pytest.fixture
def conversations(user_query, messaging_gateway) -> ListConversationsQuery:
    return ListConversationsQuery(user_query, messaging_gateway)


@pytest.fixture
def carol(store) -> User:
    return store.add_user(User(id=uuid4(), username="carol", email="carol@example.com"))


class TestConversationEntities:
    def test_key_is_order_independent(self) -> None:
        a, b = uuid4(), uuid4()

        assert Conversation.key_for(a, b) == Conversation.key_for(b, a)
        assert Conversation.between(a, b).id == Conversation.between(b, a).id

    def test_other_participant(self) -> None:
        a, b = uuid4(), uuid4()
        conversation = Conversation.between(a, b)

        assert conversation.other_participant(a) == b
        assert conversation.other_participant(b) == a
        assert not conversation.includes(uuid4())

    def test_message_is_immutable(self) -> None:
        message = Message(conversation_id="c", sender_id=uuid4(), recipient_id=uuid4(), content="x")

        with pytest.raises(AttributeError):
            message.content = "y"  # type: ignore[misc]


@pytest.mark.asyncio
class TestSendMessage:
    async def test_first_message_creates_conversation(
        self, store, alice: User, bob: User, send
    ) -> None:
        view = await send.execute(SendMessageRequest(alice.id, bob.id, "  hi bob  "))

        assert view.content == "hi bob"
        assert view.sender_username == "alice"
        assert view.read is False
        [conversation] = store.conversations.values()
        assert conversation.id == view.conversation_id
        assert conversation.updated_at == view.created_at
        assert [m.id for m in store.messages] == [view.id]

    async def test_reply_reuses_conversation(self, store, alice: User, bob: User, send) -> None:
        first = await send.execute(SendMessageRequest(alice.id, bob.id, "hi"))
        reply = await send.execute(SendMessageRequest(bob.id, alice.id, "hello"))

        assert reply.conversation_id == first.conversation_id
        assert len(store.conversations) == 1
        conversation = store.conversations[first.conversation_id]
        assert conversation.updated_at == reply.created_at

    @pytest.mark.parametrize("content", ["", "   ", "x" * 2001])
    async def test_rejects_invalid_content(
        self, store, alice: User, bob: User, send, content: str
    ) -> None:
        with pytest.raises(ValidationError):
            await send.execute(SendMessageRequest(alice.id, bob.id, content))

        assert store.conversations == {}
        assert store.messages == []

    async def test_unknown_recipient_writes_nothing(self, store, alice: User, send, tx) -> None:
        with pytest.raises(InvalidPartyError):
            await send.execute(SendMessageRequest(alice.id, uuid4(), "hi"))

        assert store.conversations == {}
        assert store.messages == []
        assert tx.rollbacks == 1

    async def test_unknown_sender(self, bob: User, send) -> None:
        with pytest.raises(InvalidPartyError):
            await send.execute(SendMessageRequest(uuid4(), bob.id, "hi"))


@pytest.mark.asyncio
class TestListConversations:
    async def test_most_recent_conversation_first(
        self,
        alice: User,
        bob: User,
        carol: User,
        messaging_gateway,
        conversations,
    ) -> None:
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        with_bob = Conversation.between(alice.id, bob.id, at=base)
        with_carol = Conversation.between(alice.id, carol.id, at=base + timedelta(minutes=1))
        await messaging_gateway.ensure_conversation(with_bob)
        await messaging_gateway.ensure_conversation(with_carol)
        await messaging_gateway.touch_conversation(with_bob.id, base + timedelta(minutes=5))

        views = await conversations.execute(alice.id)

        assert [v.other_participant_username for v in views] == ["bob", "carol"]
        assert views[0].last_activity == base + timedelta(minutes=5)

    async def test_messages_oldest_first_with_sender_names(
        self, alice: User, bob: User, send, conversations
    ) -> None:
        await send.execute(SendMessageRequest(alice.id, bob.id, "one"))
        await send.execute(SendMessageRequest(bob.id, alice.id, "two"))
        await send.execute(SendMessageRequest(alice.id, bob.id, "three"))

        [view] = await conversations.execute(bob.id)

        assert view.other_participant_id == alice.id
        assert [m.content for m in view.messages] == ["one", "two", "three"]
        assert [m.sender_username for m in view.messages] == ["alice", "bob", "alice"]

    async def test_only_own_conversations(
        self, alice: User, bob: User, carol: User, send, conversations
    ) -> None:
        await send.execute(SendMessageRequest(alice.id, bob.id, "hi"))

        assert await conversations.execute(carol.id) == []

    async def test_unknown_user(self, store, conversations) -> None:
        with pytest.raises(UserNotFoundError):
            await conversations.execute(uuid4())
