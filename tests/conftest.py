"""Shared fixtures: a recording sender and factories for inbound updates."""

from datetime import datetime, timezone

import pytest
from telegram import Chat, Message, MessageEntity, Update
from telegram import User as TgUser

from models.message import CallbackEvent, InboundMessage, User, inbound_from_telegram
from services.telegram_sender import SendError


class RecordingSender:
    """MessageSender fake that records every outbound call in order."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[tuple] = []

    def _maybe_fail(self, what: str) -> None:
        if self.fail:
            raise SendError(f"{what} failed: network down")

    async def send(self, chat_id, text, parse_mode=None, reply_markup=None):
        self.calls.append(("send", chat_id, text, parse_mode, reply_markup))
        self._maybe_fail("send")

    async def edit(self, chat_id, message_id, text, parse_mode=None):
        self.calls.append(("edit", chat_id, message_id, text, parse_mode))
        self._maybe_fail("edit")

    async def answer_callback(self, callback_id):
        self.calls.append(("answer", callback_id))
        self._maybe_fail("answer")

    @property
    def sent(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "send"]

    @property
    def texts(self) -> list[str]:
        return [c[2] for c in self.sent]


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def failing_sender():
    return RecordingSender(fail=True)


@pytest.fixture
def make_user():
    def _make(
        user_id: int = 100,
        first_name: str = "Иван",
        last_name: str = "",
        username: str = "",
        language_code: str = "ru",
        is_bot: bool = False,
    ) -> User:
        return User(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            username=username,
            language_code=language_code,
            is_bot=is_bot,
        )

    return _make


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


@pytest.fixture
def make_tg_update():
    """Factory: a real telegram.Update carrying a text message.

    `command` is the leading token Telegram would mark with a bot_command
    entity; None means the server attached no entity.
    """

    def _make(
        text: str,
        *,
        command: str | None = None,
        entities: list[MessageEntity] | None = None,
        chat_id: int = 555,
        user: User | None = None,
    ) -> Update:
        user = user or User(id=100, first_name="Иван", language_code="ru")
        entities = list(entities or [])
        if command is not None:
            entities.append(
                MessageEntity(type=MessageEntity.BOT_COMMAND, offset=0, length=_utf16_len(command))
            )
        message = Message(
            message_id=7,
            date=datetime.now(timezone.utc),
            chat=Chat(id=chat_id, type=Chat.PRIVATE),
            from_user=TgUser(
                id=user.id,
                first_name=user.first_name,
                is_bot=user.is_bot,
                last_name=user.last_name or None,
                username=user.username or None,
                language_code=user.language_code or None,
            ),
            text=text,
            entities=entities,
        )
        return Update(update_id=1, message=message)

    return _make


@pytest.fixture
def make_message(make_user, make_tg_update):
    """Factory: InboundMessage as the router would see it.

    Texts starting with '/' get a bot_command entity over their first
    token, which is what Telegram sends for ordinary ASCII commands.
    Pass command=False for slash text Telegram leaves unmarked.
    """

    def _make(
        text: str,
        *,
        chat_id: int = 555,
        user: User | None = None,
        command: bool | None = None,
    ) -> InboundMessage:
        if command is None:
            command = text.startswith("/")
        token = text.split()[0] if command and text.strip() else None
        update = make_tg_update(text, command=token, chat_id=chat_id, user=user or make_user())
        return inbound_from_telegram(update)

    return _make


@pytest.fixture
def make_callback(make_user):
    def _make(data: str, *, chat_id: int | None = 555, message_id: int | None = 42) -> CallbackEvent:
        return CallbackEvent(
            id="cb-1",
            user=make_user(),
            data=data,
            chat_id=chat_id,
            message_id=message_id,
        )

    return _make
