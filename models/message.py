"""
models/message.py
-----------------
Read-only domain models for inbound Telegram updates.

Handlers never see python-telegram-bot objects directly; the router
converts each telegram.Update into one of these records first.
"""

from dataclasses import dataclass
from typing import Optional, Union

from telegram import Message, MessageEntity, Update


@dataclass(frozen=True)
class User:
    """
    Sender of a message or button press.

    Attributes:
        id: Telegram user ID.
        first_name: Always present on Telegram users.
        last_name: Empty when the user has none.
        username: Handle without the leading '@', empty when unset.
        language_code: IETF language tag reported by the client.
        is_bot: True for bot accounts.
    """
    id: int
    first_name: str
    last_name: str = ""
    username: str = ""
    language_code: str = ""
    is_bot: bool = False

    @classmethod
    def from_telegram(cls, user) -> "User":
        return cls(
            id=user.id,
            first_name=user.first_name or "",
            last_name=user.last_name or "",
            username=user.username or "",
            language_code=user.language_code or "",
            is_bot=bool(user.is_bot),
        )


def leading_command(message: Message) -> Optional[str]:
    """
    Text of the bot_command entity at offset 0, e.g. "/start@my_bot".

    Telegram marks commands itself; slash-prefixed text without that
    entity ("/путь/к/файлу") is plain text.
    """
    if not message.text:
        return None
    for entity, entity_text in message.parse_entities([MessageEntity.BOT_COMMAND]).items():
        if entity.offset == 0:
            return entity_text
    return None


def split_command(text: str, command_text: str) -> tuple[Optional[str], tuple[str, ...]]:
    """
    Bare command name and arguments, given the leading command entity text.

    Examples:
        >>> split_command("/info@my_bot now", "/info@my_bot")
        ('info', ('now',))
    """
    name = command_text[1:].split("@", 1)[0]
    if not name:
        return None, ()
    return name, tuple(text[len(command_text):].split())


@dataclass(frozen=True)
class InboundMessage:
    """A text message; `command` is set when Telegram marked a leading bot command."""
    chat_id: int
    message_id: int
    user: User
    text: str = ""
    command: Optional[str] = None
    args: tuple[str, ...] = ()

    @classmethod
    def from_telegram(cls, message: Message) -> "InboundMessage":
        text = message.text or ""
        command, args = None, ()
        command_text = leading_command(message)
        if command_text:
            command, args = split_command(text, command_text)
        return cls(
            chat_id=message.chat.id,
            message_id=message.message_id,
            user=User.from_telegram(message.from_user),
            text=text,
            command=command,
            args=args,
        )

    @property
    def is_command(self) -> bool:
        return self.command is not None


@dataclass(frozen=True)
class CallbackEvent:
    """
    An inline-button press.

    chat_id and message_id are None when the button belongs to an
    inline-mode message the bot cannot address.
    """
    id: str
    user: User
    data: str
    chat_id: Optional[int] = None
    message_id: Optional[int] = None


InboundUpdate = Union[InboundMessage, CallbackEvent]


def inbound_from_telegram(update: Update) -> Optional[InboundUpdate]:
    """Convert a telegram.Update, or return None for update kinds the bot ignores."""
    query = update.callback_query
    if query is not None:
        message = query.message
        return CallbackEvent(
            id=query.id,
            user=User.from_telegram(query.from_user),
            data=query.data or "",
            chat_id=message.chat.id if message is not None else None,
            message_id=message.message_id if message is not None else None,
        )

    message = update.message
    if message is None or message.from_user is None:
        return None
    return InboundMessage.from_telegram(message)
