"""
services/telegram_sender.py
---------------------------
Outbound side of the bot: the only place that talks to the Bot API.

Handlers depend on the MessageSender protocol, so tests can pass a
recording fake instead of a live telegram.Bot.
"""

from typing import Optional, Protocol

from telegram import Bot
from telegram.error import TelegramError


class SendError(Exception):
    """An outbound Bot API call failed."""


class MessageSender(Protocol):
    async def send(
        self,
        chat_id: int,
        text: str,
        parse_mode: Optional[str] = None,
        reply_markup=None,
    ) -> None: ...

    async def edit(
        self,
        chat_id: int,
        message_id: int,
        text: str,
        parse_mode: Optional[str] = None,
    ) -> None: ...

    async def answer_callback(self, callback_id: str) -> None: ...


class TelegramSender:
    """MessageSender backed by a python-telegram-bot Bot."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send(self, chat_id, text, parse_mode=None, reply_markup=None) -> None:
        try:
            await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                parse_mode=parse_mode,
                reply_markup=reply_markup,
            )
        except TelegramError as e:
            raise SendError(f"send_message to chat {chat_id} failed: {e}") from e

    async def edit(self, chat_id, message_id, text, parse_mode=None) -> None:
        try:
            await self.bot.edit_message_text(
                text=text,
                chat_id=chat_id,
                message_id=message_id,
                parse_mode=parse_mode,
            )
        except TelegramError as e:
            raise SendError(
                f"edit_message_text {message_id} in chat {chat_id} failed: {e}"
            ) from e

    async def answer_callback(self, callback_id) -> None:
        try:
            await self.bot.answer_callback_query(callback_query_id=callback_id)
        except TelegramError as e:
            raise SendError(f"answer_callback_query {callback_id} failed: {e}") from e
