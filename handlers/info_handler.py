"""
handlers/info_handler.py
-------------------------
Handles /info and the admin-only /admin command.
Both render the requesting user's Telegram profile.
"""

from html import escape
from typing import AbstractSet

from telegram.constants import ParseMode

from models.message import InboundMessage, User
from security.auth import require_admin
from services.telegram_sender import MessageSender
from handlers.base import Handler


def format_user_info(user: User) -> str:
    """
    Render a user's profile as HTML.

    Last name and username lines are left out when those fields are empty.
    """
    lines = [
        "<b>Информация о вас:</b>",
        "",
        f"<b>ID:</b> <code>{user.id}</code>",
        f"<b>Имя:</b> {escape(user.first_name)}",
    ]
    if user.last_name:
        lines.append(f"<b>Фамилия:</b> {escape(user.last_name)}")
    if user.username:
        lines.append(f"<b>Username:</b> @{escape(user.username)}")
    lines.append(f"<b>Язык:</b> {escape(user.language_code)}")
    lines.append(f"<b>Бот:</b> {'да' if user.is_bot else 'нет'}")
    return "\n".join(lines) + "\n"


class InfoHandler(Handler):
    """Handle /info - show the user's own profile."""

    command = "info"
    description = "👤 Информация о вас"

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        await sender.send(
            message.chat_id,
            format_user_info(message.user),
            parse_mode=ParseMode.HTML,
        )


class AdminHandler(Handler):
    """Handle /admin - profile view reserved for administrators."""

    command = "admin"
    description = "🔐 Для администраторов"

    def __init__(self, admin_ids: AbstractSet[int]):
        self.admin_ids = admin_ids

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        if not await require_admin(message, self.admin_ids, sender):
            return  # deny notice already sent

        await sender.send(
            message.chat_id,
            format_user_info(message.user),
            parse_mode=ParseMode.HTML,
        )
