"""
handlers/settings_handler.py
-----------------------------
Commands that answer with an inline keyboard.
The button presses come back through CallbackHandler.
"""

from models.message import InboundMessage
from services.telegram_sender import MessageSender
from utils.keyboards import confirm_keyboard, language_keyboard
from handlers.base import Handler

DELETE_PROFILE_PREFIX = "delete_profile"


class DeleteProfileHandler(Handler):
    """Handle /delete_profile - ask for confirmation."""

    command = "delete_profile"
    description = "🗑️ Удалить профиль"

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        await sender.send(
            message.chat_id,
            "Вы уверены, что хотите удалить профиль?",
            reply_markup=confirm_keyboard(DELETE_PROFILE_PREFIX),
        )


class LanguageHandler(Handler):
    """Handle /language - offer the language choice."""

    command = "language"
    description = "🌐 Выбрать язык"

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        await sender.send(
            message.chat_id,
            "Выберите язык:",
            reply_markup=language_keyboard(),
        )
