"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
Both reply with static text listing the available commands.
"""

from telegram.constants import ParseMode

from models.message import InboundMessage
from services.telegram_sender import MessageSender
from handlers.base import Handler

START_TEXT = (
    "Привет! Я тестовый бот.\n\n"
    "Я могу помочь вам с различными задачами.\n\n"
    "Доступные команды:\n"
    "/start - начать работу\n"
    "/help - помощь\n"
    "/info - информация о вас\n"
    "/language - выбрать язык\n"
    "/delete_profile - удалить профиль"
)

HELP_TEXT = (
    "Это справочная информация.\n\n"
    "<b>Доступные команды:</b>\n\n"
    "/start - начать работу с ботом\n"
    "/help - показать эту справку\n"
    "/info - информация о вашем профиле\n"
    "/language - выбрать язык\n"
    "/delete_profile - удалить профиль\n"
    "/admin - информация для администраторов\n\n"
    "Бот создан с помощью библиотеки python-telegram-bot."
)


class StartHandler(Handler):
    """Handle /start - greeting and command list."""

    command = "start"
    description = "🚀 Начать работу"

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        await sender.send(message.chat_id, START_TEXT)


class HelpHandler(Handler):
    """Handle /help - usage text."""

    command = "help"
    description = "📖 Помощь"

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        await sender.send(message.chat_id, HELP_TEXT, parse_mode=ParseMode.HTML)
