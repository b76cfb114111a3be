"""
handlers/message_handler.py
----------------------------
Handles any plain text message (not a command).
Always answers with exactly one message.
"""

from models.message import InboundMessage
from services.telegram_sender import MessageSender

SUBSCRIPTION_KEYWORD = "подпис"
SUBSCRIPTION_TEXT = (
    "О, опять про подписку? Денежки на орехи скопил? 😏\n"
    "Напишите администратору бота, он расскажет подробности."
)


class TextHandler:
    """Echo free text back, with a canned answer for subscription questions."""

    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        if SUBSCRIPTION_KEYWORD in message.text.lower():
            await sender.send(message.chat_id, SUBSCRIPTION_TEXT)
        else:
            await sender.send(message.chat_id, f"Вы написали: {message.text}")
