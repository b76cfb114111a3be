"""
handlers/router.py
------------------
Entry point for every update received by the polling loop.

Updates are handled one at a time, in arrival order. A failure while
handling one update is logged and never stops the loop.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.message import CallbackEvent, InboundMessage, InboundUpdate, inbound_from_telegram
from services.telegram_sender import MessageSender, TelegramSender
from utils.logger import get_logger, log_command, log_message
from handlers.callback_handler import CallbackHandler
from handlers.dispatcher import Dispatcher
from handlers.message_handler import TextHandler

logger = get_logger(__name__)


class UpdateRouter:
    """Sends each update to the Dispatcher, the text handler or the callback handler."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        text_handler: TextHandler,
        callback_handler: CallbackHandler,
    ):
        self.dispatcher = dispatcher
        self.text_handler = text_handler
        self.callback_handler = callback_handler

    async def route(self, update: InboundUpdate, sender: MessageSender) -> None:
        try:
            await self._route(update, sender)
        except Exception as e:
            if isinstance(update, CallbackEvent):
                context = f"callback {update.data!r} from user {update.user.id}"
            else:
                context = f"chat_id={update.chat_id}, user_id={update.user.id}"
            logger.error(f"Failed to handle update ({context}): {e}")

    async def _route(self, update: InboundUpdate, sender: MessageSender) -> None:
        if isinstance(update, CallbackEvent):
            await self.callback_handler.handle(update, sender)
            return

        if not isinstance(update, InboundMessage):
            return

        if update.is_command:
            log_command(update)
            await self.dispatcher.handle_command(update, sender)
            return

        if update.text:
            log_message(update)
            await self.text_handler.handle(update, sender)

    async def on_update(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """python-telegram-bot callback; registered with a TypeHandler for Update."""
        inbound = inbound_from_telegram(update)
        if inbound is None:
            return
        await self.route(inbound, TelegramSender(context.bot))
