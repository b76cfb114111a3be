"""
handlers/dispatcher.py
----------------------
Routes commands to their registered Handler.

The registry is filled once at startup and only read afterwards, so
lookups need no locking.
"""

from models.message import InboundMessage
from services.telegram_sender import MessageSender
from utils.logger import get_logger
from handlers.base import Handler

logger = get_logger(__name__)

UNKNOWN_COMMAND_TEXT = "Неизвестная команда. Используйте /help для списка доступных команд."


class Dispatcher:
    """Command name -> Handler registry."""

    def __init__(self):
        self._handlers: dict[str, Handler] = {}

    def register(self, handler: Handler) -> None:
        """Store handler under its own command name. Re-registering a name replaces the old handler."""
        command = handler.command
        if not command:
            raise ValueError(f"{handler!r} does not declare a command")
        previous = self._handlers.get(command)
        if previous is not None:
            logger.warning(f"Handler for /{command} replaced: {previous!r} -> {handler!r}")
        self._handlers[command] = handler
        logger.info(f"Registered handler for /{command}")

    @property
    def commands(self) -> list[Handler]:
        return list(self._handlers.values())

    async def handle_command(self, message: InboundMessage, sender: MessageSender) -> None:
        """
        Run the handler registered for message.command.

        Unknown commands get a fixed notice and are not an error. Handler
        failures are logged and re-raised to the caller; nothing is retried.
        """
        command = message.command
        handler = self._handlers.get(command)
        if handler is None:
            await self._handle_unknown_command(message, sender)
            return

        try:
            await handler.handle(message, sender)
        except Exception as e:
            logger.error(
                f"Error handling /{command} (chat_id={message.chat_id}, "
                f"user_id={message.user.id}): {e}"
            )
            raise

    async def _handle_unknown_command(self, message: InboundMessage, sender: MessageSender) -> None:
        logger.info(f"Unknown command /{message.command} from user {message.user.id}")
        await sender.send(message.chat_id, UNKNOWN_COMMAND_TEXT)
