"""
handlers/base.py
----------------
The contract every command handler implements.
"""

from abc import ABC, abstractmethod

from models.message import InboundMessage
from services.telegram_sender import MessageSender


class Handler(ABC):
    """
    One bot command.

    Subclasses set `command` (the registry key, without '/') and
    `description` (shown in the Telegram command menu), and implement
    `handle`. The only failure `handle` may raise is SendError from the
    sender, passed through unchanged.
    """

    command: str = ""
    description: str = ""

    @abstractmethod
    async def handle(self, message: InboundMessage, sender: MessageSender) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(/{self.command})"
