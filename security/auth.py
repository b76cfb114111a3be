"""
security/auth.py
-----------------
Administrator checks for privileged commands.

The administrator set comes from ADMIN_IDS and is passed in explicitly;
nothing here reads configuration on its own.
"""

from typing import AbstractSet, Optional

from models.message import InboundMessage
from services.telegram_sender import MessageSender
from utils.logger import get_logger

logger = get_logger(__name__)

DENY_TEXT = "У вас нет прав для выполнения этой команды."


def is_admin(user_id: int, admin_ids: Optional[AbstractSet[int]]) -> bool:
    """Return True iff user_id is in admin_ids. An empty or missing set admits nobody."""
    if not admin_ids:
        return False
    return user_id in admin_ids


async def require_admin(
    message: InboundMessage,
    admin_ids: Optional[AbstractSet[int]],
    sender: MessageSender,
) -> bool:
    """
    Gate a handler behind the administrator set.

    Behavior:
        - Admins: returns True and sends nothing.
        - Everyone else: sends the deny notice once and returns False.
          The caller must stop there; a denial is not an error.
    """
    user = message.user
    if is_admin(user.id, admin_ids):
        return True

    logger.warning(
        f"🚫 Unauthorized /{message.command} attempt: user_id={user.id}, "
        f"username={user.username or '-'}, chat_id={message.chat_id}"
    )
    await sender.send(message.chat_id, DENY_TEXT)
    return False
