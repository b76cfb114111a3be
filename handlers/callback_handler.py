"""
handlers/callback_handler.py
-----------------------------
Handles inline-button presses.

Every press is acknowledged first, exactly once, which clears the
loading indicator on the button. Payloads are then matched by prefix and
exact value. Unmatched payloads get no reply.
"""

from models.message import CallbackEvent
from services.telegram_sender import MessageSender
from utils.logger import get_logger
from handlers.settings_handler import DELETE_PROFILE_PREFIX

logger = get_logger(__name__)

# payload -> replacement text for the message carrying the buttons
EDIT_REPLIES = {
    f"{DELETE_PROFILE_PREFIX}_yes": "✅ Профиль удалён!",
    f"{DELETE_PROFILE_PREFIX}_no": "❌ Удаление отменено.",
}

# payload -> new message sent to the chat
SEND_REPLIES = {
    "lang_ru": "✅ Выбран язык: Русский",
    "lang_en": "✅ Выбран язык: English",
}


class CallbackHandler:

    async def handle(self, callback: CallbackEvent, sender: MessageSender) -> None:
        data = callback.data
        logger.info(f"Callback from user {callback.user.id}: {data}")

        await sender.answer_callback(callback.id)

        if data.startswith(f"{DELETE_PROFILE_PREFIX}_"):
            text = EDIT_REPLIES.get(data)
            if text is None:
                return
            if callback.chat_id is None or callback.message_id is None:
                logger.warning(f"Callback {data} has no message to edit, skipping")
                return
            await sender.edit(callback.chat_id, callback.message_id, text)
            return

        if data.startswith("lang_"):
            text = SEND_REPLIES.get(data)
            if text is None:
                return
            if callback.chat_id is None:
                logger.warning(f"Callback {data} has no chat to reply to, skipping")
                return
            await sender.send(callback.chat_id, text)
