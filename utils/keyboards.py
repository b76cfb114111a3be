"""
utils/keyboards.py
------------------
Inline keyboards attached to bot messages.

Button payloads are plain strings: `<prefix>_yes` / `<prefix>_no` for
confirmations and `lang_<code>` for language choice. CallbackHandler
matches them back by exact value.
"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup


def confirm_keyboard(data_prefix: str) -> InlineKeyboardMarkup:
    """Single row with "Yes" / "No" buttons carrying `<data_prefix>_yes` / `<data_prefix>_no`."""
    return InlineKeyboardMarkup([[
        InlineKeyboardButton("✅ Да", callback_data=f"{data_prefix}_yes"),
        InlineKeyboardButton("❌ Нет", callback_data=f"{data_prefix}_no"),
    ]])


def language_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[
        InlineKeyboardButton("🇷🇺 Русский", callback_data="lang_ru"),
        InlineKeyboardButton("🇬🇧 English", callback_data="lang_en"),
    ]])
