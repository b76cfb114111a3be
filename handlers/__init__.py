"""
handlers/ - Presentation Layer
================================
Telegram update handlers. The router receives every update, commands go
through the Dispatcher to a Handler, and each handler answers through a
MessageSender. No Bot API calls happen outside services/telegram_sender.py.
"""
