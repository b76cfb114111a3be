"""
services/ - Outbound Layer
===========================
Wrappers around the Telegram Bot API.
"""
