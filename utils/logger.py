"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def setup_logging(level: str = "INFO", log_file: str = "", debug: bool = False) -> None:
    """
    Configure the root logger once.

    Args:
        level: Root level name (e.g. "INFO", "DEBUG").
        log_file: If set, logs are also appended to this file.
        debug: Let the Telegram client and its HTTP layer log requests.
    """
    global _initialized
    if _initialized:
        return
    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if debug:
        logging.getLogger("telegram").setLevel(logging.DEBUG)
        logging.getLogger("httpx").setLevel(logging.DEBUG)
    else:
        # httpx logs every getUpdates call at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger.
    """
    return logging.getLogger(name)


_audit = logging.getLogger("bot.audit")


def log_command(message) -> None:
    """Log a command before it is dispatched."""
    user = message.user
    _audit.info(
        f"Command /{message.command} from user {user.username or '-'} "
        f"(ID: {user.id}) in chat {message.chat_id}"
    )


def log_message(message) -> None:
    """Log a plain text message before it is answered."""
    user = message.user
    _audit.info(f"Message from user {user.username or '-'} (ID: {user.id}): {message.text}")
