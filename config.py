"""
config.py
---------
Central configuration module. Loads environment variables from the
.env file and exposes them as a typed, immutable BotConfig.

A missing token or a malformed value raises ConfigError, which aborts
startup before the bot begins polling.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


class ConfigError(Exception):
    """Required configuration is missing or malformed."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class BotConfig:
    """
    Process-wide bot settings.

    Attributes:
        token: Telegram bot token (BOT_TOKEN).
        debug: Verbose logging of the Telegram client (BOT_DEBUG).
        poll_timeout: Long-polling timeout in seconds (BOT_TIMEOUT).
        admin_ids: Telegram user IDs allowed to run admin commands (ADMIN_IDS).
        log_level: Root logging level name (LOG_LEVEL).
        log_file: Optional file to duplicate logs into (LOG_FILE).
    """
    token: str
    debug: bool = False
    poll_timeout: int = 60
    admin_ids: frozenset[int] = field(default_factory=frozenset)
    log_level: str = "INFO"
    log_file: str = ""


def parse_admin_ids(raw: str) -> frozenset[int]:
    """
    Parse a comma-separated list of user IDs.

    "123456789, 987654321" -> frozenset({123456789, 987654321})
    Blank entries are skipped; anything else non-numeric is an error.
    """
    ids = set()
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.add(int(part))
        except ValueError:
            raise ConfigError(f"ADMIN_IDS contains a non-numeric entry: {part!r}") from None
    return frozenset(ids)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


def load_config() -> BotConfig:
    """Build a BotConfig from the current environment."""
    token = os.getenv("BOT_TOKEN", "").strip()
    if not token:
        raise ConfigError("BOT_TOKEN is required")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"LOG_LEVEL is not a logging level: {log_level!r}")

    return BotConfig(
        token=token,
        debug=_parse_bool("BOT_DEBUG", os.getenv("BOT_DEBUG", "false")),
        poll_timeout=_parse_int("BOT_TIMEOUT", os.getenv("BOT_TIMEOUT", "60")),
        admin_ids=parse_admin_ids(os.getenv("ADMIN_IDS", "")),
        log_level=log_level,
        log_file=os.getenv("LOG_FILE", "").strip(),
    )
