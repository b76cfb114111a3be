"""
main.py
-------
Entry point for the Telegram bot.

Responsibilities:
    - Load configuration and set up logging.
    - Register command handlers with the Dispatcher.
    - Hand every polled update to the UpdateRouter.
"""

import sys
from typing import AbstractSet

from telegram import Bot, BotCommand, Update
from telegram.ext import Application, ContextTypes, TypeHandler

from config import BotConfig, ConfigError, load_config
from handlers.callback_handler import CallbackHandler
from handlers.dispatcher import Dispatcher
from handlers.info_handler import AdminHandler, InfoHandler
from handlers.message_handler import TextHandler
from handlers.router import UpdateRouter
from handlers.settings_handler import DeleteProfileHandler, LanguageHandler
from handlers.start_handler import HelpHandler, StartHandler
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def build_dispatcher(admin_ids: AbstractSet[int]) -> Dispatcher:
    """Register every command handler; order here is the command menu order."""
    dispatcher = Dispatcher()
    dispatcher.register(StartHandler())
    dispatcher.register(HelpHandler())
    dispatcher.register(InfoHandler())
    dispatcher.register(AdminHandler(admin_ids))
    dispatcher.register(DeleteProfileHandler())
    dispatcher.register(LanguageHandler())
    return dispatcher


async def set_bot_commands(bot: Bot, dispatcher: Dispatcher) -> None:
    """Publish the command menu in Telegram on startup."""
    me = await bot.get_me()
    logger.info(f"Authorized as @{me.username}")
    # /admin stays out of the public menu
    commands = [
        BotCommand(handler.command, handler.description)
        for handler in dispatcher.commands
        if handler.command != AdminHandler.command
    ]
    await bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(cfg: BotConfig) -> Application:
    """Wire the router into a python-telegram-bot Application."""
    dispatcher = build_dispatcher(cfg.admin_ids)
    router = UpdateRouter(dispatcher, TextHandler(), CallbackHandler())

    async def post_init(application: Application) -> None:
        await set_bot_commands(application.bot, dispatcher)

    async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.error(f"Telegram client error: {context.error}", exc_info=context.error)

    # concurrent_updates stays off: one update at a time, in order
    app = Application.builder().token(cfg.token).post_init(post_init).build()
    app.add_handler(TypeHandler(Update, router.on_update))
    app.add_error_handler(on_error)
    return app


def main() -> None:
    """Initialize and run the bot."""
    try:
        cfg = load_config()
    except ConfigError as e:
        setup_logging()
        logger.critical(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(cfg.log_level, cfg.log_file, cfg.debug)
    logger.info(f"Loaded config: {len(cfg.admin_ids)} admin(s), poll timeout {cfg.poll_timeout}s")

    app = build_application(cfg)

    logger.info("🚀 Bot is running! Press Ctrl+C to stop.")
    app.run_polling(
        timeout=cfg.poll_timeout,
        allowed_updates=[Update.MESSAGE, Update.CALLBACK_QUERY],
    )
    logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
