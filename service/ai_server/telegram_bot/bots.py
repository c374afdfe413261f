"""
Registry of Telegram bots, one per bot_name.

Tokens come from BOT_TOKENS. Bot instances are created lazily and reused.
"""

from telegram import Bot

from ai_server.config import get_settings
from ai_server.logging_config import logger

_bots: dict[str, Bot] = {}


class UnknownBotError(KeyError):
    """No token configured for the requested bot_name."""


def get_bot_by_name(bot_name: str | None = None) -> Bot:
    """Get or create the Bot for bot_name (default bot if empty)."""
    settings = get_settings()
    name = bot_name or settings.default_bot_name

    if name not in _bots:
        token = settings.bot_tokens.get(name)
        if not token:
            raise UnknownBotError(f"No token configured for bot '{name}'")
        _bots[name] = Bot(token=token)
        logger.info(f"Bot '{name}' registered")

    return _bots[name]


async def shutdown_bots() -> None:
    """Release HTTP resources of all created bots."""
    for name, bot in list(_bots.items()):
        try:
            await bot.shutdown()
        except Exception as e:
            logger.warning(f"Failed to shut down bot '{name}': {e}")
    _bots.clear()
