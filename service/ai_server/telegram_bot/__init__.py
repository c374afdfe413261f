"""
Telegram module for the AI server.

Outbound only: a registry of bots by name and localized notification
helpers. There is no update handling here.
"""

from .bots import get_bot_by_name, shutdown_bots, UnknownBotError
from .notifications import (
    send_text,
    send_balance_message,
    send_insufficient_stars_message,
    send_payment_notification,
    send_training_notification,
    send_tasks_summary,
)

__all__ = [
    "get_bot_by_name",
    "shutdown_bots",
    "UnknownBotError",
    "send_text",
    "send_balance_message",
    "send_insufficient_stars_message",
    "send_payment_notification",
    "send_training_notification",
    "send_tasks_summary",
]
