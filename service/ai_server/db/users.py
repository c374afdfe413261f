"""
Accessors for the `users` table, keyed by telegram_id.
"""

from typing import Optional

from .base import table, fetch_one, write_one
from .result import DbResult

DEFAULT_ASPECT_RATIO = "9:16"


async def get_user_by_telegram_id(telegram_id: str) -> DbResult:
    return fetch_one(
        f"get_user_by_telegram_id({telegram_id})",
        lambda: table("users").select("*").eq("telegram_id", str(telegram_id)).limit(1)
    )


async def get_aspect_ratio(telegram_id: str) -> DbResult:
    """Returns the user's aspect ratio string, e.g. '9:16'."""
    result = fetch_one(
        f"get_aspect_ratio({telegram_id})",
        lambda: table("users").select("aspect_ratio").eq("telegram_id", str(telegram_id)).limit(1)
    )
    if not result.ok:
        return result
    return DbResult.found(result.data.get("aspect_ratio") or DEFAULT_ASPECT_RATIO)


async def set_aspect_ratio(telegram_id: str, aspect_ratio: str) -> DbResult:
    return write_one(
        f"set_aspect_ratio({telegram_id}, {aspect_ratio})",
        lambda: table("users").update({"aspect_ratio": aspect_ratio}).eq("telegram_id", str(telegram_id))
    )


async def update_user_level_plus_one(telegram_id: str, level: int) -> DbResult:
    return write_one(
        f"update_user_level_plus_one({telegram_id}, {level})",
        lambda: table("users").update({"level": level + 1}).eq("telegram_id", str(telegram_id))
    )


async def get_user_balance(telegram_id: str) -> DbResult:
    """Returns the balance as float; a user without a balance has 0."""
    result = fetch_one(
        f"get_user_balance({telegram_id})",
        lambda: table("users").select("balance").eq("telegram_id", str(telegram_id)).limit(1)
    )
    if not result.ok:
        return result
    return DbResult.found(float(result.data.get("balance") or 0))


async def update_user_balance(telegram_id: str, balance: float) -> DbResult:
    return write_one(
        f"update_user_balance({telegram_id}, {balance})",
        lambda: table("users").update({"balance": balance}).eq("telegram_id", str(telegram_id))
    )


async def update_user_subscription(telegram_id: str, subscription: str) -> DbResult:
    return write_one(
        f"update_user_subscription({telegram_id}, {subscription})",
        lambda: table("users").update({"subscription": subscription}).eq("telegram_id", str(telegram_id))
    )


async def update_user_voice(telegram_id: str, voice_id_elevenlabs: Optional[str]) -> DbResult:
    return write_one(
        f"update_user_voice({telegram_id})",
        lambda: table("users").update({"voice_id_elevenlabs": voice_id_elevenlabs}).eq("telegram_id", str(telegram_id))
    )
