"""
Accessors for `rooms` and `workspaces`.
"""

from typing import Any

from .base import table, fetch_one, write_one
from .result import DbResult


async def get_room_by_name(name: str) -> DbResult:
    return fetch_one(
        f"get_room_by_name({name})",
        lambda: table("rooms").select("*").eq("name", name).limit(1)
    )


async def insert_room(room: dict[str, Any]) -> DbResult:
    return write_one(
        f"insert_room({room.get('room_id')})",
        lambda: table("rooms").insert(room)
    )


async def get_or_create_workspace(telegram_id: str) -> DbResult:
    """Personal workspace of a user; created on first use."""
    existing = fetch_one(
        f"get_workspace({telegram_id})",
        lambda: table("workspaces").select("*").eq("telegram_id", str(telegram_id)).limit(1)
    )
    if not existing.not_found:
        return existing

    return write_one(
        f"create_workspace({telegram_id})",
        lambda: table("workspaces").insert({"telegram_id": str(telegram_id), "title": "Personal"})
    )
