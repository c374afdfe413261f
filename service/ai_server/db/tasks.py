"""
Accessors for `tasks`.
"""

from typing import Optional

from .base import table, fetch_many, write_one
from .result import DbResult


async def create_task(
    telegram_id: str,
    title: str,
    description: str,
    room_id: Optional[str] = None,
    recording_id: Optional[str] = None,
    workspace_id: Optional[str] = None,
    chat_id: Optional[str] = None,
) -> DbResult:
    row = {
        "telegram_id": str(telegram_id),
        "title": title,
        "description": description,
        "room_id": room_id,
        "recording_id": recording_id,
        "workspace_id": workspace_id,
        "chat_id": chat_id,
    }
    return write_one(
        f"create_task({telegram_id})",
        lambda: table("tasks").insert(row)
    )


async def get_tasks_by_telegram_id(telegram_id: str, limit: int = 50) -> DbResult:
    return fetch_many(
        f"get_tasks_by_telegram_id({telegram_id})",
        lambda: table("tasks").select("*").eq("telegram_id", str(telegram_id)).order("created_at", desc=True).limit(limit)
    )
