"""
Meeting rooms on 100ms.

A room is looked up by name first; only unknown names create a new room
and its join codes.
"""

from typing import Any

from ai_server.db import rooms, users
from ai_server.logging_config import logger
from ai_server.utils.transliterate import transliterate
from . import hundredms


async def create_or_fetch_room(
    name: str,
    room_type: str,
    telegram_id: str,
    token: str,
    chat_id: str,
) -> dict[str, Any]:
    user = await users.get_user_by_telegram_id(telegram_id)
    if not user.ok:
        raise ValueError(f"User not found: {telegram_id}")

    workspace = await rooms.get_or_create_workspace(telegram_id)
    if not workspace.ok:
        raise RuntimeError("Failed to create or fetch workspace")
    workspace_id = str(workspace.data["id"])

    existing = await rooms.get_room_by_name(name)
    if existing.ok:
        logger.info(f"Room '{name}' already exists, returning it")
        return existing.data
    if existing.failed:
        raise RuntimeError(f"Room lookup failed: {existing.error}")

    new_room = await hundredms.create_room(
        transliterate(name),
        description=workspace_id,
        template_id=hundredms.template_for(room_type)
    )
    codes = await hundredms.create_room_codes(new_room["id"])

    row = {
        "room_id": new_room["id"],
        "name": new_room.get("name"),
        "original_name": name,
        "type": room_type,
        "workspace_id": workspace_id,
        "description": new_room.get("description"),
        "enabled": new_room.get("enabled", True),
        "template_id": new_room.get("template_id"),
        "region": new_room.get("region"),
        "codes": codes,
        "chat_id": chat_id,
        "telegram_id": str(telegram_id),
        "token": token,
        "username": user.data.get("username"),
        "language_code": user.data.get("language_code"),
        "public": False,
        "created_at": new_room.get("created_at"),
        "updated_at": new_room.get("updated_at"),
    }

    inserted = await rooms.insert_room(row)
    if not inserted.ok:
        raise RuntimeError(f"Failed to store room {new_room['id']}")

    logger.info(f"Room {new_room['id']} created for {telegram_id}")
    return inserted.data
