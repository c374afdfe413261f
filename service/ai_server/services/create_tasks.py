"""
Task creation from meeting transcriptions.

The transcription is turned into tasks by the model; each task is stored
for the telegram id and the short summary is posted to the chat.
"""

from typing import Optional

from ai_server.db import tasks as tasks_db
from ai_server.logging_config import logger
from ai_server.telegram_bot import send_tasks_summary
from .task_extraction import extract_tasks


async def create_tasks(
    telegram_id: str,
    transcription: Optional[str] = None,
    room_id: Optional[str] = None,
    recording_id: Optional[str] = None,
    chat_id: Optional[str] = None,
    is_ru: bool = False,
    bot_name: Optional[str] = None,
) -> list[dict]:
    """
    Store tasks extracted from `transcription` and return the stored rows.

    Without a transcription, returns the user's existing tasks.
    """
    if not transcription:
        existing = await tasks_db.get_tasks_by_telegram_id(telegram_id)
        if existing.failed:
            raise RuntimeError(f"Tasks of {telegram_id} not available: {existing.error}")
        return existing.data

    extracted = extract_tasks(transcription)

    created = []
    for task in extracted["tasks"]:
        result = await tasks_db.create_task(
            telegram_id,
            title=task["title"],
            description=task["description"],
            room_id=room_id,
            recording_id=recording_id,
            chat_id=chat_id,
        )
        if result.ok:
            created.append(result.data)
        else:
            logger.warning(f"Task '{task['title']}' not stored for {telegram_id}")

    if chat_id and extracted["summary"]:
        try:
            await send_tasks_summary(chat_id, extracted["summary"], len(created), is_ru, bot_name)
        except Exception as e:
            logger.error(f"Failed to send tasks summary to {chat_id}: {e}")

    return created
