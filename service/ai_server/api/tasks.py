"""
Tasks API.

Creates tasks from a meeting transcription (100ms transcription webhook
relayed by the bot) and lists them for a user.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ai_server.services.create_tasks import create_tasks

router = APIRouter(prefix="/create-tasks", tags=["tasks"])


class CreateTasksRequest(BaseModel):
    telegram_id: str
    transcription: Optional[str] = None
    room_id: Optional[str] = None
    recording_id: Optional[str] = None
    chat_id: Optional[str] = None
    is_ru: bool = False
    bot_name: Optional[str] = None


@router.post("/create-tasks")
async def create_tasks_handler(request: CreateTasksRequest):
    tasks = await create_tasks(
        request.telegram_id,
        transcription=request.transcription,
        room_id=request.room_id,
        recording_id=request.recording_id,
        chat_id=request.chat_id,
        is_ru=request.is_ru,
        bot_name=request.bot_name,
    )
    return {"tasks": tasks}
