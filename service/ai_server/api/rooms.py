"""
Rooms API.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ai_server.services.room import create_or_fetch_room

router = APIRouter(tags=["rooms"])


class CreateRoomRequest(BaseModel):
    name: str = Field(min_length=1)
    type: str = "meets"
    telegram_id: str
    token: str
    chat_id: str


@router.post("/room")
async def create_room(request: CreateRoomRequest):
    """Return the room with this name, creating it on 100ms if needed."""
    return await create_or_fetch_room(
        request.name,
        room_type=request.type,
        telegram_id=request.telegram_id,
        token=request.token,
        chat_id=request.chat_id,
    )
