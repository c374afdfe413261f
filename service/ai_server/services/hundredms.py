"""
100ms REST client for meeting rooms.

Management requests are authorized with a short-lived HS256 JWT signed
with APP_SECRET.
"""

import time
import uuid
from typing import Any

import httpx
from jose import jwt

from ai_server.config import get_settings

HMS_API = "https://api.100ms.live/v2"
TOKEN_TTL_SECONDS = 24 * 60 * 60

AUDIO_SPACE_TEMPLATE = "65e84b5148b3dd31b94ff005"
MEETING_TEMPLATE = "65efdfab48b3dd31b94ff0dc"


def create_management_token(now: float | None = None) -> str:
    settings = get_settings()
    issued_at = int(now if now is not None else time.time())
    payload = {
        "access_key": settings.app_access_key,
        "type": "management",
        "version": 2,
        "iat": issued_at,
        "nbf": issued_at,
        "exp": issued_at + TOKEN_TTL_SECONDS,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, settings.app_secret, algorithm="HS256")


def template_for(room_type: str) -> str:
    return AUDIO_SPACE_TEMPLATE if room_type == "audio-space" else MEETING_TEMPLATE


def _headers() -> dict:
    return {
        "Authorization": f"Bearer {create_management_token()}",
        "Content-Type": "application/json",
    }


async def create_room(name: str, description: str, template_id: str) -> dict[str, Any]:
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.post(
            f"{HMS_API}/rooms",
            json={
                "name": name,
                "description": description,
                "template_id": template_id,
                "enabled": True,
            },
            headers=_headers()
        )
        response.raise_for_status()
        return response.json()


async def create_room_codes(room_id: str) -> list[dict[str, Any]]:
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.post(
            f"{HMS_API}/room-codes/room/{room_id}",
            headers=_headers()
        )
        response.raise_for_status()
        return response.json().get("data", [])
