"""
Inngest client shared by event functions and event senders.
"""

import logging
from typing import Any

import inngest

from ai_server.config import get_settings

settings = get_settings()

inngest_client = inngest.Inngest(
    app_id=settings.inngest_app_id,
    event_key=settings.inngest_event_key or None,
    is_production=not settings.is_dev,
    logger=logging.getLogger("ai_server"),
)


async def send_event(name: str, data: dict[str, Any]) -> list[str]:
    """Publish one event. Returns the event ids."""
    return await inngest_client.send(inngest.Event(name=name, data=data))
