"""
Job dispatch for long-running generations.

Jobs go to Inngest as `video/job.start`. When the event platform is
disabled (USE_INNGEST=false) or fallback mode is on, the job runs in this
process as a background task instead.
"""

import asyncio
import uuid
from typing import Any, Optional

from ai_server.config import get_settings
from ai_server.logging_config import logger
from ai_server.inngest_client import send_event
from .video_generation import JOB_TYPES, resolve_model, run_video_job

VIDEO_JOB_EVENT = "video/job.start"

# Strong references to fallback tasks until they finish
_background_tasks: set[asyncio.Task] = set()


async def create_job(
    telegram_id: str,
    bot_name: str,
    job_type: str,
    prompt: str,
    is_ru: bool = False,
    video_model: Optional[str] = None,
    image_url: Optional[str] = None,
) -> dict[str, Any]:
    if job_type not in JOB_TYPES:
        raise ValueError(f"Unsupported job type: {job_type}")
    resolve_model(video_model)

    job_id = str(uuid.uuid4())
    data = {
        "job_id": job_id,
        "telegram_id": str(telegram_id),
        "bot_name": bot_name,
        "type": job_type,
        "prompt": prompt,
        "video_model": video_model,
        "image_url": image_url,
        "is_ru": is_ru,
    }

    settings = get_settings()
    if settings.use_inngest and not settings.use_fallback:
        await send_event(VIDEO_JOB_EVENT, data)
        logger.info(f"Job {job_id} sent to Inngest")
        return {"job_id": job_id, "status": "pending", "mode": "inngest"}

    task = asyncio.create_task(_run_in_background(data))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    logger.info(f"Job {job_id} started in fallback mode")
    return {"job_id": job_id, "status": "pending", "mode": "fallback"}


async def _run_in_background(data: dict[str, Any]) -> None:
    try:
        await run_video_job(data)
    except Exception as e:
        logger.error(f"Fallback job {data['job_id']} failed: {e}", exc_info=True)
