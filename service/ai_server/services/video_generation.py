"""
Video generation job.

A job is split into small steps so the event function can checkpoint each
one; `run_video_job` chains the same steps in-process for fallback mode.
"""

from typing import Any, Optional

from ai_server.db import prompts
from ai_server.logging_config import logger
from ai_server.telegram_bot import send_text
from . import replicate_client

VIDEO_MODELS = {
    "minimax": "minimax/video-01",
    "kling": "kwaivgi/kling-v1.6-standard",
    "haiper": "haiper-ai/haiper-video-2",
}
DEFAULT_VIDEO_MODEL = "minimax"
JOB_TYPES = ("text-to-video", "image-to-video")


def resolve_model(video_model: Optional[str]) -> str:
    key = (video_model or DEFAULT_VIDEO_MODEL).lower()
    if key not in VIDEO_MODELS:
        raise ValueError(f"Unsupported video model: {video_model}")
    return VIDEO_MODELS[key]


def build_input(data: dict[str, Any]) -> dict[str, Any]:
    model_input: dict[str, Any] = {"prompt": data["prompt"]}
    if data.get("type") == "image-to-video":
        if not data.get("image_url"):
            raise ValueError("image_url is required for image-to-video")
        model_input["first_frame_image"] = data["image_url"]
    return model_input


async def start_prediction(data: dict[str, Any]) -> dict[str, Any]:
    prediction = await replicate_client.create_prediction(
        resolve_model(data.get("video_model")),
        build_input(data)
    )
    return {
        "id": prediction["id"],
        "cancel_url": (prediction.get("urls") or {}).get("cancel"),
    }


async def record_prompt(data: dict[str, Any], prediction: dict[str, Any]) -> Optional[int]:
    """Store the prompt row. A failed write does not stop the job."""
    saved = await prompts.save_prompt(
        prompt=data["prompt"],
        model_type=resolve_model(data.get("video_model")),
        mode=data.get("type", "text-to-video"),
        telegram_id=data["telegram_id"],
        status="PROCESSING",
        task_id=prediction["id"],
    )
    if not saved.ok:
        logger.warning(f"Prompt for job {data.get('job_id')} not stored: {saved.outcome.value}")
        return None

    prompt_id = saved.data["prompt_id"]
    if prediction.get("cancel_url"):
        await prompts.set_prompt_cancel_url(prompt_id, prediction["cancel_url"])
    return prompt_id


async def await_result(prediction_id: str) -> dict[str, Any]:
    prediction = await replicate_client.wait_for_prediction(prediction_id)
    return {
        "status": prediction.get("status"),
        "url": replicate_client.output_url(prediction),
        "error": prediction.get("error"),
    }


async def finish_job(
    data: dict[str, Any],
    prompt_id: Optional[int],
    result: dict[str, Any]
) -> dict[str, Any]:
    is_ru = bool(data.get("is_ru"))
    succeeded = result["status"] == "succeeded" and bool(result["url"])

    if prompt_id is not None:
        await prompts.update_prompt(
            prompt_id,
            "SUCCESS" if succeeded else "ERROR",
            media_url=result["url"] if succeeded else None
        )

    if succeeded:
        text = f"🎬 Ваше видео готово!\n{result['url']}" if is_ru else f"🎬 Your video is ready!\n{result['url']}"
    else:
        reason = result.get("error") or result["status"]
        text = f"❌ Не удалось создать видео: {reason}" if is_ru else f"❌ Video generation failed: {reason}"

    await send_text(data["telegram_id"], text, data.get("bot_name"))

    logger.info(f"Video job {data.get('job_id')} finished: {result['status']}")
    return {"job_id": data.get("job_id"), "status": result["status"], "url": result["url"]}


async def run_video_job(data: dict[str, Any]) -> dict[str, Any]:
    """Run all steps in-process (fallback mode)."""
    prediction = await start_prediction(data)
    prompt_id = await record_prompt(data, prediction)
    result = await await_result(prediction["id"])
    return await finish_job(data, prompt_id, result)
