"""
Replicate webhook for model trainings.

Replicate posts the training object on completion. The training row is
updated, the owner is notified and `model/training.completed` is sent for
follow-up work.
"""

from typing import Any

from ai_server.config import get_settings
from ai_server.db import trainings, users
from ai_server.logging_config import logger
from ai_server.inngest_client import send_event
from ai_server.telegram_bot import send_training_notification

TRAINING_COMPLETED_EVENT = "model/training.completed"
TERMINAL_STATUSES = ("succeeded", "failed", "canceled")


async def handle_training_event(event: dict[str, Any]) -> dict[str, Any]:
    """
    Returns a small ack dict. Unknown trainings are acknowledged with
    success=False so Replicate does not retry. A failed notification is
    logged and the webhook is still acknowledged.
    """
    training_id = event["id"]
    status = event["status"]
    logger.info(f"Replicate webhook: training {training_id} is {status}")

    training = await trainings.get_training_by_replicate_id(training_id)
    if not training.ok:
        logger.error(f"Training {training_id} not found ({training.outcome.value})")
        return {"success": False, "message": "Training not found, webhook acknowledged"}

    if status not in TERMINAL_STATUSES:
        await trainings.update_training_status(training_id, status)
        return {"success": True, "message": f"Status {status} recorded"}

    output = event.get("output") or {}
    if status == "succeeded":
        await trainings.update_training_status(
            training_id,
            "SUCCESS",
            model_url=output.get("version"),
            weights=output.get("weights"),
        )
    else:
        await trainings.update_training_status(training_id, status.upper(), error=event.get("error"))

    row = training.data
    telegram_id = str(row["telegram_id"])
    user = await users.get_user_by_telegram_id(telegram_id)
    user_row = user.data or {}

    completed = {
        "training_id": training_id,
        "telegram_id": telegram_id,
        "model_name": row.get("model_name"),
        "status": status,
        "error": event.get("error"),
        "bot_name": row.get("bot_name") or user_row.get("bot_name"),
        "is_ru": user_row.get("language_code") == "ru",
    }

    settings = get_settings()
    try:
        if settings.use_inngest and not settings.use_fallback:
            await send_event(TRAINING_COMPLETED_EVENT, completed)
        else:
            await notify_training_completed(completed)
    except Exception as e:
        logger.error(f"Failed to report training {training_id} to {telegram_id}: {e}", exc_info=True)

    return {"success": True, "message": f"Training {status}"}


async def notify_training_completed(data: dict[str, Any]) -> dict[str, Any]:
    """Tell the owner how the training ended."""
    await send_training_notification(
        data["telegram_id"],
        data.get("model_name") or "",
        succeeded=data["status"] == "succeeded",
        is_ru=bool(data.get("is_ru")),
        error=data.get("error"),
        bot_name=data.get("bot_name"),
    )
    return {"success": True, "telegram_id": data["telegram_id"]}
