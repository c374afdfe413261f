"""
Notification functions: deliver messages through the bot registry.
"""

import inngest

from ai_server.logging_config import logger
from ai_server.services.training_webhook import notify_training_completed
from ai_server.telegram_bot import send_text
from ai_server.inngest_client import inngest_client


async def deliver_notification(ctx: inngest.Context, step: inngest.Step) -> dict:
    data = ctx.event.data or {}
    telegram_id = str(data["telegram_id"])

    async def send() -> dict:
        await send_text(telegram_id, data["message"], data.get("bot_name"))
        return {"success": True}

    result = await step.run("send-generic-notification", send)
    logger.info(f"Notification delivered to {telegram_id}")
    return result


async def announce_training(ctx: inngest.Context, step: inngest.Step) -> dict:
    data = dict(ctx.event.data or {})

    async def notify() -> dict:
        return await notify_training_completed(data)

    return await step.run("notify-owner", notify)


send_generic_notification = inngest_client.create_function(
    fn_id="send-generic-notification",
    trigger=inngest.TriggerEvent(event="notification/generic.start"),
    retries=3,
)(deliver_notification)

model_training_completed = inngest_client.create_function(
    fn_id="model-training-completed",
    trigger=inngest.TriggerEvent(event="model/training.completed"),
)(announce_training)
