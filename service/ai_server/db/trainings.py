"""
Accessors for `model_trainings`, keyed by replicate_training_id.
"""

from typing import Any, Optional

from .base import table, fetch_one, write_one
from .result import DbResult


async def get_training_by_replicate_id(replicate_training_id: str) -> DbResult:
    return fetch_one(
        f"get_training_by_replicate_id({replicate_training_id})",
        lambda: table("model_trainings").select("*").eq("replicate_training_id", replicate_training_id).limit(1)
    )


async def create_model_training(
    telegram_id: str,
    model_name: str,
    trigger_word: str,
    zip_url: str,
    steps: int,
    bot_name: Optional[str] = None,
    gender: Optional[str] = None,
) -> DbResult:
    row = {
        "telegram_id": str(telegram_id),
        "model_name": model_name,
        "trigger_word": trigger_word,
        "zip_url": zip_url,
        "steps": steps,
        "bot_name": bot_name,
        "gender": gender,
        "status": "starting",
    }
    return write_one(
        f"create_model_training({telegram_id}, {model_name})",
        lambda: table("model_trainings").insert(row)
    )


async def update_training_status(
    replicate_training_id: str,
    status: str,
    **fields: Any,
) -> DbResult:
    """Update status plus any extra columns (model_url, weights, error)."""
    values = {"status": status, **fields}
    return write_one(
        f"update_training_status({replicate_training_id}, {status})",
        lambda: table("model_trainings").update(values).eq("replicate_training_id", replicate_training_id)
    )


async def set_training_cancel_url(replicate_training_id: str, cancel_url: str) -> DbResult:
    return write_one(
        f"set_training_cancel_url({replicate_training_id})",
        lambda: table("model_trainings").update({"cancel_url": cancel_url}).eq("replicate_training_id", replicate_training_id)
    )
