"""
Accessors for `prompts_history`, keyed by prompt_id.
"""

from typing import Optional

from .base import table, fetch_one, fetch_many, write_one
from .result import DbResult

PROMPT_COLUMNS = (
    "prompt_id, prompt, model_type, mode, media_url, telegram_id, "
    "status, task_id, cancel_url, created_at, updated_at"
)
MAX_HISTORY = 100


async def get_prompt_by_id(prompt_id: int) -> DbResult:
    return fetch_one(
        f"get_prompt_by_id({prompt_id})",
        lambda: table("prompts_history").select("*").eq("prompt_id", prompt_id).limit(1)
    )


async def save_prompt(
    prompt: str,
    model_type: str,
    mode: str,
    telegram_id: str,
    status: str,
    media_url: Optional[str] = None,
    task_id: Optional[str] = None,
) -> DbResult:
    """Insert a prompt row. On success `data` is the new row."""
    row = {
        "prompt": prompt,
        "model_type": model_type,
        "mode": mode,
        "telegram_id": str(telegram_id),
        "status": status,
        "media_url": media_url,
        "task_id": task_id,
    }
    return write_one(
        f"save_prompt({telegram_id}, {mode})",
        lambda: table("prompts_history").insert(row)
    )


async def update_prompt(prompt_id: int, status: str, media_url: Optional[str] = None) -> DbResult:
    fields = {"status": status}
    if media_url is not None:
        fields["media_url"] = media_url
    return write_one(
        f"update_prompt({prompt_id}, {status})",
        lambda: table("prompts_history").update(fields).eq("prompt_id", prompt_id)
    )


async def set_prompt_cancel_url(prompt_id: int, cancel_url: str) -> DbResult:
    return write_one(
        f"set_prompt_cancel_url({prompt_id})",
        lambda: table("prompts_history").update({"cancel_url": cancel_url}).eq("prompt_id", prompt_id)
    )


async def get_prompt_history(
    telegram_id: str,
    limit: int = 10,
    mode: Optional[str] = None,
    status: Optional[str] = None,
) -> DbResult:
    """Latest prompts first, optionally filtered by mode and status."""
    limit = max(1, min(limit, MAX_HISTORY))

    def build():
        query = table("prompts_history").select(PROMPT_COLUMNS).eq("telegram_id", str(telegram_id))
        if mode:
            query = query.eq("mode", mode)
        if status:
            query = query.eq("status", status)
        return query.order("created_at", desc=True).limit(limit)

    return fetch_many(f"get_prompt_history({telegram_id})", build)
