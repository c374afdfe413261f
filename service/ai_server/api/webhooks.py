"""
Webhooks from external services.
"""

from fastapi import APIRouter, HTTPException, Request

from ai_server.logging_config import logger
from ai_server.services.training_webhook import handle_training_event

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/replicate")
async def replicate_webhook(request: Request):
    """Training status updates from Replicate."""
    event = await request.json()

    if not isinstance(event, dict) or not event.get("id") or not event.get("status"):
        logger.warning(f"Invalid Replicate webhook: {str(event)[:500]}")
        raise HTTPException(status_code=400, detail="Missing required fields")

    return await handle_training_event(event)
