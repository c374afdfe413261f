"""
Replicate REST client.

Thin httpx wrapper: create a prediction, poll it, cancel it through the
cancel URL Replicate returns.
"""

import asyncio
from typing import Any, Optional

import httpx

from ai_server.config import get_settings
from ai_server.logging_config import logger

REPLICATE_API = "https://api.replicate.com/v1"
TERMINAL_STATUSES = {"succeeded", "failed", "canceled"}


def _headers() -> dict:
    settings = get_settings()
    return {
        "Authorization": f"Bearer {settings.replicate_api_token}",
        "Content-Type": "application/json",
    }


async def create_prediction(
    model: str,
    input: dict[str, Any],
    webhook: Optional[str] = None
) -> dict:
    """
    Start a prediction.

    Args:
        model: "owner/name" for official models or "owner/name:version"
        input: Model input
        webhook: Optional URL notified on completion

    Returns:
        Prediction dict (id, status, urls.get, urls.cancel, ...)
    """
    if ":" in model:
        url = f"{REPLICATE_API}/predictions"
        payload: dict[str, Any] = {"version": model.split(":", 1)[1], "input": input}
    else:
        url = f"{REPLICATE_API}/models/{model}/predictions"
        payload = {"input": input}

    if webhook:
        payload["webhook"] = webhook
        payload["webhook_events_filter"] = ["completed"]

    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.post(url, json=payload, headers=_headers())
        response.raise_for_status()
        prediction = response.json()

    logger.info(f"Replicate prediction {prediction.get('id')} created for {model}")
    return prediction


async def get_prediction(prediction_id: str) -> dict:
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(
            f"{REPLICATE_API}/predictions/{prediction_id}",
            headers=_headers()
        )
        response.raise_for_status()
        return response.json()


async def cancel_prediction(cancel_url: str) -> None:
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.post(cancel_url, headers=_headers())
        response.raise_for_status()


async def wait_for_prediction(
    prediction_id: str,
    interval: float = 5.0,
    timeout: float = 600.0
) -> dict:
    """Poll until the prediction reaches a terminal status."""
    waited = 0.0
    while True:
        prediction = await get_prediction(prediction_id)
        if prediction.get("status") in TERMINAL_STATUSES:
            return prediction
        if waited >= timeout:
            raise TimeoutError(f"Prediction {prediction_id} not finished after {timeout}s")
        await asyncio.sleep(interval)
        waited += interval


def output_url(prediction: dict) -> Optional[str]:
    """First URL of a prediction output (string or list of strings)."""
    output = prediction.get("output")
    if isinstance(output, list):
        return output[0] if output else None
    return output
