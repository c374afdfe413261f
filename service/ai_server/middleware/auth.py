import secrets

from fastapi import Header, HTTPException

from ai_server.config import get_settings
from ai_server.logging_config import logger


async def verify_secret_key(x_secret_key: str | None = Header(None)) -> None:
    """
    Require the `x-secret-key` header to match SECRET_API_KEY.

    Used by endpoints that trigger paid work (jobs, uploads).
    """
    settings = get_settings()
    if not x_secret_key or not secrets.compare_digest(x_secret_key, settings.secret_api_key):
        logger.warning("[AUTH] Rejected request with invalid secret key")
        raise HTTPException(status_code=403, detail="Invalid secret key")
