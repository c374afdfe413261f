"""
Local storage for uploaded media.

Files land in <uploads_dir>/<telegram_id>/<type>/ and are served from
<origin>/uploads/...
"""

import re
import uuid
from pathlib import Path

from ai_server.config import get_settings
from ai_server.logging_config import logger

ALLOWED_EXTENSIONS = {".mp4", ".mov", ".webm", ".avi", ".mkv"}
MAX_UPLOAD_BYTES = 200 * 1024 * 1024

_SAFE_SEGMENT = re.compile(r"[^A-Za-z0-9_-]")
CHUNK_SIZE = 1024 * 1024


class UploadTooLarge(ValueError):
    """Upload exceeds MAX_UPLOAD_BYTES."""


async def read_limited(file) -> bytes:
    """
    Read an UploadFile in chunks, stopping once MAX_UPLOAD_BYTES is exceeded.

    Raises:
        UploadTooLarge: file is larger than MAX_UPLOAD_BYTES
    """
    chunks = []
    size = 0
    while chunk := await file.read(CHUNK_SIZE):
        size += len(chunk)
        if size > MAX_UPLOAD_BYTES:
            raise UploadTooLarge("File is too large")
        chunks.append(chunk)
    return b"".join(chunks)


def _safe_segment(value: str) -> str:
    cleaned = _SAFE_SEGMENT.sub("", str(value))
    if not cleaned:
        raise ValueError(f"Invalid path segment: {value!r}")
    return cleaned


def save_upload(telegram_id: str, upload_type: str, filename: str, content: bytes) -> dict:
    """
    Store the file and return its public URL.

    Raises:
        ValueError: unsupported extension, empty or too large file
    """
    extension = Path(filename or "").suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: {extension or 'none'}")
    if not content:
        raise ValueError("Empty file")
    if len(content) > MAX_UPLOAD_BYTES:
        raise UploadTooLarge("File is too large")

    settings = get_settings()
    relative = Path(_safe_segment(telegram_id)) / _safe_segment(upload_type) / f"{uuid.uuid4().hex}{extension}"
    target = Path(settings.uploads_dir) / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)

    url = f"{settings.origin.rstrip('/')}/uploads/{relative.as_posix()}"
    logger.info(f"Upload saved for {telegram_id}: {target}")
    return {"url": url, "path": str(target), "size": len(content)}
