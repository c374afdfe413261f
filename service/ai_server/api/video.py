"""
Video upload API.
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from ai_server.middleware.auth import verify_secret_key
from ai_server.services.upload import UploadTooLarge, read_limited, save_upload

router = APIRouter(prefix="/video", tags=["video"])


@router.post("/upload", dependencies=[Depends(verify_secret_key)])
async def upload_video(
    telegram_id: str = Form(...),
    type: str = Form("video"),
    file: UploadFile = File(...),
):
    try:
        content = await read_limited(file)
        return save_upload(telegram_id, type, file.filename or "", content)
    except UploadTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
