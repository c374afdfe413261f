"""
Jobs API.

Starts a long-running generation and returns its job id right away.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ai_server.middleware.auth import verify_secret_key
from ai_server.services.jobs import create_job

router = APIRouter(tags=["jobs"])


class CreateJobRequest(BaseModel):
    telegram_id: str
    bot_name: str
    type: str = "text-to-video"
    prompt: str
    is_ru: bool = False
    video_model: Optional[str] = None
    image_url: Optional[str] = None


class CreateJobResponse(BaseModel):
    job_id: str
    status: str
    mode: str


@router.post("/create-job", response_model=CreateJobResponse, dependencies=[Depends(verify_secret_key)])
async def create_job_handler(request: CreateJobRequest):
    try:
        return await create_job(
            request.telegram_id,
            request.bot_name,
            request.type,
            request.prompt,
            is_ru=request.is_ru,
            video_model=request.video_model,
            image_url=request.image_url,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
