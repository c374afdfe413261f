from datetime import datetime, timezone
from pathlib import Path

import inngest.fast_api
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from ai_server.config import get_settings
from ai_server.logging_config import logger
from ai_server.api.tasks import router as tasks_router
from ai_server.api.payments import router as payments_router
from ai_server.api.rooms import router as rooms_router
from ai_server.api.video import router as video_router
from ai_server.api.jobs import router as jobs_router
from ai_server.api.webhooks import router as webhooks_router
from ai_server.inngest_functions import inngest_client, functions
from ai_server.telegram_bot import shutdown_bots

VERSION = "1.0.0"

app = FastAPI(
    title="AI Server",
    description="Backend for the neuro bots: tasks, payments, rooms, media jobs",
    version=VERSION
)


@app.on_event("startup")
async def startup_event():
    settings = get_settings()
    print(f"[STARTUP] ENV: {settings.node_env}, port {settings.port}")
    print(f"[STARTUP] Inngest: {'on' if settings.use_inngest else 'off'}, fallback: {'on' if settings.use_fallback else 'off'}")


@app.on_event("shutdown")
async def shutdown_event():
    """Close bot HTTP sessions on application shutdown."""
    print("[SHUTDOWN] Closing Telegram bots...")
    await shutdown_bots()
    print("[SHUTDOWN] Bots closed")


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "x-secret-key", "x-inngest-signature", "x-inngest-sdk"],
)


@app.exception_handler(404)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=404, content={"status": "error", "message": "Route not found"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"status": "error", "message": "Internal server error"})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "status": "success",
        "message": "Welcome to AI Server",
        "version": VERSION,
        "docs": "/docs",
    }


# Include routers
app.include_router(tasks_router)
app.include_router(payments_router)
app.include_router(rooms_router)
app.include_router(video_router)
app.include_router(jobs_router)
app.include_router(webhooks_router)

# Uploaded media
app.mount("/uploads", StaticFiles(directory=Path(get_settings().uploads_dir), check_dir=False), name="uploads")

# Event functions
if get_settings().use_inngest:
    inngest.fast_api.serve(app, inngest_client, functions)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
