"""
Inngest functions served at /api/inngest.
"""

from ai_server.inngest_client import inngest_client, send_event
from .hello_world import hello_world_test
from .notifications import send_generic_notification, model_training_completed
from .video_job import video_job

functions = [
    hello_world_test,
    send_generic_notification,
    model_training_completed,
    video_job,
]

__all__ = ["inngest_client", "send_event", "functions"]
