"""
Video generation function. Each stage is a separate step so a retry
resumes after the last finished one.
"""

import inngest

from ai_server.services import video_generation
from ai_server.inngest_client import inngest_client


async def process_video_job(ctx: inngest.Context, step: inngest.Step) -> dict:
    data = dict(ctx.event.data or {})

    async def start() -> dict:
        return await video_generation.start_prediction(data)

    prediction = await step.run("create-prediction", start)

    async def record():
        return await video_generation.record_prompt(data, prediction)

    prompt_id = await step.run("save-prompt", record)

    async def wait() -> dict:
        return await video_generation.await_result(prediction["id"])

    result = await step.run("wait-for-prediction", wait)

    async def finish() -> dict:
        return await video_generation.finish_job(data, prompt_id, result)

    return await step.run("finish-job", finish)


video_job = inngest_client.create_function(
    fn_id="video-job",
    trigger=inngest.TriggerEvent(event="video/job.start"),
    retries=2,
)(process_video_job)
