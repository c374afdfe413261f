"""
Smoke-test function: waits a moment and greets the sender.
"""

import datetime

import inngest

from ai_server.inngest_client import inngest_client

HELLO_DELAY = datetime.timedelta(seconds=1)


async def say_hello(ctx: inngest.Context, step: inngest.Step) -> dict:
    await step.sleep("wait-a-moment", HELLO_DELAY)
    name = (ctx.event.data or {}).get("name", "")
    return {"success": True, "message": f"Привет, {name}! 👋"}


hello_world_test = inngest_client.create_function(
    fn_id="hello-world-test",
    trigger=inngest.TriggerEvent(event="test/hello"),
)(say_hello)
