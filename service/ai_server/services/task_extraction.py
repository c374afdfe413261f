"""
Task extraction from meeting transcriptions using OpenAI.
"""

import json

import openai

from ai_server.config import get_settings
from ai_server.logging_config import logger

TASKS_PROMPT = '''Extract every task from this meeting transcription.

Transcription:
"""{transcription}"""

Return a JSON object of the form:
{{"summary": "<one sentence summary>", "tasks": [{{"title": "...", "description": "..."}}]}}

If no tasks are found, return one task saying that no tasks were found.
Always answer in the language of the transcription.
'''


def extract_tasks(transcription: str) -> dict:
    """
    Ask the model for a short summary and a list of tasks.

    Returns:
        {"summary": str, "tasks": [{"title": str, "description": str}, ...]}
    """
    settings = get_settings()
    client = openai.OpenAI(api_key=settings.openai_api_key)

    response = client.chat.completions.create(
        model=settings.openai_model,
        messages=[{"role": "user", "content": TASKS_PROMPT.format(transcription=transcription)}],
        response_format={"type": "json_object"},
        temperature=0
    )

    content = response.choices[0].message.content or "{}"
    parsed = json.loads(content)

    tasks = parsed.get("tasks")
    if not isinstance(tasks, list):
        raise ValueError("Model response has no tasks array")

    logger.info(f"Extracted {len(tasks)} tasks from transcription")
    return {
        "summary": parsed.get("summary", ""),
        "tasks": [
            {"title": str(t.get("title", "")), "description": str(t.get("description", ""))}
            for t in tasks
            if isinstance(t, dict)
        ],
    }
