"""
Shared fixtures.

Settings are read from the environment on first use, so test values are
set before any ai_server module is imported.
"""

import os
from types import SimpleNamespace

import pytest

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "service-role-key")
os.environ.setdefault("SECRET_API_KEY", "test-secret")
os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("BOT_TOKENS", '{"test_bot": "123456:TEST-token"}')
os.environ.setdefault("DEFAULT_BOT_NAME", "test_bot")
os.environ.setdefault("APP_ACCESS_KEY", "hms-access")
os.environ.setdefault("APP_SECRET", "hms-secret")

from ai_server.config import get_settings
from ai_server.db import base as db_base


class FakeQuery:
    """
    Stands in for a supabase query builder.

    Every builder method (select, eq, update, ...) is recorded and returns
    the query itself. execute() returns the next queued result; the last
    one repeats. Exceptions in the queue are raised.
    """

    def __init__(self, *results):
        self.results = list(results) or [[]]
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    def execute(self):
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return SimpleNamespace(data=result)

    def called(self, name):
        return [call for call in self.calls if call[0] == name]


class FakeStep:
    """
    Stands in for inngest.Step: sleeps are recorded, step.run executes the
    callable right away and records its id and result.
    """

    def __init__(self):
        self.sleeps = []
        self.runs = []

    async def sleep(self, step_id, duration):
        self.sleeps.append((step_id, duration))

    async def run(self, step_id, handler, *args):
        result = await handler(*args)
        self.runs.append((step_id, result))
        return result

    @property
    def run_ids(self):
        return [step_id for step_id, _ in self.runs]


def make_ctx(name, data):
    return SimpleNamespace(event=SimpleNamespace(name=name, data=data))


class FakeSupabase:
    def __init__(self, tables):
        self.tables = tables
        self.used = []

    def table(self, name):
        self.used.append(name)
        return self.tables.setdefault(name, FakeQuery())


@pytest.fixture
def install_db(monkeypatch):
    """install_db(users=FakeQuery([...]), ...) -> FakeSupabase"""
    def install(**tables):
        client = FakeSupabase(tables)
        monkeypatch.setattr(db_base, "get_supabase_admin", lambda: client)
        return client
    return install


@pytest.fixture
def settings():
    """Cached settings; attributes may be monkeypatched per test."""
    return get_settings()


@pytest.fixture
def sent_messages(monkeypatch):
    """Capture Telegram messages instead of sending them."""
    from ai_server.telegram_bot import notifications

    messages = []

    class RecordingBot:
        async def send_message(self, chat_id, text, **kwargs):
            messages.append({"chat_id": chat_id, "text": text})

    monkeypatch.setattr(notifications, "get_bot_by_name", lambda bot_name=None: RecordingBot())
    return messages


@pytest.fixture
def anyio_backend():
    return "asyncio"
