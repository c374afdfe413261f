"""
Tests for job dispatch: Inngest event vs in-process fallback.
"""

import asyncio

import pytest

from ai_server.services import jobs


@pytest.fixture
def sent_events(monkeypatch):
    events = []

    async def fake_send_event(name, data):
        events.append((name, data))
        return ["evt-1"]

    monkeypatch.setattr(jobs, "send_event", fake_send_event)
    return events


@pytest.fixture
def local_runs(monkeypatch):
    runs = []

    async def fake_run_video_job(data):
        runs.append(data)
        return {"job_id": data["job_id"], "status": "succeeded", "url": "https://cdn/x.mp4"}

    monkeypatch.setattr(jobs, "run_video_job", fake_run_video_job)
    return runs


class TestCreateJob:

    @pytest.mark.anyio
    async def test_sends_event_when_inngest_is_on(self, settings, monkeypatch, sent_events, local_runs):
        """Inngest mode publishes the job event."""
        monkeypatch.setattr(settings, "use_inngest", True)
        monkeypatch.setattr(settings, "use_fallback", False)

        result = await jobs.create_job("1", "test_bot", "text-to-video", "a cat", is_ru=True)

        assert result["status"] == "pending"
        assert result["mode"] == "inngest"
        assert local_runs == []

        name, data = sent_events[0]
        assert name == jobs.VIDEO_JOB_EVENT
        assert data["job_id"] == result["job_id"]
        assert data["prompt"] == "a cat"
        assert data["is_ru"] is True

    @pytest.mark.anyio
    async def test_fallback_runs_in_process(self, settings, monkeypatch, sent_events, local_runs):
        """Fallback mode runs the job locally."""
        monkeypatch.setattr(settings, "use_inngest", True)
        monkeypatch.setattr(settings, "use_fallback", True)

        result = await jobs.create_job("1", "test_bot", "text-to-video", "a cat")
        await asyncio.gather(*list(jobs._background_tasks))

        assert result["mode"] == "fallback"
        assert sent_events == []
        assert [run["job_id"] for run in local_runs] == [result["job_id"]]

    @pytest.mark.anyio
    async def test_inngest_off_runs_in_process(self, settings, monkeypatch, sent_events, local_runs):
        """Disabled Inngest also runs locally."""
        monkeypatch.setattr(settings, "use_inngest", False)
        monkeypatch.setattr(settings, "use_fallback", False)

        result = await jobs.create_job("1", "test_bot", "image-to-video", "a cat", image_url="https://x/1.png")
        await asyncio.gather(*list(jobs._background_tasks))

        assert result["mode"] == "fallback"
        assert local_runs[0]["image_url"] == "https://x/1.png"

    @pytest.mark.anyio
    async def test_fallback_failure_is_contained(self, settings, monkeypatch, sent_events):
        """A crashing local job does not escape."""
        monkeypatch.setattr(settings, "use_inngest", False)

        async def broken(data):
            raise RuntimeError("replicate down")

        monkeypatch.setattr(jobs, "run_video_job", broken)

        result = await jobs.create_job("1", "test_bot", "text-to-video", "a cat")
        await asyncio.gather(*list(jobs._background_tasks))

        assert result["status"] == "pending"

    @pytest.mark.anyio
    async def test_unsupported_type(self, sent_events):
        """Unknown job type is rejected before dispatch."""
        with pytest.raises(ValueError):
            await jobs.create_job("1", "test_bot", "text-to-opera", "a cat")
        assert sent_events == []

    @pytest.mark.anyio
    async def test_unsupported_model(self, sent_events):
        """Unknown video model is rejected before dispatch."""
        with pytest.raises(ValueError):
            await jobs.create_job("1", "test_bot", "text-to-video", "a cat", video_model="sora")
        assert sent_events == []
