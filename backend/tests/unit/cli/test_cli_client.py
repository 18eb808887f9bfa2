"""
Unit Tests for the CLI API client, notifier and timer runner
"""
import io
import pytest
import httpx
from datetime import datetime
from httpx import ASGITransport
from rich.console import Console

from app.main import app
from app.modules.auth.dependencies import get_storage
from app.modules.pomodoro import CompletedInterval, TimerMode
from cli.api_client import StudyFlowClient, ApiSessionRecorder, APIError
from cli.config import CLIConfig
from cli.notifications import TimerNotifier, SoundEvent
from cli.timer_runner import TimerRunner


def make_interval(mode=TimerMode.POMODORO, task_id=None) -> CompletedInterval:
    return CompletedInterval(
        mode=mode,
        task_id=task_id,
        started_at=datetime(2026, 10, 19, 9, 0),
        ended_at=datetime(2026, 10, 19, 9, 25),
        duration_minutes=25,
        completed_pomodoros=1,
        next_mode=TimerMode.SHORT_BREAK,
    )


@pytest.fixture
def config() -> CLIConfig:
    return CLIConfig(api_base_url="http://test/api", sounds=False)


@pytest.fixture
async def api_client(storage, config):
    """StudyFlowClient talking to the app in-process"""
    app.dependency_overrides[get_storage] = lambda: storage
    app.state.storage = storage

    async with StudyFlowClient(config, transport=ASGITransport(app=app)) as client:
        yield client

    app.dependency_overrides.clear()


def console() -> Console:
    return Console(file=io.StringIO(), record=True, width=100)


class TestStudyFlowClient:
    """Test the HTTP client"""

    @pytest.mark.asyncio
    async def test_get_user(self, api_client):
        user = await api_client.get_user()

        assert user["username"] == "student"

    @pytest.mark.asyncio
    async def test_list_tasks_sends_query(self, config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[])

        async with StudyFlowClient(config, transport=httpx.MockTransport(handler)) as client:
            await client.list_tasks("incomplete", "priority", course_id=2, search="essay")

        assert seen["path"] == "/api/tasks"
        assert seen["params"] == {"filter": "incomplete", "sort": "priority", "courseId": "2", "search": "essay"}

    @pytest.mark.asyncio
    async def test_error_message_from_body(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Task not found"})

        async with StudyFlowClient(config, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(APIError) as exc_info:
                await client.upcoming_deadlines()

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Task not found"

    @pytest.mark.asyncio
    async def test_error_without_json(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        async with StudyFlowClient(config, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(APIError) as exc_info:
                await client.list_courses()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_week(self, api_client):
        days = await api_client.week("2026-10-21")

        assert days[0]["day"] == "2026-10-19"


class TestApiSessionRecorder:
    """Test recording finished pomodoros through the API"""

    @pytest.mark.asyncio
    async def test_records_pomodoro(self, api_client, storage):
        recorder = ApiSessionRecorder(api_client)

        session = await recorder(make_interval(task_id=4))

        assert session["taskId"] == 4
        assert session["duration"] == 25
        assert session["startTime"] == "2026-10-19T09:00:00"
        assert len(storage.get_pomodoro_sessions_by_user_id(1)) == 1
        assert recorder.recorded == [session]

    @pytest.mark.asyncio
    async def test_skips_breaks(self, api_client, storage):
        recorder = ApiSessionRecorder(api_client)

        assert await recorder(make_interval(mode=TimerMode.SHORT_BREAK)) is None
        assert storage.get_pomodoro_sessions_by_user_id(1) == []


class TestTimerNotifier:
    """Test completion notifications"""

    @pytest.mark.parametrize("title,event", [
        ("Pomodoro completed!", SoundEvent.POMODORO_COMPLETE),
        ("Time for a long break!", SoundEvent.LONG_BREAK),
        ("Break finished!", SoundEvent.BREAK_COMPLETE),
    ])
    def test_event_for(self, title, event):
        assert TimerNotifier.event_for(title) == event

    def test_prints_panel(self):
        out = console()
        notifier = TimerNotifier(out, sounds=False)

        notifier("Pomodoro completed!", "Well done! Take a 5-minute break.")

        text = out.export_text()
        assert "Pomodoro completed!" in text
        assert "Well done! Take a 5-minute break." in text


class TestTimerRunner:
    """Test the foreground runner end to end"""

    @pytest.mark.asyncio
    async def test_single_pomodoro_recorded(self, api_client, storage, config):
        config.pomodoro_minutes = 1
        runner = TimerRunner(config, console(), api_client, interval=0)

        completed = await runner.run(task_id=2, cycles=1)

        assert [c.mode for c in completed] == [TimerMode.POMODORO]
        sessions = storage.get_pomodoro_sessions_by_user_id(1)
        assert len(sessions) == 1
        assert sessions[0].task_id == 2
        assert sessions[0].duration == 1
        assert runner.timer.mode == TimerMode.SHORT_BREAK
        assert runner.timer.is_running is False

    @pytest.mark.asyncio
    async def test_no_recording_without_client(self, config):
        config.pomodoro_minutes = 1
        config.short_break_minutes = 1
        runner = TimerRunner(config, console(), interval=0)

        completed = await runner.run(cycles=2)

        assert [c.mode for c in completed] == [TimerMode.POMODORO, TimerMode.SHORT_BREAK, TimerMode.POMODORO]
        assert runner.recorder is None
        assert runner.timer.completed_pomodoros == 2
