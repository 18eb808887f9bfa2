"""
Foreground pomodoro runner for the terminal

Drives a local PomodoroTimer with PomodoroTicker, shows a rich live
countdown and records finished pomodoros through the API.
"""

from typing import Optional, List

from rich.console import Console
from rich.live import Live

from cli.api_client import StudyFlowClient, ApiSessionRecorder
from cli.config import CLIConfig
from cli.notifications import TimerNotifier
from cli.renderer import Renderer
from app.modules.pomodoro import PomodoroTimer, PomodoroSettings, PomodoroTicker, CompletedInterval


def intervals_for(cycles: int, auto_start_breaks: bool) -> int:
    """
    Intervals to run for `cycles` pomodoros.

    Breaks between pomodoros always run; the break after the last one only
    when breaks auto-start.
    """
    return 2 * cycles - 1 + (1 if auto_start_breaks else 0)


class TimerRunner:
    """
    Usage:
        runner = TimerRunner(config, console, client)
        completed = await runner.run(task_id=4, cycles=2)
    """

    def __init__(
        self,
        config: CLIConfig,
        console: Console,
        client: Optional[StudyFlowClient] = None,
        interval: float = 1.0
    ):
        self.config = config
        self.console = console
        self.client = client
        self.interval = interval
        self.renderer = Renderer(console)
        self.recorder: Optional[ApiSessionRecorder] = None

        self.timer = PomodoroTimer(
            settings=PomodoroSettings(**config.timer_settings()),
            notifier=TimerNotifier(console, sounds=config.sounds),
            name="cli",
        )
        self.ticker = PomodoroTicker(self.timer, interval=interval)

        if client is not None and config.record_sessions:
            self.recorder = ApiSessionRecorder(client)
            self.ticker.on_completion(self.recorder)

    async def run(self, task_id: Optional[int] = None, cycles: int = 1) -> List[CompletedInterval]:
        total = intervals_for(cycles, self.config.auto_start_breaks)
        done: List[CompletedInterval] = []

        async def track(completed: CompletedInterval) -> None:
            done.append(completed)

        self.ticker.on_completion(track)

        def panel():
            return self.renderer.render_timer(self.timer.snapshot(), min(len(done) + 1, total), total)

        with Live(panel(), console=self.console, refresh_per_second=4, transient=True) as live:
            self.ticker.on_tick(lambda _timer: live.update(panel()))
            self.timer.start(task_id=task_id)
            completed = await self.ticker.run_until_complete(total, auto_continue=True)

        pomodoros = sum(1 for c in completed if c.is_pomodoro)
        self.console.print(f"[green]✓ {pomodoros} pomodoro(s) finished[/green]")
        if self.recorder is not None:
            self.console.print(f"[dim]{len(self.recorder.recorded)} session(s) recorded[/dim]")
        return completed
