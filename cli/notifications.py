"""
StudyFlow CLI notifications

Terminal bell plus a rich panel for timer completions.
"""

import time
from enum import Enum

from rich.console import Console
from rich.panel import Panel


class SoundEvent(str, Enum):
    """Events that can trigger sounds"""
    POMODORO_COMPLETE = "pomodoro_complete"
    LONG_BREAK = "long_break"
    BREAK_COMPLETE = "break_complete"


class TimerNotifier:
    """
    Notifier callback for PomodoroTimer.

    Usage:
        notifier = TimerNotifier(console)
        timer = PomodoroTimer(notifier=notifier)
    """

    # Number of terminal bell beeps per event
    BELL_PATTERNS = {
        SoundEvent.POMODORO_COMPLETE: 1,
        SoundEvent.LONG_BREAK: 2,
        SoundEvent.BREAK_COMPLETE: 1,
    }

    def __init__(self, console: Console, sounds: bool = True):
        self.console = console
        self.sounds = sounds

    @staticmethod
    def event_for(title: str) -> SoundEvent:
        if title.startswith("Time for a long break"):
            return SoundEvent.LONG_BREAK
        if title.startswith("Break finished"):
            return SoundEvent.BREAK_COMPLETE
        return SoundEvent.POMODORO_COMPLETE

    def _play_bell(self, event: SoundEvent):
        """Play terminal bell"""
        beeps = self.BELL_PATTERNS.get(event, 1)

        for _ in range(beeps):
            print("\a", end="", flush=True)
            if beeps > 1:
                time.sleep(0.1)

    def __call__(self, title: str, body: str) -> None:
        event = self.event_for(title)
        if self.sounds:
            self._play_bell(event)
        style = "green" if event == SoundEvent.BREAK_COMPLETE else "magenta"
        self.console.print(Panel(body, title=f"[bold]{title}[/bold]", border_style=style))
