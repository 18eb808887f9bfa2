"""
Pomodoro timer

- PomodoroTimer: countdown and break cycling state machine
- PomodoroTicker: asyncio loop calling tick() once per second
- StorageSessionRecorder: stores finished pomodoros as sessions
"""

from app.modules.pomodoro.state_machine import (
    TimerMode,
    TimerStatus,
    PomodoroSettings,
    TimerTransition,
    CompletedInterval,
    PomodoroTimer,
    completion_message,
)
from app.modules.pomodoro.ticker import PomodoroTicker
from app.modules.pomodoro.recorder import StorageSessionRecorder

__all__ = [
    "TimerMode",
    "TimerStatus",
    "PomodoroSettings",
    "TimerTransition",
    "CompletedInterval",
    "PomodoroTimer",
    "completion_message",
    "PomodoroTicker",
    "StorageSessionRecorder",
]
