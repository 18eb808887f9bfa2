"""
Pomodoro Timer State Machine

Countdown and break cycling for focused study sessions:

┌──────────────────────────────────────────────────────────────┐
│   POMODORO ──complete──► SHORT_BREAK ──complete──┐            │
│      ▲   └─every Nth──► LONG_BREAK ──complete──┐ │            │
│      └─────────────────────────────────────────┴─┘            │
└──────────────────────────────────────────────────────────────┘

Each mode has its own configured duration and the timer is either running
or stopped inside it. The timer never sleeps on its own: something calls
tick() once per second while it runs (see PomodoroTicker).

Completion side effects are injected callbacks:
- session_recorder(CompletedInterval) for every finished pomodoro
- notifier(title, body) for every finished interval

Usage:
    timer = PomodoroTimer(notifier=lambda title, body: print(title, body))
    timer.start(task_id=3)
    for _ in range(25 * 60):
        timer.tick()
    timer.mode        # TimerMode.SHORT_BREAK
"""

from typing import Dict, Any, Optional, Callable, List, Tuple
from enum import Enum
from dataclasses import dataclass, field, fields, replace, asdict
from datetime import datetime
import threading
from collections import deque

from app.core.config import settings as app_settings
from app.core.exceptions import InvalidTimerSettingsError, ValidationError
from app.core.logging_config import logger
from app.utils.formatting import format_clock


class TimerMode(str, Enum):
    """Interval kinds the timer cycles through"""
    POMODORO = "pomodoro"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"


class TimerStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


_POSITIVE_SETTINGS = (
    "pomodoro_minutes",
    "short_break_minutes",
    "long_break_minutes",
    "long_break_interval",
)

_DURATION_SETTINGS = {
    TimerMode.POMODORO: "pomodoro_minutes",
    TimerMode.SHORT_BREAK: "short_break_minutes",
    TimerMode.LONG_BREAK: "long_break_minutes",
}


@dataclass
class PomodoroSettings:
    """Durations in minutes plus break cycling options"""
    pomodoro_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    long_break_interval: int = 4
    auto_start_breaks: bool = False
    auto_start_pomodoros: bool = False

    def __post_init__(self):
        for name in _POSITIVE_SETTINGS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidTimerSettingsError(name, value)

    @classmethod
    def from_config(cls) -> "PomodoroSettings":
        return cls(**app_settings.get_pomodoro_defaults())

    def duration_minutes(self, mode: TimerMode) -> int:
        if mode == TimerMode.SHORT_BREAK:
            return self.short_break_minutes
        if mode == TimerMode.LONG_BREAK:
            return self.long_break_minutes
        return self.pomodoro_minutes

    def duration_seconds(self, mode: TimerMode) -> int:
        return self.duration_minutes(mode) * 60

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TimerTransition:
    """Record of a timer state change"""
    from_state: str
    to_state: str
    timestamp: datetime = field(default_factory=datetime.now)
    reason: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_state,
            "to": self.to_state,
            "timestamp": self.timestamp.isoformat(),
            "reason": self.reason,
            "metadata": self.metadata
        }


@dataclass
class CompletedInterval:
    """An interval that ran out (or was skipped)"""
    mode: TimerMode
    task_id: Optional[int]
    started_at: datetime
    ended_at: datetime
    duration_minutes: int
    completed_pomodoros: int
    next_mode: TimerMode

    @property
    def is_pomodoro(self) -> bool:
        return self.mode == TimerMode.POMODORO


SessionRecorder = Callable[[CompletedInterval], Any]
Notifier = Callable[[str, str], Any]


def completion_message(interval: CompletedInterval, timer_settings: PomodoroSettings) -> Tuple[str, str]:
    """Notification title and body for a finished interval"""
    if not interval.is_pomodoro:
        return "Break finished!", "Time to focus on your next pomodoro session."
    if interval.next_mode == TimerMode.LONG_BREAK:
        return (
            "Time for a long break!",
            f"You've completed {interval.completed_pomodoros} pomodoros. "
            f"Take a {timer_settings.long_break_minutes}-minute break.",
        )
    return (
        "Pomodoro completed!",
        f"Well done! Take a {timer_settings.short_break_minutes}-minute break.",
    )


class PomodoroTimer:
    """
    Pomodoro countdown with break cycling.

    - remaining_seconds never goes below zero
    - pausing keeps the remaining time exactly
    - the completed counter only changes on pomodoro completion and reset_all()
    - callback failures are logged and never change timer state
    """

    def __init__(
        self,
        settings: Optional[PomodoroSettings] = None,
        session_recorder: Optional[SessionRecorder] = None,
        notifier: Optional[Notifier] = None,
        clock: Callable[[], datetime] = datetime.now,
        name: str = "pomodoro",
        max_history: Optional[int] = None
    ):
        self.name = name
        self.settings = settings or PomodoroSettings.from_config()
        self.session_recorder = session_recorder
        self.notifier = notifier
        self.clock = clock

        self.mode = TimerMode.POMODORO
        self.remaining_seconds = self.settings.duration_seconds(self.mode)
        self.is_running = False
        self.completed_pomodoros = 0
        self.task_id: Optional[int] = None
        self.started_at: Optional[datetime] = None

        self._lock = threading.RLock()
        self._history: deque = deque(maxlen=max_history or app_settings.TIMER_HISTORY_SIZE)
        self._completion_callbacks: List[Callable[[CompletedInterval], Any]] = []

    # ==================== State ====================

    @property
    def is_break(self) -> bool:
        return self.mode != TimerMode.POMODORO

    @property
    def status(self) -> TimerStatus:
        if self.is_running:
            return TimerStatus.RUNNING
        if self.started_at is not None:
            return TimerStatus.PAUSED
        return TimerStatus.IDLE

    @property
    def state_label(self) -> str:
        return f"{self.mode.value}:{self.status.value}"

    def _record(self, from_state: str, reason: str, **metadata) -> None:
        transition = TimerTransition(
            from_state=from_state,
            to_state=self.state_label,
            timestamp=self.clock(),
            reason=reason,
            metadata=metadata
        )
        self._history.append(transition)
        logger.log_timer_event(
            self.name,
            f"{from_state} → {transition.to_state} ({reason})",
            remaining_seconds=self.remaining_seconds,
            completed_pomodoros=self.completed_pomodoros,
        )

    def get_history(self, limit: int = 10) -> List[TimerTransition]:
        """Get recent transition history"""
        with self._lock:
            return list(self._history)[-limit:]

    # ==================== Operations ====================

    def start(self, task_id: Optional[int] = None) -> bool:
        """
        Start or resume the countdown.

        The nominal start instant is taken the first time the current
        interval starts; resuming after a pause keeps it.

        Returns:
            False if the timer was already running
        """
        with self._lock:
            if self.is_running:
                return False
            from_state = self.state_label
            if task_id is not None:
                self.task_id = task_id
            if self.started_at is None:
                self.started_at = self.clock()
            self.is_running = True
            self._record(from_state, "start", task_id=self.task_id)
        return True

    def resume(self) -> bool:
        return self.start()

    def pause(self) -> bool:
        """Stop the countdown, keeping the remaining time"""
        with self._lock:
            if not self.is_running:
                return False
            from_state = self.state_label
            self.is_running = False
            self._record(from_state, "pause")
        return True

    def tick(self) -> Optional[CompletedInterval]:
        """
        Advance one second.

        Ignored while stopped. Returns the CompletedInterval when this tick
        finished the current interval.
        """
        with self._lock:
            if not self.is_running:
                return None
            self.remaining_seconds = max(0, self.remaining_seconds - 1)
            if self.remaining_seconds > 0:
                return None
            completed = self._advance("timeout")
        self._run_callbacks(completed)
        return completed

    def skip(self) -> CompletedInterval:
        """Finish the current interval now"""
        with self._lock:
            completed = self._advance("skip")
        self._run_callbacks(completed)
        return completed

    def reset(self) -> None:
        """Back to a stopped pomodoro at full length. The counter is kept."""
        with self._lock:
            from_state = self.state_label
            self._load(TimerMode.POMODORO)
            self._record(from_state, "reset")

    def reset_all(self) -> None:
        with self._lock:
            self.reset()
            self.completed_pomodoros = 0

    def set_mode(self, mode: TimerMode) -> None:
        """Jump to a mode, stopped, with that mode's full duration"""
        with self._lock:
            from_state = self.state_label
            self._load(TimerMode(mode))
            self._record(from_state, "set_mode")

    def update_settings(self, **changes) -> PomodoroSettings:
        """
        Change durations, interval or auto-start flags.

        A stopped timer reloads its remaining time whenever the duration of
        its current mode is supplied, even with an unchanged value.

        Raises:
            InvalidTimerSettingsError: non-positive duration or interval
            ValidationError: unknown setting name
        """
        known = {f.name for f in fields(PomodoroSettings)}
        for key in changes:
            if key not in known:
                raise ValidationError(f"Unknown timer setting '{key}'", field=key)

        with self._lock:
            self.settings = replace(self.settings, **changes)
            if not self.is_running and _DURATION_SETTINGS[self.mode] in changes:
                self.remaining_seconds = self.settings.duration_seconds(self.mode)
            logger.log_timer_event(self.name, "settings updated", changes=changes)
            return self.settings

    def snapshot(self) -> Dict[str, Any]:
        """Serialisable view of the timer"""
        with self._lock:
            return {
                "mode": self.mode.value,
                "status": self.status.value,
                "remaining_seconds": self.remaining_seconds,
                "display": format_clock(self.remaining_seconds),
                "is_running": self.is_running,
                "is_break": self.is_break,
                "completed_pomodoros": self.completed_pomodoros,
                "task_id": self.task_id,
                "started_at": self.started_at.isoformat() if self.started_at else None,
                "settings": self.settings.to_dict(),
            }

    def on_complete(self, callback: Callable[[CompletedInterval], Any]) -> None:
        """Register an extra sync callback for finished intervals"""
        self._completion_callbacks.append(callback)

    # ==================== Internals ====================

    def _load(self, mode: TimerMode) -> None:
        self.mode = mode
        self.remaining_seconds = self.settings.duration_seconds(mode)
        self.is_running = False
        self.started_at = None

    def _advance(self, reason: str) -> CompletedInterval:
        """Move to the next interval. Caller holds the lock."""
        from_state = self.state_label
        ended_at = self.clock()
        finished = self.mode

        if finished == TimerMode.POMODORO:
            self.completed_pomodoros += 1
            if self.completed_pomodoros % self.settings.long_break_interval == 0:
                next_mode = TimerMode.LONG_BREAK
            else:
                next_mode = TimerMode.SHORT_BREAK
            auto_start = self.settings.auto_start_breaks
        else:
            next_mode = TimerMode.POMODORO
            auto_start = self.settings.auto_start_pomodoros

        completed = CompletedInterval(
            mode=finished,
            task_id=self.task_id,
            started_at=self.started_at or ended_at,
            ended_at=ended_at,
            duration_minutes=self.settings.duration_minutes(finished),
            completed_pomodoros=self.completed_pomodoros,
            next_mode=next_mode,
        )

        self._load(next_mode)
        if auto_start:
            self.is_running = True
            self.started_at = ended_at

        self._record(from_state, reason, completed=finished.value)
        return completed

    def _run_callbacks(self, completed: CompletedInterval) -> None:
        if completed.is_pomodoro and self.session_recorder:
            try:
                self.session_recorder(completed)
            except Exception as e:
                logger.error(f"[{self.name}] Session recorder error: {e}")

        if self.notifier:
            title, body = completion_message(completed, self.settings)
            try:
                self.notifier(title, body)
            except Exception as e:
                logger.error(f"[{self.name}] Notifier error: {e}")

        for callback in self._completion_callbacks:
            try:
                callback(completed)
            except Exception as e:
                logger.error(f"[{self.name}] Callback error: {e}")
