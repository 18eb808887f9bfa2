"""
Asyncio driver for PomodoroTimer

Calls timer.tick() once per interval on the running event loop. Completion
handlers are awaited (for example an HTTP session recorder); tick listeners
are plain functions called after every tick (for example a display refresh).
"""

import asyncio
from typing import Awaitable, Callable, List, Optional

from app.core.logging_config import logger
from app.modules.pomodoro.state_machine import PomodoroTimer, CompletedInterval

CompletionHandler = Callable[[CompletedInterval], Awaitable[None]]
TickListener = Callable[[PomodoroTimer], None]


class PomodoroTicker:
    """
    Periodic tick task for a timer.

    Usage:
        ticker = PomodoroTicker(timer)
        ticker.on_tick(lambda t: print(t.snapshot()["display"]))
        timer.start()
        ticker.start()
        ...
        await ticker.stop()
    """

    def __init__(self, timer: PomodoroTimer, interval: float = 1.0):
        self.timer = timer
        self.interval = interval
        self._task: Optional[asyncio.Task] = None
        self._completion_handlers: List[CompletionHandler] = []
        self._tick_listeners: List[TickListener] = []

    @property
    def is_active(self) -> bool:
        return self._task is not None and not self._task.done()

    def on_completion(self, handler: CompletionHandler) -> None:
        self._completion_handlers.append(handler)

    def on_tick(self, listener: TickListener) -> None:
        self._tick_listeners.append(listener)

    async def step(self) -> Optional[CompletedInterval]:
        """One tick plus listeners and handlers"""
        completed = self.timer.tick()

        for listener in self._tick_listeners:
            try:
                listener(self.timer)
            except Exception as e:
                logger.error(f"[{self.timer.name}] Tick listener error: {e}")

        if completed:
            for handler in self._completion_handlers:
                try:
                    await handler(completed)
                except Exception as e:
                    logger.error(f"[{self.timer.name}] Completion handler error: {e}")

        return completed

    def start(self) -> None:
        """Schedule the tick loop on the running event loop"""
        if self.is_active:
            return

        async def tick_loop():
            while True:
                await asyncio.sleep(self.interval)
                await self.step()

        self._task = asyncio.create_task(tick_loop())
        logger.debug(f"[{self.timer.name}] Ticker started")

    async def stop(self) -> None:
        """Cancel the tick loop"""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.debug(f"[{self.timer.name}] Ticker stopped")

    async def run_until_complete(self, intervals: int = 1, auto_continue: bool = True) -> List[CompletedInterval]:
        """
        Tick in the foreground until `intervals` intervals finish.

        With auto_continue the timer is restarted whenever a completion left
        it stopped; without it the run ends at the first such stop. A pause
        or reset from outside ends the run with what has completed so far.
        """
        completed: List[CompletedInterval] = []
        if not self.timer.is_running:
            self.timer.start()

        while len(completed) < intervals:
            await asyncio.sleep(self.interval)
            result = await self.step()
            if result is None:
                if not self.timer.is_running:
                    # Paused or reset from outside the run
                    logger.debug(f"[{self.timer.name}] Run ended early: timer stopped")
                    break
                continue
            completed.append(result)
            if len(completed) < intervals and not self.timer.is_running:
                if not auto_continue:
                    break
                self.timer.start()

        return completed
