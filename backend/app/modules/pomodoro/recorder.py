"""
Session recorder writing finished pomodoros into the in-memory store
"""

from typing import Optional

from app.core.logging_config import logger
from app.models import PomodoroSession
from app.modules.pomodoro.state_machine import CompletedInterval
from app.services.memory_storage import MemStorage


class StorageSessionRecorder:
    """Callable suitable as PomodoroTimer(session_recorder=...)"""

    def __init__(self, storage: MemStorage, user_id: int):
        self.storage = storage
        self.user_id = user_id

    def __call__(self, interval: CompletedInterval) -> Optional[PomodoroSession]:
        if not interval.is_pomodoro:
            return None
        session = self.storage.create_pomodoro_session(self.user_id, {
            "task_id": interval.task_id,
            "start_time": interval.started_at,
            "end_time": interval.ended_at,
            "duration": interval.duration_minutes,
        })
        logger.info(f"Recorded pomodoro session #{session.id} for user {self.user_id}")
        return session
