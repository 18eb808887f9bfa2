from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class PomodoroSession:
    """One logged interval of focused work; duration is in minutes"""
    id: int
    user_id: int
    start_time: datetime
    duration: int
    task_id: Optional[int] = None
    end_time: Optional[datetime] = None
