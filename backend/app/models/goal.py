from dataclasses import dataclass
from typing import Optional


@dataclass
class Goal:
    """Goal with a 0-100 progress value"""
    id: int
    user_id: int
    title: str
    progress: int = 0
    color: Optional[str] = None
    course_id: Optional[int] = None
