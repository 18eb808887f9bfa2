# Re-export all models for convenient imports
from app.models.user import User
from app.models.course import Course
from app.models.task import Task, TaskPriority
from app.models.mindmap import MindMapNode, MindMapEdge
from app.models.goal import Goal
from app.models.pomodoro_session import PomodoroSession

__all__ = [
    "User",
    "Course",
    "Task",
    "TaskPriority",
    "MindMapNode",
    "MindMapEdge",
    "Goal",
    "PomodoroSession",
]
