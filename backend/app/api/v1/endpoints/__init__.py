# API endpoints
from . import users, courses, tasks, mindmap, goals, pomodoro, health

__all__ = ["users", "courses", "tasks", "mindmap", "goals", "pomodoro", "health"]
