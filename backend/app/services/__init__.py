from app.services.memory_storage import MemStorage
from app.services.task_views import (
    TASK_FILTERS,
    TASK_SORT_KEYS,
    filter_tasks,
    sort_tasks,
    task_view,
    upcoming_deadlines,
    week_view,
    course_distribution,
)
from app.services.mindmap_service import NODE_COLORS, EdgeSelection, with_node_defaults
from app.services.goal_service import resolve_goal_color, overall_progress, goal_summary

__all__ = [
    # Storage
    "MemStorage",
    # Task views
    "TASK_FILTERS",
    "TASK_SORT_KEYS",
    "filter_tasks",
    "sort_tasks",
    "task_view",
    "upcoming_deadlines",
    "week_view",
    "course_distribution",
    # Mind map
    "NODE_COLORS",
    "EdgeSelection",
    "with_node_defaults",
    # Goals
    "resolve_goal_color",
    "overall_progress",
    "goal_summary",
]
