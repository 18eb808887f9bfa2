"""
Goal progress helpers
"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence

from app.core.config import settings
from app.models import Course, Goal

MAIN_GOAL_TITLE = "Semester"


@dataclass
class GoalSummary:
    overall_progress: int
    main_goal: Optional[Goal]
    other_goals: List[Goal]


def resolve_goal_color(goal: Goal, courses: Iterable[Course]) -> str:
    """Goal color, else its course color, else the default"""
    if goal.color:
        return goal.color
    if goal.course_id is not None:
        course = next((c for c in courses if c.id == goal.course_id), None)
        if course and course.color:
            return course.color
    return settings.DEFAULT_GOAL_COLOR


def overall_progress(goals: Sequence[Goal]) -> int:
    """Mean progress across goals, rounded half up; 0 without goals"""
    if not goals:
        return 0
    return int(sum(g.progress for g in goals) / len(goals) + 0.5)


def goal_summary(goals: Sequence[Goal], courses: Sequence[Course]) -> GoalSummary:
    colored = [replace(g, color=resolve_goal_color(g, courses)) for g in goals]
    main = next((g for g in colored if g.title == MAIN_GOAL_TITLE), colored[0] if colored else None)
    return GoalSummary(
        overall_progress=overall_progress(colored),
        main_goal=main,
        other_goals=[g for g in colored if main is None or g.id != main.id],
    )
