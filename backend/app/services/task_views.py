"""
Derived task views: filtering, sorting, deadlines, calendar weeks.

Everything here is a pure function of its inputs. Nothing touches storage.
"""

from dataclasses import dataclass
from datetime import datetime, date, timedelta
from typing import Iterable, List, Optional, Sequence

from app.core.exceptions import InvalidViewOptionError
from app.models import Course, Task, TaskPriority

TASK_FILTERS = ["all", "completed", "incomplete"]
TASK_SORT_KEYS = ["dueDate", "priority", "createdAt"]

PRIORITY_RANK = {
    TaskPriority.HIGH: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.LOW: 2,
}


@dataclass
class WeekDay:
    day: date
    is_today: bool
    tasks: List[Task]


@dataclass
class CourseDistribution:
    course_id: int
    name: str
    code: str
    color: str
    task_count: int
    completed_count: int
    percentage: int


def _newest_first(task: Task) -> float:
    return -task.created_at.timestamp()


def filter_tasks(
    tasks: Iterable[Task],
    status: str = "all",
    course_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[Task]:
    """Keep tasks matching the completion status, course and search term"""
    if status not in TASK_FILTERS:
        raise InvalidViewOptionError("filter", status, TASK_FILTERS)

    result = list(tasks)
    if status == "completed":
        result = [t for t in result if t.completed]
    elif status == "incomplete":
        result = [t for t in result if not t.completed]

    if course_id is not None:
        result = [t for t in result if t.course_id == course_id]

    if search:
        needle = search.lower()
        result = [
            t for t in result
            if needle in t.title.lower() or needle in (t.description or "").lower()
        ]

    return result


def sort_tasks(tasks: Iterable[Task], key: str = "dueDate") -> List[Task]:
    """
    Order tasks for display.

    dueDate:   dated tasks first, earliest due first
    priority:  high, medium, low
    createdAt: newest first

    Ties always fall back to newest-created first.
    """
    if key not in TASK_SORT_KEYS:
        raise InvalidViewOptionError("sort", key, TASK_SORT_KEYS)

    if key == "dueDate":
        return sorted(
            tasks,
            key=lambda t: (
                t.due_date is None,
                t.due_date.timestamp() if t.due_date else 0.0,
                _newest_first(t),
            ),
        )
    if key == "priority":
        return sorted(tasks, key=lambda t: (PRIORITY_RANK[t.priority], _newest_first(t)))
    return sorted(tasks, key=_newest_first)


def task_view(
    tasks: Iterable[Task],
    status: str = "all",
    sort: str = "dueDate",
    course_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[Task]:
    """Filter then sort"""
    return sort_tasks(filter_tasks(tasks, status, course_id, search), sort)


def upcoming_deadlines(tasks: Iterable[Task], now: Optional[datetime] = None, limit: int = 5) -> List[Task]:
    """Incomplete tasks due after now, soonest first"""
    cutoff = (now or datetime.now()).timestamp()
    pending = [
        t for t in tasks
        if t.due_date and not t.completed and t.due_date.timestamp() > cutoff
    ]
    return sorted(pending, key=lambda t: t.due_date.timestamp())[:limit]


def start_of_week(day: date) -> date:
    """Monday of the week containing day"""
    return day - timedelta(days=day.weekday())


def week_view(tasks: Sequence[Task], anchor: Optional[date] = None, today: Optional[date] = None) -> List[WeekDay]:
    """Seven days starting Monday, each with the tasks due that day"""
    today = today or date.today()
    monday = start_of_week(anchor or today)

    days = []
    for offset in range(7):
        day = monday + timedelta(days=offset)
        due = [t for t in tasks if t.due_date and t.due_date.date() == day]
        days.append(WeekDay(day=day, is_today=day == today, tasks=sort_tasks(due, "dueDate")))
    return days


def course_distribution(courses: Iterable[Course], tasks: Sequence[Task]) -> List[CourseDistribution]:
    """Completed/total task counts per course"""
    result = []
    for course in courses:
        course_tasks = [t for t in tasks if t.course_id == course.id]
        completed = sum(1 for t in course_tasks if t.completed)
        percentage = int(completed * 100 / len(course_tasks) + 0.5) if course_tasks else 0
        result.append(CourseDistribution(
            course_id=course.id,
            name=course.name,
            code=course.code,
            color=course.color,
            task_count=len(course_tasks),
            completed_count=completed,
            percentage=percentage,
        ))
    return result
