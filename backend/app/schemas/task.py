from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime, date

from app.models.task import TaskPriority
from app.schemas.base import CamelModel, reject_null


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    course_id: Optional[int] = None
    due_date: Optional[datetime] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    completed: bool = False


class TaskUpdate(CamelModel):
    """Partial update; only fields present in the request body are applied"""
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    course_id: Optional[int] = None
    due_date: Optional[datetime] = None
    priority: Optional[TaskPriority] = None
    completed: Optional[bool] = None

    @field_validator("title", "priority", "completed")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class TaskResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    course_id: Optional[int] = None
    due_date: Optional[datetime] = None
    priority: TaskPriority
    completed: bool
    created_at: datetime


class WeekDayResponse(CamelModel):
    """One calendar day with the tasks due on it"""
    day: date
    is_today: bool
    tasks: List[TaskResponse]
