from pydantic import Field, field_validator
from typing import Optional, List

from app.schemas.base import CamelModel, reject_null


class GoalCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    progress: int = Field(0, ge=0, le=100)
    color: Optional[str] = None
    course_id: Optional[int] = None


class GoalUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    progress: Optional[int] = Field(None, ge=0, le=100)
    color: Optional[str] = None
    course_id: Optional[int] = None

    @field_validator("title", "progress")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class GoalResponse(CamelModel):
    id: int
    user_id: int
    title: str
    progress: int
    color: Optional[str] = None
    course_id: Optional[int] = None


class GoalSummaryResponse(CamelModel):
    """Goals with resolved colors plus the overall progress"""
    overall_progress: int
    main_goal: Optional[GoalResponse] = None
    other_goals: List[GoalResponse]
