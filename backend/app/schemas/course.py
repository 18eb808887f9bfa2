from pydantic import Field, field_validator
from typing import Optional

from app.schemas.base import CamelModel, reject_null

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CourseCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=50)
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)


class CourseUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)

    @field_validator("name", "code", "color")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class CourseResponse(CamelModel):
    id: int
    user_id: int
    name: str
    code: str
    color: str


class CourseDistributionResponse(CamelModel):
    """Task completion breakdown for one course"""
    course_id: int
    name: str
    code: str
    color: str
    task_count: int
    completed_count: int
    percentage: int
