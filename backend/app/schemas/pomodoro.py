from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, reject_null


class PomodoroSessionCreate(CamelModel):
    task_id: Optional[int] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: int = Field(..., ge=0, description="Length of the session in minutes")


class PomodoroSessionUpdate(CamelModel):
    task_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = Field(None, ge=0)

    @field_validator("start_time", "duration")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class PomodoroSessionResponse(CamelModel):
    id: int
    user_id: int
    task_id: Optional[int] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: int
