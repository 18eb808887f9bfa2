from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.schemas.base import CamelModel, reject_null


class Position(BaseModel):
    x: float
    y: float


class MindMapNodeCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    parent_id: Optional[int] = None
    position: Optional[Position] = None  # Random when omitted
    color: Optional[str] = None  # Random palette color when omitted
    task_id: Optional[int] = None


class MindMapNodeUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    parent_id: Optional[int] = None
    position: Optional[Position] = None
    color: Optional[str] = None
    task_id: Optional[int] = None

    @field_validator("title", "position")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class MindMapNodeResponse(CamelModel):
    id: int
    user_id: int
    title: str
    parent_id: Optional[int] = None
    position: Position
    color: Optional[str] = None
    task_id: Optional[int] = None


class MindMapEdgeCreate(CamelModel):
    source_id: int
    target_id: int


class MindMapEdgeResponse(CamelModel):
    id: int
    user_id: int
    source_id: int
    target_id: int
