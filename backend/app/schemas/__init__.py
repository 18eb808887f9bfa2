# Pydantic schemas
from app.schemas.user import UserResponse
from app.schemas.course import (
    CourseCreate,
    CourseUpdate,
    CourseResponse,
    CourseDistributionResponse,
)
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse, WeekDayResponse
from app.schemas.mindmap import (
    Position,
    MindMapNodeCreate,
    MindMapNodeUpdate,
    MindMapNodeResponse,
    MindMapEdgeCreate,
    MindMapEdgeResponse,
)
from app.schemas.goal import GoalCreate, GoalUpdate, GoalResponse, GoalSummaryResponse
from app.schemas.pomodoro import (
    PomodoroSessionCreate,
    PomodoroSessionUpdate,
    PomodoroSessionResponse,
)
