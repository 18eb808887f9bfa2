"""
Task endpoints

The list endpoint serves the filtered and sorted task view; the calendar
and deadline widgets use /upcoming and /week.
"""
from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional
from datetime import date

from app.core.config import settings
from app.core.exceptions import TaskNotFoundError
from app.core.logging_config import logger
from app.modules.auth.dependencies import get_storage, get_current_user_id
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse, WeekDayResponse
from app.services.memory_storage import MemStorage
from app.services.task_views import task_view, upcoming_deadlines, week_view

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    status_filter: str = Query("all", alias="filter", description="all, completed or incomplete"),
    sort: str = Query("dueDate", description="dueDate, priority or createdAt"),
    course_id: Optional[int] = Query(None, alias="courseId"),
    search: Optional[str] = Query(None),
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    """
    List tasks for the current user.

    Unknown filter or sort values are rejected with 400.
    """
    return task_view(
        storage.get_tasks_by_user_id(user_id),
        status=status_filter,
        sort=sort,
        course_id=course_id,
        search=search
    )


@router.get("/upcoming", response_model=List[TaskResponse])
async def list_upcoming_deadlines(
    limit: int = Query(settings.UPCOMING_DEADLINES_LIMIT, ge=1, le=100),
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    """Incomplete tasks due in the future, soonest first"""
    return upcoming_deadlines(storage.get_tasks_by_user_id(user_id), limit=limit)


@router.get("/week", response_model=List[WeekDayResponse])
async def get_week(
    anchor: Optional[date] = Query(None, alias="date", description="Any day inside the week, defaults to today"),
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    """Monday to Sunday with the tasks due on each day"""
    return week_view(storage.get_tasks_by_user_id(user_id), anchor=anchor)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: TaskCreate,
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    created = storage.create_task(user_id, task.model_dump())
    logger.info(f"Task created: {created.id} (priority={created.priority.value})")
    return created


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    changes: TaskUpdate,
    storage: MemStorage = Depends(get_storage)
):
    updated = storage.update_task(task_id, changes.model_dump(exclude_unset=True))
    if not updated:
        raise TaskNotFoundError(task_id)
    return updated


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_task(task_id):
        raise TaskNotFoundError(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
