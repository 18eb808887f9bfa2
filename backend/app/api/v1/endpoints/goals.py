"""
Goal endpoints
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.core.exceptions import GoalNotFoundError
from app.modules.auth.dependencies import get_storage, get_current_user_id
from app.schemas.goal import GoalCreate, GoalUpdate, GoalResponse, GoalSummaryResponse
from app.services.memory_storage import MemStorage
from app.services.goal_service import goal_summary

router = APIRouter(prefix="/goals", tags=["Goals"])


@router.get("", response_model=List[GoalResponse])
async def list_goals(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    return storage.get_goals_by_user_id(user_id)


@router.get("/summary", response_model=GoalSummaryResponse)
async def get_goal_summary(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    """Overall progress, the semester goal and the rest, with colors resolved"""
    return goal_summary(
        storage.get_goals_by_user_id(user_id),
        storage.get_courses_by_user_id(user_id)
    )


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal: GoalCreate,
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    return storage.create_goal(user_id, goal.model_dump())


@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: int,
    changes: GoalUpdate,
    storage: MemStorage = Depends(get_storage)
):
    updated = storage.update_goal(goal_id, changes.model_dump(exclude_unset=True))
    if not updated:
        raise GoalNotFoundError(goal_id)
    return updated


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(goal_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_goal(goal_id):
        raise GoalNotFoundError(goal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
