"""
Pomodoro session log endpoints

Sessions are append/update only. Clients running the timer POST one
session for every finished pomodoro.
"""
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.exceptions import SessionNotFoundError
from app.core.logging_config import logger
from app.modules.auth.dependencies import get_storage, get_current_user_id
from app.schemas.pomodoro import PomodoroSessionCreate, PomodoroSessionUpdate, PomodoroSessionResponse
from app.services.memory_storage import MemStorage

router = APIRouter(prefix="/pomodoro", tags=["Pomodoro"])


@router.get("/sessions", response_model=List[PomodoroSessionResponse])
async def list_sessions(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    return storage.get_pomodoro_sessions_by_user_id(user_id)


@router.post("/sessions", response_model=PomodoroSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    session: PomodoroSessionCreate,
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
):
    created = storage.create_pomodoro_session(user_id, session.model_dump())
    logger.info(f"Pomodoro session logged: {created.id} ({created.duration} min, task={created.task_id})")
    return created


@router.patch("/sessions/{session_id}", response_model=PomodoroSessionResponse)
async def update_session(
    session_id: int,
    changes: PomodoroSessionUpdate,
    storage: MemStorage = Depends(get_storage)
):
    updated = storage.update_pomodoro_session(session_id, changes.model_dump(exclude_unset=True))
    if not updated:
        raise SessionNotFoundError(session_id)
    return updated
