from fastapi import Depends, Request

from app.core.config import settings
from app.core.exceptions import UserNotFoundError
from app.models.user import User
from app.services.memory_storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    """The store created at startup and held on app.state"""
    return request.app.state.storage


def get_current_user_id() -> int:
    """There is no login flow: every request acts as the configured user"""
    return settings.CURRENT_USER_ID


async def get_current_user(
    storage: MemStorage = Depends(get_storage),
    user_id: int = Depends(get_current_user_id)
) -> User:
    """Get the current user record"""
    user = storage.get_user(user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user
