"""
Current user endpoint
"""
from fastapi import APIRouter, Depends

from app.modules.auth.dependencies import get_current_user
from app.models.user import User
from app.schemas.user import UserResponse

router = APIRouter(prefix="/user", tags=["User"])


@router.get("", response_model=UserResponse)
async def get_user(current_user: User = Depends(get_current_user)):
    """Profile of the current user (password excluded)"""
    return current_user
