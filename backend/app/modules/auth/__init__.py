# Current user and storage dependencies

from app.modules.auth.dependencies import (
    get_storage,
    get_current_user_id,
    get_current_user,
)

__all__ = [
    "get_storage",
    "get_current_user_id",
    "get_current_user",
]
