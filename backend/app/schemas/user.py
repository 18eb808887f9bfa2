from typing import Optional

from app.schemas.base import CamelModel


class UserResponse(CamelModel):
    """Current user profile. The password never leaves the server."""
    id: int
    username: str
    first_name: str
    last_name: str
    university: Optional[str] = None
