from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Student account record (password is stored as given)"""
    id: int
    username: str
    password: str
    first_name: str
    last_name: str
    university: Optional[str] = None
