from dataclasses import dataclass


@dataclass
class Course:
    """Course owned by a user"""
    id: int
    user_id: int
    name: str
    code: str
    color: str
