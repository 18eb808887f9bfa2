from dataclasses import dataclass, field
from typing import Optional, Dict


@dataclass
class MindMapNode:
    """
    A labeled point in the concept graph.

    parent_id gives a loose tree shape but is not checked for cycles.
    """
    id: int
    user_id: int
    title: str
    position: Dict[str, float] = field(default_factory=lambda: {"x": 0.0, "y": 0.0})
    parent_id: Optional[int] = None
    color: Optional[str] = None
    task_id: Optional[int] = None


@dataclass
class MindMapEdge:
    """Directed connection between two nodes"""
    id: int
    user_id: int
    source_id: int
    target_id: int
