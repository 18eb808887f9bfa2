"""
Mind map editing helpers

Node placement defaults and the two-click edge creation flow. The graph is
free-form: no duplicate-edge or cycle checks.
"""

import random
from dataclasses import dataclass
from typing import Optional, Dict, Any

NODE_COLORS = ["#6C5CE7", "#00B894", "#FF6B6B", "#FDCB6E", "#E056FD"]

# Random placement area for new nodes
POSITION_X_RANGE = (100.0, 500.0)
POSITION_Y_RANGE = (100.0, 300.0)


def random_color(rng: Optional[random.Random] = None) -> str:
    """Pick a color from the node palette"""
    return (rng or random).choice(NODE_COLORS)


def random_position(rng: Optional[random.Random] = None) -> Dict[str, float]:
    r = rng or random
    return {
        "x": r.uniform(*POSITION_X_RANGE),
        "y": r.uniform(*POSITION_Y_RANGE),
    }


def with_node_defaults(data: Dict[str, Any], rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """Fill in a random position and color when the caller left them out"""
    node = dict(data)
    if not node.get("position"):
        node["position"] = random_position(rng)
    if not node.get("color"):
        node["color"] = random_color(rng)
    return node


@dataclass
class EdgeRequest:
    source_id: int
    target_id: int


class EdgeSelection:
    """
    Builds edges from two node selections in sequence.

    Usage:
        selection = EdgeSelection()
        selection.select(3)          # -> None, node 3 is now selected
        selection.select(7)          # -> EdgeRequest(source_id=3, target_id=7)
    """

    def __init__(self):
        self.selected: Optional[int] = None

    def select(self, node_id: int) -> Optional[EdgeRequest]:
        if self.selected is not None and self.selected != node_id:
            request = EdgeRequest(source_id=self.selected, target_id=node_id)
            self.selected = None
            return request
        self.selected = node_id
        return None

    def clear(self) -> None:
        self.selected = None
