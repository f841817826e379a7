"""
node.py — Graph Node
====================
A vertex of one of the fixed demonstration graphs.  Carries only
identity and canvas position; per-step visual state lives in the Step
(GraphState.node_highlights), never on the Node itself.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Unique identifier within its graph (e.g. "0").
        label : Human-readable name shown on the canvas.
        x, y  : Canvas coordinates in pixels.
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(self, node_id: str, x: float = 0.0, y: float = 0.0, label: Optional[str] = None):
        self.id: str    = node_id
        self.label: str = label or node_id
        self.x: float   = x
        self.y: float   = y

    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.0f},{self.y:.0f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
