"""
edge.py — Graph Edge
====================
Connects two nodes with an optional weight.

  - `source` and `target` are node-id strings, not Node references.
  - The id is "<source>-<target>", so edge highlights in a trace are
    the same on every run.
  - Weight defaults to 1; BFS, DFS and topological sort never read it.
"""


class Edge:
    """
    Attributes:
        id       : "<source>-<target>".
        source   : ID of the tail node.
        target   : ID of the head node.
        weight   : Numeric cost (default 1).
        directed : If False, traversal works in both directions.
    """

    __slots__ = ("id", "source", "target", "weight", "directed")

    def __init__(self, source: str, target: str, weight: float = 1, directed: bool = False):
        self.id:       str   = f"{source}-{target}"
        self.source:   str   = source
        self.target:   str   = target
        self.weight:   float = weight
        self.directed: bool  = directed

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b (respects directedness)."""
        if self.directed:
            return self.source == node_a and self.target == node_b
        return {self.source, self.target} == {node_a, node_b}

    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
