"""
graph.py — Graph Container & Demonstration Graphs
==================================================
Single source of truth for the graphs the graph simulators walk.

Responsibilities:
  1. Building nodes & edges                 (add / create)
  2. Adjacency queries                      (neighbours, get_edge_between, in_degrees)
  3. The fixed demonstration graphs         (sample_graph, weighted_graph, sample_dag)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id; dict insertion
    order is the declaration order, which keeps every traversal
    deterministic.
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally so neighbour queries are O(degree).
  - Each factory returns a fresh Graph, so simulators can never share
    state through the graph object.
"""

from typing import Dict, List, Optional, Tuple

from graph.node import Node
from graph.edge import Edge


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}
        edges      : {edge_id: Edge}
        directed   : bool – graph-level directedness
        weighted   : bool – whether weights are meaningful
        _adj       : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.directed: bool            = directed
        self.weighted: bool            = weighted
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}

    # ==================================================================
    # NODES & EDGES
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, x: float, y: float, label: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id, x=x, y=y, label=label))

    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        self._adj.setdefault(edge.source, []).append((edge.target, edge.id))
        if not edge.directed:
            self._adj.setdefault(edge.target, []).append((edge.source, edge.id))
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight, directed=self.directed))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b (direction-aware)."""
        for _, eid in self._adj.get(a, []):
            e = self.edges[eid]
            if e.connects(a, b):
                return e
        return None

    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] in ascending neighbour order."""
        pairs = [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]
        return sorted(pairs, key=lambda p: _sort_key(p[0]))

    def in_degrees(self) -> Dict[str, int]:
        """Incoming edge count per node (directed graphs)."""
        deg = {nid: 0 for nid in self.nodes}
        for e in self.edges.values():
            deg[e.target] += 1
        return deg

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={len(self.nodes)}, edges={len(self.edges)})"


def _sort_key(node_id: str):
    return (0, int(node_id)) if node_id.isdigit() else (1, node_id)


# ---------------------------------------------------------------------------
# Demonstration graphs
# ---------------------------------------------------------------------------
_LAYOUT: List[Tuple[str, float, float]] = [
    ("0", 250, 40),
    ("1", 130, 130),
    ("2", 370, 130),
    ("3", 50, 230),
    ("4", 200, 230),
    ("5", 440, 230),
    ("6", 200, 310),
]


def sample_graph() -> Graph:
    """Seven-node undirected tree used by BFS and DFS."""
    g = Graph(directed=False, weighted=False)
    for nid, x, y in _LAYOUT:
        g.create_node(nid, x, y)
    for a, b in [("0", "1"), ("0", "2"), ("1", "3"), ("1", "4"), ("2", "5"), ("4", "6")]:
        g.create_edge(a, b)
    return g


def weighted_graph() -> Graph:
    """Same layout with weights and a few cross edges, for Dijkstra and Prim."""
    g = Graph(directed=False, weighted=True)
    for nid, x, y in _LAYOUT:
        g.create_node(nid, x, y)
    for a, b, w in [
        ("0", "1", 4),
        ("0", "2", 1),
        ("1", "2", 2),
        ("1", "3", 5),
        ("1", "4", 3),
        ("2", "5", 7),
        ("3", "6", 4),
        ("4", "6", 2),
        ("5", "6", 1),
    ]:
        g.create_edge(a, b, weight=w)
    return g


def sample_dag() -> Graph:
    """Six-node directed acyclic graph for topological sort."""
    g = Graph(directed=True, weighted=False)
    for nid, x, y in [
        ("0", 80, 60),
        ("1", 80, 240),
        ("2", 240, 40),
        ("3", 240, 160),
        ("4", 240, 280),
        ("5", 420, 160),
    ]:
        g.create_node(nid, x, y)
    for a, b in [("0", "2"), ("0", "3"), ("1", "3"), ("1", "4"), ("2", "5"), ("3", "5"), ("4", "5")]:
        g.create_edge(a, b)
    return g
