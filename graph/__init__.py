"""
graph/
-----
Fixed graph data for the graph simulators.  Public API:

    from graph import Graph, Node, Edge
    from graph import sample_graph, weighted_graph, sample_dag
"""

from graph.node  import Node
from graph.edge  import Edge
from graph.graph import Graph, sample_graph, weighted_graph, sample_dag

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "sample_graph",
    "weighted_graph",
    "sample_dag",
]
