from algorithms.graphs import bfs, dfs, dijkstra, prim, topological_sort
from graph import sample_dag, sample_graph, weighted_graph


def _final(fn):
    trace = list(fn())
    return trace, trace[-1].data


def test_bfs_visits_level_by_level():
    _, final = _final(bfs)
    assert final.order == ("0", "1", "2", "3", "4", "5", "6")
    assert set(final.node_highlights.values()) == {"visited"}
    assert len(final.edge_highlights) == 6


def test_bfs_frontier_starts_with_source():
    trace, _ = _final(bfs)
    assert any(step.data.frontier == ("0",) for step in trace)


def test_dfs_goes_deep_first():
    _, final = _final(dfs)
    assert final.order == ("0", "1", "3", "4", "6", "2", "5")


def test_dfs_backtracks():
    trace, _ = _final(dfs)
    assert any("Backtrack" in step.description or "backtrack" in step.description for step in trace)


def test_dijkstra_final_distances():
    trace, final = _final(dijkstra)
    assert final.distances == {"0": 0, "1": 3, "2": 1, "3": 8, "4": 6, "5": 8, "6": 8}
    assert set(final.edge_highlights.values()) == {"path"}
    assert len(final.edge_highlights) == 6


def test_dijkstra_starts_with_unknown_distances():
    trace, _ = _final(dijkstra)
    first = next(step.data.distances for step in trace if step.data.distances)
    assert first["0"] == 0
    assert all(first[nid] is None for nid in first if nid != "0")


def test_prim_builds_minimum_spanning_tree():
    trace, final = _final(prim)
    assert trace[-1].variables["total"] == 13
    assert len(final.edge_highlights) == 6
    assert final.order == ("0", "2", "1", "4", "6", "5", "3")
    g = weighted_graph()
    assert sum(g.edges[eid].weight for eid in final.edge_highlights) == 13


def test_topological_order_respects_every_edge():
    _, final = _final(topological_sort)
    position = {nid: i for i, nid in enumerate(final.order)}
    assert len(position) == 6
    for edge in sample_dag().edges.values():
        assert position[edge.source] < position[edge.target]
    assert final.directed


def test_graph_layout_is_fixed_across_steps():
    layout = tuple((n.id, n.x, n.y) for n in sample_graph().nodes.values())
    for step in bfs():
        assert tuple((n.id, n.x, n.y) for n in step.data.nodes) == layout
