from graph import Graph, sample_dag, sample_graph, weighted_graph


def test_neighbours_are_sorted_numerically():
    g = Graph()
    for nid in ("10", "2", "0"):
        g.create_node(nid, 0, 0)
    g.create_edge("0", "10")
    g.create_edge("0", "2")
    assert [nbr for nbr, _ in g.neighbours("0")] == ["2", "10"]


def test_undirected_edges_work_both_ways():
    g = weighted_graph()
    assert g.get_edge_between("2", "0").id == "0-2"
    assert g.get_edge_between("0", "2").weight == 1
    assert g.get_edge_between("0", "6") is None


def test_directed_edges_only_work_forward():
    g = sample_dag()
    assert g.get_edge_between("0", "2") is not None
    assert g.get_edge_between("2", "0") is None
    assert [nbr for nbr, _ in g.neighbours("5")] == []


def test_in_degrees():
    assert sample_dag().in_degrees() == {"0": 0, "1": 0, "2": 1, "3": 2, "4": 1, "5": 3}


def test_factories_return_fresh_graphs():
    a, b = sample_graph(), sample_graph()
    assert a is not b
    a.create_node("99", 0, 0)
    assert "99" not in b.nodes
    assert len(b.edges) == 6
