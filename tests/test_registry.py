import pytest

from algorithms import (
    CATEGORIES,
    DIFFICULTIES,
    REGISTRY,
    get_algorithm,
    list_algorithms,
    list_by_category,
)
from algorithms.step import KINDS


def test_registry_has_every_algorithm():
    assert len(REGISTRY) == 28
    assert [a.id for a in list_algorithms()][:3] == ["big-o-notation", "recursion", "stacks-queues"]


def test_lookup_is_exact_and_absent_is_none():
    assert get_algorithm("bubble-sort").name == "Bubble Sort"
    assert get_algorithm("Bubble-Sort") is None
    assert get_algorithm("nope") is None


def test_descriptor_fields_are_consistent():
    for algo in list_algorithms():
        assert algo.category in CATEGORIES
        assert algo.difficulty in DIFFICULTIES
        assert algo.visualization in KINDS
        assert algo.pseudocode
        assert algo.code.splitlines() == list(algo.pseudocode)


def test_visualization_matches_trace_kind(run):
    for algo in list_algorithms():
        assert {step.kind for step in run(algo.id)} == {algo.visualization}


def test_list_by_category_keeps_category_order():
    grouped = list_by_category()
    assert list(grouped) == list(CATEGORIES)
    assert sum(len(v) for v in grouped.values()) == len(REGISTRY)
    assert [a.id for a in grouped["Graphs"]] == ["bfs", "dfs", "dijkstra", "prim", "topological-sort"]


def test_to_dict_extends_summary():
    algo = get_algorithm("binary-search")
    summary, full = algo.summary(), algo.to_dict()
    assert set(summary) <= set(full)
    assert "code" not in summary
    assert full["code"] == algo.code


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        REGISTRY["bubble-sort"] = None
    with pytest.raises(TypeError):
        del REGISTRY["lcs"]
    assert get_algorithm("bubble-sort").name == "Bubble Sort"
