import pytest

from algorithms import get_algorithm
from engine.recorder import Recorder, compare, step_roles


def test_record_counts_binary_search():
    rec = Recorder()
    metrics = rec.record("binary-search")
    assert metrics.algorithm_name == "Binary Search"
    assert metrics.total_steps == 7
    assert metrics.comparisons == 2
    assert metrics.swaps == 0
    assert metrics.writes == 0
    assert metrics.final_summary == "Found 23 at index 5!"
    assert rec.get_metrics() is metrics


def test_record_accepts_descriptor_and_locale():
    rec = Recorder()
    metrics = rec.record(get_algorithm("bubble-sort"), "es")
    assert metrics.locale == "es"
    assert metrics.swaps > 0
    assert metrics.writes == metrics.swaps
    assert metrics.final_summary.startswith("Arreglo ordenado")


def test_record_unknown_id_raises():
    with pytest.raises(ValueError):
        Recorder().record("nope")


def test_unknown_locale_recorded_as_default():
    assert Recorder().record("lcs", "fr").locale == "en"


def test_export_is_json_ready():
    rec = Recorder()
    rec.record("fibonacci-dp")
    data = rec.export()
    assert data["algorithm_id"] == "fibonacci-dp"
    assert len(data["steps"]) == data["metrics"]["total_steps"]
    assert data["steps"][-1]["is_final"] is True
    assert data["pseudocode"] == list(get_algorithm("fibonacci-dp").pseudocode)


def test_step_roles_reads_graph_edges():
    rec = Recorder()
    rec.record("bfs")
    assert "path" in step_roles(rec.steps[-1])


def test_compare_picks_fewer_steps():
    left, right = Recorder(), Recorder()
    left.record("binary-search")
    right.record("linear-search")
    result = compare(left, right)
    assert result.winner_steps == "Binary Search"
    assert result.winner_swaps == "tie"
    d = result.to_dict()
    assert d["left"]["algorithm_id"] == "binary-search"
    assert d["right"]["algorithm_id"] == "linear-search"


def test_compare_same_algorithm_is_all_ties():
    left, right = Recorder(), Recorder()
    left.record("heap-sort")
    right.record("heap-sort")
    result = compare(left, right)
    assert (result.winner_steps, result.winner_comparisons, result.winner_swaps) == ("tie",) * 3


def test_package_exports_compare_function():
    import engine
    from engine import recorder

    assert engine.compare is recorder.compare
    assert callable(engine.compare)
