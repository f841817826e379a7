import pytest

from algorithms.step import (
    ARRAY,
    MATRIX,
    ArrayState,
    MatrixState,
    Step,
    StepBuilder,
    TraceError,
    cell,
    validate_trace,
)
from graph import sample_graph


def _array_step(values, highlights=None, done=(), final=False, description="x"):
    return Step(
        kind=ARRAY,
        data=ArrayState(values=tuple(values), highlights=dict(highlights or {}), sorted=tuple(done)),
        description=description,
        is_final=final,
    )


def test_builder_snapshots_mutable_inputs():
    sb = StepBuilder("en")
    arr = [3, 1, 2]
    hl = {0: "comparing"}
    first = sb.array(arr, hl, en="a", es="b")
    arr[0] = 99
    hl[1] = "swapped"
    assert first.data.values == (3, 1, 2)
    assert first.data.highlights == {0: "comparing"}


def test_builder_numbers_steps_and_picks_locale():
    sb = StepBuilder("es")
    a = sb.array([1], en="hello", es="hola")
    b = sb.matrix([[1, 2]], en="hello", es="hola")
    assert (a.step_number, b.step_number) == (0, 1)
    assert a.description == "hola"
    assert b.data.rows == 1 and b.data.cols == 2


def test_builder_unknown_locale_falls_back_to_english():
    step = StepBuilder("fr").array([1], en="hello", es="hola")
    assert step.description == "hello"


def test_graph_builder_maps_infinity_to_none():
    g = sample_graph()
    step = StepBuilder().graph(g, distances={"0": 0, "1": float("inf")}, en="a", es="b")
    assert step.data.distances == {"0": 0, "1": None}
    assert len(step.data.nodes) == 7


def test_typed_accessors_follow_kind():
    step = StepBuilder().array([1, 2], en="a", es="b")
    assert step.array is step.data
    assert step.matrix is None and step.graph is None and step.concept is None


def test_to_dict_puts_payload_under_kind():
    step = StepBuilder().matrix([[0, 1]], {cell(0, 1): "found"}, en="a", es="b", line=2, final=True)
    d = step.to_dict()
    assert d["kind"] == MATRIX
    assert d["matrix"]["highlights"] == {"0,1": "found"}
    assert d["code_line"] == 2
    assert d["is_final"] is True


def test_validate_accepts_good_trace():
    validate_trace([_array_step([1, 2]), _array_step([1, 2], {0: "found"}, final=True)])


def test_validate_rejects_empty_trace():
    with pytest.raises(TraceError):
        validate_trace([])


def test_validate_requires_only_last_step_final():
    with pytest.raises(TraceError):
        validate_trace([_array_step([1], final=True), _array_step([1], final=True)])
    with pytest.raises(TraceError):
        validate_trace([_array_step([1])])


def test_validate_rejects_out_of_range_highlight():
    with pytest.raises(TraceError):
        validate_trace([_array_step([1, 2], {5: "comparing"}, final=True)])


def test_validate_rejects_unknown_role():
    with pytest.raises(TraceError):
        validate_trace([_array_step([1, 2], {0: "sparkly"}, final=True)])


def test_validate_rejects_shrinking_finalized_set():
    with pytest.raises(TraceError):
        validate_trace([_array_step([1, 2], done=(0, 1)), _array_step([1, 2], done=(0,), final=True)])


def test_validate_rejects_payload_kind_mismatch():
    bad = Step(kind=ARRAY, data=MatrixState(rows=1, cols=1, values=((0,),)), description="x", is_final=True)
    with pytest.raises(TraceError):
        validate_trace([bad])


def test_validate_rejects_cell_outside_matrix():
    step = StepBuilder().matrix([[0, 0]], {cell(1, 0): "current"}, en="a", es="b", final=True)
    with pytest.raises(TraceError):
        validate_trace([step])


def test_validate_rejects_unknown_graph_node():
    step = StepBuilder().graph(sample_graph(), {"42": "visited"}, en="a", es="b", final=True)
    with pytest.raises(TraceError):
        validate_trace([step])
