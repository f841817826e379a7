from algorithms.searching import binary_search, interpolation_search, jump_search, linear_search


def _probes(trace):
    return [
        next(i for i, role in step.data.highlights.items() if role == "current")
        for step in trace
        if "current" in step.data.highlights.values()
    ]


def test_binary_search_scenario():
    trace = list(binary_search())
    assert len(trace) == 7
    assert _probes(trace) == [4, 7, 5]
    assert trace[-1].data.highlights == {5: "found"}
    assert trace[-1].variables["result"] == 5


def test_binary_search_probe_steps_bracket_the_range():
    trace = list(binary_search())
    first_probe = trace[1].data.highlights
    assert first_probe[4] == "current"
    assert all(first_probe[i] == "searching" for i in range(10) if i != 4)


def test_linear_search_scans_until_found():
    trace = list(linear_search())
    assert _probes(trace) == [0, 1, 2, 3, 4]
    assert trace[-1].data.highlights == {4: "found"}


def test_jump_search_jumps_then_scans_block():
    trace = list(jump_search())
    assert trace[0].variables["jump"] == 3
    assert _probes(trace) == [3, 6, 9, 6]
    assert trace[-1].data.highlights == {6: "found"}


def test_interpolation_search_hits_first_estimate():
    trace = list(interpolation_search())
    assert _probes(trace) == [6]
    assert trace[-1].variables["result"] == 6


def test_search_never_finalizes_indices():
    for fn in (binary_search, linear_search, jump_search, interpolation_search):
        assert all(step.data.sorted == () for step in fn())
