from algorithms.dynamic_programming import fibonacci_dp, knapsack, lcs


FIB = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


def test_fibonacci_scenario():
    trace = list(fibonacci_dp())
    final = trace[-1]
    assert list(final.data.values) == FIB
    assert final.data.sorted == tuple(range(11))
    assert final.code_line == 5
    assert final.variables["F(n)"] == 55


def test_fibonacci_reads_two_previous_cells():
    for step in fibonacci_dp():
        h = step.data.highlights
        if "current" in h.values():
            i = next(k for k, role in h.items() if role == "current")
            assert h[i - 1] == "comparing" and h[i - 2] == "comparing"


def test_fibonacci_cells_fill_in_order():
    trace = list(fibonacci_dp())
    filled = [len(step.data.sorted) for step in trace]
    assert filled == sorted(filled)


def test_knapsack_optimum():
    final = list(knapsack())[-1]
    assert final.variables["max_value"] == 10
    assert final.variables["items"] == [2, 4]
    assert final.data.values[4][8] == 10
    assert final.data.highlights["4,8"] == "found"
    assert (final.data.rows, final.data.cols) == (5, 9)


def test_knapsack_fills_row_by_row():
    trace = list(knapsack())
    current = [
        next(key for key, role in step.data.highlights.items() if role == "current")
        for step in trace[1:-1]
    ]
    expected = [f"{i},{w}" for i in range(1, 5) for w in range(9)]
    assert current == expected


def test_lcs_length_and_traceback():
    final = list(lcs())[-1]
    assert final.variables["lcs_length"] == 3
    assert final.variables["lcs"] == "BCB"
    assert final.data.values[4][4] == 3
    path = [key for key, role in final.data.highlights.items() if role == "path"]
    assert len(path) == 2
    assert final.data.highlights["4,4"] == "found"
