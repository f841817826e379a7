from algorithms.divide_and_conquer import tower_of_hanoi


def _pegs(values):
    """Column p of the table, top → bottom, without empty slots."""
    return [[row[p] for row in values if row[p]] for p in range(3)]


def test_hanoi_scenario():
    trace = list(tower_of_hanoi())
    assert len(trace) == 9
    moves = [s for s in trace if "move" in s.variables]
    assert [s.variables["move"] for s in moves] == list(range(1, 8))
    final = trace[-1]
    assert final.variables["total_moves"] == 7
    assert _pegs(final.data.values) == [[], [], [1, 2, 3]]
    assert set(final.data.highlights.values()) == {"found"}


def test_hanoi_starts_on_peg_zero():
    first = list(tower_of_hanoi())[0]
    assert _pegs(first.data.values) == [[1, 2, 3], [], []]


def test_hanoi_never_puts_larger_disk_on_smaller():
    for step in tower_of_hanoi():
        for peg in _pegs(step.data.values):
            assert peg == sorted(peg)


def test_hanoi_moved_disk_is_current():
    for step in tower_of_hanoi():
        if "move" not in step.variables:
            continue
        current = [key for key, role in step.data.highlights.items() if role == "current"]
        assert len(current) == 1
        row, col = map(int, current[0].split(","))
        assert col == step.variables["to"]
        assert step.data.values[row][col] == step.variables["disk"]
