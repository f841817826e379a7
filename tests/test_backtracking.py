from algorithms.backtracking import (
    MAZE_END,
    MAZE_LAYOUT,
    MAZE_START,
    SUDOKU_PUZZLE,
    WALL,
    maze,
    n_queens,
    sudoku,
)


def test_n_queens_solution_is_valid():
    trace = list(n_queens())
    final = trace[-1]
    queens = final.variables["queens"]
    assert final.variables["solved"] is True
    assert queens == [1, 3, 0, 2]
    for r1, c1 in enumerate(queens):
        for r2, c2 in enumerate(queens):
            if r1 < r2:
                assert c1 != c2
                assert abs(c1 - c2) != r2 - r1
    assert set(final.data.highlights.values()) == {"found"}
    assert sum(row.count("Q") for row in final.data.values) == 4


def test_n_queens_backtracks_and_shows_conflicts():
    roles = set()
    for step in n_queens():
        roles |= set(step.data.highlights.values())
    assert {"conflict", "placed", "checking"} <= roles


def test_sudoku_solution_is_valid_and_keeps_givens():
    final = list(sudoku())[-1]
    grid = [list(row) for row in final.data.values]
    assert final.variables["solved"] is True
    for r in range(4):
        for c in range(4):
            if SUDOKU_PUZZLE[r][c]:
                assert grid[r][c] == SUDOKU_PUZZLE[r][c]
    digits = [1, 2, 3, 4]
    for r in range(4):
        assert sorted(grid[r]) == digits
    for c in range(4):
        assert sorted(grid[r][c] for r in range(4)) == digits
    for br in (0, 2):
        for bc in (0, 2):
            box = [grid[r][c] for r in range(br, br + 2) for c in range(bc, bc + 2)]
            assert sorted(box) == digits


def test_sudoku_never_overwrites_a_given():
    for step in sudoku():
        for r in range(4):
            for c in range(4):
                if SUDOKU_PUZZLE[r][c]:
                    assert step.data.values[r][c] == SUDOKU_PUZZLE[r][c]


def test_maze_path_connects_start_to_end_without_walls():
    final = list(maze())[-1]
    path = [tuple(p) for p in final.variables["path"]]
    assert final.variables["solved"] is True
    assert path[0] == MAZE_START and path[-1] == MAZE_END
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    for r, c in path:
        assert MAZE_LAYOUT[r][c] != WALL
    assert len(set(path)) == len(path)


def test_maze_backtracks_out_of_dead_ends():
    trace = list(maze())
    assert any("conflict" in step.data.highlights.values() for step in trace)
    final = trace[-1]
    path_cells = {key for key, role in final.data.highlights.items() if role == "path"}
    assert path_cells == {f"{r},{c}" for r, c in final.variables["path"]}
