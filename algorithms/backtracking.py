"""
backtracking.py — Backtracking Simulators
==========================================
4-Queens, 4x4 Sudoku and a 5x5 maze, all on the table view.

Each search shows three kinds of transition:
  1. an attempt            → cell "checking"
  2. a rejected attempt    → offending cells "conflict"
  3. a backtrack (undo)    → the emptied cell is "current" again, with
                             the board already showing the removal

The recursive solvers are generators that `return` a success flag, so a
caller reads it with `solved = yield from ...`.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from algorithms.step import Step, StepBuilder, cell


Pos = Tuple[int, int]


# ---------------------------------------------------------------------------
# N-Queens (n = 4)
# ---------------------------------------------------------------------------
N_QUEENS_PSEUDOCODE: List[str] = [
    "def solve(board, row):",                       # 0
    "    if row == n:",                             # 1
    "        return True",                          # 2
    "    for col in range(n):",                     # 3
    "        if is_safe(board, row, col):",         # 4
    "            board[row][col] = 'Q'",            # 5
    "            if solve(board, row + 1):",        # 6
    "                return True",                  # 7
    "            board[row][col] = ''",             # 8
    "    return False",                             # 9
]


def n_queens(locale: str = "en") -> Iterator[Step]:
    n      = 4
    board  = [[""] * n for _ in range(n)]
    queens: List[int] = []          # queens[r] = column of the queen in row r
    sb     = StepBuilder(locale)

    def placed() -> Dict[str, str]:
        return {cell(r, c): "placed" for r, c in enumerate(queens)}

    def attacker(row: int, col: int) -> Optional[Pos]:
        for r, c in enumerate(queens):
            if c == col or abs(c - col) == row - r:
                return r, c
        return None

    def solve(row: int) -> Iterator[Step]:
        if row == n:
            return True
        for col in range(n):
            yield sb.matrix(
                board, {**placed(), cell(row, col): "checking"},
                en=f"Try a queen at row {row}, column {col}",
                es=f"Probar una reina en fila {row}, columna {col}",
                line=4, variables={"row": row, "col": col},
            )
            hit = attacker(row, col)
            if hit is not None:
                yield sb.matrix(
                    board, {**placed(), cell(*hit): "conflict", cell(row, col): "conflict"},
                    en=f"Conflict: the queen at ({hit[0]}, {hit[1]}) attacks ({row}, {col})",
                    es=f"Conflicto: la reina en ({hit[0]}, {hit[1]}) ataca ({row}, {col})",
                    line=4, variables={"row": row, "col": col, "attacker": list(hit)},
                )
                continue

            board[row][col] = "Q"
            queens.append(col)
            yield sb.matrix(
                board, placed(),
                en=f"Safe: place a queen at ({row}, {col})",
                es=f"Segura: colocar una reina en ({row}, {col})",
                line=5, variables={"row": row, "col": col, "queens": len(queens)},
            )
            if (yield from solve(row + 1)):
                return True

            board[row][col] = ""
            queens.pop()
            yield sb.matrix(
                board, {**placed(), cell(row, col): "current"},
                en=f"Dead end below row {row}: remove the queen from ({row}, {col}) and backtrack",
                es=f"Callejón sin salida bajo la fila {row}: quitar la reina de ({row}, {col}) y retroceder",
                line=8, variables={"row": row, "col": col},
            )
        return False

    yield sb.matrix(
        board,
        en=f"Place {n} queens on a {n}x{n} board so that no two attack each other.",
        es=f"Colocar {n} reinas en un tablero de {n}x{n} sin que se ataquen entre sí.",
        line=0, variables={"n": n},
    )

    solved = yield from solve(0)
    final_h = {cell(r, c): "found" for r, c in enumerate(queens)}
    yield sb.matrix(
        board, final_h,
        en=f"Solution found! Queen columns by row: {queens}" if solved else "No solution exists.",
        es=f"¡Solución encontrada! Columnas de las reinas por fila: {queens}" if solved else "No existe solución.",
        line=2 if solved else 9, variables={"queens": list(queens), "solved": solved},
        final=True,
    )


# ---------------------------------------------------------------------------
# Sudoku (4x4, 2x2 boxes)
# ---------------------------------------------------------------------------
SUDOKU_PSEUDOCODE: List[str] = [
    "def solve(grid):",                             # 0
    "    pos = find_empty(grid)",                   # 1
    "    if pos is None:",                          # 2
    "        return True",                          # 3
    "    r, c = pos",                               # 4
    "    for v in range(1, 5):",                    # 5
    "        if is_valid(grid, r, c, v):",          # 6
    "            grid[r][c] = v",                   # 7
    "            if solve(grid):",                  # 8
    "                return True",                  # 9
    "            grid[r][c] = 0",                   # 10
    "    return False",                             # 11
]

SUDOKU_PUZZLE: List[List[int]] = [
    [1, 0, 0, 4],
    [0, 0, 1, 0],
    [0, 1, 0, 0],
    [4, 0, 0, 1],
]


def sudoku(locale: str = "en") -> Iterator[Step]:
    grid  = [list(row) for row in SUDOKU_PUZZLE]
    size  = len(grid)
    box   = 2
    given = [(r, c) for r in range(size) for c in range(size) if grid[r][c]]
    filled: List[Pos] = []
    sb    = StepBuilder(locale)

    def paint() -> Dict[str, str]:
        h = {cell(r, c): "given" for r, c in given}
        h.update({cell(r, c): "placed" for r, c in filled})
        return h

    def clash(r: int, c: int, v: int) -> Optional[Pos]:
        for cc in range(size):
            if grid[r][cc] == v:
                return r, cc
        for rr in range(size):
            if grid[rr][c] == v:
                return rr, c
        br, bc = r - r % box, c - c % box
        for rr in range(br, br + box):
            for cc in range(bc, bc + box):
                if grid[rr][cc] == v:
                    return rr, cc
        return None

    def find_empty() -> Optional[Pos]:
        for r in range(size):
            for c in range(size):
                if grid[r][c] == 0:
                    return r, c
        return None

    def solve() -> Iterator[Step]:
        pos = find_empty()
        if pos is None:
            return True
        r, c = pos
        for v in range(1, size + 1):
            yield sb.matrix(
                grid, {**paint(), cell(r, c): "checking"},
                en=f"Cell ({r}, {c}): try {v}",
                es=f"Celda ({r}, {c}): probar {v}",
                line=6, variables={"r": r, "c": c, "v": v},
            )
            hit = clash(r, c, v)
            if hit is not None:
                yield sb.matrix(
                    grid, {**paint(), cell(*hit): "conflict", cell(r, c): "conflict"},
                    en=f"{v} already appears at ({hit[0]}, {hit[1]}) in the same row, column or box",
                    es=f"{v} ya aparece en ({hit[0]}, {hit[1]}) en la misma fila, columna o caja",
                    line=6, variables={"r": r, "c": c, "v": v, "clash": list(hit)},
                )
                continue

            grid[r][c] = v
            filled.append((r, c))
            yield sb.matrix(
                grid, paint(),
                en=f"{v} fits at ({r}, {c}): write it",
                es=f"{v} encaja en ({r}, {c}): escribirlo",
                line=7, variables={"r": r, "c": c, "v": v},
            )
            if (yield from solve()):
                return True

            grid[r][c] = 0
            filled.pop()
            yield sb.matrix(
                grid, {**paint(), cell(r, c): "current"},
                en=f"No way forward with {v} at ({r}, {c}): erase it and backtrack",
                es=f"Sin salida con {v} en ({r}, {c}): borrarlo y retroceder",
                line=10, variables={"r": r, "c": c, "v": v},
            )
        return False

    yield sb.matrix(
        grid, paint(),
        en="4x4 Sudoku: fill each row, column and 2x2 box with 1-4. Empty cells are 0.",
        es="Sudoku 4x4: llenar cada fila, columna y caja 2x2 con 1-4. Las celdas vacías son 0.",
        line=0, variables={"givens": len(given)},
    )

    solved = yield from solve()
    yield sb.matrix(
        grid, {cell(r, c): "found" for r, c in filled} if solved else paint(),
        en="Sudoku solved!" if solved else "The puzzle has no solution.",
        es="¡Sudoku resuelto!" if solved else "El sudoku no tiene solución.",
        line=3 if solved else 11, variables={"solved": solved, "filled": len(filled)},
        final=True,
    )


# ---------------------------------------------------------------------------
# Maze (5x5, depth-first)
# ---------------------------------------------------------------------------
MAZE_PSEUDOCODE: List[str] = [
    "def solve(maze, r, c):",                                       # 0
    "    if is_wall(maze, r, c) or (r, c) in visited:",             # 1
    "        return False",                                         # 2
    "    visited.add((r, c)); path.append((r, c))",                 # 3
    "    if (r, c) == end:",                                        # 4
    "        return True",                                          # 5
    "    for dr, dc in [(1, 0), (0, 1), (-1, 0), (0, -1)]:",        # 6
    "        if solve(maze, r + dr, c + dc):",                      # 7
    "            return True",                                      # 8
    "    path.pop()",                                               # 9
    "    return False",                                             # 10
]

WALL = 1
MAZE_LAYOUT: List[List[object]] = [
    ["S", 0, 1, 0, 0],
    [1,   0, 1, 0, 1],
    [0,   0, 0, 0, 0],
    [0,   0, 1, 1, 0],
    [1,   0, 1, 1, "E"],
]
MAZE_START: Pos = (0, 0)
MAZE_END:   Pos = (4, 4)

# down, right, up, left
_MOVES: List[Pos] = [(1, 0), (0, 1), (-1, 0), (0, -1)]


def maze(locale: str = "en") -> Iterator[Step]:
    grid    = [list(row) for row in MAZE_LAYOUT]
    rows, cols = len(grid), len(grid[0])
    visited: List[Pos] = []
    path:    List[Pos] = []
    sb      = StepBuilder(locale)

    def paint(current: Optional[Pos] = None) -> Dict[str, str]:
        h = {cell(r, c): "wall" for r in range(rows) for c in range(cols) if grid[r][c] == WALL}
        h.update({cell(r, c): "visited" for r, c in visited})
        h.update({cell(r, c): "searching" for r, c in path})
        h[cell(*MAZE_START)] = "start"
        h[cell(*MAZE_END)] = "end"
        if current is not None:
            h[cell(*current)] = "current"
        return h

    def solve(r: int, c: int) -> Iterator[Step]:
        if not (0 <= r < rows and 0 <= c < cols) or (r, c) in visited:
            return False
        if grid[r][c] == WALL:
            yield sb.matrix(
                grid, {**paint(path[-1] if path else None), cell(r, c): "conflict"},
                en=f"({r}, {c}) is a wall: blocked",
                es=f"({r}, {c}) es una pared: bloqueado",
                line=2, variables={"r": r, "c": c},
            )
            return False

        visited.append((r, c))
        path.append((r, c))
        yield sb.matrix(
            grid, paint((r, c)),
            en=f"Step into ({r}, {c}); path length {len(path)}",
            es=f"Avanzar a ({r}, {c}); longitud del camino {len(path)}",
            line=3, variables={"r": r, "c": c, "path_length": len(path)},
        )
        if (r, c) == MAZE_END:
            return True

        for dr, dc in _MOVES:
            if (yield from solve(r + dr, c + dc)):
                return True

        path.pop()
        yield sb.matrix(
            grid, paint(path[-1] if path else None),
            en=f"({r}, {c}) is a dead end: backtrack",
            es=f"({r}, {c}) es un callejón sin salida: retroceder",
            line=9, variables={"r": r, "c": c, "path_length": len(path)},
        )
        return False

    yield sb.matrix(
        grid, paint(),
        en="Find a path from S to E. Try down, right, up, left in that order; 1 = wall.",
        es="Encontrar un camino de S a E. Probar abajo, derecha, arriba, izquierda en ese orden; 1 = pared.",
        line=0, variables={"start": list(MAZE_START), "end": list(MAZE_END)},
    )

    solved = yield from solve(*MAZE_START)
    final_h = paint()
    final_h.update({cell(r, c): "path" for r, c in path})
    yield sb.matrix(
        grid, final_h,
        en=f"Exit reached! Path of {len(path)} cells." if solved else "No path to the exit.",
        es=f"¡Salida alcanzada! Camino de {len(path)} celdas." if solved else "No hay camino a la salida.",
        line=5 if solved else 10, variables={"solved": solved, "path": [list(p) for p in path]},
        final=True,
    )
