"""
divide_and_conquer.py — Tower of Hanoi
=======================================
Three pegs drawn as a rows x 3 table: column = peg, row 0 = top slot,
row n-1 = bottom slot, 0 = empty slot, k = disk of size k.

One Step per physical move, in the standard recursive order.  The
simulator does not check that the move count is minimal.
"""

from typing import Dict, Iterator, List

from algorithms.step import Step, StepBuilder, cell


HANOI_PSEUDOCODE: List[str] = [
    "def hanoi(n, source, target, auxiliary):",         # 0
    "    if n == 0:",                                   # 1
    "        return",                                   # 2
    "    hanoi(n - 1, source, auxiliary, target)",      # 3
    "    move_disk(source, target)",                    # 4
    "    hanoi(n - 1, auxiliary, target, source)",      # 5
]

PEGS = 3


def tower_of_hanoi(locale: str = "en") -> Iterator[Step]:
    disks = 3
    # pegs[p] lists disk sizes bottom → top
    pegs: List[List[int]] = [list(range(disks, 0, -1)), [], []]
    moves = 0
    sb    = StepBuilder(locale)

    def table() -> List[List[int]]:
        grid = [[0] * PEGS for _ in range(disks)]
        for p, stack in enumerate(pegs):
            for depth, size in enumerate(stack):
                grid[disks - 1 - depth][p] = size
        return grid

    def top_cell(p: int) -> str:
        return cell(disks - len(pegs[p]), p)

    def occupied(role: str) -> Dict[str, str]:
        return {
            cell(disks - 1 - depth, p): role
            for p, stack in enumerate(pegs)
            for depth in range(len(stack))
        }

    def hanoi(n: int, source: int, target: int, auxiliary: int) -> Iterator[Step]:
        nonlocal moves
        if n == 0:
            return
        yield from hanoi(n - 1, source, auxiliary, target)

        disk = pegs[source].pop()
        pegs[target].append(disk)
        moves += 1
        yield sb.matrix(
            table(), {**occupied("sorted"), top_cell(target): "current"},
            en=f"Move {moves}: disk {disk} from peg {source} → peg {target}",
            es=f"Movimiento {moves}: disco {disk} de la torre {source} → torre {target}",
            line=4, variables={"move": moves, "disk": disk, "from": source, "to": target},
        )

        yield from hanoi(n - 1, auxiliary, target, source)

    yield sb.matrix(
        table(), occupied("sorted"),
        en=f"Tower of Hanoi: move {disks} disks from peg 0 to peg 2, never placing a larger disk on a smaller one.",
        es=f"Torre de Hanoi: mover {disks} discos de la torre 0 a la torre 2, sin poner nunca un disco mayor sobre uno menor.",
        line=0, variables={"n": disks, "source": 0, "target": 2, "auxiliary": 1},
    )

    yield from hanoi(disks, 0, 2, 1)

    yield sb.matrix(
        table(), occupied("found"),
        en=f"Tower of Hanoi complete! All {disks} disks are on peg 2 after {moves} moves.",
        es=f"¡Torre de Hanoi completada! Los {disks} discos están en la torre 2 tras {moves} movimientos.",
        line=2, variables={"total_moves": moves, "n": disks},
        final=True,
    )
