"""
concepts.py — Concept Narrations
=================================
Big-O growth curves, the recursion call stack, and stack vs queue.

These are not algorithms over data: each trace is a staged narration
whose Steps carry a concept payload (BigOState, CallStackState,
StackQueueState).  The narration is still generated from a small table
or loop so every number shown is computed, not typed in.
"""

import math
from collections import deque
from typing import Iterator, List, Optional, Sequence, Tuple

from algorithms.step import (
    BigOCurve, BigOState, CallFrame, CallStackState,
    ContainerItem, StackQueueState, Step, StepBuilder,
)


# ---------------------------------------------------------------------------
# Big-O Notation
# ---------------------------------------------------------------------------
BIG_O_PSEUDOCODE: List[str] = [
    "# O(1): constant time",                                # 0
    "def get_first(arr):",                                  # 1
    "    return arr[0]",                                    # 2
    "",                                                     # 3
    "# O(n): linear time",                                  # 4
    "def find_max(arr):",                                   # 5
    "    best = arr[0]",                                    # 6
    "    for x in arr[1:]:",                                # 7
    "        best = max(best, x)",                          # 8
    "    return best",                                      # 9
    "",                                                     # 10
    "# O(n^2): quadratic time",                             # 11
    "def has_duplicate(arr):",                              # 12
    "    for i in range(len(arr)):",                        # 13
    "        for j in range(i + 1, len(arr)):",             # 14
    "            if arr[i] == arr[j]:",                     # 15
    "                return True",                          # 16
    "    return False",                                     # 17
    "",                                                     # 18
    "# O(log n): logarithmic time",                         # 19
    "def binary_search(arr, target):",                      # 20
    "    lo, hi = 0, len(arr) - 1",                         # 21
    "    while lo <= hi:",                                  # 22
    "        mid = (lo + hi) // 2",                         # 23
    "        if arr[mid] == target:",                       # 24
    "            return mid",                               # 25
    "        lo, hi = (mid + 1, hi) if arr[mid] < target else (lo, mid - 1)",  # 26
    "    return -1",                                        # 27
]

BIG_O_CURVES: List[Tuple[str, str]] = [
    ("O(1)",       "#34d399"),
    ("O(log n)",   "#22d3ee"),
    ("O(n)",       "#fb923c"),
    ("O(n log n)", "#c084fc"),
    ("O(n²)",      "#f87171"),
]

_GROWTH = {
    "O(1)":       lambda n: 1,
    "O(log n)":   lambda n: math.log2(n),
    "O(n)":       lambda n: n,
    "O(n log n)": lambda n: n * math.log2(n),
    "O(n²)":      lambda n: n * n,
}


def operations(name: str, n: int) -> float:
    """Operation count of curve `name` at input size n, to one decimal."""
    ops = _GROWTH[name](n)
    return int(ops) if float(ops).is_integer() else round(ops, 1)


def _curves(upto: Optional[str], highlighted: Optional[str] = None) -> Tuple[BigOCurve, ...]:
    names = [name for name, _ in BIG_O_CURVES]
    shown = set(names[: names.index(upto) + 1]) if upto else set()
    return tuple(
        BigOCurve(name=name, color=color, visible=name in shown, highlighted=name == highlighted)
        for name, color in BIG_O_CURVES
    )


# (curve, max_n, code line, en, es): the curve is shown with all cheaper ones
_BIG_O_STAGES: List[Tuple[str, int, int, str, str]] = [
    ("O(1)", 10, 2,
     "O(1), constant time: however large n gets, the work stays at {ops}. A flat line.",
     "O(1), tiempo constante: por mucho que crezca n, el trabajo se queda en {ops}. Una línea plana."),
    ("O(log n)", 4, 22,
     "O(log n), logarithmic time: at n={n} only {ops} operations. Let's grow n...",
     "O(log n), tiempo logarítmico: con n={n} solo {ops} operaciones. Hagamos crecer n..."),
    ("O(log n)", 10, 22,
     "O(log n) at n={n}: about {ops} operations. Halving the problem keeps growth slow, as in binary search.",
     "O(log n) con n={n}: unas {ops} operaciones. Dividir el problema a la mitad mantiene el crecimiento lento, como en la búsqueda binaria."),
    ("O(n)", 4, 7,
     "O(n), linear time: {ops} operations at n={n}, one per element.",
     "O(n), tiempo lineal: {ops} operaciones con n={n}, una por elemento."),
    ("O(n)", 10, 7,
     "O(n) at n={n}: {ops} operations. It pulls away from O(log n).",
     "O(n) con n={n}: {ops} operaciones. Se aleja de O(log n)."),
    ("O(n log n)", 4, 7,
     "O(n log n), linearithmic: {ops} operations at n={n}, close to O(n) for small inputs.",
     "O(n log n), linearítmico: {ops} operaciones con n={n}, cerca de O(n) para entradas pequeñas."),
    ("O(n log n)", 10, 7,
     "O(n log n) at n={n}: about {ops} operations. Merge Sort and Quick Sort live here.",
     "O(n log n) con n={n}: unas {ops} operaciones. Aquí viven Merge Sort y Quick Sort."),
    ("O(n²)", 4, 14,
     "O(n²), quadratic time: already {ops} operations at n={n}. Nested loops.",
     "O(n²), tiempo cuadrático: ya {ops} operaciones con n={n}. Bucles anidados."),
    ("O(n²)", 7, 14,
     "O(n²) at n={n}: {ops} operations, and the curve is pulling away fast.",
     "O(n²) con n={n}: {ops} operaciones, y la curva se aleja rápido."),
    ("O(n²)", 10, 14,
     "O(n²) at n={n}: {ops} operations! Bubble Sort lives here.",
     "O(n²) con n={n}: ¡{ops} operaciones! Aquí vive Bubble Sort."),
]

_BIG_O_ZOOM: Sequence[int] = (25, 50)


def big_o_notation(locale: str = "en") -> Iterator[Step]:
    sb = StepBuilder(locale)
    last = BIG_O_CURVES[-1][0]

    yield sb.concept(
        BigOState(curves=_curves(None), max_n=10),
        en="Big O describes how work grows with the input size n. Watch each curve as n increases.",
        es="Big O describe cómo crece el trabajo con el tamaño de entrada n. Observa cada curva conforme n aumenta.",
        line=0, variables={"complexity": "—"},
    )

    for name, n, line, en, es in _BIG_O_STAGES:
        ops = operations(name, n)
        yield sb.concept(
            BigOState(curves=_curves(name, name), max_n=n),
            en=en.format(n=n, ops=ops),
            es=es.format(n=n, ops=ops),
            line=line, variables={"complexity": name, "n": n, f"ops({n})": ops},
        )

    for i, n in enumerate(_BIG_O_ZOOM):
        table = {name: operations(name, n) for name, _ in BIG_O_CURVES}
        ratio = operations(last, n) // operations("O(n)", n)
        yield sb.concept(
            BigOState(curves=_curves(last), max_n=n),
            en=f"Zoom out to n={n}: O(1)={table['O(1)']}, O(n)={table['O(n)']}, O(n²)={table[last]}. Quadratic is {ratio}x worse than linear.",
            es=f"Ampliar a n={n}: O(1)={table['O(1)']}, O(n)={table['O(n)']}, O(n²)={table[last]}. Cuadrático es {ratio}x peor que lineal.",
            line=0, variables={"n": n, **table},
            final=i == len(_BIG_O_ZOOM) - 1,
        )


# ---------------------------------------------------------------------------
# Recursion (factorial call stack)
# ---------------------------------------------------------------------------
RECURSION_PSEUDOCODE: List[str] = [
    "def factorial(n):",                    # 0
    "    if n <= 1:",                       # 1
    "        return 1",                     # 2
    "    return n * factorial(n - 1)",      # 3
]


def recursion(locale: str = "en") -> Iterator[Step]:
    top = 5
    sb  = StepBuilder(locale)

    def frames(calls: List[int], detail: str, state: str) -> CallStackState:
        waiting = tuple(
            CallFrame(f"factorial({k})", f"{k} × factorial({k - 1})", "waiting") for k in calls[:-1]
        )
        return CallStackState(frames=waiting + (CallFrame(f"factorial({calls[-1]})", detail, state),))

    yield sb.concept(
        CallStackState(),
        en=f"Compute factorial({top}). Each call waits on a smaller call stacked above it.",
        es=f"Calcular factorial({top}). Cada llamada espera a una llamada menor apilada encima.",
        line=0, variables={"n": top},
    )

    calls: List[int] = []
    for k in range(top, 1, -1):
        calls.append(k)
        yield sb.concept(
            frames(calls, f"{k} × factorial({k - 1})", "active"),
            en=f"factorial({k}): {k} is not a base case, so it calls factorial({k - 1}).",
            es=f"factorial({k}): {k} no es caso base, así que llama a factorial({k - 1}).",
            line=3, variables={"n": k, "stack_depth": len(calls)},
        )

    calls.append(1)
    yield sb.concept(
        frames(calls, "return 1", "base"),
        en="factorial(1): base case reached, return 1. Results now flow back down the stack.",
        es="factorial(1): caso base alcanzado, retorna 1. Los resultados regresan por la pila.",
        line=2, variables={"n": 1, "returns": 1, "stack_depth": len(calls)},
    )

    result = 1
    calls.pop()
    while calls:
        k = calls[-1]
        prev, result = result, k * result
        done = len(calls) == 1
        yield sb.concept(
            frames(calls, f"{k} × {prev} = {result}", "resolved" if done else "active"),
            en=f"factorial({k}) receives {prev} and returns {k} × {prev} = {result}."
               + (" The stack is empty: done!" if done else ""),
            es=f"factorial({k}) recibe {prev} y retorna {k} × {prev} = {result}."
               + (" La pila queda vacía: ¡listo!" if done else ""),
            line=3, variables={"n": k, f"factorial({k - 1})": prev, "returns": result,
                               "stack_depth": len(calls) - 1},
            final=done,
        )
        calls.pop()


# ---------------------------------------------------------------------------
# Stacks & Queues
# ---------------------------------------------------------------------------
STACKS_QUEUES_PSEUDOCODE: List[str] = [
    "stack = []",                           # 0
    "stack.append(x)      # push",          # 1
    "stack.pop()          # pop",           # 2
    "stack[-1]            # peek",          # 3
    "",                                     # 4
    "queue = deque()",                      # 5
    "queue.append(x)      # enqueue",       # 6
    "queue.popleft()      # dequeue",       # 7
    "queue[0]             # front",         # 8
]

_VALUES: Sequence[int] = (10, 20, 30, 42)


def stacks_queues(locale: str = "en") -> Iterator[Step]:
    sb = StepBuilder(locale)

    def view(structure: str, items: Sequence[int], entering: bool = False,
             operation: Optional[str] = None, removed: Optional[int] = None) -> StackQueueState:
        states = ["normal"] * len(items)
        if entering and items:
            states[-1] = "entering"
        return StackQueueState(
            structure=structure,
            items=tuple(ContainerItem(v, s) for v, s in zip(items, states)),
            operation=operation,
            removed_value=removed,
        )

    # -- stack --
    stack: List[int] = []
    yield sb.concept(
        view("stack", stack),
        en="STACK (LIFO): last in, first out. Like a pile of plates, you add and remove at the top.",
        es="PILA (LIFO): último en entrar, primero en salir. Como una pila de platos, se añade y retira por arriba.",
        line=0, variables={"structure": "stack", "size": 0},
    )
    for v in _VALUES:
        stack.append(v)
        yield sb.concept(
            view("stack", stack, entering=True, operation=f"push({v})"),
            en=f"push({v}): {v} goes on top. Stack: {stack}",
            es=f"push({v}): {v} queda arriba. Pila: {stack}",
            line=1, variables={"operation": f"push({v})", "top": v, "size": len(stack)},
        )
    for _ in range(2):
        v = stack.pop()
        yield sb.concept(
            view("stack", stack, operation=f"pop() → {v}", removed=v),
            en=f"pop() → {v}: the newest element leaves first. Top is now {stack[-1]}.",
            es=f"pop() → {v}: el elemento más nuevo sale primero. Ahora arriba está {stack[-1]}.",
            line=2, variables={"operation": "pop()", "removed": v, "top": stack[-1], "size": len(stack)},
        )

    # -- queue --
    queue: deque = deque()
    yield sb.concept(
        view("queue", queue),
        en="QUEUE (FIFO): first in, first out. Like a line at a shop, the first to arrive is served first.",
        es="COLA (FIFO): primero en entrar, primero en salir. Como una fila en una tienda, el primero en llegar es atendido primero.",
        line=5, variables={"structure": "queue", "size": 0},
    )
    for v in _VALUES:
        queue.append(v)
        yield sb.concept(
            view("queue", list(queue), entering=True, operation=f"enqueue({v})"),
            en=f"enqueue({v}): {v} joins the back. Front is still {queue[0]}.",
            es=f"enqueue({v}): {v} se une al final. El frente sigue siendo {queue[0]}.",
            line=6, variables={"operation": f"enqueue({v})", "front": queue[0], "size": len(queue)},
        )
    for _ in range(2):
        v = queue.popleft()
        yield sb.concept(
            view("queue", list(queue), operation=f"dequeue() → {v}", removed=v),
            en=f"dequeue() → {v}: the oldest element leaves first. Front is now {queue[0]}.",
            es=f"dequeue() → {v}: el elemento más antiguo sale primero. Ahora el frente es {queue[0]}.",
            line=7, variables={"operation": "dequeue()", "removed": v, "front": queue[0], "size": len(queue)},
        )

    yield sb.concept(
        view("queue", list(queue)),
        en="A stack removes the newest element (LIFO), a queue the oldest (FIFO). Every operation is O(1).",
        es="Una pila retira el elemento más nuevo (LIFO), una cola el más antiguo (FIFO). Cada operación es O(1).",
        line=0, variables={"stack": "LIFO", "queue": "FIFO", "complexity": "O(1)"},
        final=True,
    )
