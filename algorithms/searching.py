"""
searching.py — Search Simulators
=================================
Binary, linear, jump and interpolation search over fixed arrays.

Every probe is shown in two beats:
  1. the bracketing range (role "searching") with the probed index
     as "current"
  2. the outcome: "comparing" when the search continues, "found"
     when it ends

A run stops at its terminal step (found or not found).
"""

import math
from typing import Dict, Iterator, List

from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Binary Search
# ---------------------------------------------------------------------------
BINARY_PSEUDOCODE: List[str] = [
    "def binary_search(array, target):",            # 0
    "    low, high = 0, len(array) - 1",            # 1
    "    while low <= high:",                       # 2
    "        mid = (low + high) // 2",              # 3
    "        if array[mid] == target:",             # 4
    "            return mid",                       # 5
    "        elif array[mid] < target:",            # 6
    "            low = mid + 1",                    # 7
    "        else:",                                # 8
    "            high = mid - 1",                   # 9
    "    return -1",                                # 10
]


def binary_search(locale: str = "en") -> Iterator[Step]:
    arr    = [2, 5, 8, 12, 16, 23, 38, 56, 72, 91]
    target = 23
    sb     = StepBuilder(locale)

    low, high = 0, len(arr) - 1
    yield sb.array(
        arr,
        en=f"Sorted array. Searching for target: {target}",
        es=f"Arreglo ordenado. Buscando objetivo: {target}",
        line=1, variables={"target": target, "low": low, "high": high},
    )

    while low <= high:
        mid = (low + high) // 2
        yield sb.array(
            arr, _range(low, high, mid),
            en=f"Search range [{low}..{high}], checking middle index {mid}: value {arr[mid]}",
            es=f"Rango de búsqueda [{low}..{high}], verificando índice medio {mid}: valor {arr[mid]}",
            line=3, variables={"low": low, "high": high, "mid": mid, "target": target, "array[mid]": arr[mid]},
        )

        if arr[mid] == target:
            yield sb.array(
                arr, {mid: "found"},
                en=f"Found {target} at index {mid}!",
                es=f"¡{target} encontrado en índice {mid}!",
                line=5, variables={"low": low, "high": high, "mid": mid, "result": mid},
                final=True,
            )
            return
        if arr[mid] < target:
            yield sb.array(
                arr, {mid: "comparing"},
                en=f"{arr[mid]} < {target}, searching right half",
                es=f"{arr[mid]} < {target}, buscando en mitad derecha",
                line=7, variables={"low": mid + 1, "high": high, "mid": mid},
            )
            low = mid + 1
        else:
            yield sb.array(
                arr, {mid: "comparing"},
                en=f"{arr[mid]} > {target}, searching left half",
                es=f"{arr[mid]} > {target}, buscando en mitad izquierda",
                line=9, variables={"low": low, "high": mid - 1, "mid": mid},
            )
            high = mid - 1

    yield sb.array(
        arr,
        en=f"Target {target} not found in the array.",
        es=f"Objetivo {target} no encontrado en el arreglo.",
        line=10, variables={"low": low, "high": high, "result": -1},
        final=True,
    )


# ---------------------------------------------------------------------------
# Linear Search
# ---------------------------------------------------------------------------
LINEAR_PSEUDOCODE: List[str] = [
    "def linear_search(array, target):",            # 0
    "    for i in range(len(array)):",              # 1
    "        if array[i] == target:",               # 2
    "            return i",                         # 3
    "    return -1",                                # 4
]


def linear_search(locale: str = "en") -> Iterator[Step]:
    arr    = [14, 33, 27, 10, 35, 19, 42, 44]
    target = 35
    sb     = StepBuilder(locale)

    yield sb.array(
        arr,
        en=f"Unsorted array. Searching for target: {target}",
        es=f"Arreglo sin ordenar. Buscando objetivo: {target}",
        line=0, variables={"target": target, "len(array)": len(arr)},
    )

    for i, value in enumerate(arr):
        rel = "=" if value == target else "≠"
        yield sb.array(
            arr, _range(i, len(arr) - 1, i),
            en=f"Checking index {i}: {value} {rel} {target}",
            es=f"Verificando índice {i}: {value} {rel} {target}",
            line=2, variables={"i": i, "target": target, "array[i]": value},
        )
        if value == target:
            yield sb.array(
                arr, {i: "found"},
                en=f"Found {target} at index {i}!",
                es=f"¡{target} encontrado en índice {i}!",
                line=3, variables={"i": i, "result": i},
                final=True,
            )
            return
        yield sb.array(
            arr, {i: "comparing"},
            en=f"{value} is not {target}, move on",
            es=f"{value} no es {target}, continuar",
            line=1, variables={"i": i},
        )

    yield sb.array(
        arr,
        en=f"Target {target} not found.",
        es=f"Objetivo {target} no encontrado.",
        line=4, variables={"target": target, "result": -1},
        final=True,
    )


# ---------------------------------------------------------------------------
# Jump Search
# ---------------------------------------------------------------------------
JUMP_PSEUDOCODE: List[str] = [
    "def jump_search(array, target):",                      # 0
    "    n = len(array)",                                   # 1
    "    jump = int(math.sqrt(n))",                         # 2
    "    prev, curr = 0, jump",                             # 3
    "    while curr < n and array[curr] <= target:",        # 4
    "        prev, curr = curr, curr + jump",               # 5
    "    for i in range(prev, min(curr, n)):",              # 6
    "        if array[i] == target:",                       # 7
    "            return i",                                 # 8
    "    return -1",                                        # 9
]


def jump_search(locale: str = "en") -> Iterator[Step]:
    arr    = [2, 5, 8, 12, 16, 23, 38, 56, 72, 91]
    target = 38
    n      = len(arr)
    jump   = int(math.sqrt(n))
    sb     = StepBuilder(locale)

    yield sb.array(
        arr,
        en=f"Sorted array. Searching for target: {target}. Jump size: √{n} = {jump}",
        es=f"Arreglo ordenado. Buscando objetivo: {target}. Tamaño de salto: √{n} = {jump}",
        line=2, variables={"target": target, "n": n, "jump": jump},
    )

    prev, curr = 0, jump
    while curr < n:
        yield sb.array(
            arr, _range(prev, curr, curr),
            en=f"Block [{prev}..{curr}]: probing arr[{curr}] = {arr[curr]}",
            es=f"Bloque [{prev}..{curr}]: probando arr[{curr}] = {arr[curr]}",
            line=4, variables={"prev": prev, "curr": curr, "jump": jump, "arr[curr]": arr[curr], "target": target},
        )
        if arr[curr] > target:
            yield sb.array(
                arr, {curr: "comparing"},
                en=f"{arr[curr]} > {target}: the target lies before index {curr}. Stop jumping.",
                es=f"{arr[curr]} > {target}: el objetivo está antes del índice {curr}. Dejar de saltar.",
                line=4, variables={"prev": prev, "curr": curr},
            )
            break
        yield sb.array(
            arr, {curr: "comparing"},
            en=f"{arr[curr]} ≤ {target}: jump to the next block.",
            es=f"{arr[curr]} ≤ {target}: saltar al siguiente bloque.",
            line=5, variables={"prev": curr, "curr": curr + jump},
        )
        prev, curr = curr, curr + jump

    end = min(curr, n) - 1
    yield sb.array(
        arr, {i: "searching" for i in range(prev, end + 1)},
        en=f"Target must be in block [{prev}..{end}]. Starting linear search.",
        es=f"El objetivo debe estar en el bloque [{prev}..{end}]. Iniciando búsqueda lineal.",
        line=6, variables={"prev": prev, "end": end + 1, "target": target},
    )

    for i in range(prev, end + 1):
        rel = "=" if arr[i] == target else "≠"
        yield sb.array(
            arr, _range(i, end, i),
            en=f"Checking index {i}: {arr[i]} {rel} {target}",
            es=f"Verificando índice {i}: {arr[i]} {rel} {target}",
            line=7, variables={"i": i, "arr[i]": arr[i], "target": target},
        )
        if arr[i] == target:
            yield sb.array(
                arr, {i: "found"},
                en=f"Found {target} at index {i}!",
                es=f"¡{target} encontrado en índice {i}!",
                line=8, variables={"i": i, "result": i},
                final=True,
            )
            return
        yield sb.array(
            arr, {i: "comparing"},
            en=f"{arr[i]} is not {target}, keep scanning the block",
            es=f"{arr[i]} no es {target}, seguir recorriendo el bloque",
            line=6, variables={"i": i},
        )

    yield sb.array(
        arr,
        en=f"Target {target} not found.",
        es=f"Objetivo {target} no encontrado.",
        line=9, variables={"target": target, "result": -1},
        final=True,
    )


# ---------------------------------------------------------------------------
# Interpolation Search
# ---------------------------------------------------------------------------
INTERPOLATION_PSEUDOCODE: List[str] = [
    "def interpolation_search(array, target):",                             # 0
    "    low, high = 0, len(array) - 1",                                    # 1
    "    while low <= high and array[low] <= target <= array[high]:",       # 2
    "        span = array[high] - array[low]",                              # 3
    "        pos = low if span == 0 else \\",                               # 4
    "            low + (target - array[low]) * (high - low) // span",       # 5
    "        if array[pos] == target:",                                     # 6
    "            return pos",                                               # 7
    "        elif array[pos] < target:",                                    # 8
    "            low = pos + 1",                                            # 9
    "        else:",                                                        # 10
    "            high = pos - 1",                                           # 11
    "    return -1",                                                        # 12
]


def interpolation_search(locale: str = "en") -> Iterator[Step]:
    arr    = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    target = 70
    sb     = StepBuilder(locale)

    low, high = 0, len(arr) - 1
    yield sb.array(
        arr,
        en=f"Uniformly distributed sorted array. Searching for target: {target}",
        es=f"Arreglo ordenado uniformemente distribuido. Buscando objetivo: {target}",
        line=1, variables={"target": target, "low": low, "high": high},
    )

    while low <= high and arr[low] <= target <= arr[high]:
        span = arr[high] - arr[low]
        # a single equal-valued range has no slope to interpolate along
        pos = low if span == 0 else low + (target - arr[low]) * (high - low) // span

        yield sb.array(
            arr, _range(low, high, pos),
            en=f"Range [{low}..{high}]. Estimated position: {pos} (value {arr[pos]})",
            es=f"Rango [{low}..{high}]. Posición estimada: {pos} (valor {arr[pos]})",
            line=5, variables={"low": low, "high": high, "pos": pos, "target": target, "arr[pos]": arr[pos]},
        )

        if arr[pos] == target:
            yield sb.array(
                arr, {pos: "found"},
                en=f"Found {target} at index {pos}!",
                es=f"¡{target} encontrado en índice {pos}!",
                line=7, variables={"low": low, "high": high, "pos": pos, "result": pos},
                final=True,
            )
            return
        if arr[pos] < target:
            yield sb.array(
                arr, {pos: "comparing"},
                en=f"{arr[pos]} < {target}, narrowing to right portion",
                es=f"{arr[pos]} < {target}, acotando a la porción derecha",
                line=9, variables={"low": pos + 1, "high": high, "pos": pos},
            )
            low = pos + 1
        else:
            yield sb.array(
                arr, {pos: "comparing"},
                en=f"{arr[pos]} > {target}, narrowing to left portion",
                es=f"{arr[pos]} > {target}, acotando a la porción izquierda",
                line=11, variables={"low": low, "high": pos - 1, "pos": pos},
            )
            high = pos - 1

    yield sb.array(
        arr,
        en=f"Target {target} not found.",
        es=f"Objetivo {target} no encontrado.",
        line=12, variables={"target": target, "result": -1},
        final=True,
    )


# ---------------------------------------------------------------------------
def _range(low: int, high: int, probe: int) -> Dict[int, str]:
    """Highlight [low..high] as the search range with `probe` on top."""
    h = {i: "searching" for i in range(low, high + 1)}
    h[probe] = "current"
    return h
