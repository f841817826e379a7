"""
sorting.py — Sorting Simulators
================================
Seven comparison sorts (bubble, selection, insertion, quick, merge,
heap, shell) and two distribution sorts (counting, radix).

Conventions shared by every simulator here:
  - `arr` is the working list, mutated in place; StepBuilder copies it
    on every yield.
  - `done` is the set of finalized indices.  It only grows, and an
    index inside it is never highlighted again as comparing / swapped /
    current / pivot / minimum.
  - Distribution sorts never "compare": they highlight with "active"
    (element being bucketed / counted) and "placed" (element written
    back), and expose the count array / digit buckets via aux / buckets.
"""

from typing import Dict, Iterator, List, Set

from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Bubble Sort
# ---------------------------------------------------------------------------
BUBBLE_PSEUDOCODE: List[str] = [
    "def bubble_sort(array):",                                      # 0
    "    n = len(array)",                                           # 1
    "    for i in range(n - 1):",                                   # 2
    "        swapped = False",                                      # 3
    "        for j in range(n - 1 - i):",                           # 4
    "            if array[j] > array[j + 1]:",                      # 5
    "                array[j], array[j + 1] = array[j + 1], array[j]",  # 6
    "                swapped = True",                               # 7
    "        if not swapped:",                                      # 8
    "            break",                                            # 9
    "    return array",                                             # 10
]


def bubble_sort(locale: str = "en") -> Iterator[Step]:
    arr  = [64, 34, 25, 12, 22, 11, 90]
    n    = len(arr)
    done: Set[int] = set()
    sb   = StepBuilder(locale)

    yield sb.array(
        arr,
        en="Initial array. Bubble Sort repeatedly swaps adjacent out-of-order pairs.",
        es="Arreglo inicial. Bubble Sort intercambia repetidamente pares adyacentes desordenados.",
        line=1, variables={"n": n},
    )

    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            yield sb.array(
                arr, {j: "comparing", j + 1: "comparing"}, done,
                en=f"Compare {arr[j]} and {arr[j + 1]}",
                es=f"Comparar {arr[j]} y {arr[j + 1]}",
                line=5, variables={"i": i, "j": j, "array[j]": arr[j], "array[j+1]": arr[j + 1]},
            )
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield sb.array(
                    arr, {j: "swapped", j + 1: "swapped"}, done,
                    en=f"{arr[j + 1]} > {arr[j]}: swap them",
                    es=f"{arr[j + 1]} > {arr[j]}: intercambiarlos",
                    line=6, variables={"i": i, "j": j, "swapped": True},
                )

        done.add(n - 1 - i)
        yield sb.array(
            arr, {}, done,
            en=f"Pass {i + 1} complete: {arr[n - 1 - i]} has bubbled into its final position.",
            es=f"Pasada {i + 1} completa: {arr[n - 1 - i]} llegó a su posición final.",
            line=2, variables={"i": i, "swapped": swapped},
        )

        if not swapped:
            done.update(range(n))
            yield sb.array(
                arr, {}, done,
                en="No swaps in this pass: the remaining elements are already in order.",
                es="Sin intercambios en esta pasada: los elementos restantes ya están en orden.",
                line=9, variables={"i": i, "swapped": False},
            )
            break

    done.update(range(n))
    yield sb.array(
        arr, {}, done,
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=10, final=True,
    )


# ---------------------------------------------------------------------------
# Selection Sort
# ---------------------------------------------------------------------------
SELECTION_PSEUDOCODE: List[str] = [
    "def selection_sort(array):",                                   # 0
    "    n = len(array)",                                           # 1
    "    for i in range(n - 1):",                                   # 2
    "        min_idx = i",                                          # 3
    "        for j in range(i + 1, n):",                            # 4
    "            if array[j] < array[min_idx]:",                    # 5
    "                min_idx = j",                                  # 6
    "        if min_idx != i:",                                     # 7
    "            array[i], array[min_idx] = array[min_idx], array[i]",  # 8
    "    return array",                                             # 9
]


def selection_sort(locale: str = "en") -> Iterator[Step]:
    arr  = [64, 25, 12, 22, 11]
    n    = len(arr)
    done: Set[int] = set()
    sb   = StepBuilder(locale)

    yield sb.array(
        arr,
        en="Initial array. Selection Sort picks the minimum of the unsorted part each pass.",
        es="Arreglo inicial. Selection Sort elige el mínimo de la parte sin ordenar en cada pasada.",
        line=1, variables={"n": n},
    )

    for i in range(n - 1):
        min_idx = i
        yield sb.array(
            arr, {i: "minimum"}, done,
            en=f"Pass {i + 1}: assume {arr[i]} (index {i}) is the minimum",
            es=f"Pasada {i + 1}: suponer que {arr[i]} (índice {i}) es el mínimo",
            line=3, variables={"i": i, "min_idx": min_idx},
        )
        for j in range(i + 1, n):
            yield sb.array(
                arr, {min_idx: "minimum", j: "comparing"}, done,
                en=f"Compare {arr[j]} with current minimum {arr[min_idx]}",
                es=f"Comparar {arr[j]} con el mínimo actual {arr[min_idx]}",
                line=5, variables={"i": i, "j": j, "min_idx": min_idx},
            )
            if arr[j] < arr[min_idx]:
                min_idx = j
                yield sb.array(
                    arr, {min_idx: "minimum"}, done,
                    en=f"New minimum: {arr[min_idx]} at index {min_idx}",
                    es=f"Nuevo mínimo: {arr[min_idx]} en índice {min_idx}",
                    line=6, variables={"i": i, "j": j, "min_idx": min_idx},
                )

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield sb.array(
                arr, {i: "swapped", min_idx: "swapped"}, done,
                en=f"Swap the minimum {arr[i]} into index {i}",
                es=f"Intercambiar el mínimo {arr[i]} al índice {i}",
                line=8, variables={"i": i, "min_idx": min_idx},
            )

        done.add(i)
        yield sb.array(
            arr, {}, done,
            en=f"{arr[i]} is now in its final position (index {i})",
            es=f"{arr[i]} está ahora en su posición final (índice {i})",
            line=2, variables={"i": i},
        )

    done.update(range(n))
    yield sb.array(
        arr, {}, done,
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=9, final=True,
    )


# ---------------------------------------------------------------------------
# Insertion Sort
# ---------------------------------------------------------------------------
INSERTION_PSEUDOCODE: List[str] = [
    "def insertion_sort(array):",                                   # 0
    "    for i in range(1, len(array)):",                           # 1
    "        key = array[i]",                                       # 2
    "        j = i - 1",                                            # 3
    "        while j >= 0 and array[j] > key:",                     # 4
    "            array[j + 1] = array[j]",                          # 5
    "            j -= 1",                                           # 6
    "        array[j + 1] = key",                                   # 7
    "    return array",                                             # 8
]


def insertion_sort(locale: str = "en") -> Iterator[Step]:
    arr = [12, 11, 13, 5, 6]
    n   = len(arr)
    sb  = StepBuilder(locale)

    yield sb.array(
        arr,
        en="Initial array. Insertion Sort grows a sorted prefix one element at a time.",
        es="Arreglo inicial. Insertion Sort hace crecer un prefijo ordenado elemento a elemento.",
        line=0, variables={"n": n},
    )

    for i in range(1, n):
        key = arr[i]
        yield sb.array(
            arr, {i: "current"},
            en=f"Take key = {key} (index {i}) and insert it into the sorted prefix [0..{i - 1}]",
            es=f"Tomar clave = {key} (índice {i}) e insertarla en el prefijo ordenado [0..{i - 1}]",
            line=2, variables={"i": i, "key": key},
        )

        # the key travels left by swaps so it stays visible at j + 1
        j = i - 1
        while j >= 0:
            yield sb.array(
                arr, {j: "comparing", j + 1: "current"},
                en=f"Compare {arr[j]} with key {key}",
                es=f"Comparar {arr[j]} con la clave {key}",
                line=4, variables={"i": i, "j": j, "key": key},
            )
            if arr[j] <= key:
                break
            arr[j], arr[j + 1] = arr[j + 1], arr[j]
            yield sb.array(
                arr, {j: "swapped", j + 1: "swapped"},
                en=f"{arr[j + 1]} > {key}: shift {arr[j + 1]} one place right",
                es=f"{arr[j + 1]} > {key}: desplazar {arr[j + 1]} una posición a la derecha",
                line=5, variables={"i": i, "j": j, "key": key},
            )
            j -= 1

        yield sb.array(
            arr, {j + 1: "placed"},
            en=f"Insert key {key} at index {j + 1}",
            es=f"Insertar la clave {key} en el índice {j + 1}",
            line=7, variables={"i": i, "j": j, "key": key},
        )

    yield sb.array(
        arr, {}, range(n),
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=8, final=True,
    )


# ---------------------------------------------------------------------------
# Quick Sort (Lomuto partition)
# ---------------------------------------------------------------------------
QUICK_PSEUDOCODE: List[str] = [
    "def quick_sort(array, low, high):",                            # 0
    "    if low < high:",                                           # 1
    "        p = partition(array, low, high)",                      # 2
    "        quick_sort(array, low, p - 1)",                        # 3
    "        quick_sort(array, p + 1, high)",                       # 4
    "",                                                             # 5
    "def partition(array, low, high):",                             # 6
    "    pivot = array[high]",                                      # 7
    "    i = low - 1",                                              # 8
    "    for j in range(low, high):",                               # 9
    "        if array[j] < pivot:",                                 # 10
    "            i += 1",                                           # 11
    "            array[i], array[j] = array[j], array[i]",          # 12
    "    array[i + 1], array[high] = array[high], array[i + 1]",    # 13
    "    return i + 1",                                             # 14
]


def quick_sort(locale: str = "en") -> Iterator[Step]:
    arr  = [10, 80, 30, 90, 40, 50, 70]
    n    = len(arr)
    done: Set[int] = set()
    sb   = StepBuilder(locale)

    def sort(low: int, high: int) -> Iterator[Step]:
        if low > high:
            return
        if low == high:
            done.add(low)
            yield sb.array(
                arr, {}, done,
                en=f"Subarray [{low}..{high}] has a single element: {arr[low]} is in place",
                es=f"El subarreglo [{low}..{high}] tiene un solo elemento: {arr[low]} está en su lugar",
                line=1, variables={"low": low, "high": high},
            )
            return

        pivot = arr[high]
        yield sb.array(
            arr, {high: "pivot"}, done,
            en=f"Partition [{low}..{high}] around pivot {pivot}",
            es=f"Particionar [{low}..{high}] alrededor del pivote {pivot}",
            line=7, variables={"low": low, "high": high, "pivot": pivot},
        )

        i = low - 1
        for j in range(low, high):
            yield sb.array(
                arr, {high: "pivot", j: "comparing"}, done,
                en=f"Is {arr[j]} < pivot {pivot}?",
                es=f"¿{arr[j]} < pivote {pivot}?",
                line=10, variables={"i": i, "j": j, "pivot": pivot},
            )
            if arr[j] < pivot:
                i += 1
                if i != j:
                    arr[i], arr[j] = arr[j], arr[i]
                    yield sb.array(
                        arr, {high: "pivot", i: "swapped", j: "swapped"}, done,
                        en=f"Yes: swap {arr[i]} into the smaller side (index {i})",
                        es=f"Sí: mover {arr[i]} al lado menor (índice {i})",
                        line=12, variables={"i": i, "j": j, "pivot": pivot},
                    )

        p = i + 1
        if p != high:
            arr[p], arr[high] = arr[high], arr[p]
            yield sb.array(
                arr, {p: "swapped", high: "swapped"}, done,
                en=f"Move pivot {pivot} to index {p}",
                es=f"Mover el pivote {pivot} al índice {p}",
                line=13, variables={"p": p, "pivot": pivot},
            )
        done.add(p)
        yield sb.array(
            arr, {}, done,
            en=f"Pivot {pivot} is in its final position (index {p})",
            es=f"El pivote {pivot} está en su posición final (índice {p})",
            line=14, variables={"p": p},
        )

        yield from sort(low, p - 1)
        yield from sort(p + 1, high)

    yield sb.array(
        arr,
        en="Initial array. Quick Sort partitions around a pivot, then recurses on both sides.",
        es="Arreglo inicial. Quick Sort particiona alrededor de un pivote y luego recurre en ambos lados.",
        line=0, variables={"low": 0, "high": n - 1},
    )
    yield from sort(0, n - 1)

    done.update(range(n))
    yield sb.array(
        arr, {}, done,
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=0, final=True,
    )


# ---------------------------------------------------------------------------
# Merge Sort
# ---------------------------------------------------------------------------
MERGE_PSEUDOCODE: List[str] = [
    "def merge_sort(array, left, right):",                          # 0
    "    if left >= right:",                                        # 1
    "        return",                                               # 2
    "    mid = (left + right) // 2",                                # 3
    "    merge_sort(array, left, mid)",                             # 4
    "    merge_sort(array, mid + 1, right)",                        # 5
    "    merge(array, left, mid, right)",                           # 6
    "",                                                             # 7
    "def merge(array, left, mid, right):",                          # 8
    "    L, R = array[left:mid + 1], array[mid + 1:right + 1]",     # 9
    "    i = j = 0; k = left",                                      # 10
    "    while i < len(L) and j < len(R):",                         # 11
    "        if L[i] <= R[j]:",                                     # 12
    "            array[k] = L[i]; i += 1",                          # 13
    "        else:",                                                # 14
    "            array[k] = R[j]; j += 1",                          # 15
    "        k += 1",                                               # 16
    "    array[k:right + 1] = L[i:] + R[j:]",                       # 17
]


def merge_sort(locale: str = "en") -> Iterator[Step]:
    arr = [38, 27, 43, 3, 9, 82, 10]
    n   = len(arr)
    sb  = StepBuilder(locale)

    def halves(left: int, mid: int, right: int) -> Dict[int, str]:
        h = {k: "left" for k in range(left, mid + 1)}
        h.update({k: "right" for k in range(mid + 1, right + 1)})
        return h

    def sort(left: int, right: int) -> Iterator[Step]:
        if left >= right:
            return
        mid = (left + right) // 2
        yield sb.array(
            arr, halves(left, mid, right),
            en=f"Split [{left}..{right}] into [{left}..{mid}] and [{mid + 1}..{right}]",
            es=f"Dividir [{left}..{right}] en [{left}..{mid}] y [{mid + 1}..{right}]",
            line=3, variables={"left": left, "mid": mid, "right": right},
        )
        yield from sort(left, mid)
        yield from sort(mid + 1, right)
        yield from merge(left, mid, right)

    def merge(left: int, mid: int, right: int) -> Iterator[Step]:
        L, R = arr[left:mid + 1], arr[mid + 1:right + 1]
        yield sb.array(
            arr, halves(left, mid, right),
            en=f"Merge {L} and {R}",
            es=f"Mezclar {L} y {R}",
            line=9, variables={"L": list(L), "R": list(R)},
        )

        i = j = 0
        k = left
        while i < len(L) and j < len(R):
            yield sb.array(
                arr, {k: "current"},
                en=f"Compare {L[i]} (left) with {R[j]} (right)",
                es=f"Comparar {L[i]} (izquierda) con {R[j]} (derecha)",
                line=12, variables={"i": i, "j": j, "k": k, "L[i]": L[i], "R[j]": R[j]},
            )
            if L[i] <= R[j]:
                arr[k] = L[i]
                i += 1
                line = 13
            else:
                arr[k] = R[j]
                j += 1
                line = 15
            yield sb.array(
                arr, {k: "merged"},
                en=f"Write {arr[k]} to index {k}",
                es=f"Escribir {arr[k]} en el índice {k}",
                line=line, variables={"i": i, "j": j, "k": k},
            )
            k += 1

        for value in L[i:] + R[j:]:
            arr[k] = value
            yield sb.array(
                arr, {k: "merged"},
                en=f"Copy leftover {value} to index {k}",
                es=f"Copiar el sobrante {value} al índice {k}",
                line=17, variables={"k": k},
            )
            k += 1

        yield sb.array(
            arr, {k: "merged" for k in range(left, right + 1)},
            en=f"Range [{left}..{right}] merged: {arr[left:right + 1]}",
            es=f"Rango [{left}..{right}] mezclado: {arr[left:right + 1]}",
            line=6, variables={"left": left, "right": right},
        )

    yield sb.array(
        arr,
        en="Initial array. Merge Sort splits in halves, sorts each, then merges them.",
        es="Arreglo inicial. Merge Sort divide en mitades, ordena cada una y luego las mezcla.",
        line=0, variables={"left": 0, "right": n - 1},
    )
    yield from sort(0, n - 1)
    yield sb.array(
        arr, {}, range(n),
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=0, final=True,
    )


# ---------------------------------------------------------------------------
# Heap Sort
# ---------------------------------------------------------------------------
HEAP_PSEUDOCODE: List[str] = [
    "def heap_sort(array):",                                        # 0
    "    n = len(array)",                                           # 1
    "    for i in range(n // 2 - 1, -1, -1):",                      # 2
    "        heapify(array, n, i)",                                 # 3
    "    for end in range(n - 1, 0, -1):",                          # 4
    "        array[0], array[end] = array[end], array[0]",          # 5
    "        heapify(array, end, 0)",                               # 6
    "",                                                             # 7
    "def heapify(array, size, root):",                              # 8
    "    largest = root",                                           # 9
    "    left, right = 2 * root + 1, 2 * root + 2",                 # 10
    "    if left < size and array[left] > array[largest]:",         # 11
    "        largest = left",                                       # 12
    "    if right < size and array[right] > array[largest]:",       # 13
    "        largest = right",                                      # 14
    "    if largest != root:",                                      # 15
    "        array[root], array[largest] = array[largest], array[root]",  # 16
    "        heapify(array, size, largest)",                        # 17
]


def heap_sort(locale: str = "en") -> Iterator[Step]:
    arr  = [12, 11, 13, 5, 6, 7]
    n    = len(arr)
    done: Set[int] = set()
    sb   = StepBuilder(locale)

    def heapify(size: int, root: int) -> Iterator[Step]:
        while True:
            left, right = 2 * root + 1, 2 * root + 2
            if left >= size:
                return
            h = {root: "current", left: "comparing"}
            if right < size:
                h[right] = "comparing"
            largest = root
            if arr[left] > arr[largest]:
                largest = left
            if right < size and arr[right] > arr[largest]:
                largest = right
            children = [arr[c] for c in (left, right) if c < size]
            yield sb.array(
                arr, h, done,
                en=f"Heapify at index {root}: compare {arr[root]} with children {children}",
                es=f"Heapify en el índice {root}: comparar {arr[root]} con los hijos {children}",
                line=11, variables={"root": root, "left": left, "right": right, "largest": largest, "size": size},
            )
            if largest == root:
                return
            arr[root], arr[largest] = arr[largest], arr[root]
            yield sb.array(
                arr, {root: "swapped", largest: "swapped"}, done,
                en=f"Swap {arr[largest]} down with larger child {arr[root]}",
                es=f"Intercambiar {arr[largest]} con el hijo mayor {arr[root]}",
                line=16, variables={"root": root, "largest": largest},
            )
            root = largest

    yield sb.array(
        arr,
        en="Initial array. Heap Sort first builds a max-heap.",
        es="Arreglo inicial. Heap Sort primero construye un max-heap.",
        line=1, variables={"n": n},
    )
    for i in range(n // 2 - 1, -1, -1):
        yield from heapify(n, i)

    yield sb.array(
        arr, {0: "selected"}, done,
        en=f"Max-heap built. The largest value {arr[0]} sits at the root.",
        es=f"Max-heap construido. El valor mayor {arr[0]} está en la raíz.",
        line=4, variables={"n": n},
    )

    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        yield sb.array(
            arr, {0: "swapped", end: "swapped"}, done,
            en=f"Move the max {arr[end]} to index {end}",
            es=f"Mover el máximo {arr[end]} al índice {end}",
            line=5, variables={"end": end},
        )
        done.add(end)
        yield sb.array(
            arr, {}, done,
            en=f"{arr[end]} is in its final position; heap shrinks to size {end}",
            es=f"{arr[end]} está en su posición final; el heap se reduce a tamaño {end}",
            line=6, variables={"end": end},
        )
        yield from heapify(end, 0)

    done.update(range(n))
    yield sb.array(
        arr, {}, done,
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=0, final=True,
    )


# ---------------------------------------------------------------------------
# Shell Sort
# ---------------------------------------------------------------------------
SHELL_PSEUDOCODE: List[str] = [
    "def shell_sort(array):",                                       # 0
    "    gap = len(array) // 2",                                    # 1
    "    while gap > 0:",                                           # 2
    "        for i in range(gap, len(array)):",                     # 3
    "            j = i",                                            # 4
    "            while j >= gap and array[j - gap] > array[j]:",    # 5
    "                array[j - gap], array[j] = array[j], array[j - gap]",  # 6
    "                j -= gap",                                     # 7
    "        gap //= 2",                                            # 8
    "    return array",                                             # 9
]


def shell_sort(locale: str = "en") -> Iterator[Step]:
    arr = [23, 12, 1, 8, 34, 54, 2, 3]
    n   = len(arr)
    sb  = StepBuilder(locale)

    yield sb.array(
        arr,
        en="Initial array. Shell Sort runs insertion sort over shrinking gaps.",
        es="Arreglo inicial. Shell Sort aplica insertion sort con saltos decrecientes.",
        line=0, variables={"n": n},
    )

    gap = n // 2
    while gap > 0:
        yield sb.array(
            arr,
            en=f"Gap = {gap}: sort every sub-list of elements {gap} apart",
            es=f"Salto = {gap}: ordenar cada sublista de elementos separados por {gap}",
            line=2, variables={"gap": gap},
        )
        for i in range(gap, n):
            j = i
            while j >= gap:
                yield sb.array(
                    arr, {j - gap: "comparing", j: "comparing"},
                    en=f"Compare {arr[j - gap]} (index {j - gap}) with {arr[j]} (index {j})",
                    es=f"Comparar {arr[j - gap]} (índice {j - gap}) con {arr[j]} (índice {j})",
                    line=5, variables={"gap": gap, "i": i, "j": j},
                )
                if arr[j - gap] <= arr[j]:
                    break
                arr[j - gap], arr[j] = arr[j], arr[j - gap]
                yield sb.array(
                    arr, {j - gap: "swapped", j: "swapped"},
                    en=f"Out of order: swap {arr[j]} and {arr[j - gap]}",
                    es=f"Desordenados: intercambiar {arr[j]} y {arr[j - gap]}",
                    line=6, variables={"gap": gap, "i": i, "j": j},
                )
                j -= gap
        gap //= 2

    yield sb.array(
        arr, {}, range(n),
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=9, final=True,
    )


# ---------------------------------------------------------------------------
# Counting Sort
# ---------------------------------------------------------------------------
COUNTING_PSEUDOCODE: List[str] = [
    "def counting_sort(array):",                                    # 0
    "    count = [0] * (max(array) + 1)",                           # 1
    "    for value in array:",                                      # 2
    "        count[value] += 1",                                    # 3
    "    k = 0",                                                    # 4
    "    for value, freq in enumerate(count):",                     # 5
    "        for _ in range(freq):",                                # 6
    "            array[k] = value",                                 # 7
    "            k += 1",                                           # 8
    "    return array",                                             # 9
]


def counting_sort(locale: str = "en") -> Iterator[Step]:
    arr   = [4, 2, 2, 8, 3, 3, 1]
    n     = len(arr)
    count = [0] * (max(arr) + 1)
    done: Set[int] = set()
    sb    = StepBuilder(locale)

    yield sb.array(
        arr, aux=count,
        en=f"Initial array. Count array has one slot per value 0..{len(count) - 1}.",
        es=f"Arreglo inicial. El arreglo de conteo tiene una casilla por valor 0..{len(count) - 1}.",
        line=1, variables={"max": max(arr)},
    )

    for idx, value in enumerate(arr):
        count[value] += 1
        yield sb.array(
            arr, {idx: "active"}, aux=count,
            en=f"Count {value}: count[{value}] = {count[value]}",
            es=f"Contar {value}: count[{value}] = {count[value]}",
            line=3, variables={"value": value, f"count[{value}]": count[value]},
        )

    yield sb.array(
        arr, aux=count,
        en=f"Counting done: {count}. Rewrite the array value by value.",
        es=f"Conteo terminado: {count}. Reescribir el arreglo valor por valor.",
        line=4, variables={"count": list(count)},
    )

    k = 0
    for value in range(len(count)):
        while count[value] > 0:
            arr[k] = value
            count[value] -= 1
            done.add(k)
            yield sb.array(
                arr, {k: "placed"}, done, aux=count,
                en=f"Write {value} at index {k} ({count[value]} left)",
                es=f"Escribir {value} en el índice {k} (quedan {count[value]})",
                line=7, variables={"value": value, "k": k},
            )
            k += 1

    yield sb.array(
        arr, {}, range(n), aux=count,
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=9, final=True,
    )


# ---------------------------------------------------------------------------
# Radix Sort (LSD, base 10)
# ---------------------------------------------------------------------------
RADIX_PSEUDOCODE: List[str] = [
    "def radix_sort(array):",                                       # 0
    "    exp = 1",                                                  # 1
    "    while max(array) // exp > 0:",                             # 2
    "        buckets = [[] for _ in range(10)]",                    # 3
    "        for value in array:",                                  # 4
    "            buckets[(value // exp) % 10].append(value)",       # 5
    "        array[:] = [v for bucket in buckets for v in bucket]", # 6
    "        exp *= 10",                                            # 7
    "    return array",                                             # 8
]


def radix_sort(locale: str = "en") -> Iterator[Step]:
    arr = [170, 45, 75, 90, 802, 24, 2, 66]
    n   = len(arr)
    sb  = StepBuilder(locale)

    yield sb.array(
        arr,
        en="Initial array. Radix Sort distributes by one digit at a time, least significant first.",
        es="Arreglo inicial. Radix Sort distribuye por un dígito a la vez, empezando por el menos significativo.",
        line=1, variables={"max": max(arr)},
    )

    exp = 1
    while max(arr) // exp > 0:
        buckets: List[List[int]] = [[] for _ in range(10)]
        yield sb.array(
            arr, buckets=buckets,
            en=f"Digit pass for place value {exp}",
            es=f"Pasada de dígito para el valor posicional {exp}",
            line=3, variables={"exp": exp},
        )
        for idx, value in enumerate(arr):
            digit = (value // exp) % 10
            buckets[digit].append(value)
            yield sb.array(
                arr, {idx: "active"}, buckets=buckets,
                en=f"{value}: digit {digit} → bucket {digit}",
                es=f"{value}: dígito {digit} → cubeta {digit}",
                line=5, variables={"exp": exp, "value": value, "digit": digit},
            )

        k = 0
        for digit in range(10):
            while buckets[digit]:
                arr[k] = buckets[digit].pop(0)
                yield sb.array(
                    arr, {k: "placed"}, buckets=buckets,
                    en=f"Collect {arr[k]} from bucket {digit} into index {k}",
                    es=f"Recoger {arr[k]} de la cubeta {digit} en el índice {k}",
                    line=6, variables={"exp": exp, "digit": digit, "k": k},
                )
                k += 1
        exp *= 10

    yield sb.array(
        arr, {}, range(n),
        en=f"Array sorted: {arr}",
        es=f"Arreglo ordenado: {arr}",
        line=8, final=True,
    )
