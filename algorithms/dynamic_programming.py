"""
dynamic_programming.py — DP Simulators
=======================================
Fibonacci tabulation (array view), 0/1 knapsack and LCS (table view).

Every cell write is one Step:
  - the cells it reads are highlighted "comparing"
  - the cell being written is "current" (or "found" on an LCS match)

Knapsack and LCS finish with a traceback that marks the cells that
produced the answer as "path".
"""

from typing import Iterator, List

from algorithms.step import Step, StepBuilder, cell


# ---------------------------------------------------------------------------
# Fibonacci (bottom-up)
# ---------------------------------------------------------------------------
FIBONACCI_PSEUDOCODE: List[str] = [
    "def fibonacci(n):",                            # 0
    "    dp = [0] * (n + 1)",                       # 1
    "    dp[1] = 1",                                # 2
    "    for i in range(2, n + 1):",                # 3
    "        dp[i] = dp[i - 1] + dp[i - 2]",        # 4
    "    return dp",                                # 5
]


def fibonacci_dp(locale: str = "en") -> Iterator[Step]:
    n    = 10
    dp   = [0] * (n + 1)
    dp[1] = 1
    done = [0, 1]
    sb   = StepBuilder(locale)

    yield sb.array(
        dp, {0: "sorted", 1: "sorted"}, done,
        en="Base cases: dp[0] = 0, dp[1] = 1. Fill the rest with dp[i] = dp[i-1] + dp[i-2].",
        es="Casos base: dp[0] = 0, dp[1] = 1. Rellenar el resto con dp[i] = dp[i-1] + dp[i-2].",
        line=2, variables={"n": n, "dp[0]": 0, "dp[1]": 1},
    )

    for i in range(2, n + 1):
        yield sb.array(
            dp, {i - 2: "comparing", i - 1: "comparing", i: "current"}, done,
            en=f"Computing dp[{i}] = dp[{i - 1}] + dp[{i - 2}] = {dp[i - 1]} + {dp[i - 2]}",
            es=f"Calculando dp[{i}] = dp[{i - 1}] + dp[{i - 2}] = {dp[i - 1]} + {dp[i - 2]}",
            line=4, variables={"i": i, "dp[i-1]": dp[i - 1], "dp[i-2]": dp[i - 2]},
        )
        dp[i] = dp[i - 1] + dp[i - 2]
        done.append(i)
        yield sb.array(
            dp, {i: "sorted"}, done,
            en=f"dp[{i}] = {dp[i]}",
            es=f"dp[{i}] = {dp[i]}",
            line=4, variables={"i": i, "dp[i]": dp[i]},
        )

    yield sb.array(
        dp, {}, range(n + 1),
        en=f"Fibonacci table complete! F({n}) = {dp[n]}",
        es=f"¡Tabla de Fibonacci completa! F({n}) = {dp[n]}",
        line=5, variables={"n": n, "F(n)": dp[n], "dp": list(dp)},
        final=True,
    )


# ---------------------------------------------------------------------------
# 0/1 Knapsack
# ---------------------------------------------------------------------------
KNAPSACK_PSEUDOCODE: List[str] = [
    "def knapsack(weights, values, capacity):",                         # 0
    "    n = len(weights)",                                             # 1
    "    dp = [[0] * (capacity + 1) for _ in range(n + 1)]",            # 2
    "    for i in range(1, n + 1):",                                    # 3
    "        for w in range(capacity + 1):",                            # 4
    "            if weights[i - 1] <= w:",                              # 5
    "                skip = dp[i - 1][w]",                              # 6
    "                take = dp[i - 1][w - weights[i - 1]] + values[i - 1]",  # 7
    "                dp[i][w] = max(skip, take)",                       # 8
    "            else:",                                                # 9
    "                dp[i][w] = dp[i - 1][w]",                          # 10
    "    return dp[n][capacity]",                                       # 11
]


def knapsack(locale: str = "en") -> Iterator[Step]:
    weights  = [2, 3, 4, 5]
    values   = [3, 4, 5, 6]
    capacity = 8
    n        = len(weights)
    dp       = [[0] * (capacity + 1) for _ in range(n + 1)]
    sb       = StepBuilder(locale)

    yield sb.matrix(
        dp,
        en=f"DP table initialised to 0. Rows = items (0..{n}), columns = capacity (0..{capacity}).",
        es=f"Tabla DP inicializada en 0. Filas = artículos (0..{n}), columnas = capacidad (0..{capacity}).",
        line=2, variables={"weights": list(weights), "values": list(values), "capacity": capacity},
    )

    for i in range(1, n + 1):
        wi, vi = weights[i - 1], values[i - 1]
        for w in range(capacity + 1):
            if wi <= w:
                skip = dp[i - 1][w]
                take = dp[i - 1][w - wi] + vi
                dp[i][w] = max(skip, take)
                h = {cell(i - 1, w): "comparing", cell(i - 1, w - wi): "comparing", cell(i, w): "current"}
                yield sb.matrix(
                    dp, h,
                    en=f"Item {i} (w={wi}, v={vi}), cap={w}: max(skip={skip}, take={take}) = {dp[i][w]}",
                    es=f"Artículo {i} (p={wi}, v={vi}), cap={w}: max(omitir={skip}, tomar={take}) = {dp[i][w]}",
                    line=8, variables={"i": i, "w": w, "skip": skip, "take": take, "dp[i][w]": dp[i][w]},
                )
            else:
                dp[i][w] = dp[i - 1][w]
                yield sb.matrix(
                    dp, {cell(i - 1, w): "comparing", cell(i, w): "current"},
                    en=f"Item {i} (w={wi}) is too heavy for cap={w}. dp[{i}][{w}] = {dp[i][w]}",
                    es=f"Artículo {i} (p={wi}) es muy pesado para cap={w}. dp[{i}][{w}] = {dp[i][w]}",
                    line=10, variables={"i": i, "w": w, "weight": wi, "dp[i][w]": dp[i][w]},
                )

    # traceback: an item was taken wherever the value changed from the row above
    chosen: List[int] = []
    h = {}
    w = capacity
    for i in range(n, 0, -1):
        if dp[i][w] != dp[i - 1][w]:
            h[cell(i, w)] = "path"
            chosen.append(i)
            w -= weights[i - 1]
    chosen.reverse()
    h[cell(n, capacity)] = "found"

    yield sb.matrix(
        dp, h,
        en=f"Knapsack complete! Maximum value: {dp[n][capacity]} (items {chosen})",
        es=f"¡Mochila completada! Valor máximo: {dp[n][capacity]} (artículos {chosen})",
        line=11, variables={"max_value": dp[n][capacity], "items": chosen},
        final=True,
    )


# ---------------------------------------------------------------------------
# Longest Common Subsequence
# ---------------------------------------------------------------------------
LCS_PSEUDOCODE: List[str] = [
    "def lcs(a, b):",                                               # 0
    "    m, n = len(a), len(b)",                                    # 1
    "    dp = [[0] * (n + 1) for _ in range(m + 1)]",               # 2
    "    for i in range(1, m + 1):",                                # 3
    "        for j in range(1, n + 1):",                            # 4
    "            if a[i - 1] == b[j - 1]:",                         # 5
    "                dp[i][j] = dp[i - 1][j - 1] + 1",              # 6
    "            else:",                                            # 7
    "                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])",   # 8
    "    return dp[m][n]",                                          # 9
]


def lcs(locale: str = "en") -> Iterator[Step]:
    a, b = "ABCB", "BDCB"
    m, n = len(a), len(b)
    dp   = [[0] * (n + 1) for _ in range(m + 1)]
    sb   = StepBuilder(locale)

    yield sb.matrix(
        dp,
        en=f'DP table initialised. Comparing "{a}" (rows) with "{b}" (columns).',
        es=f'Tabla DP inicializada. Comparando "{a}" (filas) con "{b}" (columnas).',
        line=2, variables={"a": a, "b": b, "m": m, "n": n},
    )

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            ca, cb = a[i - 1], b[j - 1]
            if ca == cb:
                dp[i][j] = dp[i - 1][j - 1] + 1
                yield sb.matrix(
                    dp, {cell(i - 1, j - 1): "comparing", cell(i, j): "found"},
                    en=f"'{ca}' = '{cb}': match! dp[{i}][{j}] = dp[{i - 1}][{j - 1}] + 1 = {dp[i][j]}",
                    es=f"'{ca}' = '{cb}': ¡coincidencia! dp[{i}][{j}] = dp[{i - 1}][{j - 1}] + 1 = {dp[i][j]}",
                    line=6, variables={"i": i, "j": j, "a[i-1]": ca, "b[j-1]": cb, "dp[i][j]": dp[i][j]},
                )
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
                yield sb.matrix(
                    dp, {cell(i - 1, j): "comparing", cell(i, j - 1): "comparing", cell(i, j): "current"},
                    en=f"'{ca}' ≠ '{cb}': dp[{i}][{j}] = max({dp[i - 1][j]}, {dp[i][j - 1]}) = {dp[i][j]}",
                    es=f"'{ca}' ≠ '{cb}': dp[{i}][{j}] = max({dp[i - 1][j]}, {dp[i][j - 1]}) = {dp[i][j]}",
                    line=8, variables={"i": i, "j": j, "a[i-1]": ca, "b[j-1]": cb, "dp[i][j]": dp[i][j]},
                )

    h = {}
    chars: List[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            h[cell(i, j)] = "path"
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    subsequence = "".join(reversed(chars))
    h[cell(m, n)] = "found"

    yield sb.matrix(
        dp, h,
        en=f'LCS complete! Length {dp[m][n]}, e.g. "{subsequence}"',
        es=f'¡LCS completado! Longitud {dp[m][n]}, por ejemplo "{subsequence}"',
        line=9, variables={"lcs_length": dp[m][n], "lcs": subsequence},
        final=True,
    )
