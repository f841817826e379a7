"""
graphs.py — Graph Simulators
=============================
BFS, DFS, Dijkstra, Prim and topological sort (Kahn) over the fixed
graphs in `graph.graph`.

Node roles used throughout:
  current   – node being expanded right now
  searching – waiting in the queue / stack / heap (the frontier)
  visited   – fully processed
Edge roles:
  checking  – edge being examined
  path      – tree edge (BFS/DFS tree, shortest-path tree, MST)
  visited   – edge consumed by Kahn's algorithm

GraphState.visited is the discovery order, GraphState.order the output
order (processing order, MST join order, topological order).
"""

import heapq
from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional

from graph import sample_graph, weighted_graph, sample_dag
from algorithms.step import Step, StepBuilder


def _paint(
    done: Iterable[str],
    frontier: Iterable[str] = (),
    current: Optional[str] = None,
) -> Dict[str, str]:
    h = {nid: "visited" for nid in done}
    h.update({nid: "searching" for nid in frontier})
    if current is not None:
        h[current] = "current"
    return h


# ---------------------------------------------------------------------------
# Breadth-First Search
# ---------------------------------------------------------------------------
BFS_PSEUDOCODE: List[str] = [
    "def bfs(graph, start):",                       # 0
    "    visited = {start}",                        # 1
    "    queue = deque([start])",                   # 2
    "    while queue:",                             # 3
    "        node = queue.popleft()",               # 4
    "        for nbr in graph.neighbours(node):",   # 5
    "            if nbr not in visited:",           # 6
    "                visited.add(nbr)",             # 7
    "                queue.append(nbr)",            # 8
    "    return visited",                           # 9
]


def bfs(locale: str = "en") -> Iterator[Step]:
    g     = sample_graph()
    start = "0"
    sb    = StepBuilder(locale)

    seen:  List[str] = [start]
    queue = deque([start])
    order: List[str] = []
    tree:  Dict[str, str] = {}

    yield sb.graph(
        g, _paint([], queue),
        en=f"Start BFS at node {start}: mark it visited and enqueue it.",
        es=f"Iniciar BFS en el nodo {start}: marcarlo visitado y encolarlo.",
        visited=seen, frontier=queue, line=2, variables={"queue": list(queue)},
    )

    while queue:
        node = queue.popleft()
        order.append(node)
        yield sb.graph(
            g, _paint(order, queue, node), tree,
            en=f"Dequeue node {node} and explore its neighbours.",
            es=f"Desencolar el nodo {node} y explorar sus vecinos.",
            visited=seen, frontier=queue, order=order, line=4,
            variables={"node": node, "queue": list(queue)},
        )
        for nbr, edge in g.neighbours(node):
            if nbr in seen:
                yield sb.graph(
                    g, _paint(order, queue, node), {**tree, edge.id: "checking"},
                    en=f"Neighbour {nbr} was already visited, skip it.",
                    es=f"El vecino {nbr} ya fue visitado, omitirlo.",
                    visited=seen, frontier=queue, order=order, line=6,
                    variables={"node": node, "nbr": nbr},
                )
                continue
            seen.append(nbr)
            queue.append(nbr)
            tree[edge.id] = "path"
            yield sb.graph(
                g, _paint(order, queue, node), tree,
                en=f"Neighbour {nbr} is new: mark visited and enqueue.",
                es=f"El vecino {nbr} es nuevo: marcarlo visitado y encolarlo.",
                visited=seen, frontier=queue, order=order, line=8,
                variables={"node": node, "nbr": nbr, "queue": list(queue)},
            )

    yield sb.graph(
        g, _paint(order), tree,
        en=f"Queue empty. BFS order: {' → '.join(order)}",
        es=f"Cola vacía. Orden BFS: {' → '.join(order)}",
        visited=seen, order=order, line=9, variables={"order": list(order)},
        final=True,
    )


# ---------------------------------------------------------------------------
# Depth-First Search (recursive)
# ---------------------------------------------------------------------------
DFS_PSEUDOCODE: List[str] = [
    "def dfs(graph, node, visited):",               # 0
    "    visited.add(node)",                        # 1
    "    for nbr in graph.neighbours(node):",       # 2
    "        if nbr not in visited:",               # 3
    "            dfs(graph, nbr, visited)",         # 4
    "    return visited",                           # 5
]


def dfs(locale: str = "en") -> Iterator[Step]:
    g     = sample_graph()
    start = "0"
    sb    = StepBuilder(locale)

    seen:  List[str] = []
    done:  List[str] = []
    stack: List[str] = []
    tree:  Dict[str, str] = {}

    def visit(node: str) -> Iterator[Step]:
        seen.append(node)
        stack.append(node)
        yield sb.graph(
            g, _paint(done, stack[:-1], node), tree,
            en=f"Visit node {node} (call depth {len(stack)}).",
            es=f"Visitar el nodo {node} (profundidad de llamada {len(stack)}).",
            visited=seen, frontier=stack, order=seen, line=1,
            variables={"node": node, "stack": list(stack)},
        )
        for nbr, edge in g.neighbours(node):
            if nbr in seen:
                yield sb.graph(
                    g, _paint(done, stack[:-1], node), {**tree, edge.id: "checking"},
                    en=f"Neighbour {nbr} already visited, skip it.",
                    es=f"El vecino {nbr} ya fue visitado, omitirlo.",
                    visited=seen, frontier=stack, order=seen, line=3,
                    variables={"node": node, "nbr": nbr},
                )
                continue
            tree[edge.id] = "path"
            yield sb.graph(
                g, _paint(done, stack[:-1], node), tree,
                en=f"Neighbour {nbr} is unvisited: go deeper.",
                es=f"El vecino {nbr} no fue visitado: profundizar.",
                visited=seen, frontier=stack, order=seen, line=4,
                variables={"node": node, "nbr": nbr},
            )
            yield from visit(nbr)
        stack.pop()
        done.append(node)
        yield sb.graph(
            g, _paint(done, stack[:-1], stack[-1] if stack else None), tree,
            en=f"Node {node} finished, backtrack.",
            es=f"Nodo {node} terminado, retroceder.",
            visited=seen, frontier=stack, order=seen, line=5,
            variables={"node": node, "stack": list(stack)},
        )

    yield sb.graph(
        g,
        en=f"Start DFS at node {start}.",
        es=f"Iniciar DFS en el nodo {start}.",
        line=0, variables={"start": start},
    )
    yield from visit(start)

    yield sb.graph(
        g, _paint(done), tree,
        en=f"DFS complete. Visit order: {' → '.join(seen)}",
        es=f"DFS completo. Orden de visita: {' → '.join(seen)}",
        visited=seen, order=seen, line=5, variables={"order": list(seen)},
        final=True,
    )


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
DIJKSTRA_PSEUDOCODE: List[str] = [
    "def dijkstra(graph, source):",                         # 0
    "    dist = {v: inf for v in graph}; dist[source] = 0", # 1
    "    heap = [(0, source)]",                             # 2
    "    while heap:",                                      # 3
    "        d, u = heappop(heap)",                         # 4
    "        if d > dist[u]: continue",                     # 5
    "        for v, w in graph.neighbours(u):",             # 6
    "            if dist[u] + w < dist[v]:",                # 7
    "                dist[v] = dist[u] + w",                # 8
    "                heappush(heap, (dist[v], v))",         # 9
    "    return dist",                                      # 10
]


def dijkstra(locale: str = "en") -> Iterator[Step]:
    INF    = float("inf")
    g      = weighted_graph()
    source = "0"
    sb     = StepBuilder(locale)

    dist:    Dict[str, float] = {nid: INF for nid in g.nodes}
    parent:  Dict[str, str]   = {}
    settled: List[str]        = []
    dist[source] = 0
    heap = [(0, source)]

    def frontier() -> List[str]:
        return sorted({v for _, v in heap if v not in settled})

    def tree() -> Dict[str, str]:
        return {eid: "path" for eid in parent.values()}

    yield sb.graph(
        g, _paint([], [source]),
        en=f"All distances start at ∞ except the source {source} = 0.",
        es=f"Todas las distancias comienzan en ∞ excepto el origen {source} = 0.",
        frontier=[source], distances=dist, line=1, variables={"source": source},
    )

    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            yield sb.graph(
                g, _paint(settled, frontier()), tree(),
                en=f"Pop ({d}, {u}): stale entry, {u} already has distance {dist[u]}. Skip.",
                es=f"Sacar ({d}, {u}): entrada obsoleta, {u} ya tiene distancia {dist[u]}. Omitir.",
                visited=settled, frontier=frontier(), distances=dist, order=settled, line=5,
                variables={"d": d, "u": u},
            )
            continue

        settled.append(u)
        yield sb.graph(
            g, _paint(settled, frontier(), u), tree(),
            en=f"Pop {u} with distance {d}: it is now final.",
            es=f"Sacar {u} con distancia {d}: ahora es definitiva.",
            visited=settled, frontier=frontier(), distances=dist, order=settled, line=4,
            variables={"d": d, "u": u},
        )

        for v, edge in g.neighbours(u):
            if v in settled:
                continue
            cand = dist[u] + edge.weight
            if cand < dist[v]:
                old = "∞" if dist[v] == INF else dist[v]
                dist[v] = cand
                parent[v] = edge.id
                heapq.heappush(heap, (cand, v))
                en = f"Relax {u}–{v}: {dist[u]} + {edge.weight} = {cand} < {old}. Update dist[{v}]."
                es = f"Relajar {u}–{v}: {dist[u]} + {edge.weight} = {cand} < {old}. Actualizar dist[{v}]."
                line = 8
            else:
                en = f"Edge {u}–{v}: {dist[u]} + {edge.weight} = {cand} ≥ {dist[v]}. No improvement."
                es = f"Arista {u}–{v}: {dist[u]} + {edge.weight} = {cand} ≥ {dist[v]}. Sin mejora."
                line = 7
            yield sb.graph(
                g, _paint(settled, frontier(), u), {**tree(), edge.id: "checking"},
                en=en, es=es,
                visited=settled, frontier=frontier(), distances=dist, order=settled, line=line,
                variables={"u": u, "v": v, "w": edge.weight, "candidate": cand},
            )

    summary = ", ".join(f"{nid}={dist[nid]}" for nid in g.nodes)
    yield sb.graph(
        g, _paint(settled), tree(),
        en=f"Heap empty. Shortest distances from {source}: {summary}",
        es=f"Heap vacío. Distancias mínimas desde {source}: {summary}",
        visited=settled, distances=dist, order=settled, line=10,
        variables={"dist": {k: v for k, v in dist.items()}},
        final=True,
    )


# ---------------------------------------------------------------------------
# Prim's Minimum Spanning Tree
# ---------------------------------------------------------------------------
PRIM_PSEUDOCODE: List[str] = [
    "def prim(graph, start):",                                      # 0
    "    in_tree = {start}",                                        # 1
    "    heap = [(w, start, v) for v, w in graph.neighbours(start)]",  # 2
    "    total = 0",                                                # 3
    "    while heap and len(in_tree) < len(graph):",                # 4
    "        w, u, v = heappop(heap)",                              # 5
    "        if v in in_tree: continue",                            # 6
    "        in_tree.add(v); total += w",                           # 7
    "        for x, wx in graph.neighbours(v):",                    # 8
    "            if x not in in_tree:",                             # 9
    "                heappush(heap, (wx, v, x))",                   # 10
    "    return total",                                             # 11
]


def prim(locale: str = "en") -> Iterator[Step]:
    g     = weighted_graph()
    start = "0"
    sb    = StepBuilder(locale)

    in_tree: List[str]      = [start]
    mst:     Dict[str, str] = {}
    total = 0
    heap = [(e.weight, start, v) for v, e in g.neighbours(start)]
    heapq.heapify(heap)

    def frontier() -> List[str]:
        return sorted({v for _, _, v in heap if v not in in_tree})

    yield sb.graph(
        g, _paint([], frontier(), start),
        en=f"Start the tree at node {start}; its edges become candidates.",
        es=f"Iniciar el árbol en el nodo {start}; sus aristas pasan a ser candidatas.",
        visited=in_tree, frontier=frontier(), order=in_tree, line=2,
        variables={"total": total},
    )

    while heap and len(in_tree) < len(g.nodes):
        w, u, v = heapq.heappop(heap)
        edge = g.get_edge_between(u, v)
        if v in in_tree:
            yield sb.graph(
                g, _paint(in_tree, frontier()), {**mst, edge.id: "checking"},
                en=f"Cheapest candidate {u}–{v} (w={w}) would close a cycle. Skip.",
                es=f"La candidata más barata {u}–{v} (w={w}) cerraría un ciclo. Omitir.",
                visited=in_tree, frontier=frontier(), order=in_tree, line=6,
                variables={"u": u, "v": v, "w": w, "total": total},
            )
            continue

        in_tree.append(v)
        total += w
        mst[edge.id] = "path"
        for x, e in g.neighbours(v):
            if x not in in_tree:
                heapq.heappush(heap, (e.weight, v, x))
        yield sb.graph(
            g, _paint(in_tree, frontier(), v), mst,
            en=f"Add edge {u}–{v} (w={w}) to the tree. Total cost = {total}.",
            es=f"Agregar la arista {u}–{v} (w={w}) al árbol. Costo total = {total}.",
            visited=in_tree, frontier=frontier(), order=in_tree, line=7,
            variables={"u": u, "v": v, "w": w, "total": total},
        )

    yield sb.graph(
        g, _paint(in_tree), mst,
        en=f"Minimum spanning tree complete: {len(mst)} edges, total cost {total}.",
        es=f"Árbol de expansión mínima completo: {len(mst)} aristas, costo total {total}.",
        visited=in_tree, order=in_tree, line=11, variables={"total": total},
        final=True,
    )


# ---------------------------------------------------------------------------
# Topological Sort (Kahn)
# ---------------------------------------------------------------------------
TOPOLOGICAL_PSEUDOCODE: List[str] = [
    "def topological_sort(graph):",                             # 0
    "    indeg = graph.in_degrees()",                           # 1
    "    queue = deque(v for v in graph if indeg[v] == 0)",     # 2
    "    order = []",                                           # 3
    "    while queue:",                                         # 4
    "        u = queue.popleft()",                              # 5
    "        order.append(u)",                                  # 6
    "        for v in graph.neighbours(u):",                    # 7
    "            indeg[v] -= 1",                                # 8
    "            if indeg[v] == 0:",                            # 9
    "                queue.append(v)",                          # 10
    "    return order",                                         # 11
]


def topological_sort(locale: str = "en") -> Iterator[Step]:
    g     = sample_dag()
    sb    = StepBuilder(locale)
    indeg = g.in_degrees()
    queue = deque(nid for nid in g.nodes if indeg[nid] == 0)
    order: List[str] = []
    used:  Dict[str, str] = {}

    yield sb.graph(
        g, _paint([], queue),
        en=f"Compute in-degrees. Nodes with no incoming edge: {', '.join(queue)}",
        es=f"Calcular grados de entrada. Nodos sin aristas entrantes: {', '.join(queue)}",
        frontier=queue, line=2, variables={"in_degree": dict(indeg), "queue": list(queue)},
    )

    while queue:
        u = queue.popleft()
        order.append(u)
        yield sb.graph(
            g, _paint(order, queue, u), used,
            en=f"Take {u} from the queue and append it to the order.",
            es=f"Tomar {u} de la cola y agregarlo al orden.",
            visited=order, frontier=queue, order=order, line=6,
            variables={"u": u, "in_degree": dict(indeg), "queue": list(queue)},
        )
        for v, edge in g.neighbours(u):
            indeg[v] -= 1
            if indeg[v] == 0:
                queue.append(v)
                en = f"Edge {u}→{v}: in-degree of {v} drops to 0, enqueue it."
                es = f"Arista {u}→{v}: el grado de entrada de {v} baja a 0, encolarlo."
                line = 10
            else:
                en = f"Edge {u}→{v}: in-degree of {v} drops to {indeg[v]}."
                es = f"Arista {u}→{v}: el grado de entrada de {v} baja a {indeg[v]}."
                line = 8
            yield sb.graph(
                g, _paint(order, queue, u), {**used, edge.id: "checking"},
                en=en, es=es,
                visited=order, frontier=queue, order=order, line=line,
                variables={"u": u, "v": v, "in_degree": dict(indeg)},
            )
            used[edge.id] = "visited"

    yield sb.graph(
        g, _paint(order), used,
        en=f"Queue empty. Topological order: {' → '.join(order)}",
        es=f"Cola vacía. Orden topológico: {' → '.join(order)}",
        visited=order, order=order, line=11, variables={"order": list(order)},
        final=True,
    )
