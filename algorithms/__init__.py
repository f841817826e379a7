"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a read-only mapping (MappingProxyType) built once at import:
    {
        "bubble-sort": Algorithm(id, name, category, difficulty, visualization, fn, …),
        …
    }

Algorithm is a frozen dataclass.  The engine and the HTTP layer both
consume it, so adding an algorithm is: write the generator, add one
entry here.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from algorithms.i18n import resolve_locale
from algorithms.step import Step

# ---------------------------------------------------------------------------
# Import all simulator modules
# ---------------------------------------------------------------------------
from algorithms import concepts as _concepts
from algorithms import sorting as _sorting
from algorithms import searching as _searching
from algorithms import graphs as _graphs
from algorithms import dynamic_programming as _dp
from algorithms import backtracking as _bt
from algorithms import divide_and_conquer as _dc


log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Categories: fixed display order
# ---------------------------------------------------------------------------
CONCEPTS            = "Concepts"
SORTING             = "Sorting"
SEARCHING           = "Searching"
GRAPHS              = "Graphs"
DYNAMIC_PROGRAMMING = "Dynamic Programming"
BACKTRACKING        = "Backtracking"
DIVIDE_AND_CONQUER  = "Divide and Conquer"

CATEGORIES: Tuple[str, ...] = (
    CONCEPTS, SORTING, SEARCHING, GRAPHS,
    DYNAMIC_PROGRAMMING, BACKTRACKING, DIVIDE_AND_CONQUER,
)

DIFFICULTIES: Tuple[str, ...] = ("easy", "intermediate", "advanced")

Simulator = Callable[[str], Iterator[Step]]


# ---------------------------------------------------------------------------
# Algorithm: metadata card for each simulator
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Algorithm:
    id:               str                   # registry key, e.g. "bubble-sort"
    name:             str                   # human label, e.g. "Bubble Sort"
    category:         str                   # one of CATEGORIES
    difficulty:       str                   # one of DIFFICULTIES
    visualization:    str                   # "array" | "matrix" | "graph" | "concept"
    fn:               Simulator             # the generator function
    pseudocode:       Tuple[str, ...]       # listing lines; Step.code_line indexes this
    description:      str = ""              # explanation for the info panel
    complexity_time:  str = ""              # e.g. "O(n log n)"
    complexity_space: str = ""              # e.g. "O(n)"

    @property
    def code(self) -> str:
        return "\n".join(self.pseudocode)

    def generate_steps(self, locale: Optional[str] = None) -> Tuple[Step, ...]:
        """Run the simulator to completion and return its trace."""
        trace = tuple(self.fn(resolve_locale(locale)))
        log.info("Generated %d steps for %s (%s)", len(trace), self.id, resolve_locale(locale))
        return trace

    def summary(self) -> dict:
        """Short JSON-ready card (no listing, no description)."""
        return {
            "id":            self.id,
            "name":          self.name,
            "category":      self.category,
            "difficulty":    self.difficulty,
            "visualization": self.visualization,
        }

    def to_dict(self) -> dict:
        return {
            **self.summary(),
            "code":             self.code,
            "description":      self.description,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
        }


def _algo(id, name, category, difficulty, visualization, fn, pseudocode, description,
          time="", space="") -> Algorithm:
    return Algorithm(
        id=id, name=name, category=category, difficulty=difficulty,
        visualization=visualization, fn=fn, pseudocode=tuple(pseudocode),
        description=description, complexity_time=time, complexity_space=space,
    )


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_ALGORITHMS: List[Algorithm] = [
    # -- Concepts --
    _algo(
        "big-o-notation", "Big O Notation", CONCEPTS, "easy", "concept",
        _concepts.big_o_notation, _concepts.BIG_O_PSEUDOCODE,
        "Big O describes how running time grows with input size, ignoring constants. "
        "The chart grows n step by step so O(1), O(log n), O(n), O(n log n) and O(n²) "
        "can be compared side by side.",
    ),
    _algo(
        "recursion", "Recursion", CONCEPTS, "easy", "concept",
        _concepts.recursion, _concepts.RECURSION_PSEUDOCODE,
        "A recursive function calls itself on a smaller input until it reaches a base case. "
        "factorial(5) pushes one frame per call, then unwinds as results return.",
        "O(n)", "O(n)",
    ),
    _algo(
        "stacks-queues", "Stacks & Queues", CONCEPTS, "easy", "concept",
        _concepts.stacks_queues, _concepts.STACKS_QUEUES_PSEUDOCODE,
        "A stack removes the newest element first (LIFO); a queue removes the oldest (FIFO). "
        "Both support O(1) insertion and removal.",
        "O(1)", "O(n)",
    ),

    # -- Sorting --
    _algo(
        "bubble-sort", "Bubble Sort", SORTING, "easy", "array",
        _sorting.bubble_sort, _sorting.BUBBLE_PSEUDOCODE,
        "Repeatedly swaps adjacent out-of-order pairs. Each pass bubbles the largest "
        "remaining value to the end; a pass with no swaps ends the sort early.",
        "O(n²)", "O(1)",
    ),
    _algo(
        "selection-sort", "Selection Sort", SORTING, "easy", "array",
        _sorting.selection_sort, _sorting.SELECTION_PSEUDOCODE,
        "Finds the minimum of the unsorted part and swaps it to the front, one position per pass.",
        "O(n²)", "O(1)",
    ),
    _algo(
        "insertion-sort", "Insertion Sort", SORTING, "easy", "array",
        _sorting.insertion_sort, _sorting.INSERTION_PSEUDOCODE,
        "Takes each element in turn and shifts it left into its place within the sorted prefix. "
        "Fast on nearly sorted data.",
        "O(n²)", "O(1)",
    ),
    _algo(
        "quick-sort", "Quick Sort", SORTING, "intermediate", "array",
        _sorting.quick_sort, _sorting.QUICK_PSEUDOCODE,
        "Partitions around a pivot (Lomuto scheme, last element) so smaller values land left, "
        "then sorts both sides recursively.",
        "O(n log n) average, O(n²) worst", "O(log n)",
    ),
    _algo(
        "merge-sort", "Merge Sort", SORTING, "intermediate", "array",
        _sorting.merge_sort, _sorting.MERGE_PSEUDOCODE,
        "Splits the array in halves, sorts each half, then merges the two sorted halves.",
        "O(n log n)", "O(n)",
    ),
    _algo(
        "heap-sort", "Heap Sort", SORTING, "advanced", "array",
        _sorting.heap_sort, _sorting.HEAP_PSEUDOCODE,
        "Builds a max-heap, then repeatedly swaps the root to the end and restores the heap.",
        "O(n log n)", "O(1)",
    ),
    _algo(
        "counting-sort", "Counting Sort", SORTING, "intermediate", "array",
        _sorting.counting_sort, _sorting.COUNTING_PSEUDOCODE,
        "Counts occurrences of each value, then rewrites the array value by value. "
        "No comparisons; works for small integer ranges.",
        "O(n + k)", "O(k)",
    ),
    _algo(
        "radix-sort", "Radix Sort", SORTING, "advanced", "array",
        _sorting.radix_sort, _sorting.RADIX_PSEUDOCODE,
        "Distributes values into digit buckets, least significant digit first, and collects "
        "them back after each pass.",
        "O(d · (n + b))", "O(n + b)",
    ),
    _algo(
        "shell-sort", "Shell Sort", SORTING, "intermediate", "array",
        _sorting.shell_sort, _sorting.SHELL_PSEUDOCODE,
        "Insertion sort over elements a gap apart, halving the gap until it reaches 1.",
        "O(n^1.5) typical", "O(1)",
    ),

    # -- Searching --
    _algo(
        "binary-search", "Binary Search", SEARCHING, "easy", "array",
        _searching.binary_search, _searching.BINARY_PSEUDOCODE,
        "Halves a sorted search range on every probe by comparing the middle element "
        "with the target.",
        "O(log n)", "O(1)",
    ),
    _algo(
        "linear-search", "Linear Search", SEARCHING, "easy", "array",
        _searching.linear_search, _searching.LINEAR_PSEUDOCODE,
        "Checks every element from left to right. Works on unsorted data.",
        "O(n)", "O(1)",
    ),
    _algo(
        "jump-search", "Jump Search", SEARCHING, "intermediate", "array",
        _searching.jump_search, _searching.JUMP_PSEUDOCODE,
        "Jumps ahead in blocks of √n until the target is passed, then scans that block linearly.",
        "O(√n)", "O(1)",
    ),
    _algo(
        "interpolation-search", "Interpolation Search", SEARCHING, "intermediate", "array",
        _searching.interpolation_search, _searching.INTERPOLATION_PSEUDOCODE,
        "Estimates the target's position from its value, assuming evenly spread sorted data.",
        "O(log log n) average, O(n) worst", "O(1)",
    ),

    # -- Graphs --
    _algo(
        "bfs", "Breadth-First Search", GRAPHS, "intermediate", "graph",
        _graphs.bfs, _graphs.BFS_PSEUDOCODE,
        "Explores the graph layer by layer with a queue. Finds shortest paths by hop count.",
        "O(V + E)", "O(V)",
    ),
    _algo(
        "dfs", "Depth-First Search", GRAPHS, "intermediate", "graph",
        _graphs.dfs, _graphs.DFS_PSEUDOCODE,
        "Goes as deep as possible along each branch before backtracking.",
        "O(V + E)", "O(V)",
    ),
    _algo(
        "dijkstra", "Dijkstra's Algorithm", GRAPHS, "advanced", "graph",
        _graphs.dijkstra, _graphs.DIJKSTRA_PSEUDOCODE,
        "Settles the closest unsettled node with a priority queue and relaxes its edges. "
        "Optimal for non-negative weights.",
        "O((V + E) log V)", "O(V)",
    ),
    _algo(
        "prim", "Prim's Algorithm", GRAPHS, "advanced", "graph",
        _graphs.prim, _graphs.PRIM_PSEUDOCODE,
        "Grows a minimum spanning tree from one node by always adding the cheapest edge "
        "leaving the tree.",
        "O(E log V)", "O(V + E)",
    ),
    _algo(
        "topological-sort", "Topological Sort", GRAPHS, "intermediate", "graph",
        _graphs.topological_sort, _graphs.TOPOLOGICAL_PSEUDOCODE,
        "Kahn's algorithm: repeatedly output a node with no remaining incoming edges.",
        "O(V + E)", "O(V)",
    ),

    # -- Dynamic Programming --
    _algo(
        "fibonacci-dp", "Fibonacci DP", DYNAMIC_PROGRAMMING, "intermediate", "array",
        _dp.fibonacci_dp, _dp.FIBONACCI_PSEUDOCODE,
        "Bottom-up tabulation: each dp[i] is computed once from dp[i-1] and dp[i-2].",
        "O(n)", "O(n)",
    ),
    _algo(
        "knapsack", "Knapsack 0/1", DYNAMIC_PROGRAMMING, "advanced", "matrix",
        _dp.knapsack, _dp.KNAPSACK_PSEUDOCODE,
        "dp[i][w] is the best value using the first i items within capacity w: either skip "
        "item i or take it. Items: weights [2, 3, 4, 5], values [3, 4, 5, 6], capacity 8.",
        "O(n · W)", "O(n · W)",
    ),
    _algo(
        "lcs", "Longest Common Subsequence", DYNAMIC_PROGRAMMING, "advanced", "matrix",
        _dp.lcs, _dp.LCS_PSEUDOCODE,
        "dp[i][j] is the LCS length of the first i and j characters. Matching characters extend "
        "the diagonal; otherwise take the better neighbour. Strings: \"ABCB\" and \"BDCB\".",
        "O(m · n)", "O(m · n)",
    ),

    # -- Backtracking --
    _algo(
        "n-queens", "N-Queens", BACKTRACKING, "advanced", "matrix",
        _bt.n_queens, _bt.N_QUEENS_PSEUDOCODE,
        "Places one queen per row, backing up whenever a row has no safe column.",
        "O(n!)", "O(n)",
    ),
    _algo(
        "sudoku", "Sudoku Solver", BACKTRACKING, "advanced", "matrix",
        _bt.sudoku, _bt.SUDOKU_PSEUDOCODE,
        "Fills the first empty cell with the first digit that breaks no row, column or box "
        "rule, undoing choices that lead nowhere.",
        "O(k^m)", "O(m)",
    ),
    _algo(
        "maze", "Maze Pathfinding", BACKTRACKING, "intermediate", "matrix",
        _bt.maze, _bt.MAZE_PSEUDOCODE,
        "Depth-first walk from S to E that retreats from dead ends.",
        "O(rows · cols)", "O(rows · cols)",
    ),

    # -- Divide and Conquer --
    _algo(
        "tower-of-hanoi", "Tower of Hanoi", DIVIDE_AND_CONQUER, "intermediate", "matrix",
        _dc.tower_of_hanoi, _dc.HANOI_PSEUDOCODE,
        "Move n-1 disks out of the way, move the largest disk, then move the n-1 disks back "
        "on top of it.",
        "O(2^n)", "O(n)",
    ),
]

REGISTRY: Mapping[str, Algorithm] = MappingProxyType({a.id: a for a in _ALGORITHMS})


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(algorithm_id: str) -> Optional[Algorithm]:
    """Return the Algorithm with this exact id, or None."""
    return REGISTRY.get(algorithm_id)


def list_algorithms() -> List[Algorithm]:
    """Return all registered algorithms in declaration order."""
    return list(REGISTRY.values())


def list_by_category() -> Dict[str, List[Algorithm]]:
    """{category: [Algorithm, …]} in CATEGORIES order."""
    grouped: Dict[str, List[Algorithm]] = {c: [] for c in CATEGORIES}
    for algo in REGISTRY.values():
        grouped[algo.category].append(algo)
    return grouped


__all__ = [
    "Algorithm",
    "REGISTRY",
    "CATEGORIES",
    "DIFFICULTIES",
    "get_algorithm",
    "list_algorithms",
    "list_by_category",
]
