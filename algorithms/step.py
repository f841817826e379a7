"""
step.py — Algorithm Step Snapshot
==================================
Every simulator is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the presentation
layer needs to render one frame of an algorithm:

    • The data being worked on (array bars, table cells, graph, concept)
    • Which indices / cells / nodes carry a highlight role right now
    • Which indices are finalized (never touched again)
    • Which line of the source listing is executing
    • A plain-language explanation in the requested locale

Design decisions:
  - Step is a tagged union: `kind` selects the payload type held in
    `data` (ArrayState, MatrixState, GraphState, or one of the concept
    states).  The renderer switches on `kind` alone.
  - Highlights are sparse dicts: absence means "no highlight".
  - Every collection is copied when the Step is built, so a simulator
    may keep mutating its working array without corrupting Steps it
    already yielded.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from algorithms.i18n import pick, resolve_locale


Number = Union[int, float]
Cell   = Union[int, float, str]

# ---------------------------------------------------------------------------
# Visualization kinds: the discriminant values
# ---------------------------------------------------------------------------
ARRAY   = "array"
MATRIX  = "matrix"
GRAPH   = "graph"
CONCEPT = "concept"

KINDS: Tuple[str, ...] = (ARRAY, MATRIX, GRAPH, CONCEPT)


# ---------------------------------------------------------------------------
# Highlight roles: closed vocabulary, mapped to colours by ui.palette
# ---------------------------------------------------------------------------
class Highlight(Enum):
    COMPARING = "comparing"
    SWAPPED   = "swapped"
    SELECTED  = "selected"
    SORTED    = "sorted"
    PIVOT     = "pivot"
    FOUND     = "found"
    CURRENT   = "current"
    SEARCHING = "searching"
    LEFT      = "left"
    RIGHT     = "right"
    MERGED    = "merged"
    MINIMUM   = "minimum"
    PLACED    = "placed"
    CONFLICT  = "conflict"
    CHECKING  = "checking"
    WALL      = "wall"
    PATH      = "path"
    START     = "start"
    END       = "end"
    GIVEN     = "given"
    ACTIVE    = "active"
    VISITED   = "visited"


HIGHLIGHT_ROLES = frozenset(h.value for h in Highlight)


class TraceError(ValueError):
    """A trace violates the Step invariants (a simulator bug)."""


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ArrayState:
    """
    Attributes:
        values     : Array contents at this instant.
        highlights : {index: role}, only annotated indices.
        sorted     : Finalized indices, ascending.
        aux        : Auxiliary count array (counting sort).
        buckets    : Digit buckets (radix sort), one tuple per digit 0-9.
    """

    values:     Tuple[Number, ...]              = ()
    highlights: Dict[int, str]                  = field(default_factory=dict)
    sorted:     Tuple[int, ...]                 = ()
    aux:        Tuple[int, ...]                 = ()
    buckets:    Tuple[Tuple[int, ...], ...]     = ()


@dataclass(frozen=True)
class MatrixState:
    """Row-major table; highlight keys are "row,col" strings."""

    rows:       int                             = 0
    cols:       int                             = 0
    values:     Tuple[Tuple[Cell, ...], ...]    = ()
    highlights: Dict[str, str]                  = field(default_factory=dict)


@dataclass(frozen=True)
class GraphNodeView:
    id:    str
    label: str
    x:     float
    y:     float


@dataclass(frozen=True)
class GraphEdgeView:
    id:     str
    source: str
    target: str
    weight: float = 1.0


@dataclass(frozen=True)
class GraphState:
    """
    Attributes:
        nodes           : Fixed layout of the graph (same in every Step).
        edges           : Fixed edge list.
        directed        : Draw arrows?
        node_highlights : {node_id: role}
        edge_highlights : {edge_id: role}
        visited         : Node ids in discovery / finalization order.
        frontier        : Node ids currently waiting in the queue / stack / heap.
        distances       : {node_id: best-known cost}; None stands for ∞.
        order           : Output sequence (topological order, MST join order).
    """

    nodes:           Tuple[GraphNodeView, ...]   = ()
    edges:           Tuple[GraphEdgeView, ...]   = ()
    directed:        bool                        = False
    node_highlights: Dict[str, str]              = field(default_factory=dict)
    edge_highlights: Dict[str, str]              = field(default_factory=dict)
    visited:         Tuple[str, ...]             = ()
    frontier:        Tuple[str, ...]             = ()
    distances:       Dict[str, Optional[Number]] = field(default_factory=dict)
    order:           Tuple[str, ...]             = ()


@dataclass(frozen=True)
class BigOCurve:
    name:        str
    color:       str
    visible:     bool = False
    highlighted: bool = False


@dataclass(frozen=True)
class BigOState:
    curves: Tuple[BigOCurve, ...] = ()
    max_n:  int                   = 10
    type:   str                   = "bigO"


@dataclass(frozen=True)
class CallFrame:
    label:  str
    detail: str = ""
    state:  str = "active"      # active | waiting | base | resolved


@dataclass(frozen=True)
class CallStackState:
    frames: Tuple[CallFrame, ...] = ()
    type:   str                   = "callStack"


@dataclass(frozen=True)
class ContainerItem:
    value: int
    state: str = "normal"       # normal | entering | leaving


@dataclass(frozen=True)
class StackQueueState:
    structure:     str                        = "stack"     # stack | queue
    items:         Tuple[ContainerItem, ...]  = ()
    operation:     Optional[str]              = None
    removed_value: Optional[int]              = None
    type:          str                        = "stackQueue"


ConceptState = Union[BigOState, CallStackState, StackQueueState]
Payload      = Union[ArrayState, MatrixState, GraphState, ConceptState]

CONCEPT_TYPES: Dict[str, type] = {
    "bigO":       BigOState,
    "callStack":  CallStackState,
    "stackQueue": StackQueueState,
}

_PAYLOAD_TYPES: Dict[str, Tuple[type, ...]] = {
    ARRAY:   (ArrayState,),
    MATRIX:  (MatrixState,),
    GRAPH:   (GraphState,),
    CONCEPT: tuple(CONCEPT_TYPES.values()),
}


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind        : Discriminant: "array" | "matrix" | "graph" | "concept".
        data        : Payload matching `kind`.
        step_number : 0-based index of this step in the trace.
        description : Human-readable text for the requested locale.
        code_line   : 0-based index into the algorithm's source listing.
        variables   : Named values shown in the variables panel.
        is_final    : True on the very last step (terminal outcome).
    """

    kind:        str
    data:        Payload
    step_number: int                 = 0
    description: str                 = ""
    code_line:   Optional[int]       = None
    variables:   Dict[str, Any]      = field(default_factory=dict)
    is_final:    bool                = False

    # -- typed accessors (None when the tag does not match) --
    @property
    def array(self) -> Optional[ArrayState]:
        return self.data if self.kind == ARRAY else None

    @property
    def matrix(self) -> Optional[MatrixState]:
        return self.data if self.kind == MATRIX else None

    @property
    def graph(self) -> Optional[GraphState]:
        return self.data if self.kind == GRAPH else None

    @property
    def concept(self) -> Optional[ConceptState]:
        return self.data if self.kind == CONCEPT else None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; the payload sits under a key named after `kind`."""
        return {
            "step_number": self.step_number,
            "kind":        self.kind,
            self.kind:     asdict(self.data),
            "description": self.description,
            "code_line":   self.code_line,
            "variables":   dict(self.variables),
            "is_final":    self.is_final,
        }


def cell(row: int, col: int) -> str:
    """Matrix highlight key for (row, col)."""
    return f"{row},{col}"


# ---------------------------------------------------------------------------
# Convenience builder so simulators don't have to spell out every payload
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Numbers steps, resolves the bilingual description, and snapshot-copies
    everything handed to it.

    Usage inside a simulator generator:
        sb = StepBuilder(locale)
        yield sb.array(arr, {j: "comparing", j + 1: "comparing"},
                       en=f"Compare {arr[j]} and {arr[j+1]}",
                       es=f"Comparar {arr[j]} y {arr[j+1]}",
                       line=3, variables={"j": j})
    """

    def __init__(self, locale: Optional[str] = None):
        self.locale  = resolve_locale(locale)
        self.step_no = 0

    def text(self, en: str, es: str) -> str:
        return pick(self.locale, en, es)

    # -- payload builders --
    def array(
        self,
        values: Sequence[Number],
        highlights: Optional[Mapping[int, str]] = None,
        done: Iterable[int] = (),
        *,
        en: str,
        es: str,
        line: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
        aux: Sequence[int] = (),
        buckets: Sequence[Sequence[int]] = (),
        final: bool = False,
    ) -> Step:
        data = ArrayState(
            values=tuple(values),
            highlights=dict(highlights or {}),
            sorted=tuple(sorted(set(done))),
            aux=tuple(aux),
            buckets=tuple(tuple(b) for b in buckets),
        )
        return self._emit(ARRAY, data, en, es, line, variables, final)

    def matrix(
        self,
        grid: Sequence[Sequence[Cell]],
        highlights: Optional[Mapping[str, str]] = None,
        *,
        en: str,
        es: str,
        line: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
        final: bool = False,
    ) -> Step:
        values = tuple(tuple(row) for row in grid)
        data = MatrixState(
            rows=len(values),
            cols=len(values[0]) if values else 0,
            values=values,
            highlights=dict(highlights or {}),
        )
        return self._emit(MATRIX, data, en, es, line, variables, final)

    def graph(
        self,
        graph,
        node_highlights: Optional[Mapping[str, str]] = None,
        edge_highlights: Optional[Mapping[str, str]] = None,
        *,
        en: str,
        es: str,
        visited: Iterable[str] = (),
        frontier: Iterable[str] = (),
        distances: Optional[Mapping[str, Number]] = None,
        order: Iterable[str] = (),
        line: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
        final: bool = False,
    ) -> Step:
        inf = float("inf")
        data = GraphState(
            nodes=tuple(
                GraphNodeView(n.id, n.label, n.x, n.y) for n in graph.nodes.values()
            ),
            edges=tuple(
                GraphEdgeView(e.id, e.source, e.target, e.weight) for e in graph.edges.values()
            ),
            directed=graph.directed,
            node_highlights=dict(node_highlights or {}),
            edge_highlights=dict(edge_highlights or {}),
            visited=tuple(visited),
            frontier=tuple(frontier),
            distances={
                k: (None if v == inf else v) for k, v in (distances or {}).items()
            },
            order=tuple(order),
        )
        return self._emit(GRAPH, data, en, es, line, variables, final)

    def concept(
        self,
        state: ConceptState,
        *,
        en: str,
        es: str,
        line: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
        final: bool = False,
    ) -> Step:
        # concept states are built from immutable tuples already
        return self._emit(CONCEPT, state, en, es, line, variables, final)

    def _emit(self, kind, data, en, es, line, variables, final) -> Step:
        step = Step(
            kind=kind,
            data=data,
            step_number=self.step_no,
            description=self.text(en, es),
            code_line=line,
            variables=dict(variables or {}),
            is_final=final,
        )
        self.step_no += 1
        return step


# ---------------------------------------------------------------------------
# Invariant checks
# ---------------------------------------------------------------------------
def validate_trace(trace: Sequence[Step]) -> None:
    """
    Raise TraceError on the first violated invariant:
      - trace non-empty, only the last step is final
      - payload type matches `kind`, roles come from HIGHLIGHT_ROLES
      - every highlight key is inside the step's own array / matrix / graph
      - finalized index sets never shrink
    """
    if not trace:
        raise TraceError("trace is empty")

    prev_sorted: Optional[set] = None
    for i, step in enumerate(trace):
        if step.kind not in KINDS:
            raise TraceError(f"step {i}: unknown kind {step.kind!r}")
        if not isinstance(step.data, _PAYLOAD_TYPES[step.kind]):
            raise TraceError(f"step {i}: payload {type(step.data).__name__} does not match kind {step.kind!r}")
        if step.is_final != (i == len(trace) - 1):
            raise TraceError(f"step {i}: is_final={step.is_final} out of place")
        if not step.description:
            raise TraceError(f"step {i}: missing description")

        if step.kind == ARRAY:
            _check_array(i, step.data)
            cur = set(step.data.sorted)
            if prev_sorted is not None and not prev_sorted <= cur:
                raise TraceError(f"step {i}: finalized indices shrank {sorted(prev_sorted - cur)}")
            prev_sorted = cur
        elif step.kind == MATRIX:
            _check_matrix(i, step.data)
        elif step.kind == GRAPH:
            _check_graph(i, step.data)


def _check_roles(i: int, roles: Iterable[str]) -> None:
    for role in roles:
        if role not in HIGHLIGHT_ROLES:
            raise TraceError(f"step {i}: unknown highlight role {role!r}")


def _check_array(i: int, data: ArrayState) -> None:
    n = len(data.values)
    for idx in list(data.highlights) + list(data.sorted):
        if not (isinstance(idx, int) and 0 <= idx < n):
            raise TraceError(f"step {i}: index {idx!r} outside array of length {n}")
    _check_roles(i, data.highlights.values())


def _check_matrix(i: int, data: MatrixState) -> None:
    if data.rows <= 0 or data.cols <= 0:
        raise TraceError(f"step {i}: matrix must have positive dimensions")
    if len(data.values) != data.rows or any(len(r) != data.cols for r in data.values):
        raise TraceError(f"step {i}: matrix values do not match {data.rows}x{data.cols}")
    for key in data.highlights:
        try:
            r, c = (int(part) for part in key.split(","))
        except ValueError:
            raise TraceError(f"step {i}: malformed cell key {key!r}") from None
        if not (0 <= r < data.rows and 0 <= c < data.cols):
            raise TraceError(f"step {i}: cell {key!r} outside {data.rows}x{data.cols}")
    _check_roles(i, data.highlights.values())


def _check_graph(i: int, data: GraphState) -> None:
    node_ids = {n.id for n in data.nodes}
    edge_ids = {e.id for e in data.edges}
    refs: List[str] = (
        list(data.node_highlights) + list(data.visited) + list(data.frontier)
        + list(data.distances) + list(data.order)
    )
    for nid in refs:
        if nid not in node_ids:
            raise TraceError(f"step {i}: unknown node {nid!r}")
    for eid in data.edge_highlights:
        if eid not in edge_ids:
            raise TraceError(f"step {i}: unknown edge {eid!r}")
    _check_roles(i, data.node_highlights.values())
    _check_roles(i, data.edge_highlights.values())


__all__ = [
    "ARRAY", "MATRIX", "GRAPH", "CONCEPT", "KINDS",
    "Highlight", "HIGHLIGHT_ROLES", "TraceError",
    "ArrayState", "MatrixState", "GraphState", "GraphNodeView", "GraphEdgeView",
    "BigOCurve", "BigOState", "CallFrame", "CallStackState",
    "ContainerItem", "StackQueueState", "CONCEPT_TYPES",
    "Step", "StepBuilder", "cell", "validate_trace",
]
