"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (its whole trace), validates it, and
computes the metrics shown in the analytics card and in compare mode.

Usage:
    rec = Recorder()
    metrics = rec.record("bubble-sort", locale="es")
    rec.export()                     # JSON-ready snapshot of the run

Comparison:
    Record two algorithms with two Recorders, then
    compare(rec1, rec2) → ComparisonResult.

Metric definitions (counted per Step, so they measure what the viewer
sees rather than what the CPU did):
    comparisons – steps highlighting "comparing" or "checking"
    swaps       – steps highlighting "swapped"
    writes      – steps whose array / table values differ from the step before
"""

import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Set, Tuple, Union

from algorithms import Algorithm, get_algorithm
from algorithms.i18n import resolve_locale
from algorithms.step import ARRAY, GRAPH, MATRIX, Step, validate_trace


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algorithm_id:   str   = ""
    algorithm_name: str   = ""
    category:       str   = ""
    locale:         str   = ""
    total_steps:    int   = 0          # number of Steps in the trace
    comparisons:    int   = 0
    swaps:          int   = 0
    writes:         int   = 0
    final_summary:  str   = ""         # description of the terminal Step
    wall_time_ms:   float = 0.0        # wall-clock time to generate the trace


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived: the name of the winning algorithm, or "tie"
    winner_steps:       str = ""
    winner_comparisons: str = ""
    winner_swaps:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        algorithm : Descriptor of the recorded algorithm.
        locale    : Resolved locale of the run.
        steps     : The recorded trace.
        metrics   : Computed RunMetrics (available after record()).
    """

    def __init__(self):
        self.algorithm: Optional[Algorithm]  = None
        self.locale:    str                  = ""
        self.steps:     Tuple[Step, ...]     = ()
        self.metrics:   Optional[RunMetrics] = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def record(self, algorithm: Union[Algorithm, str], locale: Optional[str] = None) -> RunMetrics:
        """Generate, validate and measure one run.  Raises TraceError on a bad trace."""
        if isinstance(algorithm, str):
            info = get_algorithm(algorithm)
            if info is None:
                raise ValueError(f"Unknown algorithm: {algorithm}")
            algorithm = info

        self.algorithm = algorithm
        self.locale    = resolve_locale(locale)

        start = time.monotonic()
        self.steps = algorithm.generate_steps(self.locale)
        wall_ms = (time.monotonic() - start) * 1000

        validate_trace(self.steps)
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algorithm_id": self.algorithm.id if self.algorithm else "",
            "locale":       self.locale,
            "pseudocode":   list(self.algorithm.pseudocode) if self.algorithm else [],
            "metrics":      asdict(self.metrics) if self.metrics else {},
            "steps":        [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self.algorithm
        comparisons = swaps = writes = 0
        prev_values = None

        for step in self.steps:
            roles = step_roles(step)
            if roles & {"comparing", "checking"}:
                comparisons += 1
            if "swapped" in roles:
                swaps += 1
            values = _values(step)
            if prev_values is not None and values is not None and values != prev_values:
                writes += 1
            prev_values = values

        return RunMetrics(
            algorithm_id=info.id,
            algorithm_name=info.name,
            category=info.category,
            locale=self.locale,
            total_steps=len(self.steps),
            comparisons=comparisons,
            swaps=swaps,
            writes=writes,
            final_summary=self.steps[-1].description,
            wall_time_ms=round(wall_ms, 2),
        )


def step_roles(step: Step) -> Set[str]:
    """Every highlight role present in a Step, whatever its kind."""
    if step.kind in (ARRAY, MATRIX):
        return set(step.data.highlights.values())
    if step.kind == GRAPH:
        return set(step.data.node_highlights.values()) | set(step.data.edge_highlights.values())
    return set()


def _values(step: Step):
    if step.kind in (ARRAY, MATRIX):
        return step.data.values
    return None


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps, l.algorithm_name, r.algorithm_name),
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algorithm_name, r.algorithm_name),
        winner_swaps=winner(l.swaps, r.swaps, l.algorithm_name, r.algorithm_name),
    )
