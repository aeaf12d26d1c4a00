"""
recorder.py — Run Recorder & Analytics
========================================
Times one find_goal() run and turns its result into the metrics the
service reports, plus a side-by-side comparison of two runs.

Usage:
    rec = Recorder(graph)
    metrics = rec.run(goal, start=start, algorithm="astar", heuristic="manhattan")
    rec.path                          # the Path (or None)

Comparison:
    left, right = Recorder(g), Recorder(g)
    left.run(goal, algorithm="dijkstra")
    right.run(goal, algorithm="astar")
    compare(left, right)              # → ComparisonResult
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from gridalgos.base import Capability, Path


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algorithm:     str   = ""
    label:         str   = ""
    path_found:    bool  = False
    path_length:   int   = 0          # number of edges on the final path
    path_cost:     float = 0.0        # total edge cost of the final path
    expanded:      int   = 0          # nodes expanded, found or not
    wall_time_ms:  float = 0.0
    heuristic:     str   = ""         # for A*

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_expanded: str = ""   # which algorithm settled fewer nodes
    winner_cost:     str = ""   # which algorithm found the cheaper path

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        graph   : The graph the run is made on.
        path    : Path from the last run (None if unreachable / not run yet).
        metrics : RunMetrics from the last run.
    """

    def __init__(self, graph):
        self.graph = graph
        self.path:    Optional[Path]       = None
        self.metrics: Optional[RunMetrics] = None

    def run(self, goal, start=None, algorithm: Optional[str] = None, **options) -> RunMetrics:
        algo = self.graph.registry.lookup(algorithm) or self.graph.registry.default(Capability.SHORTEST_PATH)

        t0 = time.monotonic()
        runner, self.path = self.graph.run_shortest_path(goal, start=start, algorithm=algorithm, **options)
        wall_ms = (time.monotonic() - t0) * 1000

        # a failed run still did work; read the count off the runner
        if self.path is not None:
            expanded = self.path.expanded
        else:
            expanded = getattr(runner, "expanded", 0)

        heuristic = options.get("heuristic", "")
        self.metrics = RunMetrics(
            algorithm=algorithm or getattr(algo, "name", ""),
            label=getattr(algo, "label", ""),
            path_found=self.path is not None,
            path_length=self.path.length if self.path is not None else 0,
            path_cost=self.path.cost if self.path is not None else 0.0,
            expanded=expanded,
            wall_time_ms=round(wall_ms, 3),
            heuristic=heuristic if isinstance(heuristic, str) else getattr(heuristic, "__name__", "custom"),
        )
        return self.metrics


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algorithm if l_val < r_val else r.algorithm

    # an unreachable goal never wins on cost
    l_cost = l.path_cost if l.path_found else float("inf")
    r_cost = r.path_cost if r.path_found else float("inf")

    return ComparisonResult(
        left=l,
        right=r,
        winner_expanded=winner(l.expanded, r.expanded),
        winner_cost=winner(l_cost, r_cost),
    )
