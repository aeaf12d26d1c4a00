"""
astar.py — A* Search
=====================
Dijkstra whose frontier is ordered by g + h, where h estimates the cost
still to go.  Everything else (relaxation, tie-break, stale entries,
reconstruction) is inherited from DijkstraAlgorithm.

Heuristic option:
  • a name from gridgraph.distance.METRICS
        "pythagoras" (default), "manhattan", "octile", "zero"
  • or a callable(node, goal_node) → float

The named metrics are admissible when every cell weight is ≥ 1 and moves
match the metric (manhattan: 4-connected only).  A predicate goal has no
position, so h = 0 and A* degrades to Dijkstra.
"""

from typing import Any, Callable, Union

from gridalgos.dijkstra import DijkstraAlgorithm
from gridgraph.distance import METRICS
from gridgraph.node import Positioned


class AStarAlgorithm(DijkstraAlgorithm):
    name        = "astar"
    label       = "A* Search"
    complexity  = "O((V + E) log V)"
    description = "Dijkstra + heuristic guidance. Optimal when h is admissible."

    def initialize_data_structures(self) -> None:
        super().initialize_data_structures()
        self._h: Callable[[Any], float] = lambda node: 0.0

    def prepare(
        self,
        start,
        goal,
        heuristic: Union[str, Callable[[Any, Any], float]] = "pythagoras",
        **options,
    ) -> None:
        if not isinstance(goal, Positioned):
            return
        if callable(heuristic):
            self._h = lambda node: heuristic(node, goal)
            return
        metric = METRICS.get(heuristic)
        if metric is None:
            raise ValueError(f"unknown heuristic {heuristic!r}; expected one of {sorted(METRICS)}")
        gx, gy = goal.get_x(), goal.get_y()
        self._h = lambda node: metric(node.get_x() - gx, node.get_y() - gy)

    def estimate(self, node) -> float:
        return self._h(node)
