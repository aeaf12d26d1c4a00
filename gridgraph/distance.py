"""
distance.py — Distance Metrics
===============================
Pure functions: coordinate delta in, scalar distance out.  Used for
A* heuristics and for GridNode step costs.

    pythagoras  – √(Δx² + Δy²)                   (straight line)
    manhattan   – |Δx| + |Δy|                    (4-connected grids)
    octile      – max(|Δx|,|Δy|) + (√2-1)·min(…)  (8-connected grids)
    zero        – 0                              (turns A* into Dijkstra)
"""

import math
from typing import Callable, Dict


def pythagoras(dx: float, dy: float) -> float:
    return math.sqrt(dx ** 2 + dy ** 2)


def manhattan(dx: float, dy: float) -> float:
    return abs(dx) + abs(dy)


def octile(dx: float, dy: float) -> float:
    dx, dy = abs(dx), abs(dy)
    return max(dx, dy) + (math.sqrt(2) - 1) * min(dx, dy)


def zero(dx: float, dy: float) -> float:
    return 0.0


METRICS: Dict[str, Callable[[float, float], float]] = {
    "pythagoras": pythagoras,
    "manhattan":  manhattan,
    "octile":     octile,
    "zero":       zero,
}
