"""
node.py — Node Capabilities & Grid Node
========================================
The graph never looks inside a node.  It only needs two capabilities:

    Positioned   – get_x() / get_y()           (every node, used for indexing)
    Traversable  – get_neighbors(graph)        (only for path finding; edges
                   get_cost(neighbor)           are computed, never stored)

Both are runtime-checkable Protocols, so any object with the right methods
qualifies — no inheritance required.

GridNode is the stock implementation for tile / grid maps.
"""

import math
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from gridgraph.distance import pythagoras


# ---------------------------------------------------------------------------
# Capability protocols
# ---------------------------------------------------------------------------
@runtime_checkable
class Positioned(Protocol):
    def get_x(self) -> float: ...

    def get_y(self) -> float: ...


@runtime_checkable
class Traversable(Positioned, Protocol):
    def get_neighbors(self, graph: Any) -> List[Any]: ...

    def get_cost(self, neighbor: Any) -> float: ...


# 4-connected first, diagonals appended when enabled
ORTHOGONAL = [(1, 0), (0, 1), (-1, 0), (0, -1)]
DIAGONAL   = [(1, 1), (-1, 1), (-1, -1), (1, -1)]


# ---------------------------------------------------------------------------
# GridNode
# ---------------------------------------------------------------------------
class GridNode:
    """
    One walkable (or blocked) cell of a grid map.

    Attributes:
        x, y      : Cell coordinates.  The graph floors them for indexing.
        weight    : Cost multiplier for ENTERING this cell (default 1).
        blocked   : Obstacle flag — blocked cells are never returned as neighbours.
        diagonals : If True, neighbours include the 4 diagonal cells.
        label     : Human-readable name (defaults to "x,y").
        data      : Free-form dict for caller payload (tile data, terrain, …).

    Equality is identity: two nodes at the same cell are different nodes.
    """

    __slots__ = ("x", "y", "weight", "blocked", "diagonals", "label", "data")

    def __init__(
        self,
        x: float,
        y: float,
        weight: float = 1.0,
        blocked: bool = False,
        diagonals: bool = False,
        label: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        self.x:         float          = x
        self.y:         float          = y
        self.weight:    float          = weight
        self.blocked:   bool           = blocked
        self.diagonals: bool           = diagonals
        self.label:     str            = label or f"{x},{y}"
        self.data:      Dict[str, Any] = data if data is not None else {}

    # ------------------------------------------------------------------
    # Positioned
    # ------------------------------------------------------------------
    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    # ------------------------------------------------------------------
    # Traversable
    # ------------------------------------------------------------------
    def get_neighbors(self, graph) -> List["GridNode"]:
        """
        Open cells around this one, looked up in the graph's coordinate index.

        Diagonal moves are only allowed when both orthogonal cells they pass
        between are open (no cutting corners around walls).
        """
        cx, cy = math.floor(self.x), math.floor(self.y)

        def open_at(dx: int, dy: int):
            other = graph.get_node(cx + dx, cy + dy)
            if other is None or getattr(other, "blocked", False):
                return None
            return other

        result = []
        for dx, dy in ORTHOGONAL:
            other = open_at(dx, dy)
            if other is not None:
                result.append(other)

        if self.diagonals:
            for dx, dy in DIAGONAL:
                if open_at(dx, 0) is None or open_at(0, dy) is None:
                    continue
                other = open_at(dx, dy)
                if other is not None:
                    result.append(other)
        return result

    def get_cost(self, neighbor) -> float:
        """Step length × the weight of the cell being entered."""
        step = pythagoras(neighbor.get_x() - self.x, neighbor.get_y() - self.y)
        return step * getattr(neighbor, "weight", 1.0)

    # ------------------------------------------------------------------
    # Serialisation  (JSON responses of the web service)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "x":         self.x,
            "y":         self.y,
            "weight":    self.weight,
            "blocked":   self.blocked,
            "diagonals": self.diagonals,
            "label":     self.label,
            "data":      dict(self.data),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "GridNode":
        """Inverse of to_dict().  Missing keys take the constructor defaults."""
        return cls(
            d["x"],
            d["y"],
            weight=d.get("weight", 1.0),
            blocked=d.get("blocked", False),
            diagonals=d.get("diagonals", False),
            label=d.get("label"),
            data=dict(d.get("data") or {}),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        flag = ", blocked" if self.blocked else ""
        return f"GridNode({self.x}, {self.y}, w={self.weight}{flag})"
