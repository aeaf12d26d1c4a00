"""
base.py — Algorithm Capabilities
=================================
Every algorithm family is a class that declares ONE capability as a
class-level tag:

    Capability.SEARCH         → implements search(start, filter=None)
    Capability.SHORTEST_PATH  → implements find_path(start, goal, **options)

The graph checks the tag, never the class hierarchy, so a family does not
have to inherit from anything here — subclassing SearchAlgorithm /
ShortestPathAlgorithm is just the convenient way to get the tag and the
shared helpers.

Per-run state lives on the instance.  The graph builds a fresh instance
for every query and calls initialize_data_structures() before running it.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from gridgraph.errors import NotTraversable
from gridgraph.node import Positioned, Traversable


class Capability(Enum):
    SEARCH        = "search"
    SHORTEST_PATH = "shortest-path"


# ---------------------------------------------------------------------------
# Path — result of a ShortestPath run
# ---------------------------------------------------------------------------
class Path(list):
    """
    Ordered nodes start → goal.  Compares equal to a plain list of the same
    nodes; also carries:

        cost     : total edge cost along the path
        expanded : how many nodes the algorithm settled to find it
    """

    def __init__(self, nodes: Iterable[Any] = (), cost: float = 0.0, expanded: int = 0):
        super().__init__(nodes)
        self.cost:     float = cost
        self.expanded: int   = expanded

    @property
    def length(self) -> int:
        """Number of edges (hops) on the path."""
        return max(len(self) - 1, 0)

    def __repr__(self) -> str:
        return f"Path({list.__repr__(self)}, cost={self.cost})"


# ---------------------------------------------------------------------------
# Bases
# ---------------------------------------------------------------------------
class Algorithm:
    """
    Class attributes double as the metadata card the service lists:

        name        : registry key, e.g. "dijkstra"
        label       : human label
        capability  : Capability tag (None = not usable by the graph)
        complexity  : e.g. "O((V + E) log V)"
        description : one-liner
    """

    name:        str                  = ""
    label:       str                  = ""
    capability:  Optional[Capability] = None
    complexity:  str                  = ""
    description: str                  = ""

    def __init__(self, graph=None):
        self.graph = graph

    def initialize_data_structures(self) -> None:
        """Reset per-run state.  Called by the graph before every run."""

    @staticmethod
    def require_traversable(node, with_cost: bool = True) -> None:
        ok = isinstance(node, Traversable) if with_cost else hasattr(node, "get_neighbors")
        if not ok:
            raise NotTraversable(f"{node!r} cannot enumerate neighbours / edge costs")

    @classmethod
    def info(cls) -> Dict[str, str]:
        return {
            "name":        cls.name,
            "label":       cls.label,
            "capability":  cls.capability.value if cls.capability else "",
            "complexity":  cls.complexity,
            "description": cls.description,
        }


class SearchAlgorithm(Algorithm):
    capability = Capability.SEARCH

    def search(self, start, filter: Optional[Callable[[Any], bool]] = None) -> List[Any]:
        raise NotImplementedError


class ShortestPathAlgorithm(Algorithm):
    capability = Capability.SHORTEST_PATH

    def find_path(self, start, goal, **options) -> Optional[Path]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers shared by the path finders
    # ------------------------------------------------------------------
    @staticmethod
    def goal_test(goal) -> Callable[[Any], bool]:
        """A node goal matches by identity; anything else callable is a predicate."""
        if isinstance(goal, Positioned):
            return lambda node: node is goal
        if callable(goal):
            return goal
        raise TypeError(f"goal must be a node or a predicate, got {goal!r}")
