"""
registry.py — Algorithm Registry
=================================
Maps a name to an algorithm family, and keeps one default family per
capability.

    from gridalgos import REGISTRY, register_algorithm, lookup_algorithm

REGISTRY is the process-wide instance every Graph uses unless it was
given its own (Graph(registry=...)).  It ships with:

    "linear"    LinearAlgorithm          default SEARCH
    "bfs"       BreadthFirstAlgorithm
    "dijkstra"  DijkstraAlgorithm        default SHORTEST_PATH
    "astar"     AStarAlgorithm

Adding an algorithm is: write the class, set its `capability` tag, call
register_algorithm().  That's the plugin system.
"""

import logging
from typing import Dict, List, Optional

from gridalgos.astar import AStarAlgorithm
from gridalgos.base import Capability
from gridalgos.bfs import BreadthFirstAlgorithm
from gridalgos.dijkstra import DijkstraAlgorithm
from gridalgos.linear import LinearAlgorithm
from gridgraph.errors import IncompatibleAlgorithm, UnknownAlgorithm

logger = logging.getLogger(__name__)


class AlgorithmRegistry:
    """
    Attributes:
        _algorithms : {name: family}          insertion order
        _defaults   : {Capability: family}
    """

    def __init__(self):
        self._algorithms: Dict[str, type]        = {}
        self._defaults:   Dict[Capability, type] = {}

    def register(self, algo: type, name: Optional[str] = None, is_default: bool = False) -> type:
        """
        Register `algo` under `name` (default: algo.name).  A later
        registration under the same name replaces the earlier one.  With
        is_default=True it also becomes the default for its capability.
        """
        capability = getattr(algo, "capability", None)
        if not isinstance(capability, Capability):
            raise IncompatibleAlgorithm(f"{algo!r} declares no capability")
        name = name or getattr(algo, "name", "")
        if not name:
            raise ValueError(f"{algo!r} needs a name to be registered")

        self._algorithms[name] = algo
        if is_default:
            self._defaults[capability] = algo
        logger.debug("registered %s (%s%s)", name, capability.value, ", default" if is_default else "")
        return algo

    def lookup(self, name: Optional[str]) -> Optional[type]:
        """Family registered under `name`; None when no name is given."""
        if not name:
            return None
        try:
            return self._algorithms[name]
        except KeyError:
            raise UnknownAlgorithm(f"Algorithm `{name}` not found") from None

    def default(self, capability: Capability) -> Optional[type]:
        return self._defaults.get(capability)

    def names(self) -> List[str]:
        return list(self._algorithms)

    def by_capability(self, capability: Capability) -> List[type]:
        return [a for a in self._algorithms.values() if a.capability is capability]

    def copy(self) -> "AlgorithmRegistry":
        """Independent registry with the same entries — for injection / tests."""
        other = AlgorithmRegistry()
        other._algorithms = dict(self._algorithms)
        other._defaults = dict(self._defaults)
        return other

    def __contains__(self, name: str) -> bool:
        return name in self._algorithms

    def __len__(self) -> int:
        return len(self._algorithms)

    def __repr__(self) -> str:
        return f"AlgorithmRegistry({', '.join(self._algorithms)})"


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY = AlgorithmRegistry()
REGISTRY.register(LinearAlgorithm, "linear", is_default=True)
REGISTRY.register(BreadthFirstAlgorithm, "bfs")
REGISTRY.register(DijkstraAlgorithm, "dijkstra", is_default=True)
REGISTRY.register(AStarAlgorithm, "astar")


# ---------------------------------------------------------------------------
# Module-level helpers (act on REGISTRY)
# ---------------------------------------------------------------------------
def register_algorithm(algo: type, name: Optional[str] = None, is_default: bool = False) -> type:
    return REGISTRY.register(algo, name, is_default)


def lookup_algorithm(name: Optional[str]) -> Optional[type]:
    return REGISTRY.lookup(name)


def list_algorithms() -> List[type]:
    """All registered families in registration order."""
    return [REGISTRY.lookup(n) for n in REGISTRY.names()]
