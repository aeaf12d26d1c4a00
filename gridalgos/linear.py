"""
linear.py — Linear Search
==========================
Walks the graph's node list in insertion order.  Ignores `start` and
adjacency entirely, so it works on nodes that are merely Positioned.

Deterministic and restartable: same graph → same list.
"""

from typing import Any, Callable, List, Optional

from gridalgos.base import SearchAlgorithm


class LinearAlgorithm(SearchAlgorithm):
    name        = "linear"
    label       = "Linear Scan"
    complexity  = "O(V)"
    description = "Every node in insertion order, optionally filtered."

    def search(self, start, filter: Optional[Callable[[Any], bool]] = None) -> List[Any]:
        return [node for node in self.graph.get_nodes() if filter is None or filter(node)]
