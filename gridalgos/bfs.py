"""
bfs.py — Breadth-First Search
==============================
Explores outward from `start` layer by layer, following each node's own
get_neighbors(graph).  Returns every reachable node in discovery order
(start first) that passes the filter.

Unlike LinearAlgorithm this only ever sees the connected component that
contains `start`.
"""

from collections import deque
from typing import Any, Callable, List, Optional

from gridalgos.base import SearchAlgorithm


class BreadthFirstAlgorithm(SearchAlgorithm):
    name        = "bfs"
    label       = "Breadth-First Search"
    complexity  = "O(V + E)"
    description = "Nodes reachable from start, nearest hops first."

    def initialize_data_structures(self) -> None:
        self.seen = set()

    def search(self, start, filter: Optional[Callable[[Any], bool]] = None) -> List[Any]:
        self.initialize_data_structures()
        queue = deque([start])
        self.seen.add(id(start))
        found = []

        while queue:
            node = queue.popleft()
            if filter is None or filter(node):
                found.append(node)
            self.require_traversable(node, with_cost=False)
            for nbr in node.get_neighbors(self.graph):
                if id(nbr) not in self.seen:
                    self.seen.add(id(nbr))
                    queue.append(nbr)
        return found
