"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Heap-based Dijkstra over nodes that compute their own edges.

    1. dist[start] ← 0, frontier ← [(0, start)]
    2. pop the cheapest frontier entry; skip it if already settled
    3. if it satisfies the goal → walk parent links back to start
    4. relax each neighbour: dist[node] + cost(node, nbr) < dist[nbr] → push
    5. mark settled, repeat; empty frontier → None (unreachable)

Frontier entries are (priority, seq, node).  `seq` is a running counter,
so among equal priorities the first-discovered node is expanded first and
runs are reproducible.

Correctness note: Dijkstra requires non-negative edge costs.  A negative
cost raises ValueError as soon as it is seen.

Options accepted by find_path():
    cost      : callable(a, b) → float, overrides a.get_cost(b)
    max_cost  : never settle anything costlier than this
"""

import heapq
import itertools
import logging
from typing import Any, Callable, Dict, Optional

from gridalgos.base import Path, ShortestPathAlgorithm

logger = logging.getLogger(__name__)

INF = float("inf")


class DijkstraAlgorithm(ShortestPathAlgorithm):
    name        = "dijkstra"
    label       = "Dijkstra's Algorithm"
    complexity  = "O((V + E) log V)"
    description = "Greedily settles the cheapest node. Optimal for non-negative costs."

    def initialize_data_structures(self) -> None:
        self.dist:     Dict[int, float] = {}    # id(node) → best known cost
        self.parent:   Dict[int, Any]   = {}    # id(node) → predecessor node
        self.settled:  set              = set()
        self.expanded: int              = 0

    def estimate(self, node) -> float:
        """Lower bound on the remaining cost from `node`.  Zero for Dijkstra."""
        return 0.0

    def prepare(self, start, goal, **options) -> None:
        """Hook for subclasses that need to see the query before the run."""

    # ------------------------------------------------------------------
    def find_path(
        self,
        start,
        goal,
        cost: Optional[Callable[[Any, Any], float]] = None,
        max_cost: Optional[float] = None,
        **options,
    ) -> Optional[Path]:
        self.initialize_data_structures()
        self.prepare(start, goal, **options)
        is_goal = self.goal_test(goal)
        edge_cost = cost or (lambda a, b: a.get_cost(b))
        self.require_traversable(start, with_cost=cost is None)

        seq = itertools.count()
        self.dist[id(start)] = 0.0
        frontier = [(self.estimate(start), next(seq), start)]

        while frontier:
            _, _, node = heapq.heappop(frontier)
            key = id(node)
            if key in self.settled:
                continue                        # stale entry
            self.settled.add(key)

            if is_goal(node):
                path = self._reconstruct(node)
                logger.debug("%s settled %d nodes, cost %s", self.name, self.expanded, path.cost)
                return path

            self.expanded += 1
            self.require_traversable(node, with_cost=cost is None)
            d = self.dist[key]

            for nbr in node.get_neighbors(self.graph):
                nkey = id(nbr)
                if nkey in self.settled:
                    continue
                w = edge_cost(node, nbr)
                if w < 0:
                    raise ValueError(f"negative edge cost {w} from {node!r} to {nbr!r}")
                alt = d + w
                if max_cost is not None and alt > max_cost:
                    continue
                if alt < self.dist.get(nkey, INF):
                    self.dist[nkey] = alt
                    self.parent[nkey] = node
                    heapq.heappush(frontier, (alt + self.estimate(nbr), next(seq), nbr))

        logger.debug("%s: frontier exhausted after %d nodes", self.name, self.expanded)
        return None

    def _reconstruct(self, goal_node) -> Path:
        nodes, cur = [], goal_node
        while cur is not None:
            nodes.append(cur)
            cur = self.parent.get(id(cur))
        nodes.reverse()
        return Path(nodes, cost=self.dist[id(goal_node)], expanded=self.expanded)
