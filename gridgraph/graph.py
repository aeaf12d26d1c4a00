"""
graph.py — Coordinate-Indexed Graph
====================================
Single source of truth for a map.  Algorithms read this object; they
never write to it.

Responsibilities:
  1. Node CRUD                                (add / remove / get)
  2. Bulk retrieval through a Search algorithm        (get_nodes)
  3. Shortest-path queries through a ShortestPath algorithm (find_goal)
  4. Grid factory class-methods               (generate_grid, from_rows)

Design decisions:
  - Edges are NOT stored.  Each node computes its own neighbours on demand
    (see gridgraph.node.Traversable), usually by asking this graph for the
    node at a neighbouring coordinate.
  - Two indexes are kept in step:
        nodes    : [node, …]                      insertion order
        _cells   : {floor(x): {floor(y): [node, …]}}
    A cell keeps every node placed on it.  Lookups answer with the newest
    occupant; removal drops one object from BOTH indexes, so the two never
    disagree about which nodes exist.
  - Algorithms are resolved by name through an AlgorithmRegistry.  A graph
    uses the process-wide gridalgos.REGISTRY unless one is injected.
"""

import logging
import math
import numbers
import random
from typing import (
    Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple
)

from gridgraph.errors import (
    EmptyGraph, IncompatibleAlgorithm, InvalidCoordinate, MissingCoordinate, MissingGoal
)
from gridgraph.node import GridNode

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


def _is_number(value) -> bool:
    """Finite real number.  bool is an int subclass but not a coordinate."""
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class Graph:
    """
    Attributes:
        nodes    : [node, …] in insertion order (canonical enumeration source)
        registry : AlgorithmRegistry used by get_nodes / find_goal
        _cells   : {int x: {int y: [node, …]}} coordinate index
    """

    def __init__(self, registry=None):
        self.nodes:   List[Any]                        = []
        self._cells:  Dict[int, Dict[int, List[Any]]]  = {}
        self._registry = registry

    @property
    def registry(self):
        if self._registry is None:
            # late import: gridalgos imports gridgraph
            from gridalgos.registry import REGISTRY
            return REGISTRY
        return self._registry

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node):
        """
        Append `node` and index it under its floored coordinates.  O(1).

        Coordinates are checked before anything is stored, so a rejected
        node leaves both indexes untouched.
        """
        x, y = node.get_x(), node.get_y()
        if not _is_number(x):
            raise InvalidCoordinate(f"Node must have a valid x coord, got {x!r}")
        if not _is_number(y):
            raise InvalidCoordinate(f"Node must have a valid y coord, got {y!r}")

        cx, cy = math.floor(x), math.floor(y)
        self.nodes.append(node)
        cell = self._cells.setdefault(cx, {}).setdefault(cy, [])
        if cell:
            logger.debug("cell (%d, %d) now holds %d nodes", cx, cy, len(cell) + 1)
        cell.append(node)
        return node

    def remove_node(self, x: float, y: float):
        """
        Remove one node at (x, y).  O(n).

        The first node (insertion order) whose coordinates equal (x, y)
        exactly wins; failing that, the newest occupant of the floored cell.
        Returns the removed node, or None if there was nothing to remove.
        """
        target = None
        for node in self.nodes:
            if node.get_x() == x and node.get_y() == y:
                target = node
                break
        if target is None and _is_number(x) and _is_number(y):
            target = self.get_node(x, y)
        if target is None:
            return None

        self._drop_from_list(target)
        self._drop_from_index(target)
        return target

    def _drop_from_list(self, node) -> None:
        # by identity; list.remove() would use __eq__
        for i, n in enumerate(self.nodes):
            if n is node:
                del self.nodes[i]
                return

    def _drop_from_index(self, node) -> None:
        cx, cy = math.floor(node.get_x()), math.floor(node.get_y())
        column = self._cells.get(cx)
        if column is None or cy not in column:
            return
        column[cy] = [n for n in column[cy] if n is not node]
        if not column[cy]:
            del column[cy]
        if not column:
            del self._cells[cx]

    def get_node(self, x_or_filter, y: Optional[float] = None):
        """
        get_node(x, y)       → node at the floored cell, or None.  O(1)
        get_node(predicate)  → first node (insertion order) passing it.  O(n)
        """
        if callable(x_or_filter):
            for node in self.nodes:
                if x_or_filter(node):
                    return node
            return None

        if not _is_number(x_or_filter):
            raise MissingCoordinate(f"x coordinate not provided, got {x_or_filter!r}")
        if not _is_number(y):
            raise MissingCoordinate(f"y coordinate not provided, got {y!r}")

        cell = self._cells.get(math.floor(x_or_filter), {}).get(math.floor(y))
        return cell[-1] if cell else None

    def get_nodes(
        self,
        filter_or_options=None,
        *,
        start=None,
        algorithm: Optional[str] = None,
        filter: Optional[Predicate] = None,
    ):
        """
        Three ways to call:
          1) get_nodes()              → snapshot tuple of every node,
                                        insertion order.  O(n) copy
          2) get_nodes(predicate)     → same as get_nodes(filter=predicate)
          3) get_nodes(start=…, algorithm=…, filter=…)
                                      → run a Search algorithm; cost varies

        An options Mapping ({"start": …, "algorithm": …, "filter": …}) is
        accepted in place of keywords.
        """
        if isinstance(filter_or_options, Mapping):
            opts = dict(filter_or_options)
            start = opts.get("start", start)
            algorithm = opts.get("algorithm", algorithm)
            filter = opts.get("filter", filter)
        elif callable(filter_or_options):
            filter = filter_or_options
        elif filter_or_options is not None:
            raise TypeError(f"unsupported argument {filter_or_options!r}")
        elif start is None and algorithm is None and filter is None:
            return tuple(self.nodes)

        from gridalgos.base import Capability

        algo = self._resolve(algorithm, Capability.SEARCH)
        if start is None:
            if not self.nodes:
                return []
            start = self.nodes[0]
        return algo(self).search(start, filter=filter)

    # ==================================================================
    # SHORTEST PATH
    # ==================================================================
    def find_goal(self, goal=None, *, start=None, algorithm: Optional[str] = None, **algorithm_options):
        """
        Shortest path from `start` (default: first node) to `goal`.

        `goal` is a node, an (x, y) tuple, or a predicate called with each
        node the algorithm settles.  Extra keyword options (cost=, heuristic=,
        max_cost=, …) are passed through to the algorithm.  An options
        Mapping ({"goal": …, "start": …, "algorithm": …, "heuristic": …})
        is accepted in place of keywords.

        Returns a gridalgos.Path (a list of nodes with .cost) or None when
        the goal is unreachable.
        """
        _, path = self.run_shortest_path(goal, start=start, algorithm=algorithm, **algorithm_options)
        return path

    def run_shortest_path(self, goal=None, *, start=None, algorithm: Optional[str] = None, **algorithm_options):
        """
        Same query as find_goal(), returning (runner, path).

        `runner` is the algorithm instance that ran, so its counters
        (e.g. `expanded`) stay readable when no path was found.  It is None
        when an (x, y) goal names an empty cell and nothing ran.
        """
        if isinstance(goal, Mapping):
            opts = dict(goal)
            goal = opts.pop("goal", None)
            start = opts.pop("start", start)
            algorithm = opts.pop("algorithm", algorithm)
            algorithm_options = {**opts, **algorithm_options}

        if goal is None:
            raise MissingGoal("To find a goal, one must provide a goal")

        from gridalgos.base import Capability

        algo = self._resolve(algorithm, Capability.SHORTEST_PATH)
        if start is None:
            if not self.nodes:
                raise EmptyGraph("graph has no nodes to start from")
            start = self.nodes[0]

        if isinstance(goal, tuple):
            goal = self.get_node(*goal)
            if goal is None:
                return None, None

        # fresh instance per run: no auxiliary state survives between calls
        runner = algo(self)
        reset = getattr(runner, "initialize_data_structures", None)
        if reset is not None:
            reset()
        path = runner.find_path(start, goal, **algorithm_options)
        logger.debug(
            "%s: %s", getattr(algo, "name", algo),
            "no path" if path is None else f"path of {len(path)} nodes",
        )
        return runner, path

    def _resolve(self, name: Optional[str], capability):
        algo = self.registry.lookup(name) or self.registry.default(capability)
        if algo is None:
            raise IncompatibleAlgorithm(f"no default {capability.value} algorithm registered")
        if getattr(algo, "capability", None) is not capability:
            raise IncompatibleAlgorithm(
                f"`{getattr(algo, 'name', algo)}` is not a {capability.value} algorithm"
            )
        return algo

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================
    @classmethod
    def generate_grid(
        cls,
        cols: int = 8,
        rows: int = 6,
        diagonals: bool = False,
        wall_prob: float = 0.0,
        seed: Optional[int] = None,
        registry=None,
    ) -> "Graph":
        """
        cols × rows grid of GridNodes at integer coordinates.
        If wall_prob > 0 some interior cells are pre-blocked → maze feel.
        """
        rng = random.Random(seed)
        g = cls(registry=registry)

        for y in range(rows):
            for x in range(cols):
                node = GridNode(x, y, diagonals=diagonals)
                # keep the border open so corners stay reachable
                if 0 < x < cols - 1 and 0 < y < rows - 1 and rng.random() < wall_prob:
                    node.blocked = True
                g.add_node(node)
        return g

    @classmethod
    def from_rows(cls, rows: Sequence[str], diagonals: bool = False, registry=None) -> "Graph":
        """
        Build a grid from text, one string per row (y grows downward).

            "#"        → blocked cell
            "."        → open cell, weight 1
            "1".."9"   → open cell with that weight
            " "        → no node at all
        """
        g = cls(registry=registry)
        for y, line in enumerate(rows):
            for x, ch in enumerate(line):
                if ch == " ":
                    continue
                if ch == "#":
                    g.add_node(GridNode(x, y, blocked=True, diagonals=diagonals))
                elif ch == ".":
                    g.add_node(GridNode(x, y, diagonals=diagonals))
                elif ch.isdigit() and ch != "0":
                    g.add_node(GridNode(x, y, weight=float(ch), diagonals=diagonals))
                else:
                    raise ValueError(f"unknown cell {ch!r} at ({x}, {y})")
        return g

    def to_rows(self, path: Optional[Sequence[Any]] = None) -> List[str]:
        """
        Inverse of from_rows(), over the cells between bounds().  Cells on
        `path` print as "*".  Weights that are not whole numbers 1..9 print
        as ".".
        """
        if not self._cells:
            return []
        on_path = {id(n) for n in (path or ())}
        min_x, min_y, max_x, max_y = self.bounds()

        rows = []
        for y in range(min_y, max_y + 1):
            line = []
            for x in range(min_x, max_x + 1):
                node = self.get_node(x, y)
                weight = getattr(node, "weight", 1)
                if node is None:
                    line.append(" ")
                elif id(node) in on_path:
                    line.append("*")
                elif getattr(node, "blocked", False):
                    line.append("#")
                elif weight != 1 and weight == int(weight) and 1 < weight <= 9:
                    line.append(str(int(weight)))
                else:
                    line.append(".")
            rows.append("".join(line))
        return rows

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        """
        Lossless form of a grid of GridNodes: every node, in insertion
        order, including fractional weights, labels, data and cells holding
        more than one node.  Use to_rows() for the compact text picture.
        """
        return {"nodes": [node.to_dict() for node in self.nodes]}

    @classmethod
    def from_dict(cls, d: dict, registry=None) -> "Graph":
        g = cls(registry=registry)
        for nd in d.get("nodes", []):
            g.add_node(GridNode.from_dict(nd))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """(min_x, min_y, max_x, max_y) over indexed cells, or None if empty."""
        if not self._cells:
            return None
        ys = [y for column in self._cells.values() for y in column]
        return min(self._cells), min(ys), max(self._cells), max(ys)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.nodes))

    def __contains__(self, node) -> bool:
        return any(n is node for n in self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, cells={sum(len(c) for c in self._cells.values())})"
