"""
Unit tests for DijkstraAlgorithm through Graph.find_goal().
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gridalgos import DijkstraAlgorithm, Path
from gridgraph import Graph, GridNode, NotTraversable
from conftest import LinkNode, PointNode


def brute_force_cost(start, goal):
    """Cheapest simple path by exhaustive DFS (fine for <= 8 nodes)."""
    best = float("inf")

    def walk(node, cost, seen):
        nonlocal best
        if node is goal:
            best = min(best, cost)
            return
        for nbr, w in node.links.items():
            if id(nbr) not in seen:
                walk(nbr, cost + w, seen | {id(nbr)})

    walk(start, 0.0, {id(start)})
    return best


def path_cost(path):
    return sum(a.get_cost(b) for a, b in zip(path, path[1:]))


def test_line_graph_path(line_graph):
    g, (n0, n1, n2) = line_graph
    path = g.find_goal(n2, start=n0)

    assert path == [n0, n1, n2]
    assert isinstance(path, Path)
    assert path.cost == 2.0
    assert path.length == 2


def test_disconnected_node_is_no_path(line_graph):
    g, (n0, _, _) = line_graph
    island = g.add_node(GridNode(5, 5))

    assert g.find_goal(island, start=n0) is None


def test_start_is_goal(line_graph):
    g, (n0, _, _) = line_graph
    path = g.find_goal(n0, start=n0)
    assert path == [n0]
    assert path.cost == 0.0


def test_prefers_cheaper_longer_route():
    g = Graph()
    a, b, c, d = (g.add_node(LinkNode(x, 0)) for x in range(4))
    a.link(d, 10)
    a.link(b, 1)
    b.link(c, 1)
    c.link(d, 1)

    path = g.find_goal(d, start=a)
    assert path == [a, b, c, d]
    assert path.cost == 3


@st.composite
def _link_graph(draw):
    """Up to 8 LinkNodes with random directed links of cost 1..9."""
    size = draw(st.integers(min_value=2, max_value=8))
    g = Graph()
    nodes = [g.add_node(LinkNode(i, 0)) for i in range(size)]
    pairs = [(a, b) for a in range(size) for b in range(size) if a != b]
    for a, b in draw(st.lists(st.sampled_from(pairs), max_size=3 * size, unique=True)):
        nodes[a].link(nodes[b], draw(st.integers(min_value=1, max_value=9)))
    return g, nodes[0], nodes[-1]


@settings(max_examples=50, deadline=None)
@given(_link_graph())
def test_matches_brute_force_on_small_graphs(data):
    g, start, goal = data
    expected = brute_force_cost(start, goal)
    path = g.find_goal(goal, start=start)

    if expected == float("inf"):
        assert path is None
    else:
        assert path.cost == expected
        assert path_cost(path) == expected
        assert path[0] is start and path[-1] is goal


def test_goal_predicate():
    g = Graph.from_rows([
        ".....",
        ".###.",
        ".....",
    ])
    start = g.get_node(0, 0)
    path = g.find_goal(lambda n: n.x == 4 and n.y == 2, start=start)

    assert path[-1] is g.get_node(4, 2)
    assert path.cost == 6.0


def test_equal_cost_ties_expand_in_discovery_order():
    g = Graph.generate_grid(cols=3, rows=3)
    start, goal = g.get_node(0, 0), g.get_node(2, 2)

    first = g.find_goal(goal, start=start)
    second = g.find_goal(goal, start=start)

    assert first == second
    assert [(n.x, n.y) for n in first] == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_walls_and_weights():
    g = Graph.from_rows([
        ".9.",
        ".#.",
        "...",
    ])
    start, goal = g.get_node(0, 0), g.get_node(2, 0)
    path = g.find_goal(goal, start=start)

    # around the wall (6 steps) beats through the weight-9 cell (9 + 1)
    assert path.cost == 6.0
    assert g.get_node(1, 0) not in path


def test_diagonals():
    g = Graph.generate_grid(cols=3, rows=3, diagonals=True)
    path = g.find_goal(g.get_node(2, 2), start=g.get_node(0, 0))

    assert len(path) == 3
    assert path.cost == pytest.approx(2 * 2 ** 0.5)


def test_no_corner_cutting():
    g = Graph.from_rows([
        ".#",
        "#.",
    ], diagonals=True)
    assert g.find_goal(g.get_node(1, 1), start=g.get_node(0, 0)) is None


def test_custom_cost_function(line_graph):
    g, (n0, _, n2) = line_graph
    path = g.find_goal(n2, start=n0, cost=lambda a, b: 5)
    assert path.cost == 10


def test_max_cost_bounds_the_search(line_graph):
    g, (n0, _, n2) = line_graph
    assert g.find_goal(n2, start=n0, max_cost=1.5) is None
    assert g.find_goal(n2, start=n0, max_cost=2).cost == 2.0


def test_negative_cost_is_rejected(line_graph):
    g, (n0, _, n2) = line_graph
    with pytest.raises(ValueError):
        g.find_goal(n2, start=n0, cost=lambda a, b: -1)


def test_requires_traversable_nodes():
    g = Graph()
    a = g.add_node(PointNode(0, 0))
    b = g.add_node(PointNode(1, 0))
    with pytest.raises(NotTraversable):
        g.find_goal(b, start=a)


def test_fresh_state_per_run(line_graph):
    g, (n0, n1, n2) = line_graph
    algo = DijkstraAlgorithm(g)
    algo.initialize_data_structures()
    first = algo.find_path(n0, n2)
    second = algo.find_path(n2, n0)

    assert first == [n0, n1, n2]
    assert second == [n2, n1, n0]
    assert second.expanded == first.expanded
