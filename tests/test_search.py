"""
Unit tests for the Search algorithms: linear and bfs.
"""

import pytest

from gridalgos import BreadthFirstAlgorithm, LinearAlgorithm
from gridgraph import Graph, GridNode, NotTraversable
from conftest import LinkNode, PointNode


def test_linear_visits_in_insertion_order():
    g = Graph()
    nodes = [g.add_node(PointNode(x, 0)) for x in (2, 0, 1)]

    assert g.get_nodes(algorithm="linear") == nodes
    assert LinearAlgorithm(g).search(nodes[1]) == nodes


def test_linear_filter_and_restart():
    g = Graph()
    for x in range(6):
        g.add_node(PointNode(x, 0))
    algo = LinearAlgorithm(g)

    evens = algo.search(None, filter=lambda n: n.x % 2 == 0)
    assert [n.x for n in evens] == [0, 2, 4]
    assert algo.search(None, filter=lambda n: n.x % 2 == 0) == evens


def test_linear_on_empty_graph():
    assert LinearAlgorithm(Graph()).search(None) == []


def test_bfs_discovery_order():
    g = Graph.generate_grid(cols=3, rows=3)
    start = g.get_node(0, 0)
    found = g.get_nodes(start=start, algorithm="bfs")

    assert found[0] is start
    assert [(n.x, n.y) for n in found[:3]] == [(0, 0), (1, 0), (0, 1)]
    assert len(found) == 9


def test_bfs_only_sees_connected_component():
    g = Graph.from_rows([
        "..#..",
        "..#..",
    ])
    found = g.get_nodes(start=g.get_node(4, 1), algorithm="bfs")

    assert {(n.x, n.y) for n in found} == {(3, 0), (4, 0), (3, 1), (4, 1)}


def test_bfs_filter():
    g = Graph()
    a, b, c = (g.add_node(LinkNode(x, 0)) for x in range(3))
    a.link(b)
    b.link(c)
    c.link(a)

    found = g.get_nodes(start=a, algorithm="bfs", filter=lambda n: n.x > 0)
    assert found == [b, c]


def test_bfs_requires_neighbours():
    g = Graph()
    p = g.add_node(PointNode(0, 0))
    with pytest.raises(NotTraversable):
        BreadthFirstAlgorithm(g).search(p)


def test_bfs_defaults_start_to_first_node():
    g = Graph()
    first = g.add_node(GridNode(0, 0))
    g.add_node(GridNode(1, 0))
    g.add_node(GridNode(7, 7))

    found = g.get_nodes(algorithm="bfs")
    assert found[0] is first
    assert len(found) == 2
