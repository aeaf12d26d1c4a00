"""
Unit tests for the tile-plane adapter.
"""

import pytest

from gridgraph import Graph, GridNode, InvalidCoordinate
from tileplane import ListTilePlane, from_tile_plane


def floor_tiles(tile, data):
    if tile == "#":
        return None
    return GridNode(data["x"], data["y"], data={"tile": tile})


def test_builds_nodes_from_tiles():
    plane = ListTilePlane(["a#", "bc"])
    g = from_tile_plane(plane, floor_tiles)

    assert len(g) == 3
    assert g.get_node(1, 0) is None
    assert g.get_node(1, 1).data == {"tile": "c"}
    assert g.find_goal(g.get_node(1, 1), start=g.get_node(0, 0)).cost == 2.0


def test_adds_into_existing_graph():
    g = Graph()
    extra = g.add_node(GridNode(5, 5))
    result = from_tile_plane(ListTilePlane(["aa"]), floor_tiles, graph=g)

    assert result is g
    assert g.get_nodes()[0] is extra
    assert len(g) == 3


def test_ragged_rows():
    plane = ListTilePlane(["abc", "d"])
    g = from_tile_plane(plane, lambda tile, data: floor_tiles(tile, data) if tile else None)
    assert len(g) == 4


def test_argument_checks():
    with pytest.raises(ValueError):
        from_tile_plane(None, floor_tiles)
    with pytest.raises(TypeError):
        from_tile_plane(ListTilePlane(["a"]), "not a function")


def test_factory_nodes_must_have_coordinates():
    with pytest.raises(InvalidCoordinate):
        from_tile_plane(ListTilePlane(["a"]), lambda tile, data: GridNode(None, 0))
