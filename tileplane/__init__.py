"""
tileplane/
----------
Builds a gridgraph.Graph from an external tile plane.  Kept outside the
core: gridgraph never imports this package.

A tile plane is anything exposing

    get_max_tile_x() → int
    get_max_tile_y() → int
    lookup_tile(x, y, data=False) → tile  (data=True → the tile's data)

The caller's factory turns each cell into a node (or None to skip it):

    g = from_tile_plane(plane, lambda tile, data: GridNode(data["x"], data["y"]) if tile else None)
"""

from typing import Any, Callable, Optional

from gridgraph import Graph

TileFactory = Callable[[Any, Any], Optional[Any]]


def from_tile_plane(tplane, factory: TileFactory, graph: Optional[Graph] = None) -> Graph:
    if tplane is None:
        raise ValueError("tplane is required")
    if not callable(factory):
        raise TypeError("factory not provided or not a function")

    g = graph if graph is not None else Graph()
    for x in range(tplane.get_max_tile_x()):
        for y in range(tplane.get_max_tile_y()):
            tile      = tplane.lookup_tile(x, y)
            tile_data = tplane.lookup_tile(x, y, data=True)
            node = factory(tile, tile_data)
            if node is not None:
                g.add_node(node)
    return g


class ListTilePlane:
    """
    Tile plane over a list of rows (rows[y][x]) — handy for tests and for
    feeding plain 2-D data through the same factory interface.

    lookup_tile(x, y, data=True) answers {"x": x, "y": y, "tile": tile}.
    """

    def __init__(self, rows):
        self.rows = [list(r) for r in rows]

    def get_max_tile_x(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    def get_max_tile_y(self) -> int:
        return len(self.rows)

    def lookup_tile(self, x: int, y: int, data: bool = False):
        row = self.rows[y]
        tile = row[x] if x < len(row) else None
        if data:
            return {"x": x, "y": y, "tile": tile}
        return tile


__all__ = ["from_tile_plane", "ListTilePlane", "TileFactory"]
