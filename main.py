"""
main.py — gridwalk Flask Service
=================================
A small JSON service over one grid per session.

Routes:
  GET  /                       – the current grid as text (path overlay if any)
  GET  /api/algorithms         – registered algorithms + defaults
  POST /api/grid/generate      – generate a new grid
  POST /api/grid/import        – import a grid from text rows
  GET  /api/nodes              – nodes of the grid (?blocked=0|1 to filter)
  POST /api/path               – shortest path between two cells
  POST /api/compare            – run two algorithms on the same query

State management:
  The grid lives in the Flask session as its text rows (Graph.to_rows),
  which round-trip through Graph.from_rows.  Every grid this service builds
  (generate or import) is made of whole weights 1..9 with default labels,
  which the rows represent exactly.  Grids are at most MAX_GRID_SIDE cells
  on a side so the session cookie stays small.  Each session holds:
    • rows       – the grid
    • diagonals  – whether 8-connected moves are allowed
    • last_path  – [[x, y], …] of the last path found (for GET /)
"""

import os
import secrets

from flask import Flask, jsonify, render_template_string, request, session

from gridalgos import REGISTRY, Capability
from gridgraph import Graph, GraphError
from gridrun import Recorder, compare


app = Flask(__name__)
app.config["SECRET_KEY"] = os.environ.get("GRIDWALK_SECRET_KEY") or secrets.token_hex(32)

DEFAULT_GRID = {"cols": 8, "rows": 6, "wall_prob": 0.2, "seed": 42}
# the grid travels in the session cookie as text rows; keep it under ~4 KB
MAX_GRID_SIDE = 48


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Rebuild the grid from the session, or generate the default one."""
    if "rows" not in session:
        save_graph(Graph.generate_grid(**DEFAULT_GRID), diagonals=False)
    return Graph.from_rows(session["rows"], diagonals=session.get("diagonals", False))


def save_graph(graph: Graph, diagonals: bool) -> None:
    session["rows"] = graph.to_rows()
    session["diagonals"] = diagonals
    session.pop("last_path", None)


def cell(data: dict, key: str):
    """Read an [x, y] pair from the request body."""
    value = data.get(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"`{key}` must be an [x, y] pair")
    return tuple(value)


def clamp_side(value) -> int:
    """Grid width or height from the request, forced into 1..MAX_GRID_SIDE."""
    return max(1, min(MAX_GRID_SIDE, int(value)))


@app.errorhandler(GraphError)
@app.errorhandler(ValueError)
def handle_bad_request(exc):
    app.logger.info("rejected %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Main Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    graph = get_graph()
    path = [graph.get_node(x, y) for x, y in session.get("last_path", [])]
    return render_template_string(INDEX_TEMPLATE, rows=graph.to_rows(path=path), nodes=len(graph))


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    defaults = {
        cap.value: getattr(REGISTRY.default(cap), "name", None)
        for cap in Capability
    }
    algos = [dict(REGISTRY.lookup(name).info(), name=name) for name in REGISTRY.names()]
    return jsonify({"algorithms": algos, "defaults": defaults})


# ---------------------------------------------------------------------------
# API: Grid
# ---------------------------------------------------------------------------
@app.route("/api/grid/generate", methods=["POST"])
def api_grid_generate():
    data = request.get_json(silent=True) or {}
    diagonals = bool(data.get("diagonals", False))
    g = Graph.generate_grid(
        cols=clamp_side(data.get("cols", DEFAULT_GRID["cols"])),
        rows=clamp_side(data.get("rows", DEFAULT_GRID["rows"])),
        wall_prob=float(data.get("wall_prob", DEFAULT_GRID["wall_prob"])),
        seed=data.get("seed"),
        diagonals=diagonals,
    )
    save_graph(g, diagonals)
    return jsonify({"rows": session["rows"], "nodes": len(g)})


@app.route("/api/grid/import", methods=["POST"])
def api_grid_import():
    data = request.get_json(silent=True) or {}
    rows = data.get("rows")
    if isinstance(rows, str):
        rows = rows.splitlines()
    if not rows:
        raise ValueError("`rows` is required")
    if len(rows) > MAX_GRID_SIDE or any(len(line) > MAX_GRID_SIDE for line in rows):
        raise ValueError(f"grid is larger than {MAX_GRID_SIDE}x{MAX_GRID_SIDE}")
    diagonals = bool(data.get("diagonals", False))
    g = Graph.from_rows(rows, diagonals=diagonals)
    save_graph(g, diagonals)
    return jsonify({"rows": session["rows"], "nodes": len(g)})


@app.route("/api/nodes")
def api_nodes():
    graph = get_graph()
    blocked = request.args.get("blocked")
    if blocked is None:
        nodes = graph.get_nodes()
    else:
        want = blocked not in ("0", "false", "")
        nodes = graph.get_nodes(lambda n: n.blocked == want)
    return jsonify({"nodes": [n.to_dict() for n in nodes]})


# ---------------------------------------------------------------------------
# API: Paths
# ---------------------------------------------------------------------------
@app.route("/api/path", methods=["POST"])
def api_path():
    data = request.get_json(silent=True) or {}
    graph = get_graph()
    start = graph.get_node(*cell(data, "start"))
    if start is None:
        raise ValueError("no node at `start`")

    options = {}
    if "heuristic" in data:
        options["heuristic"] = data["heuristic"]
    rec = Recorder(graph)
    metrics = rec.run(cell(data, "goal"), start=start, algorithm=data.get("algorithm"), **options)

    path = [[n.get_x(), n.get_y()] for n in rec.path] if rec.path is not None else None
    session["last_path"] = path or []
    return jsonify({"path": path, "metrics": metrics.to_dict()})


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = request.get_json(silent=True) or {}
    graph = get_graph()
    start = graph.get_node(*cell(data, "start"))
    if start is None:
        raise ValueError("no node at `start`")
    goal = cell(data, "goal")
    names = data.get("algorithms") or ["dijkstra", "astar"]
    if len(names) != 2:
        raise ValueError("`algorithms` must name exactly two algorithms")

    left, right = Recorder(graph), Recorder(graph)
    left.run(goal, start=start, algorithm=names[0])
    right.run(goal, start=start, algorithm=names[1])
    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>gridwalk</title></head>
<body>
  <h1>gridwalk</h1>
  <p>{{ nodes }} nodes</p>
  <pre>{% for row in rows %}{{ row }}
{% endfor %}</pre>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=5000)
