"""
errors.py — Graph Error Kinds
==============================
Every failure the graph or an algorithm can raise.  All are synchronous
and fail-fast; nothing in the library catches or retries them.

Each error also subclasses the closest builtin so callers that only know
about TypeError / ValueError / KeyError still catch the right thing.

An unreachable goal is NOT an error: `find_goal` returns None.
"""


class GraphError(Exception):
    """Base class for every error raised by gridgraph / gridalgos."""


class InvalidCoordinate(GraphError, TypeError):
    """A node passed to add_node() has a non-numeric x or y."""


class MissingCoordinate(GraphError, TypeError):
    """get_node(x, y) was called with a non-numeric coordinate."""


class MissingGoal(GraphError, ValueError):
    """find_goal() was called without a goal."""


class UnknownAlgorithm(GraphError, KeyError):
    """A named algorithm was requested but never registered."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class IncompatibleAlgorithm(GraphError, TypeError):
    """The resolved algorithm does not provide the capability the caller needs."""


class EmptyGraph(GraphError, LookupError):
    """A query needed a start node but the graph has none."""


class NotTraversable(GraphError, TypeError):
    """A node used for path finding has no neighbour / cost capability."""
