"""Exceptions raised by graphshuffle."""

from __future__ import annotations


class GraphInvariantError(RuntimeError):
    """Internal consistency check failed.

    Means the graph's add/remove semantics broke a count that a transform
    relies on (e.g. a swap changed the edge count). Not recoverable.
    """
