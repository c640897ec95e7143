"""Views that add a capability to a graph without copying it.

as_directed_graph / as_multigraph return the graph itself when it already
has the capability. synchronized_graph and unmodifiable are plain
decorators: every call is forwarded to the wrapped graph.

A bare NetworkX graph is always wrapped first, never returned as is: its
own in_edges/edges have NetworkX signatures, not Edge lists. The wrapper
shares the caller's graph (``result.G is G``), so nothing is copied.
"""

from __future__ import annotations

import functools
import threading
from typing import Any, Hashable, List, Optional, Set

import networkx as nx

from .edges import Edge
from .graph_wrapper import DirectedGraph, GraphWrapper, Multigraph, ensure_graph


class GraphView:
    """Forwards everything it does not define to the wrapped graph."""

    def __init__(self, graph) -> None:
        self._graph = graph

    @property
    def wrapped(self):
        return self._graph

    def __getattr__(self, name: str) -> Any:
        # __getattr__ вызывается только для отсутствующих атрибутов
        if name == "_graph":
            raise AttributeError(name)
        return getattr(self._graph, name)

    def __len__(self) -> int:
        return len(self._graph)

    def __iter__(self):
        return iter(self._graph)

    def __contains__(self, item) -> bool:
        return item in self._graph

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._graph!r})"


# -----------------
# CAPABILITY ADAPTORS
# -----------------

class DirectedGraphAdaptor(GraphView):
    """Directed accessors over a graph that does not provide them.

    Undirected edges count as both incoming and outgoing at each endpoint.
    """

    def in_edges(self, v) -> List[Edge]:
        return [e for e in self._graph.adjacency(v) if not e.directed or e.dst == v]

    def out_edges(self, v) -> List[Edge]:
        return [e for e in self._graph.adjacency(v) if not e.directed or e.src == v]

    def in_degree(self, v) -> int:
        return len(self.in_edges(v))

    def out_degree(self, v) -> int:
        return len(self.out_edges(v))

    def successors(self, v) -> Set[int]:
        return {e.other(v) for e in self.out_edges(v)}

    def predecessors(self, v) -> Set[int]:
        return {e.other(v) for e in self.in_edges(v)}


class MultigraphAdaptor(GraphView):
    """Per-type edge partitioning over a graph without native edge types.

    Untyped edges fall into a single partition keyed by ``None``.
    """

    def edge_types(self) -> Set[Optional[Hashable]]:
        return {e.edge_type for e in self._graph.edges()}

    def edges(self, edge_type: Optional[Hashable] = None) -> List[Edge]:
        edges = self._graph.edges()
        if edge_type is None:
            return edges
        return [e for e in edges if e.edge_type == edge_type]


def is_directed_capable(g) -> bool:
    return isinstance(g, (DirectedGraph, DirectedGraphAdaptor))


def is_multigraph_capable(g) -> bool:
    return isinstance(g, (Multigraph, MultigraphAdaptor))


def as_directed_graph(g):
    """``g`` itself if it has in/out accessors, otherwise a directed view.

    A bare ``nx.DiGraph`` comes back as a DirectedGraph over the same object.
    """
    g = ensure_graph(g)
    return g if is_directed_capable(g) else DirectedGraphAdaptor(g)


def as_multigraph(g):
    """``g`` itself if it partitions edges by type, otherwise a typed view."""
    g = ensure_graph(g)
    return g if is_multigraph_capable(g) else MultigraphAdaptor(g)


# -----------------
# DECORATORS
# -----------------

class SynchronizedGraph(GraphView):
    """Every forwarded call runs under one reentrant lock.

    Hold ``graph.lock`` yourself to make a batch of calls appear atomic.
    """

    def __init__(self, graph) -> None:
        super().__init__(graph)
        self.lock = threading.RLock()

    def __getattr__(self, name: str) -> Any:
        attr = super().__getattr__(name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def locked(*args: Any, **kwargs: Any):
            with self.lock:
                return attr(*args, **kwargs)

        return locked

    def __len__(self) -> int:
        with self.lock:
            return len(self._graph)

    def __iter__(self):
        with self.lock:
            return iter(list(self._graph))

    def __contains__(self, item) -> bool:
        with self.lock:
            return item in self._graph


class UnmodifiableGraph(GraphView):
    """Read-only view; every mutator raises ``nx.NetworkXError``."""

    def _frozen(self, *args: Any, **kwargs: Any):
        raise nx.NetworkXError("Frozen graph can't be modified")

    add = _frozen
    remove = _frozen
    add_vertex = _frozen
    remove_vertex = _frozen


def synchronized_graph(g) -> SynchronizedGraph:
    return SynchronizedGraph(ensure_graph(g))


def unmodifiable(g) -> UnmodifiableGraph:
    """Read-only view of ``g``; its NetworkX graph is exposed as a frozen view."""
    g = ensure_graph(g)
    if isinstance(g, GraphWrapper):
        g = type(g)(g.G.copy(as_view=True))
    return UnmodifiableGraph(g)
