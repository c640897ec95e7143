"""Mutable graph wrappers around NetworkX graphs.

Один класс на возможность: простой / ориентированный / мультиграф с типами
рёбер / ориентированный мультиграф. Тип ребра хранится как ключ в
nx.MultiGraph, поэтому два ребра одного типа между одной парой вершин
невозможны.
"""

from __future__ import annotations

from numbers import Integral
from typing import Hashable, Iterable, Iterator, List, Optional, Set

import networkx as nx

from .edges import Edge


def _check_vertex(v) -> int:
    if isinstance(v, bool) or not isinstance(v, Integral) or v < 0:
        raise ValueError(f"vertex ids must be non-negative integers, got {v!r}")
    return int(v)


class GraphWrapper:
    """Undirected graph without edge types, backed by ``nx.Graph``.

    The wrapper never allows duplicate edges: ``add`` returns False for an
    edge that is already present. Vertex iteration order is the insertion
    order of the underlying NetworkX graph.
    """

    directed = False
    typed = False
    _nx_class = nx.Graph

    def __init__(self, G: Optional[nx.Graph] = None) -> None:
        if G is None:
            G = self._nx_class()
        elif G.is_directed() != self.directed or G.is_multigraph() != self.typed:
            raise ValueError(
                f"{type(self).__name__} cannot wrap {type(G).__name__} "
                f"(directed={G.is_directed()}, multigraph={G.is_multigraph()})"
            )
        self._G = G

    @property
    def G(self) -> nx.Graph:
        """Expose the underlying NetworkX graph."""
        return self._G

    # -----------------
    # VERTICES
    # -----------------

    def order(self) -> int:
        return self._G.number_of_nodes()

    def vertices(self) -> List[int]:
        return list(self._G.nodes())

    def has_vertex(self, v) -> bool:
        return v in self._G

    def add_vertex(self, v) -> bool:
        v = _check_vertex(v)
        if v in self._G:
            return False
        self._G.add_node(v)
        return True

    def remove_vertex(self, v) -> bool:
        """Remove ``v`` and every edge incident to it."""
        if v not in self._G:
            return False
        self._G.remove_node(v)
        return True

    # -----------------
    # EDGES
    # -----------------

    def size(self) -> int:
        return self._G.number_of_edges()

    def _make_edges(self, raw: Iterable[tuple]) -> List[Edge]:
        if self.typed:
            return [Edge(int(u), int(v), self.directed, k) for u, v, k in raw]
        return [Edge(int(u), int(v), self.directed) for u, v in raw]

    def _edge_kwargs(self) -> dict:
        return {"keys": True} if self.typed else {}

    def edges(self) -> List[Edge]:
        return self._make_edges(self._G.edges(**self._edge_kwargs()))

    def _check_edge(self, e: Edge) -> None:
        if not isinstance(e, Edge):
            raise TypeError(f"expected Edge, got {type(e).__name__}")
        if e.directed != self.directed:
            kind = "directed" if self.directed else "undirected"
            raise ValueError(f"{type(self).__name__} only holds {kind} edges, got {e!r}")
        if self.typed and e.edge_type is None:
            raise ValueError(f"{type(self).__name__} needs typed edges, got {e!r}")
        if not self.typed and e.edge_type is not None:
            raise ValueError(f"{type(self).__name__} does not hold typed edges, got {e!r}")

    def _has_exact(self, e: Edge) -> bool:
        if self.typed:
            return self._G.has_edge(e.src, e.dst, key=e.edge_type)
        return self._G.has_edge(e.src, e.dst)

    def contains(self, e: Edge) -> bool:
        """Membership test that tolerates a differently-shaped query.

        An undirected query against a directed graph matches either
        orientation; an untyped query against a multigraph matches any type.
        A typed query never matches an untyped graph.
        """
        if not isinstance(e, Edge):
            return False
        if e.edge_type is not None and not self.typed:
            return False
        if self.typed and e.edge_type is not None:
            found = self._G.has_edge(e.src, e.dst, key=e.edge_type)
            if not found and self.directed and not e.directed:
                found = self._G.has_edge(e.dst, e.src, key=e.edge_type)
            return found
        found = self._G.has_edge(e.src, e.dst)
        if not found and self.directed and not e.directed:
            found = self._G.has_edge(e.dst, e.src)
        return found

    def add(self, e: Edge) -> bool:
        """Insert ``e`` (and its endpoints); False if it is already present."""
        self._check_edge(e)
        _check_vertex(e.src)
        _check_vertex(e.dst)
        if self._has_exact(e):
            return False
        if self.typed:
            self._G.add_edge(e.src, e.dst, key=e.edge_type)
        else:
            self._G.add_edge(e.src, e.dst)
        return True

    def remove(self, e: Edge) -> bool:
        self._check_edge(e)
        if not self._has_exact(e):
            return False
        if self.typed:
            self._G.remove_edge(e.src, e.dst, key=e.edge_type)
        else:
            self._G.remove_edge(e.src, e.dst)
        return True

    def adjacency(self, v) -> List[Edge]:
        """Edges incident to ``v`` in a stable order, each listed once."""
        if v not in self._G:
            return []
        kw = self._edge_kwargs()
        if self.directed:
            raw = list(self._G.out_edges(v, **kw)) + list(self._G.in_edges(v, **kw))
        else:
            raw = self._G.edges(v, **kw)
        # петля в орграфе приходит и как исходящее, и как входящее ребро
        return list(dict.fromkeys(self._make_edges(raw)))

    def degree(self, v) -> int:
        return int(self._G.degree(v))

    def neighbors(self, v) -> Set[int]:
        return {e.other(v) for e in self.adjacency(v)}

    def copy(self, vertices: Optional[Iterable[int]] = None) -> "GraphWrapper":
        """Copy of the same kind; restricted to ``vertices`` when given."""
        if vertices is None:
            return type(self)(self._G.copy())
        return type(self)(self._G.subgraph(list(vertices)).copy())

    # -----------------
    # PYTHON PROTOCOL
    # -----------------

    def __len__(self) -> int:
        return self.order()

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices())

    def __contains__(self, item) -> bool:
        if isinstance(item, Edge):
            return self.contains(item)
        return self.has_vertex(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order()}, size={self.size()})"


class DirectedGraph(GraphWrapper):
    """Directed graph without edge types, backed by ``nx.DiGraph``."""

    directed = True
    _nx_class = nx.DiGraph

    def in_edges(self, v) -> List[Edge]:
        if v not in self._G:
            return []
        return self._make_edges(self._G.in_edges(v, **self._edge_kwargs()))

    def out_edges(self, v) -> List[Edge]:
        if v not in self._G:
            return []
        return self._make_edges(self._G.out_edges(v, **self._edge_kwargs()))

    def in_degree(self, v) -> int:
        return int(self._G.in_degree(v))

    def out_degree(self, v) -> int:
        return int(self._G.out_degree(v))

    def successors(self, v) -> Set[int]:
        return set(self._G.successors(v)) if v in self._G else set()

    def predecessors(self, v) -> Set[int]:
        return set(self._G.predecessors(v)) if v in self._G else set()


class Multigraph(GraphWrapper):
    """Undirected multigraph whose parallel edges differ by edge type."""

    typed = True
    _nx_class = nx.MultiGraph

    def edge_types(self) -> Set[Hashable]:
        return {k for _, _, k in self._G.edges(keys=True)}

    def edges(self, edge_type: Optional[Hashable] = None) -> List[Edge]:
        raw = self._G.edges(keys=True)
        if edge_type is not None:
            raw = [(u, v, k) for u, v, k in raw if k == edge_type]
        return self._make_edges(raw)


class DirectedMultigraph(DirectedGraph, Multigraph):
    """Directed multigraph, backed by ``nx.MultiDiGraph``."""

    directed = True
    typed = True
    _nx_class = nx.MultiDiGraph


def make_graph(directed: bool = False, typed: bool = False) -> GraphWrapper:
    """Empty wrapper with the requested capabilities."""
    if directed and typed:
        return DirectedMultigraph()
    if directed:
        return DirectedGraph()
    if typed:
        return Multigraph()
    return GraphWrapper()


def wrap(G: nx.Graph) -> GraphWrapper:
    """Wrap an existing NetworkX graph without copying it."""
    if G is None:
        raise TypeError("graph must not be None")
    if G.is_directed() and G.is_multigraph():
        return DirectedMultigraph(G)
    if G.is_directed():
        return DirectedGraph(G)
    if G.is_multigraph():
        return Multigraph(G)
    return GraphWrapper(G)


def check_node_ids(G: nx.Graph) -> None:
    """ValueError unless every node of ``G`` is a non-negative int."""
    bad = [n for n in G.nodes() if isinstance(n, bool) or not isinstance(n, Integral) or n < 0]
    if bad:
        raise ValueError(f"vertex ids must be non-negative integers, got e.g. {bad[0]!r}")


def ensure_graph(g) -> GraphWrapper:
    """Reject None; wrap a bare NetworkX graph, pass wrappers/views through.

    A bare graph is wrapped without copying, so the result's ``.G`` is the
    caller's object.
    """
    if g is None:
        raise TypeError("graph must not be None")
    if isinstance(g, nx.Graph):
        check_node_ids(g)
        return wrap(g)
    return g
