from __future__ import annotations

from typing import Dict, Optional, Tuple

import networkx as nx
import numpy as np

from ..edges import Edge
from ..errors import GraphInvariantError
from ..graph_wrapper import GraphWrapper, ensure_graph
from ..indexer import HashIndexer
from ..profiling import timeit


def is_contiguous(g) -> bool:
    """True when the vertex ids are exactly 0..order()-1."""
    g = ensure_graph(g)
    order = g.order()
    return not any(v >= order for v in g.vertices())


def pack_with_mapping(g) -> Tuple[GraphWrapper, Dict[int, int]]:
    """pack() plus the old -> new vertex id mapping used for it."""
    original = g
    g = ensure_graph(g)
    order = g.order()
    vertices = g.vertices()
    if not any(v >= order for v in vertices):
        return original, {v: v for v in vertices}

    # новые id раздаются в порядке обхода вершин
    mapping = {v: i for i, v in enumerate(vertices)}

    copy = g.copy(set())
    for i in range(order):
        copy.add_vertex(i)
    for e in g.edges():
        copy.add(e.clone(mapping[e.src], mapping[e.dst]))

    if copy.size() != g.size():
        raise GraphInvariantError(f"pack produced {copy.size()} edges from {g.size()}")
    # голый nx-граф на входе -> голый nx-граф на выходе
    if isinstance(original, nx.Graph):
        return copy.G, mapping
    return copy, mapping


@timeit("pack")
def pack(g) -> GraphWrapper:
    """Copy of ``g`` with vertices remapped onto 0..order()-1.

    Returns ``g`` itself (no copy) if its vertices are already contiguous.
    A bare NetworkX graph gives back a NetworkX graph of the same class.
    """
    return pack_with_mapping(g)[0]


@timeit("to_line_graph")
def to_line_graph(g, edge_indices: Optional[HashIndexer] = None) -> GraphWrapper:
    """Line graph of ``g``: one vertex per edge, joined when the edges touch.

    ``edge_indices`` maps edges of ``g`` to vertices of the result; edges it
    has not seen get the next free index. Pass the same indexer across calls
    to keep ids aligned.

    Every pair of edges incident to a vertex is connected once for that
    vertex. Two parallel edges of a multigraph share both endpoints and are
    connected at each of them; the second insertion is a no-op.
    """
    g = ensure_graph(g)
    if edge_indices is None:
        edge_indices = HashIndexer()

    line_graph = GraphWrapper()
    for v in g.vertices():
        adjacent = g.adjacency(v)
        for e1 in adjacent:
            e1_vertex = edge_indices.index(e1)
            line_graph.add_vertex(e1_vertex)
            for e2 in adjacent:
                if e1 == e2:
                    break
                line_graph.add(Edge(e1_vertex, edge_indices.index(e2)))
    return line_graph


def to_adjacency_matrix_string(g) -> str:
    """0/1 adjacency matrix, one text row per vertex in vertices() order."""
    g = ensure_graph(g)
    vertices = g.vertices()
    out = []
    for src in vertices:
        row = ["1" if g.contains(Edge(src, dst, directed=True)) else "0" for dst in vertices]
        out.append("".join(row))
        out.append("\n")
    return "".join(out)


def to_adjacency_matrix(g) -> np.ndarray:
    """Same matrix as to_adjacency_matrix_string, as an int numpy array."""
    g = ensure_graph(g)
    vertices = g.vertices()
    if not vertices:
        return np.zeros((0, 0), dtype=int)
    A = nx.to_numpy_array(g.G, nodelist=vertices, weight=None, multigraph_weight=max)
    return (A > 0).astype(int)
